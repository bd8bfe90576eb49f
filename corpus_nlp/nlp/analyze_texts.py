# Command-line script for scoring a corpus of .txt files with tf-idf.
# Writes the full tf-idf table, the top terms per document, optional
# lexicon sentiment, and a JSON summary.

import argparse
import json
import logging
from pathlib import Path

from corpus_nlp.etl.corpus import load_corpus, split_chapters
from corpus_nlp.nlp.features import count_terms, top_terms
from corpus_nlp.nlp.preprocessing import unnest_tokens
from corpus_nlp.nlp.sentiment import LEXICONS, join_sentiment, load_lexicon, sentiment_by_document
from corpus_nlp.nlp.tfidf import bind_tf_idf
from corpus_nlp.shared.io_utils import hash_stem

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def analyze_corpus(input_path: Path, outdir: Path, *, ngram=1, topn=10, remove_stop=True,
                   stop_words=None, normalize=None, by="file", sentiment=None) -> dict:
    """
    Run the tokenize -> count -> tf-idf pipeline over a file or directory
    and write outputs to CSV/JSON. Returns the summary that is written.
    """
    docs = load_corpus(input_path)
    if docs.empty:
        raise SystemExit(f"No non-empty .txt files found under {input_path}")

    if by == "chapter":
        chapters = split_chapters(docs)
        docs = chapters.assign(document=chapters["document"] + "#" + chapters["chapter"].astype(str))

    tokens = unnest_tokens(docs, remove_stop=remove_stop, stop_words=stop_words,
                           normalize=normalize, ngram=ngram)
    counts = count_terms(tokens)
    scored = bind_tf_idf(counts)
    best = top_terms(scored, n=topn)

    outdir.mkdir(parents=True, exist_ok=True)
    tag = hash_stem(input_path)

    scored.to_csv(outdir / f"{tag}_tfidf.csv", index=False)
    best.to_csv(outdir / f"{tag}_top{topn}.csv", index=False)

    if sentiment:
        net = sentiment_by_document(join_sentiment(counts, load_lexicon(sentiment)))
        net.to_csv(outdir / f"{tag}_sentiment_{sentiment}.csv", index=False)

    summary = {
        "input": str(input_path),
        "documents": int(docs["document"].nunique()),
        "unit": by,
        "ngram": ngram,
        "normalize": normalize,
        "token_count": int(len(tokens)),
        "vocab_size": int(counts["term"].nunique()),
        "sentiment_lexicon": sentiment,
    }
    (outdir / f"{tag}_summary.json").write_text(json.dumps(summary, indent=2), encoding="utf-8")
    print(f"TF-IDF ✓ {summary['documents']} documents, {summary['vocab_size']} terms -> {outdir / tag}_*")
    return summary


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Score terms in clean .txt files with tf-idf.")
    ap.add_argument("--input", required=True, help="A .txt file or a directory of them.")
    ap.add_argument("--outdir", default="data/outputs", help="Output directory for CSV/JSON.")
    ap.add_argument("--ngram", type=int, default=1, help="Term length in words (1 = single words).")
    ap.add_argument("--topn", type=int, default=10, help="Top terms kept per document.")
    ap.add_argument("--keep-stopwords", action="store_true", help="Do not remove English stop words.")
    ap.add_argument("--normalize", choices=["stem", "lemma"], default=None, help="Stem or lemmatize terms.")
    ap.add_argument("--by", choices=["file", "chapter"], default="file", help="Unit treated as a document.")
    ap.add_argument("--sentiment", choices=LEXICONS, default=None, help="Also score net sentiment per document.")
    ap.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS, help="Logging level.")
    return ap


def main(argv=None):
    """
    CLI entrypoint: parses arguments and runs the analysis.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    ip = Path(args.input)
    if not ip.exists():
        raise SystemExit(f"Input not found: {ip}")
    if args.ngram < 1 or args.topn < 1:
        raise SystemExit("--ngram and --topn must be >= 1")

    analyze_corpus(
        ip,
        Path(args.outdir),
        ngram=args.ngram,
        topn=args.topn,
        remove_stop=not args.keep_stopwords,
        normalize=args.normalize,
        by=args.by,
        sentiment=args.sentiment,
    )


if __name__ == "__main__":
    main()
