# usage: raw text -> (document, term) rows (NLTK tokenizer, stopwords, stemming/lemmas)
import logging
import re
from functools import lru_cache

import nltk
import pandas as pd
from nltk.stem import PorterStemmer, WordNetLemmatizer
from nltk.tokenize import word_tokenize

from .features import make_ngrams, make_windows

logger = logging.getLogger(__name__)

_PUNCT_RE = re.compile(r"\W+")
_NUM_RE = re.compile(r"\d+([.,]\d+)?")


def ensure_nltk_data(pkg: str, locator: str):
    """Locate an NLTK resource, downloading it quietly the first time it is missing."""
    try:
        nltk.data.find(locator)
    except LookupError:
        logger.info("downloading NLTK resource %s", pkg)
        nltk.download(pkg, quiet=True)


@lru_cache(maxsize=None)
def english_stopwords() -> frozenset:
    ensure_nltk_data("stopwords", "corpora/stopwords")
    from nltk.corpus import stopwords
    return frozenset(stopwords.words("english"))


@lru_cache(maxsize=None)
def _normalizer(kind: str):
    if kind == "stem":
        return PorterStemmer().stem
    if kind == "lemma":
        ensure_nltk_data("wordnet", "corpora/wordnet")
        return WordNetLemmatizer().lemmatize
    raise ValueError(f"normalize must be None, 'stem' or 'lemma', got {kind!r}")


def words_from_tokens(tokens, *, lowercase=True, remove_punct=True, remove_nums=True):
    """Lowercase and drop punctuation-only / numeric tokens."""
    out = []
    for t in tokens:
        w = t.lower() if lowercase else t
        if remove_punct:
            # single-line Treebank mode leaves mid-text sentence periods attached
            w = w.rstrip(".")
            if not w or _PUNCT_RE.fullmatch(w):
                continue
        if remove_nums and _NUM_RE.fullmatch(w):
            continue
        out.append(w)
    return out


def tokenize(text: str,
             *,
             lowercase=True,
             remove_punct=True,
             remove_nums=True,
             remove_stop=True,
             stop_words=None,
             normalize=None,
             ngram=1,
             sep="_"):
    """
    Split one text into terms.

    Steps:
    - word_tokenize in single-line mode (Treebank rules, no sentence model needed)
    - drop punctuation and numbers, lowercase
    - unigrams: drop stop words, then stem/lemmatize if `normalize` is set
    - n-grams (ngram > 1): built over the cleaned stream; any n-gram with a
      stop word in it is dropped

    `stop_words=None` means NLTK's English list; pass a set to override.
    """
    if ngram < 1:
        raise ValueError(f"ngram must be >= 1, got {ngram}")
    words = words_from_tokens(word_tokenize(text, preserve_line=True),
                              lowercase=lowercase, remove_punct=remove_punct, remove_nums=remove_nums)
    stops = frozenset()
    if remove_stop:
        stops = english_stopwords() if stop_words is None else frozenset(stop_words)

    keep = [w not in stops for w in words]
    if normalize:
        norm = _normalizer(normalize)
        words = [norm(w) for w in words]

    if ngram == 1:
        return [w for w, k in zip(words, keep) if k]
    return [g for g, window in zip(make_ngrams(words, ngram, sep=sep), make_windows(keep, ngram)) if all(window)]


def tokenize_documents(pairs, **options):
    """(document_id, text) pairs -> (document_id, term) pairs, order preserved."""
    out = []
    for doc_id, text in pairs:
        out.extend((doc_id, term) for term in tokenize(text, **options))
    return out


def unnest_tokens(docs: pd.DataFrame, *, document="document", text="text", term="term", **options) -> pd.DataFrame:
    """
    One row per term occurrence: DataFrame[document, term].

    Other columns of `docs` are dropped; documents producing no terms simply
    contribute no rows.
    """
    for col in (document, text):
        if col not in docs.columns:
            raise KeyError(f"column {col!r} not in {list(docs.columns)}")
    rows = tokenize_documents(zip(docs[document], docs[text].fillna("")), **options)
    out = pd.DataFrame(rows, columns=[document, term])
    empty = set(docs[document]) - set(out[document])
    if empty:
        logger.warning("%d document(s) produced no terms: %s", len(empty), sorted(map(str, empty))[:5])
    return out
