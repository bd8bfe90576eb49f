"""Integration tests for the corpus-nlp command line."""

import json

import pandas as pd
import pytest

from corpus_nlp.nlp.analyze_texts import analyze_corpus, main


class TestMain:
    def test_writes_tfidf_outputs(self, small_corpus, tmp_path):
        out = tmp_path / "out"
        main(["--input", str(small_corpus), "--outdir", str(out), "--keep-stopwords", "--topn", "1"])

        tfidf = pd.read_csv(next(out.glob("*_tfidf.csv")))
        top = pd.read_csv(next(out.glob("*_top1.csv")))
        summary = json.loads(next(out.glob("*_summary.json")).read_text(encoding="utf-8"))

        lookup = tfidf.set_index(["document", "term"])["tf_idf"]
        assert lookup[("A", "cat")] == pytest.approx(0.520, abs=1e-3)
        assert lookup[("B", "dog")] == 0
        assert top[["document", "term"]].values.tolist() == [["A", "cat"], ["B", "fox"]]
        assert summary["documents"] == 2
        assert summary["vocab_size"] == 3
        assert summary["token_count"] == 7

    def test_empty_directory_exits(self, tmp_path):
        empty = tmp_path / "empty"
        empty.mkdir()
        with pytest.raises(SystemExit):
            main(["--input", str(empty), "--outdir", str(tmp_path / "out"), "--keep-stopwords"])

    def test_missing_input_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--input", str(tmp_path / "missing")])

    def test_bad_ngram_exits(self, small_corpus, tmp_path):
        with pytest.raises(SystemExit):
            main(["--input", str(small_corpus), "--outdir", str(tmp_path / "out"), "--ngram", "0"])

    def test_log_level_is_case_insensitive(self, small_corpus, tmp_path):
        main(["--input", str(small_corpus), "--outdir", str(tmp_path / "out"), "--keep-stopwords", "--log-level", "debug"])
        assert list((tmp_path / "out").glob("*_tfidf.csv"))

    def test_unknown_log_level_is_a_usage_error(self, small_corpus, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--input", str(small_corpus), "--outdir", str(tmp_path / "out"), "--log-level", "loud"])

        assert exc.value.code == 2
        assert "--log-level" in capsys.readouterr().err

    def test_writes_sentiment_table(self, small_corpus, tmp_path, monkeypatch):
        lexicon = pd.DataFrame({"word": ["cat", "fox"], "sentiment": ["positive", "negative"]})
        monkeypatch.setattr("corpus_nlp.nlp.analyze_texts.load_lexicon", lambda name: lexicon)
        out = tmp_path / "out"

        main(["--input", str(small_corpus), "--outdir", str(out), "--keep-stopwords", "--sentiment", "bing"])

        net = pd.read_csv(next(out.glob("*_sentiment_bing.csv")))
        summary = json.loads(next(out.glob("*_summary.json")).read_text(encoding="utf-8"))
        assert net.set_index("document")["sentiment"].to_dict() == {"A": 3, "B": -1}
        assert summary["sentiment_lexicon"] == "bing"


class TestAnalyzeCorpus:
    def test_by_chapter(self, tmp_path):
        root = tmp_path / "books"
        root.mkdir()
        (root / "tale.txt").write_text("CHAPTER I\n\nwolf wolf moon\n\nCHAPTER II\n\nmoon sea", encoding="utf-8")

        summary = analyze_corpus(root, tmp_path / "out", remove_stop=False, by="chapter")
        tfidf = pd.read_csv(next((tmp_path / "out").glob("*_tfidf.csv")))

        assert summary["documents"] == 2
        assert set(tfidf["document"]) == {"tale#1", "tale#2"}
        assert tfidf.loc[tfidf["term"] == "moon", "tf_idf"].tolist() == [0, 0]

    def test_bigrams(self, small_corpus, tmp_path):
        summary = analyze_corpus(small_corpus, tmp_path / "out", remove_stop=False, ngram=2)
        tfidf = pd.read_csv(next((tmp_path / "out").glob("*_tfidf.csv")))

        assert summary["ngram"] == 2
        assert "cat_cat" in set(tfidf["term"])
