"""Shared fixtures: the two-document cat/dog/fox corpus in record and table form."""

import pandas as pd
import pytest

from corpus_nlp.nlp.tfidf import TermCount


@pytest.fixture
def scenario_records():
    """Doc A = {cat: 3, dog: 1}, doc B = {dog: 2, fox: 1}."""
    return [
        TermCount("A", "cat", 3),
        TermCount("A", "dog", 1),
        TermCount("B", "dog", 2),
        TermCount("B", "fox", 1),
    ]


@pytest.fixture
def scenario_frame():
    return pd.DataFrame(
        {
            "document": ["A", "A", "B", "B"],
            "term": ["cat", "dog", "dog", "fox"],
            "n": [3, 1, 2, 1],
        }
    )


@pytest.fixture
def small_corpus(tmp_path):
    """Two plain-text files reproducing the cat/dog/fox counts."""
    root = tmp_path / "corpus"
    root.mkdir()
    (root / "A.txt").write_text("cat cat cat dog", encoding="utf-8")
    (root / "B.txt").write_text("dog dog fox", encoding="utf-8")
    return root
