# Feature extraction utilities: n-grams, term counts, top terms per document
import logging
from collections import Counter

import pandas as pd

from .tfidf import TermCount

logger = logging.getLogger(__name__)


def make_windows(seq, n=2):
    """Sliding windows of length n; empty when seq is shorter than n."""
    return [tuple(seq[i:i + n]) for i in range(0, max(0, len(seq) - n + 1))]


def make_ngrams(tokens, n=2, sep="_"):
    """
    Construct n-grams of length n from a list of tokens.
    Example: tokens=["i","like","cats"], n=2 → ["i_like", "like_cats"]
    """
    return [sep.join(w) for w in make_windows(tokens, n)]


def count_terms(tokens: pd.DataFrame, *, document="document", term="term") -> pd.DataFrame:
    """
    Count term occurrences per document.

    Returns DataFrame[document, term, n], one row per document-term pair,
    most frequent first (ties keep document, then term order).
    """
    if tokens.empty:
        return pd.DataFrame({document: pd.Series(dtype=object),
                             term: pd.Series(dtype=object),
                             "n": pd.Series(dtype="int64")})
    counts = tokens.groupby([document, term]).size().reset_index(name="n")
    counts = counts.sort_values("n", ascending=False, kind="mergesort").reset_index(drop=True)
    logger.debug("counted %d distinct document-term pairs", len(counts))
    return counts


def aggregate_counts(records):
    """
    Merge TermCount records sharing a (document_id, term) by summing counts.

    The explicit pre-aggregation step for inputs that may repeat a pair;
    first-seen order is kept.
    """
    totals = Counter()
    for rec in records:
        totals[(rec.document_id, rec.term)] += rec.count
    return [TermCount(document_id=d, term=t, count=c) for (d, t), c in totals.items()]


def document_totals(counts: pd.DataFrame, *, document="document", n="n") -> pd.DataFrame:
    """Sum of counts per document: DataFrame[document, total]."""
    return counts.groupby(document, sort=False)[n].sum().reset_index(name="total")


def top_terms(scored: pd.DataFrame, *, n=10, by="tf_idf", document="document", term="term") -> pd.DataFrame:
    """
    Keep the `n` highest-`by` rows of each document.

    Documents come out in sorted order, rows within a document by descending
    score, ties by term.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    ranked = scored.sort_values([document, by, term], ascending=[True, False, True], kind="mergesort")
    return ranked.groupby(document, sort=False).head(n).reset_index(drop=True)
