# usage: tf-idf scoring over counted (document, term, count) rows
import logging
import math
import numbers
from collections import Counter, defaultdict
from dataclasses import dataclass

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

SCORE_COLUMNS = ["tf", "idf", "tf_idf"]


class InvalidInput(ValueError):
    """Raised when term counts cannot be scored (bad count, missing or duplicate key, missing column)."""


@dataclass(frozen=True)
class TermCount:
    document_id: str
    term: str
    count: int


@dataclass(frozen=True)
class ScoredTerm:
    document_id: str
    term: str
    count: int
    tf: float
    idf: float
    tf_idf: float


def _is_positive_int(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return value > 0
    # whole-valued floats coming out of pandas/numpy are accepted
    if isinstance(value, numbers.Real):
        return math.isfinite(value) and value > 0 and float(value).is_integer()
    return False


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def validate_term_counts(records) -> list:
    """
    Check every record before any aggregation happens.

    Rejects:
    - missing (None/NaN) document ids or terms
    - counts that are not positive integers
    - repeated (document_id, term) pairs

    Returns the records as a list so callers can iterate twice.
    """
    rows = list(records)
    seen = set()
    for i, rec in enumerate(rows):
        if _is_missing(rec.document_id) or _is_missing(rec.term):
            raise InvalidInput(
                f"record {i} has a missing document_id or term: ({rec.document_id!r}, {rec.term!r})"
            )
        if not _is_positive_int(rec.count):
            raise InvalidInput(
                f"record {i} ({rec.document_id!r}, {rec.term!r}) has count {rec.count!r}; "
                "counts must be positive integers"
            )
        key = (rec.document_id, rec.term)
        if key in seen:
            raise InvalidInput(
                f"duplicate (document_id, term) pair {key!r} at record {i}; "
                "pre-aggregate counts before scoring"
            )
        seen.add(key)
    return rows


def score_terms(records) -> list:
    """
    Score each TermCount with tf, idf and tf-idf.

    tf     = count / total count of the record's document
    idf    = ln(D / d_t), D = distinct documents, d_t = documents containing the term
    tf_idf = tf * idf

    One ScoredTerm per input record, in input order. Empty input gives an
    empty list. Raises InvalidInput (and scores nothing) on bad input.
    """
    rows = validate_term_counts(records)
    if not rows:
        return []

    totals = Counter()
    docs_per_term = defaultdict(set)
    for rec in rows:
        totals[rec.document_id] += rec.count
        docs_per_term[rec.term].add(rec.document_id)

    n_docs = len(totals)
    idf = {t: math.log(n_docs / len(docs)) for t, docs in docs_per_term.items()}
    logger.debug("scored %d rows over %d documents and %d terms", len(rows), n_docs, len(idf))

    out = []
    for rec in rows:
        tf = rec.count / totals[rec.document_id]
        out.append(ScoredTerm(
            document_id=rec.document_id,
            term=rec.term,
            count=rec.count,
            tf=tf,
            idf=idf[rec.term],
            tf_idf=tf * idf[rec.term],
        ))
    return out


def _validate_frame(frame: pd.DataFrame, document: str, term: str, n: str):
    missing = [c for c in (document, term, n) if c not in frame.columns]
    if missing:
        raise InvalidInput(f"missing column(s) {missing}; have {list(frame.columns)}")
    if frame.empty:
        return
    blank = frame[[document, term]].isna().any(axis=1)
    if blank.any():
        first = frame.loc[blank].iloc[0]
        raise InvalidInput(
            f"row with a missing document or term: ({first[document]!r}, {first[term]!r})"
        )
    if not pd.api.types.is_numeric_dtype(frame[n]) or pd.api.types.is_bool_dtype(frame[n]):
        raise InvalidInput(f"count column {n!r} must be numeric, got dtype {frame[n].dtype}")
    counts = frame[n]
    bad = counts.isna() | (counts <= 0) | (counts % 1 != 0)
    if bad.any():
        first = frame.loc[bad].iloc[0]
        raise InvalidInput(
            f"({first[document]!r}, {first[term]!r}) has count {first[n]!r}; "
            "counts must be positive integers"
        )
    dup = frame.duplicated(subset=[document, term])
    if dup.any():
        first = frame.loc[dup].iloc[0]
        raise InvalidInput(
            f"duplicate (document, term) pair ({first[document]!r}, {first[term]!r}); "
            "pre-aggregate counts before scoring"
        )


def bind_tf_idf(frame: pd.DataFrame, *, document="document", term="term", n="n") -> pd.DataFrame:
    """
    Tabular form of score_terms: append tf, idf and tf_idf columns.

    Works on a tidy counts table (one row per document-term pair, like the
    output of features.count_terms). Returns a new DataFrame; the input is
    left untouched and row order is preserved.
    """
    _validate_frame(frame, document, term, n)
    out = frame.copy()
    if out.empty:
        for col in SCORE_COLUMNS:
            out[col] = pd.Series(dtype="float64")
        return out

    totals = out.groupby(document)[n].transform("sum")
    doc_freq = out.groupby(term)[document].transform("nunique")
    n_docs = out[document].nunique()

    out["tf"] = out[n] / totals
    out["idf"] = np.log(n_docs / doc_freq)
    out["tf_idf"] = out["tf"] * out["idf"]
    logger.debug("bind_tf_idf: %d rows, %d documents", len(out), n_docs)
    return out


def from_frame(frame: pd.DataFrame, *, document="document", term="term", n="n") -> list:
    """Convert a counts table to TermCount records."""
    missing = [c for c in (document, term, n) if c not in frame.columns]
    if missing:
        raise InvalidInput(f"missing column(s) {missing}; have {list(frame.columns)}")
    return [TermCount(document_id=d, term=t, count=c) for d, t, c in zip(frame[document], frame[term], frame[n])]


def to_frame(scored) -> pd.DataFrame:
    """ScoredTerm records -> DataFrame with document, term, n, tf, idf, tf_idf."""
    columns = ["document", "term", "n"] + SCORE_COLUMNS
    rows = [(s.document_id, s.term, s.count, s.tf, s.idf, s.tf_idf) for s in scored]
    return pd.DataFrame(rows, columns=columns)
