"""Unit tests for phi correlation between terms."""

import pandas as pd
import pytest

from corpus_nlp.nlp.correlation import pairwise_correlation, presence_matrix


@pytest.fixture
def tokens():
    # a and b always together, c never with them
    pairs = [("d1", "a"), ("d1", "b"), ("d1", "a"), ("d2", "a"), ("d2", "b"), ("d3", "c"), ("d4", "c")]
    return pd.DataFrame(pairs, columns=["document", "term"])


class TestPresenceMatrix:
    def test_is_binary(self, tokens):
        presence = presence_matrix(tokens)
        assert presence.loc["d1", "a"] == 1
        assert presence.loc["d3", "a"] == 0
        assert set(presence.to_numpy().ravel()) <= {0, 1}


class TestPairwiseCorrelation:
    def test_phi_values(self, tokens):
        pairs = pairwise_correlation(tokens)
        lookup = {(r.item1, r.item2): r.correlation for r in pairs.itertuples()}

        assert len(pairs) == 6
        assert lookup[("a", "b")] == pytest.approx(1.0)
        assert lookup[("b", "a")] == pytest.approx(1.0)
        assert lookup[("a", "c")] == pytest.approx(-1.0)
        assert ("a", "a") not in lookup

    def test_sorted_strongest_first(self, tokens):
        pairs = pairwise_correlation(tokens)
        assert pairs["correlation"].is_monotonic_decreasing
        assert pairs.columns.tolist() == ["item1", "item2", "correlation"]

    def test_min_count_filters_terms(self, tokens):
        extra = pd.concat([tokens, pd.DataFrame([("d4", "b")], columns=["document", "term"])], ignore_index=True)
        pairs = pairwise_correlation(extra, min_count=3)
        # only b reaches 3 documents, so no pair is left
        assert pairs.empty

    def test_term_everywhere_is_left_out(self):
        pairs = pd.DataFrame(
            [("d1", "the"), ("d1", "x"), ("d2", "the"), ("d2", "y"), ("d3", "the"), ("d3", "x")],
            columns=["document", "term"],
        )
        out = pairwise_correlation(pairs)
        assert "the" not in set(out["item1"]) | set(out["item2"])
        assert len(out) == 2

    def test_empty(self):
        assert pairwise_correlation(pd.DataFrame(columns=["document", "term"])).empty
