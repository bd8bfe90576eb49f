# usage: phi correlation of term co-occurrence across documents
import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def presence_matrix(tokens: pd.DataFrame, *, document="document", term="term") -> pd.DataFrame:
    """Binary document x term table: 1 where the term occurs in the document."""
    return (pd.crosstab(tokens[document], tokens[term]) > 0).astype(int)


def pairwise_correlation(tokens: pd.DataFrame, *, document="document", term="term", min_count=1) -> pd.DataFrame:
    """
    Phi coefficient between every pair of terms, computed over documents.

    Phi is the Pearson correlation of two binary presence vectors, so this is
    DataFrame.corr() on the presence matrix. Terms found in fewer than
    `min_count` documents are dropped first. Terms with no variance (present
    everywhere or nowhere) have undefined correlation and are left out.

    Returns DataFrame[item1, item2, correlation], both directions of each
    pair, no self pairs, strongest correlation first.
    """
    columns = ["item1", "item2", "correlation"]
    if tokens.empty:
        return pd.DataFrame(columns=columns)

    presence = presence_matrix(tokens, document=document, term=term)
    presence = presence.loc[:, presence.sum(axis=0) >= min_count]
    if presence.shape[1] < 2:
        return pd.DataFrame(columns=columns)

    corr = presence.corr()
    values = corr.to_numpy(copy=True)
    np.fill_diagonal(values, np.nan)
    corr = pd.DataFrame(values, index=corr.index.astype(str), columns=corr.columns.astype(str))

    pairs = corr.stack().dropna().rename_axis(["item1", "item2"]).reset_index(name="correlation")
    logger.debug("correlated %d terms into %d pairs", presence.shape[1], len(pairs))
    return pairs.sort_values(["correlation", "item1", "item2"],
                             ascending=[False, True, True], kind="mergesort").reset_index(drop=True)
