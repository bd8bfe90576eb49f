# Expose core NLP utilities for easier imports when using this package.

from .tfidf import (                             # tf-idf scoring engine
    InvalidInput,
    ScoredTerm,
    TermCount,
    bind_tf_idf,
    score_terms,
)
from .preprocessing import tokenize, unnest_tokens   # raw text -> (document, term) rows
from .features import count_terms, top_terms         # counting and per-document rankings
from .correlation import pairwise_correlation        # phi correlation between terms
from .sentiment import join_sentiment, load_lexicon  # lexicon-based sentiment

# Define what symbols are exported when `from package import *` is used
__all__ = [
    "InvalidInput",
    "ScoredTerm",
    "TermCount",
    "bind_tf_idf",
    "score_terms",
    "tokenize",
    "unnest_tokens",
    "count_terms",
    "top_terms",
    "pairwise_correlation",
    "join_sentiment",
    "load_lexicon",
]
