"""Exploratory text mining over small literary corpora: tokenize, count, score with tf-idf."""

__version__ = "0.1.0"
