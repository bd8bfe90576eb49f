"""
Package export surface for ETL helpers.
Exposes corpus loading and text normalization at the package level.
"""
from .normalizers import basic_clean, strip_gutenberg_headers
from .corpus import chunk_words, load_corpus, read_text, split_chapters

__all__ = [
    "basic_clean",
    "strip_gutenberg_headers",
    "chunk_words",
    "load_corpus",
    "read_text",
    "split_chapters",
]
