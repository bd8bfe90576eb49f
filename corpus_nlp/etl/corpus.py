# usage: load .txt files into a document table; split books into chapters or word chunks
import logging
import re
from pathlib import Path

import pandas as pd

from corpus_nlp.etl.normalizers import basic_clean, strip_gutenberg_headers
from corpus_nlp.shared.io_utils import document_id

logger = logging.getLogger(__name__)

# "chapter" in any case, then digits or uppercase roman numerals ending the
# paragraph or followed by "." or ":"
_CHAPTER_RE = re.compile(r"^\s*(?i:chapter)\s+(?:\d+|[IVXLCDM]+)(?:\s*[.:]|\s*$)")


def read_text(path) -> str:
    """Try common encodings; fall back to 'ignore' decoding to salvage bytes."""
    p = Path(path)
    for enc in ("utf-8", "utf-8-sig", "cp1252", "latin-1"):
        try:
            return p.read_text(encoding=enc)
        except UnicodeDecodeError:
            continue
    return p.read_bytes().decode("utf-8", "ignore")


def load_corpus(root, *, pattern="*.txt", strip_gutenberg=True, unwrap_lines=True) -> pd.DataFrame:
    """
    Read every file matching `pattern` under `root` (or `root` itself if it is a file).

    Each file becomes one document, keyed by its path relative to `root`
    without the suffix. Empty files are skipped with a warning.

    Returns DataFrame[document, text], sorted by document.
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"corpus root not found: {root}")
    paths = [root] if root.is_file() else sorted(p for p in root.rglob(pattern) if p.is_file())

    rows = []
    for p in paths:
        text = read_text(p)
        if strip_gutenberg:
            text = strip_gutenberg_headers(text)
        text = basic_clean(text, unwrap_lines=unwrap_lines)
        if not text:
            logger.warning("skipping empty document %s", p)
            continue
        rows.append((document_id(p, root), text))

    logger.info("loaded %d document(s) from %s", len(rows), root)
    return pd.DataFrame(rows, columns=["document", "text"])


def split_chapters(docs: pd.DataFrame, *, document="document", text="text") -> pd.DataFrame:
    """
    Split each document on "Chapter N" / "CHAPTER XII" headings.

    Paragraphs before the first heading form chapter 0 (front matter) and
    are kept only when non-empty. The heading itself is not part of the
    chapter text.

    Returns DataFrame[document, chapter, text].
    """
    rows = []
    for doc, body in zip(docs[document], docs[text]):
        chapter, buf = 0, []
        for para in re.split(r"\n\s*\n", body):
            m = _CHAPTER_RE.match(para)
            if m:
                if buf:
                    rows.append((doc, chapter, "\n\n".join(buf)))
                chapter, buf = chapter + 1, []
                para = para[m.end():].strip()
            if para.strip():
                buf.append(para.strip())
        if buf:
            rows.append((doc, chapter, "\n\n".join(buf)))
    return pd.DataFrame(rows, columns=[document, "chapter", text])


def chunk_words(text: str, size: int = 300) -> list:
    """Split text into consecutive chunks of at most `size` whitespace-separated words."""
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    words = text.split()
    return [" ".join(words[i:i + size]) for i in range(0, len(words), size)]
