# usage: text normalization (gutenberg boilerplate strip, whitespace)
import re

# Tolerates the common START/END marker variants found in Gutenberg dumps
_START_RE = re.compile(
    r"^(?:\*\*\*\s*)?START\s+OF\s+(?:THE\s+|THIS\s+)?PROJECT\s+GUTENBERG\s+E-?BOOK",
    re.IGNORECASE,
)
_END_RE = re.compile(
    r"^(?:\*\*\*\s*)?END\s+OF\s+(?:THE\s+|THIS\s+)?PROJECT\s+GUTENBERG\s+E-?BOOK"
    r"|^End\s+of\s+(?:the\s+)?Project\s+Gutenberg'?s?",
    re.IGNORECASE,
)


def strip_gutenberg_headers(text: str) -> str:
    """
    Keep only the body between the Project Gutenberg START/END markers.
    Text without markers comes back stripped but otherwise unchanged.
    """
    lines = text.splitlines()
    start = next((i + 1 for i, ln in enumerate(lines) if _START_RE.search(ln.strip())), 0)
    end = next((i for i in range(len(lines) - 1, start - 1, -1) if _END_RE.search(lines[i].strip())), len(lines))

    body = "\n".join(lines[start:end]).strip()
    return body if body else text.strip()


def basic_clean(text: str, unwrap_lines: bool = True) -> str:
    """
    Normalize newlines/whitespace and optionally unwrap soft line breaks.

    - CR/LF variants become '\n'
    - unwrap_lines=True joins single newlines into spaces (paragraph breaks stay)
    - runs of blank lines collapse to one, runs of spaces/tabs to one space
    """
    text = re.sub(r"\r\n?", "\n", text)
    if unwrap_lines:
        text = re.sub(r"(?<!\n)\n(?!\n)", " ", text)
    text = re.sub(r"\n\s*\n+", "\n\n", text)
    text = re.sub(r"[ \t]+", " ", text)
    return text.strip()
