# usage: document ids and hashed output filename stems
from pathlib import Path
import hashlib


def document_id(path: Path, root: Path) -> str:
    """
    Stable document id for a corpus file.

    Example:
        document_id(Path("books/austen/emma.txt"), Path("books")) → "austen/emma"

    A path that is the root itself (single-file corpus) falls back to its stem.
    """
    path, root = Path(path), Path(root)
    if path == root:
        return path.stem
    return path.relative_to(root).with_suffix("").as_posix()


def hash_stem(p: Path) -> str:
    """
    Short, collision-resistant stem for output files: "<name>_<6 hex of sha1(path)>".

    Example:
        Path("data/austen") → "austen_ab12cd"
    """
    p = Path(p)
    h = hashlib.sha1(str(p.resolve()).encode("utf-8")).hexdigest()[:6]
    return f"{p.stem or 'corpus'}_{h}"
