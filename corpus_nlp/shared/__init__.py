# Import key utilities from io_utils so they are accessible at package level
from .io_utils import document_id, hash_stem

__all__ = [
    "document_id",
    "hash_stem",
]
