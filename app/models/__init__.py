"""Models package - entities for all domains."""

from app.models.blog import EPOCH, CacheState, Metadata, PostEntry
from app.models.common import BaseEntity

__all__ = [
    # Common
    "BaseEntity",
    # Blog
    "EPOCH",
    "Metadata",
    "PostEntry",
    "CacheState",
]
