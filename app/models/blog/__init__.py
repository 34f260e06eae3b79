"""Blog domain models - post metadata and cache state."""

from app.models.blog.entities import EPOCH, CacheState, Metadata, PostEntry

__all__ = [
    "EPOCH",
    "Metadata",
    "PostEntry",
    "CacheState",
]
