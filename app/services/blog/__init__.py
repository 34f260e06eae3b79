"""Blog services."""

from app.services.blog.metadata import BLOG_PREFIX, MetadataCache

__all__ = ["MetadataCache", "BLOG_PREFIX"]
