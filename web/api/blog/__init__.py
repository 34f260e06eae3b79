"""Blog API."""

from web.api.blog.views import get_all_metadata, get_health, get_metadata, invalidate_metadata

__all__ = [
    "get_metadata",
    "get_all_metadata",
    "get_health",
    "invalidate_metadata",
]
