"""Site client."""

from upstream_client.site.client import BlogIndex, SiteClient

__all__ = ["SiteClient", "BlogIndex"]
