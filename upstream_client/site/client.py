"""Site client - published post index."""

from loguru import logger

from upstream_client.base import BaseClient

BlogIndex = dict[str, str | None]


class SiteClient(BaseClient):
    """Client for the blog's own static site."""

    async def blog_index(self) -> BlogIndex:
        """GET /blog.json - slug -> linked note id (or null)."""
        index = self._parse(BlogIndex, await self._get("/blog.json"))
        logger.debug("Blog index: {} posts", len(index))
        return index
