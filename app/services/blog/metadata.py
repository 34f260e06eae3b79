"""Blog metadata cache - refresh-on-read over Umami, Fediverse and blog.json."""

import asyncio
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from loguru import logger

from app.errors import NotFoundError, ServiceUnavailableError
from app.models.blog import EPOCH, CacheState, Metadata, PostEntry
from upstream_client import FediverseClient, SiteClient, UmamiClient
from upstream_client.errors import UnauthorizedError, UpstreamError, UpstreamNotFoundError
from upstream_client.fediverse import NoteSchema

BLOG_PREFIX = "/blog"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MetadataCache:
    """Post metadata merged from the blog index, Umami and a Fediverse instance.

    Every public method holds one lock for its whole duration, upstream calls
    included, so at most one refresh runs at a time and readers never see a
    half-applied refresh. Within a call the order is fixed: blog index, then
    analytics token, then upstream fetches, then state mutation.
    """

    def __init__(
        self,
        umami: UmamiClient,
        fediverse: FediverseClient,
        site: SiteClient,
        username: str,
        password: str,
        fediverse_user_id: str,
        ttl: int = 300,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._umami = umami
        self._fediverse = fediverse
        self._site = site
        self._username = username
        self._password = password
        self._fediverse_user_id = fediverse_user_id
        self._ttl = timedelta(seconds=ttl)
        self._clock = clock
        self._state = CacheState()
        self._lock = asyncio.Lock()
        logger.debug("MetadataCache initialized (ttl={}s)", ttl)

    @property
    def state(self) -> CacheState:
        """Live cache state. Read-only outside the lock."""
        return self._state

    def _expired(self, last: datetime | None, now: datetime) -> bool:
        return last is None or now - last > self._ttl

    # ========== Refresh steps ==========

    async def _refresh_index(self, now: datetime) -> None:
        """Re-read blog.json when stale. Adds and updates entries, never removes."""
        if not self._expired(self._state.index_refreshed, now):
            return

        try:
            index = await self._site.blog_index()
        except UpstreamError as e:
            logger.warning("Blog index refresh failed: {}", e)
            raise ServiceUnavailableError("Blog index unavailable") from e

        added = 0
        for slug, note_id in index.items():
            entry = self._state.entries.get(slug)
            if entry is None:
                self._state.entries[slug] = PostEntry(slug=slug, note_id=note_id)
                added += 1
            else:
                entry.note_id = note_id

        self._state.index_refreshed = now
        logger.info("Blog index refreshed: {} posts, {} new", len(index), added)

    async def _ensure_token(self) -> str:
        """Reuse the stored token while Umami accepts it, otherwise log in again."""
        try:
            return await self._umami.verify(self._state.token)
        except UnauthorizedError as e:
            logger.info("Analytics token invalid ({}), logging in", e.message)

        self._state.token = None
        login = await self._umami.login(self._username, self._password)
        self._state.token = login.token
        return login.token

    async def _views(self, token: str, slug: str) -> int:
        # Never-visited posts have no metrics row
        try:
            return await self._umami.pageviews_path(token, f"{BLOG_PREFIX}/{slug}")
        except UpstreamNotFoundError:
            return 0

    @staticmethod
    def _assemble(views: int, note: NoteSchema | None) -> Metadata:
        if note is None:
            return Metadata(views=views)
        return Metadata(views=views, comments=note.replies_count, reactions=note.reaction_count)

    async def _refresh_all(self, now: datetime) -> None:
        try:
            token = await self._ensure_token()
            views = await self._umami.pageviews_prefix(token, BLOG_PREFIX)
            notes = await self._fediverse.user_notes(self._fediverse_user_id)
        except UpstreamError as e:
            logger.warning("Bulk refresh failed: {}", e)
            raise ServiceUnavailableError("Could not refresh blog metadata") from e

        updated = {
            slug: self._assemble(
                views.get(f"{BLOG_PREFIX}/{slug}", 0),
                notes.get(entry.note_id) if entry.note_id else None,
            )
            for slug, entry in self._state.entries.items()
        }

        for slug, metadata in updated.items():
            entry = self._state.entries[slug]
            entry.metadata = metadata
            entry.last_refreshed = now
        self._state.aggregate_refreshed = now
        logger.info("Refreshed metadata for {} posts", len(updated))

    # ========== Public API ==========

    async def get_one(self, slug: str) -> Metadata:
        """Metadata of one post, refreshed from upstream when stale."""
        async with self._lock:
            now = self._clock()
            await self._refresh_index(now)

            entry = self._state.entries.get(slug)
            if entry is None:
                raise NotFoundError(f"Blog post not found: {slug}")

            if not self._expired(entry.last_refreshed, now):
                return entry.metadata.copy()

            try:
                token = await self._ensure_token()
                views = await self._views(token, slug)
                note = await self._fediverse.note(entry.note_id) if entry.note_id else None
            except UpstreamError as e:
                logger.warning("Refresh of {} failed: {}", slug, e)
                raise ServiceUnavailableError(f"Could not refresh {slug}") from e

            entry.metadata = self._assemble(views, note)
            entry.last_refreshed = now
            logger.info("Refreshed {}: {}", slug, entry.metadata)
            return entry.metadata.copy()

    async def get_all(self) -> dict[str, Metadata]:
        """Metadata of every known post, bulk-refreshed when the aggregate is stale."""
        async with self._lock:
            now = self._clock()
            await self._refresh_index(now)

            if self._expired(self._state.aggregate_refreshed, now):
                await self._refresh_all(now)

            return {slug: e.metadata.copy() for slug, e in self._state.entries.items()}

    async def invalidate(self) -> None:
        """Mark every tier stale. Cached values stay until the next refresh."""
        async with self._lock:
            self._state.index_refreshed = None
            self._state.aggregate_refreshed = None
            for entry in self._state.entries.values():
                entry.last_refreshed = EPOCH
            logger.info("Cache invalidated ({} posts)", len(self._state.entries))

    async def status(self) -> dict:
        """Snapshot of cache size and clock ages in seconds."""
        async with self._lock:
            now = self._clock()

            def age(last: datetime | None) -> float | None:
                return None if last is None else round((now - last).total_seconds(), 1)

            return {
                "posts": len(self._state.entries),
                "stale_posts": sum(self._expired(e.last_refreshed, now) for e in self._state.entries.values()),
                "has_token": self._state.token is not None,
                "index_age": age(self._state.index_refreshed),
                "aggregate_age": age(self._state.aggregate_refreshed),
            }
