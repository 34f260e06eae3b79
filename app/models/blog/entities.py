"""Blog domain entities - cached post metadata and cache state."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from app.models.common import BaseEntity

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class Metadata(BaseEntity):
    """Engagement counters of one blog post."""

    views: int = 0
    comments: int = 0
    reactions: int = 0


@dataclass
class PostEntry(BaseEntity):
    """Cached metadata of one post plus its own refresh clock."""

    slug: str
    metadata: Metadata = field(default_factory=Metadata)
    note_id: str | None = None
    last_refreshed: datetime = EPOCH


@dataclass
class CacheState:
    """Process-wide cache state, mutated only under the cache lock.

    The three clocks are independent: ``index_refreshed`` tracks blog.json,
    ``aggregate_refreshed`` tracks the all-posts refresh and each entry keeps
    its own ``last_refreshed``.
    """

    entries: dict[str, PostEntry] = field(default_factory=dict)
    index_refreshed: datetime | None = None
    aggregate_refreshed: datetime | None = None
    token: str | None = None
