"""Blog API response schemas."""

from pydantic import BaseModel, RootModel


class MetadataResponse(BaseModel):
    """Metadata from one blog post."""

    views: int
    comments: int
    reactions: int


class AllMetadataResponse(RootModel[dict[str, MetadataResponse]]):
    """Metadata of every blog post, keyed by slug."""


class HealthResponse(BaseModel):
    """Cache status."""

    posts: int
    stale_posts: int
    has_token: bool
    index_age: float | None
    aggregate_age: float | None
