"""Blog API views - thin layer over the metadata cache."""

from app.container import container
from web.api.errors import validate_slug

from .schemas import AllMetadataResponse, HealthResponse, MetadataResponse


async def get_metadata(slug: str) -> MetadataResponse:
    """Get metadata of one blog post."""
    validate_slug(slug)
    metadata = await container.metadata.get_one(slug)
    return MetadataResponse(**metadata.to_dict())


async def get_all_metadata() -> AllMetadataResponse:
    """Get metadata of every blog post."""
    data = await container.metadata.get_all()
    return AllMetadataResponse({slug: MetadataResponse(**m.to_dict()) for slug, m in data.items()})


async def get_health() -> HealthResponse:
    return HealthResponse(**await container.metadata.status())


async def invalidate_metadata() -> None:
    """Mark all cached blog metadata stale."""
    await container.metadata.invalidate()
