"""HTTP routes."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, Request, Response
from loguru import logger

from web.api import blog
from web.api.blog.schemas import AllMetadataResponse, HealthResponse, MetadataResponse
from web.api.errors import RequestTimeoutError

router = APIRouter()


async def _bounded(request: Request, view: Callable[..., Awaitable[Any]], *args) -> Any:
    """Run a view under the app's concurrency limit and request timeout."""
    state = request.app.state
    async with state.limiter:
        try:
            return await asyncio.wait_for(view(*args), state.request_timeout)
        except asyncio.TimeoutError:
            logger.warning("Request timed out: {} {}", request.method, request.url.path)
            raise RequestTimeoutError() from None


@router.get("/hello", tags=["misc"])
async def hello() -> dict:
    """Hello, world!"""
    return {"message": "Hello, world!"}


@router.get(
    "/blog/metadata/{slug}",
    tags=["blog"],
    response_model=MetadataResponse,
    responses={404: {"description": "Blog post was not found"}, 503: {"description": "Upstream unavailable"}},
)
async def blog_metadata(slug: str, request: Request):
    """Metadata from one blog post."""
    return await _bounded(request, blog.get_metadata, slug)


@router.get(
    "/blog/metadata",
    tags=["blog"],
    response_model=AllMetadataResponse,
    responses={503: {"description": "Upstream unavailable"}},
)
async def blog_metadata_all(request: Request):
    """Metadata from every blog post, keyed by slug."""
    return await _bounded(request, blog.get_all_metadata)


@router.post("/blog/metadata/invalidate", tags=["blog"], status_code=204)
async def blog_metadata_invalidate(request: Request):
    """Mark every cached value stale. Data is kept and served again after the next refresh."""
    await _bounded(request, blog.invalidate_metadata)
    return Response(status_code=204)


@router.get("/health", tags=["misc"], response_model=HealthResponse)
async def health(request: Request):
    """Cache size and staleness.

    Reads under the cache lock, so it waits behind a refresh in progress and
    is subject to the request timeout like any other read.
    """
    return await _bounded(request, blog.get_health)
