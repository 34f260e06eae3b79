"""Upstream API clients package."""

from upstream_client.base import BaseClient, parse_count
from upstream_client.errors import (
    UnauthorizedError,
    UpstreamDecodeError,
    UpstreamError,
    UpstreamNotFoundError,
    UpstreamTransportError,
)
from upstream_client.fediverse import FediverseClient
from upstream_client.site import SiteClient
from upstream_client.umami import UmamiClient

__all__ = [
    # Base
    "BaseClient",
    "parse_count",
    # Errors
    "UpstreamError",
    "UpstreamTransportError",
    "UpstreamDecodeError",
    "UnauthorizedError",
    "UpstreamNotFoundError",
    # Clients
    "UmamiClient",
    "FediverseClient",
    "SiteClient",
]
