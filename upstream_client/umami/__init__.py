"""Umami analytics client."""

from upstream_client.umami.client import UmamiClient
from upstream_client.umami.schemas import LoginSchema, MetricSchema, UserSchema

__all__ = [
    "UmamiClient",
    "LoginSchema",
    "UserSchema",
    "MetricSchema",
]
