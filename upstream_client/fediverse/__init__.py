"""Fediverse client."""

from upstream_client.fediverse.client import USER_NOTES_LIMIT, FediverseClient
from upstream_client.fediverse.schemas import NoteSchema

__all__ = [
    "FediverseClient",
    "NoteSchema",
    "USER_NOTES_LIMIT",
]
