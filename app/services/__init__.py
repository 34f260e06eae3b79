"""Services package - service class exports."""

from app.services.blog import MetadataCache

__all__ = ["MetadataCache"]
