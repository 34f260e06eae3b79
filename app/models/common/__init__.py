"""Common models - base classes."""

from app.models.common.base import BaseEntity

__all__ = ["BaseEntity"]
