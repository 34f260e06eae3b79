"""API errors and validation helpers."""

from app.errors import NotFoundError, ServiceUnavailableError

__all__ = [
    "NotFoundError",
    "ServiceUnavailableError",
    "ValidationError",
    "RequestTimeoutError",
    "validate_slug",
]


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


MAX_SLUG_LENGTH = 200


def validate_slug(slug: str) -> None:
    """Validate slug is a single non-empty path segment."""
    if not slug or len(slug) > MAX_SLUG_LENGTH:
        raise ValidationError(f"Invalid slug length: must be 1-{MAX_SLUG_LENGTH} characters")
    if "/" in slug or slug in (".", ".."):
        raise ValidationError(f"Invalid slug: {slug!r}")


class RequestTimeoutError(Exception):
    """Request took longer than the configured timeout."""

    def __init__(self, message: str = "Request timed out"):
        self.message = message
        super().__init__(self.message)
