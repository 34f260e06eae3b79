"""Upstream error taxonomy."""


class UpstreamError(Exception):
    """Base class for failures talking to an upstream service."""

    def __init__(self, message: str = "Upstream error"):
        self.message = message
        super().__init__(self.message)


class UpstreamTransportError(UpstreamError):
    """Network failure or non-success HTTP status."""


class UpstreamDecodeError(UpstreamError):
    """Response body could not be decoded into the expected shape."""


class UnauthorizedError(UpstreamError):
    """Analytics token missing, expired or rejected."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class UpstreamNotFoundError(UpstreamError):
    """Upstream returned an empty result for the requested resource."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
