"""Service errors surfaced to API consumers."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ServiceUnavailableError(Exception):
    """An upstream dependency failed."""

    def __init__(self, message: str = "Service unavailable"):
        self.message = message
        super().__init__(self.message)
