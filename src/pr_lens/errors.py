"""Exceptions raised by pr-lens."""


class PrLensError(Exception):
    """Base class for pr-lens errors."""

    pass


class NotInitializedError(PrLensError):
    """Raised when a plugin is used without the request source it needs."""

    pass


class MissingFieldError(PrLensError, KeyError):
    """Raised when pull request JSON lacks an expected field."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        return f"Missing field in pull request data: {self.path}"


class InvalidArgumentError(PrLensError, ValueError):
    """Raised when an operation gets input it cannot handle."""

    pass


class RequestSourceError(PrLensError):
    """Raised when pull request data cannot be fetched."""

    pass
