"""Error types reported through the Failure arm of a Result."""

from typing import Any


class WebserviceError(Exception):
    """Base class for all webservice errors."""


class InvalidURLError(WebserviceError, ValueError):
    """A resource was built from a URL that cannot form a request."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Invalid url {url!r}: {reason}")
        self.url = url
        self.reason = reason


class TransportError(WebserviceError):
    """The round trip produced no bytes (network, DNS, TLS, ...)."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class StatusError(TransportError):
    """The server answered with a status outside 2xx."""

    def __init__(self, status: int, url: str | None = None):
        super().__init__(f"Unexpected status {status}", url=url)
        self.status = status


class DecodeError(WebserviceError):
    """Response bytes did not match the shape of the expected model."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        path: tuple[str | int, ...] = (),
        errors: list[dict[str, Any]] | None = None,
    ):
        super().__init__(message)
        self.field = field
        self.path = path
        self.errors = errors or []

    @property
    def missing(self) -> bool:
        """True when the first problem is a missing required field."""
        return bool(self.errors) and self.errors[0].get("type") == "missing"
