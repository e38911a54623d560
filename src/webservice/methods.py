"""HTTP methods and their wire encoding."""

import ipaddress
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from pydantic_core import PydanticSerializationError, to_json

from .core import Request
from .errors import InvalidURLError

JSON_CONTENT_TYPE = "application/json"

_LOGGER = logging.getLogger(__name__)

_HOST_LABEL = re.compile(r"^(?!-)[A-Za-z0-9_-]{1,63}(?<!-)$")

# Post() without arguments sends no body; Post(None) sends "null".
_NO_PARAMETERS = object()


@dataclass(frozen=True)
class Get:
    """GET with optional query parameters. Carries no body."""

    parameters: Mapping[str, Any] | None = None

    name = "GET"

    def query(self) -> str | None:
        """Percent-encoded query string, or None when there are no parameters."""
        if not self.parameters:
            return None
        items = [(key, str(value)) for key, value in self.parameters.items()]
        return urlencode(items, quote_via=quote)

    def body(self) -> bytes | None:
        return None


@dataclass(frozen=True)
class Post:
    """POST whose parameters are sent as a JSON body."""

    parameters: Any = _NO_PARAMETERS

    name = "POST"

    def query(self) -> str | None:
        return None

    def body(self) -> bytes | None:
        """JSON encoding of the parameters.

        None when no parameters were given or they cannot be serialized.
        """
        if self.parameters is _NO_PARAMETERS:
            return None
        try:
            return to_json(self.parameters)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            _LOGGER.warning(
                "Dropping POST body, %s is not JSON serializable: %s",
                type(self.parameters).__name__,
                exc,
            )
            return None


HTTPMethod = Get | Post


def _valid_host(host: str) -> bool:
    if ":" in host:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            return False
        return True

    try:
        ascii_host = host.encode("idna").decode("ascii")
    except UnicodeError:
        return False
    labels = ascii_host.rstrip(".").split(".")
    return all(_HOST_LABEL.match(label) for label in labels)


def validate_url(url: str) -> None:
    """Raise InvalidURLError unless url is an absolute http(s) URL."""
    try:
        parts = urlsplit(url)
        parts.port  # raises on a malformed port
    except ValueError as exc:
        raise InvalidURLError(url, str(exc)) from exc

    if parts.scheme not in ("http", "https"):
        raise InvalidURLError(url, f"unsupported scheme {parts.scheme!r}")
    if not parts.hostname:
        raise InvalidURLError(url, "missing host")
    if not _valid_host(parts.hostname):
        raise InvalidURLError(url, f"invalid host {parts.hostname!r}")


def build_request(url: str, method: HTTPMethod) -> Request:
    """Turn a base URL and method into a concrete wire request."""
    validate_url(url)

    query = method.query()
    if query is not None:
        parts = urlsplit(url)
        url = urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))

    body = method.body()
    headers = {"Content-Type": JSON_CONTENT_TYPE} if body is not None else {}
    return Request(method=method.name, url=url, body=body, headers=headers)
