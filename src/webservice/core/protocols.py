"""Protocol definitions for the transport boundary."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class Request:
    """One-shot HTTP request description."""

    method: str
    url: str
    body: bytes | None = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    """HTTP response container."""

    url: str
    status: int
    content: bytes | None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        """Decode content as UTF-8."""
        if self.content is None:
            return ""
        return self.content.decode("utf-8", errors="replace")


class Transport(Protocol):
    """Protocol for the collaborator performing the network round trip.

    Implementations raise ``TransportError`` when no bytes are received.
    """

    async def send(self, request: Request) -> Response:
        """Issue the request and return the response."""
        ...
