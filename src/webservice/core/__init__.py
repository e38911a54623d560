"""Transport boundary components."""

from .protocols import Request, Response, Transport
from .transport import HttpTransport

__all__ = ["HttpTransport", "Request", "Response", "Transport"]
