"""Typed HTTP resources with single-shot asynchronous dispatch."""

from .errors import (
    DecodeError,
    InvalidURLError,
    StatusError,
    TransportError,
    WebserviceError,
)
from .loader import Loader
from .methods import Get, HTTPMethod, Post
from .resource import Resource
from .result import Failure, Result, Success

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "Failure",
    "Get",
    "HTTPMethod",
    "InvalidURLError",
    "Loader",
    "Post",
    "Resource",
    "Result",
    "StatusError",
    "Success",
    "TransportError",
    "WebserviceError",
]
