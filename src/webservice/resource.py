"""Typed description of one network operation."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from .core import Request
from .errors import DecodeError
from .methods import Get, HTTPMethod, Post, build_request
from .result import Failure, Result, Success

ModelT = TypeVar("ModelT")


def _decode_error(exc: ValidationError) -> DecodeError:
    errors = exc.errors(include_url=False)
    first = errors[0] if errors else {}
    path = tuple(first.get("loc", ()))
    names = [part for part in path if isinstance(part, str)]
    field = names[-1] if names else None
    message = first.get("msg", str(exc))
    if field is not None:
        message = f"{field!r}: {message}"
    return DecodeError(message, field=field, path=path, errors=errors)


def json_decoder(model: type[ModelT]) -> Callable[[bytes], Result[ModelT]]:
    """Build a decode function that validates JSON bytes against model."""
    adapter = TypeAdapter(model)

    def decode(data: bytes) -> Result[ModelT]:
        try:
            return Success(adapter.validate_json(data))
        except ValidationError as exc:
            return Failure(_decode_error(exc))

    return decode


@dataclass(frozen=True)
class Resource(Generic[ModelT]):
    """Request shape plus the function decoding its response.

    Resources hold no network state and can be dispatched any number of
    times, concurrently.
    """

    request: Request
    decode: Callable[[bytes], Result[ModelT]]

    @classmethod
    def build(
        cls, url: str, method: HTTPMethod, model: type[ModelT]
    ) -> "Resource[ModelT]":
        """Build a resource for model from url and method.

        Raises InvalidURLError if url cannot form a request.
        """
        return cls(request=build_request(url, method), decode=json_decoder(model))

    @classmethod
    def get(
        cls, url: str, model: type[ModelT], parameters: Mapping[str, Any] | None = None
    ) -> "Resource[ModelT]":
        return cls.build(url, Get(parameters), model)

    @classmethod
    def post(cls, url: str, model: type[ModelT], parameters: Any) -> "Resource[ModelT]":
        return cls.build(url, Post(parameters), model)
