"""Single-shot dispatch result."""

from dataclasses import dataclass
from typing import Generic, TypeVar

ModelT = TypeVar("ModelT")


@dataclass(frozen=True)
class Success(Generic[ModelT]):
    value: ModelT

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> ModelT:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: Exception

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self):
        """Raise the carried error."""
        raise self.error


Result = Success[ModelT] | Failure
