"""Typed success/failure result returned by every gateway operation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..errors import BoardError, ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    success: bool
    value: Optional[T] = None
    error: Optional[BoardError] = None

    @classmethod
    def ok(cls, value: T) -> "Outcome[T]":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: BoardError) -> "Outcome[T]":
        return cls(success=False, error=error)

    @property
    def code(self) -> Optional[ErrorCode]:
        return self.error.code if self.error is not None else None

    def unwrap(self) -> T:
        if not self.success:
            if self.error is None:
                raise RuntimeError("failed outcome carries no error")
            raise self.error
        return self.value  # type: ignore[return-value]
