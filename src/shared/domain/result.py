"""Result envelope returned by every query and command handler.

Handlers never raise to their callers: the outcome of an operation is a
``Result`` whose ``status`` must be inspected before trusting ``data``.

- ``ResultStatus``: SUCCEEDED or FAILED.
- ``ResultError``: why a failed result failed.
- ``Result``: immutable envelope, ``Result[None]`` for void operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ResultStatus(StrEnum):
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


class ResultError(StrEnum):
    """Failure causes distinguished at the handler layer."""

    NOT_FOUND = "NOT_FOUND"
    CANCELLED = "CANCELLED"
    DATA_ACCESS = "DATA_ACCESS"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Immutable success/failure envelope.

    A failed result never carries a payload and always carries an
    ``error``; a succeeded result never carries an ``error``.
    """

    status: ResultStatus
    data: Optional[T] = None
    error: Optional[ResultError] = None
    message: str = ""

    def __post_init__(self) -> None:
        if self.status == ResultStatus.FAILED:
            if self.data is not None:
                raise ValueError("A failed result cannot carry data.")
            if self.error is None:
                raise ValueError("A failed result requires an error code.")
        elif self.error is not None:
            raise ValueError("A succeeded result cannot carry an error code.")

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def succeeded(cls, data: Optional[T] = None) -> Result[T]:
        return cls(status=ResultStatus.SUCCEEDED, data=data)

    @classmethod
    def failed(cls, error: ResultError, message: str = "") -> Result[T]:
        return cls(status=ResultStatus.FAILED, error=error, message=message)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def is_succeeded(self) -> bool:
        return self.status == ResultStatus.SUCCEEDED

    @property
    def is_failed(self) -> bool:
        return self.status == ResultStatus.FAILED
