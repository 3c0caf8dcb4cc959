"""
Failures -- what a check raises when its condition does not hold.

Responsibility:
    Classifies a caller-supplied failure descriptor into one of two closed
    kinds and produces the exception object to raise for it.

Architecture position:
    Pure value layer, zero I/O. Used only by preconditions.checks.

Invariants enforced:
    - A message descriptor always becomes a fresh InvalidArgumentError
      whose message is the exact text supplied.
    - A caller error descriptor is returned as the very same object, never
      copied, wrapped, or chained. Raising it still mutates it the way any
      raise does: __traceback__ grows with each raise of a reused object,
      and __context__ is set when the check runs inside an except block.
    - kind, message and error always agree; Failure rejects any other
      combination at construction.

Failure modes:
    - InvalidFailureDescriptorError when the descriptor is neither a str
      nor a BaseException instance.
    - ValueError when Failure is built directly with fields that do not
      match its kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

from preconditions.exceptions import (
    InvalidArgumentError,
    InvalidFailureDescriptorError,
)

FailureDescriptor = str | BaseException


@unique
class FailureKind(str, Enum):
    """Closed set of failure shapes a check can raise."""

    MESSAGE = "message"
    """Caller passed text; raise InvalidArgumentError(text)."""

    CALLER_ERROR = "caller_error"
    """Caller passed an exception instance; raise it verbatim."""


@dataclass(frozen=True, slots=True)
class Failure:
    """
    A resolved failure descriptor.

    Contract:
        Built from a descriptor with from_descriptor(). Exactly one of
        message / error is set, matching kind.

    Guarantees:
        - Immutable
        - to_exception() for CALLER_ERROR returns the original object

    Non-goals:
        - Does NOT inspect, format or translate a caller error
    """

    kind: FailureKind
    message: str | None = None
    error: BaseException | None = None

    def __post_init__(self) -> None:
        if self.kind is FailureKind.MESSAGE:
            if not isinstance(self.message, str) or self.error is not None:
                raise ValueError(
                    "MESSAGE failure requires a str message and no error"
                )
        elif self.kind is FailureKind.CALLER_ERROR:
            if not isinstance(self.error, BaseException) or self.message is not None:
                raise ValueError(
                    "CALLER_ERROR failure requires an exception instance "
                    "and no message"
                )
        else:
            raise ValueError(f"Unknown failure kind: {self.kind!r}")

    @classmethod
    def from_descriptor(cls, descriptor: FailureDescriptor) -> Failure:
        # Exception classes are types, not instances, and are rejected.
        if isinstance(descriptor, str):
            return cls(kind=FailureKind.MESSAGE, message=descriptor)
        if isinstance(descriptor, BaseException):
            return cls(kind=FailureKind.CALLER_ERROR, error=descriptor)
        raise InvalidFailureDescriptorError(type(descriptor).__name__)

    def to_exception(self) -> BaseException:
        """Return the exception object a failed check raises."""
        if self.kind is FailureKind.CALLER_ERROR:
            return self.error
        return InvalidArgumentError(self.message)
