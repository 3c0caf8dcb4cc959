"""
Checks -- named precondition predicates that raise on failure.

Responsibility:
    One function per predicate. Each evaluates its condition and either
    returns True or raises the caller's failure descriptor.

Architecture position:
    Public surface of the package. Stateless plain functions; depends only
    on preconditions.characters, preconditions.failures and logging.

Invariants enforced:
    - Every check is referentially transparent: same input, same outcome.
    - A passing check returns True and has no side effect.
    - A message descriptor raises InvalidArgumentError with that exact text.
    - An exception descriptor is raised as the same object.
    - The descriptor is validated on every call, pass or fail.

Failure modes:
    - The caller's descriptor (see preconditions.failures) when a condition
      does not hold.
    - InvalidFailureDescriptorError for an unraisable descriptor.
    - TypeError when the subject has the wrong shape (no len() for the
      emptiness checks, not a str for the character checks).

Usage::

    not_null(account, "account cannot be null")
    not_empty(lines, JournalEmptyError(entry_id))
    is_alphanumeric(code, "code must be alphanumeric")
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from preconditions.characters import all_ascii_alphanumeric, all_printable_ascii
from preconditions.failures import Failure, FailureDescriptor
from preconditions.logging_config import get_logger

logger = get_logger("checks")

__all__ = [
    "ensure",
    "not_null",
    "is_null",
    "is_true",
    "is_false",
    "not_empty",
    "not_empty_or_null",
    "is_ascii",
    "is_alphanumeric",
]


def _check(name: str, condition: bool, descriptor: FailureDescriptor) -> bool:
    failure = Failure.from_descriptor(descriptor)
    if condition:
        return True

    error = failure.to_exception()
    logger.debug(
        "precondition_failed",
        exc_info=error,
        extra={"check": name, "failure_kind": failure.kind.value},
    )
    raise error


def _require_text(name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise TypeError(
            f"{name}() expects a str subject, not {type(value).__name__}"
        )


def ensure(condition: Any, failure: FailureDescriptor) -> bool:
    """Return True if condition is truthy, otherwise raise failure."""
    return _check("ensure", bool(condition), failure)


# ---------------------------------------------------------------------------
# Nullability
# ---------------------------------------------------------------------------


def not_null(value: Any, failure: FailureDescriptor) -> bool:
    """Pass when value is not None."""
    return _check("not_null", value is not None, failure)


def is_null(value: Any, failure: FailureDescriptor) -> bool:
    """Pass when value is None."""
    return _check("is_null", value is None, failure)


# ---------------------------------------------------------------------------
# Boolean truth
# ---------------------------------------------------------------------------


def is_true(value: Any, failure: FailureDescriptor) -> bool:
    """Pass when value is truthy."""
    return _check("is_true", bool(value), failure)


def is_false(value: Any, failure: FailureDescriptor) -> bool:
    """Pass when value is falsy."""
    return _check("is_false", not value, failure)


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


def not_empty(collection: Sized | None, failure: FailureDescriptor) -> bool:
    """
    Pass when collection is not None and holds at least one element.

    None fails rather than passing: an assertion about the size of a
    missing collection is already wrong.
    """
    return _check(
        "not_empty",
        collection is not None and len(collection) > 0,
        failure,
    )


def not_empty_or_null(
    collection: Sized | None, failure: FailureDescriptor
) -> bool:
    """Same outcome as not_null() followed by not_empty(), in one call."""
    return _check(
        "not_empty_or_null",
        collection is not None and len(collection) > 0,
        failure,
    )


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------


def is_ascii(text: str | None, failure: FailureDescriptor) -> bool:
    """
    Pass when every character has an ordinal in 32..126.

    Control characters such as newline and tab fail. The empty string
    passes. None fails.
    """
    if text is None:
        return _check("is_ascii", False, failure)
    _require_text("is_ascii", text)
    return _check("is_ascii", all_printable_ascii(text), failure)


def is_alphanumeric(text: str | None, failure: FailureDescriptor) -> bool:
    """
    Pass when every character is one of a-z, A-Z, 0-9.

    Non-ASCII letters and digits fail. The empty string passes. None fails.
    """
    if text is None:
        return _check("is_alphanumeric", False, failure)
    _require_text("is_alphanumeric", text)
    return _check("is_alphanumeric", all_ascii_alphanumeric(text), failure)
