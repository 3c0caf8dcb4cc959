"""
Preconditions

Named predicate checks that return True or raise:
- Nullability (not_null, is_null)
- Boolean truth (is_true, is_false)
- Collection emptiness (not_empty, not_empty_or_null)
- Character classes (is_ascii, is_alphanumeric)

A failed check raises InvalidArgumentError for a message, or the caller's
own exception object unchanged.
"""

from preconditions.checks import (
    ensure,
    is_alphanumeric,
    is_ascii,
    is_false,
    is_null,
    is_true,
    not_empty,
    not_empty_or_null,
    not_null,
)
from preconditions.exceptions import (
    InvalidArgumentError,
    InvalidFailureDescriptorError,
    PreconditionError,
)
from preconditions.failures import Failure, FailureKind

__version__ = "0.1.0"

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
    "Failure",
    "FailureKind",
    "PreconditionError",
    "InvalidArgumentError",
    "InvalidFailureDescriptorError",
]
