"""
Typed Exception Hierarchy for precondition checks.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from PreconditionError:

    PreconditionError (base)
    |
    +-- InvalidArgumentError           (also a ValueError)
    |
    +-- InvalidFailureDescriptorError  (also a TypeError)

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Code                        | When Raised
----------------------------|------------------------------------------------
INVALID_ARGUMENT            | A check failed and the caller passed a message
INVALID_FAILURE_DESCRIPTOR  | The failure descriptor is neither str nor an
                            | exception instance
----------------------------|------------------------------------------------

A check that fails with a caller-supplied exception object raises that object
unchanged. It does NOT appear in this hierarchy unless the caller built it
from one of these classes.

===============================================================================
HANDLING PATTERNS
===============================================================================

1. CATCH THE DEFAULT KIND BY TYPE:

    try:
        not_null(user_id, "user_id cannot be null")
    except InvalidArgumentError as e:
        api_response(code=e.code, detail=e.message)

2. CALLERS THAT WANT THEIR OWN KIND PASS AN INSTANCE:

    not_empty(lines, JournalEmptyError(entry_id))

    The caller declares and handles JournalEmptyError; the checks never
    wrap or translate it.

===============================================================================
DESIGN DECISIONS
===============================================================================

1. WHY InvalidArgumentError ALSO INHERITS FROM ValueError?
   A failed precondition on a message is the Python equivalent of an
   illegal-argument error. Code that already handles ValueError keeps
   working; code that wants only precondition failures catches
   PreconditionError.

2. WHY InvalidFailureDescriptorError ALSO INHERITS FROM TypeError?
   Passing something that cannot be raised is a programming error in the
   caller, the same category Python itself reports with TypeError.

3. WHY code CLASS ATTRIBUTE (not instance)?
   Codes are static per exception type and readable without instantiation.

===============================================================================
"""


class PreconditionError(Exception):
    """
    Base exception for all precondition errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "PRECONDITION_ERROR"


class InvalidArgumentError(PreconditionError, ValueError):
    """A check failed and the caller supplied only a message."""

    code: str = "INVALID_ARGUMENT"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidFailureDescriptorError(PreconditionError, TypeError):
    """
    The failure descriptor cannot be raised.

    Descriptors must be a str message or an exception instance. Exception
    classes are rejected too: the caller must construct the object.
    """

    code: str = "INVALID_FAILURE_DESCRIPTOR"

    def __init__(self, descriptor_type: str):
        self.descriptor_type = descriptor_type
        super().__init__(
            "Failure descriptor must be a str message or an exception "
            f"instance, not {descriptor_type}"
        )
