"""
Pytest fixtures for the preconditions test suite.

Provides:
- captured_logs fixture for asserting on emitted records
"""

import json
import logging
from io import StringIO

import pytest

from preconditions.logging_config import configure_logging, reset_logging


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture
def captured_logs():
    """
    Configure preconditions logging at DEBUG into a fresh stream and return
    a reader that parses every line as JSON.

    Usage::

        def test_something(captured_logs):
            with pytest.raises(InvalidArgumentError):
                not_null(None, "missing")
            logs = captured_logs()
            assert any(r["message"] == "precondition_failed" for r in logs)
    """
    reset_logging()
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)

    def _get_records() -> list[dict]:
        return [json.loads(line) for line in stream.getvalue().splitlines() if line]

    yield _get_records

    reset_logging()
