"""
Pytest fixtures for the payroll test suite.

Provides:
- Structured logging configured for every test session
- Log capture as parsed JSON records
- Employee builders shared across layers
"""

import json
import logging
from decimal import Decimal
from io import StringIO

import pytest

from payroll_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from payroll_modules.models import Employee


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture payroll_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs):
            batch.process_payroll()
            logs = captured_logs()
            assert any(r["message"] == "payroll_run_completed" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("payroll_kernel")
    previous_level = root.level
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Employee builders
# =============================================================================


def make_employee(
    name: str = "A",
    rate: str = "20.00",
    hours: tuple = (8, 8, 8, 8, 8, 0, 0),
) -> Employee:
    return Employee(
        name=name,
        hourly_rate=Decimal(rate),
        daily_hours=tuple(Decimal(str(h)) for h in hours),
    )


@pytest.fixture
def employee_factory():
    """Build Employee records from plain numbers."""
    return make_employee


@pytest.fixture
def demo_employees() -> list[Employee]:
    """The three-person demonstration roster, in insertion order."""
    return [
        make_employee("John Terence", "20.00", (8, 8, 8, 8, 8, 0, 0)),
        make_employee("Janine Reyes", "25.00", (9, 8, 10, 7, 8, 6, 0)),
        make_employee("Michael John", "18.50", (8, 8, 8, 12, 10, 0, 0)),
    ]
