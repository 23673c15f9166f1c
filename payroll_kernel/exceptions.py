"""
Typed Exception Hierarchy for the Payroll Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Payroll errors must be handled precisely. A caller that has to parse
"Invalid hourly rate for ..." out of a message string breaks the moment the
wording changes. Every error therefore has:
  1. A TYPED exception class (catch by type, not message)
  2. A CODE class attribute (machine-readable, API-safe)
  3. Structured DATA attributes (employee name, offending value)

Example:
    try:
        batch.process_payroll(reporter)
    except InvalidDailyHoursError as e:
        log.warning(f"{e.employee_name}: day {e.day_index} has {e.hours}h")
    except PayrollError as e:
        print(f"Error processing payroll: {e}")

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    PayrollError (base)
    |
    +-- PayrollInputError
    |   +-- InvalidHourlyRateError
    |   +-- InvalidDailyHoursError
    |   +-- MalformedRecordError
    |
    +-- TaxTableError
    |   +-- InvalidBracketTableError
    |
    +-- PayrollConfigError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category   | Code                   | When Raised
-----------|------------------------|------------------------------------------
Input      | INVALID_HOURLY_RATE    | hourly rate <= 0 (batch validation)
           | INVALID_DAILY_HOURS    | a day outside [0, 24] (batch validation)
           | MALFORMED_RECORD       | daily hours length != 7 (construction)
-----------|------------------------|------------------------------------------
Tax table  | INVALID_BRACKET_TABLE  | ceilings not increasing, bad rate, bounded
-----------|------------------------|------------------------------------------
Config     | PAYROLL_CONFIG_ERROR   | unreadable / malformed YAML settings

===============================================================================
"""

from decimal import Decimal


class PayrollError(Exception):
    """
    Base exception for all payroll errors.

    All subclasses must have a `code` class attribute
    for machine-readable error identification.
    """

    code: str = "PAYROLL_ERROR"


# Employee input exceptions


class PayrollInputError(PayrollError):
    """Base exception for invalid employee input."""

    code: str = "PAYROLL_INPUT_ERROR"


class InvalidHourlyRateError(PayrollInputError):
    """Hourly rate is zero or negative."""

    code: str = "INVALID_HOURLY_RATE"

    def __init__(self, employee_name: str, hourly_rate: Decimal):
        self.employee_name = employee_name
        self.hourly_rate = hourly_rate
        super().__init__(f"Invalid hourly rate for {employee_name}")


class InvalidDailyHoursError(PayrollInputError):
    """A daily hours entry is outside the allowed range."""

    code: str = "INVALID_DAILY_HOURS"

    def __init__(self, employee_name: str, day_index: int, hours: Decimal):
        self.employee_name = employee_name
        self.day_index = day_index
        self.hours = hours
        super().__init__(f"Invalid hours entry for {employee_name}")


class MalformedRecordError(PayrollInputError):
    """Employee record does not carry exactly one week of daily hours."""

    code: str = "MALFORMED_RECORD"

    def __init__(self, employee_name: str, day_count: int, expected: int = 7):
        self.employee_name = employee_name
        self.day_count = day_count
        self.expected = expected
        super().__init__(
            f"Must provide exactly {expected} days of hours for "
            f"{employee_name} (got {day_count})"
        )


# Tax table exceptions


class TaxTableError(PayrollError):
    """Base exception for tax bracket table errors."""

    code: str = "TAX_TABLE_ERROR"


class InvalidBracketTableError(TaxTableError):
    """Bracket table violates ordering, rate range, or unbounded top bracket."""

    code: str = "INVALID_BRACKET_TABLE"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid tax bracket table: {reason}")


# Configuration exceptions


class PayrollConfigError(PayrollError):
    """Settings or roster file could not be turned into payroll inputs."""

    code: str = "PAYROLL_CONFIG_ERROR"

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid payroll configuration in {source}: {reason}")
