"""
Payroll Domain Models (``payroll_modules.models``).

Responsibility
--------------
Frozen dataclass value objects for one weekly pay run: the employee
record that goes in and the pay slip that comes out.

Architecture position
---------------------
**Modules layer** -- pure data definitions with ZERO I/O.  Consumed by
``PayrollBatch`` and the reporters.

Invariants enforced
-------------------
* All models are ``frozen=True`` (immutable after construction).
* All numeric fields are ``Decimal`` -- NEVER ``float``.
* An employee carries exactly seven daily hour values.

Failure modes
-------------
* Wrong number of daily hours raises ``MalformedRecordError``.
* Hourly rate and hour ranges are NOT checked here; that is batch
  validation's job.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from payroll_engines import PayResult
from payroll_kernel.exceptions import MalformedRecordError
from payroll_kernel.logging_config import get_logger

logger = get_logger("modules.payroll.models")

DAYS_PER_WEEK = 7


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True)
class Employee:
    """An hourly employee and the hours worked each day of one week."""
    name: str
    hourly_rate: Decimal
    daily_hours: tuple[Decimal, ...]

    def __post_init__(self):
        hours = tuple(_to_decimal(h) for h in self.daily_hours)
        if len(hours) != DAYS_PER_WEEK:
            logger.warning(
                "employee_malformed_record",
                extra={
                    "employee_name": self.name,
                    "day_count": len(hours),
                },
            )
            raise MalformedRecordError(self.name, len(hours), DAYS_PER_WEEK)

        object.__setattr__(self, "hourly_rate", _to_decimal(self.hourly_rate))
        object.__setattr__(self, "daily_hours", hours)

    @property
    def total_hours(self) -> Decimal:
        return sum(self.daily_hours, Decimal("0"))


@dataclass(frozen=True)
class PaySlip:
    """One employee's computed pay, as handed to a reporter."""
    employee: Employee
    result: PayResult
    daily_multiplier: Decimal = Decimal("1.5")
    weekly_multiplier: Decimal = Decimal("1.75")

    @property
    def name(self) -> str:
        return self.employee.name

    @property
    def net_pay(self) -> Decimal:
        return self.result.net_pay

    @property
    def regular_rate(self) -> Decimal:
        return self.employee.hourly_rate

    @property
    def daily_overtime_rate(self) -> Decimal:
        return self.employee.hourly_rate * self.daily_multiplier

    @property
    def weekly_overtime_rate(self) -> Decimal:
        return self.employee.hourly_rate * self.weekly_multiplier
