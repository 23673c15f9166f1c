"""
Payroll Batch Service (``payroll_modules.service``).

Responsibility
--------------
Runs one weekly payroll: collects employees, validates their input,
delegates pay computation to ``payroll_engines.PayCalculator``, orders the
results by net pay and hands each pay slip to a reporter.

Architecture position
---------------------
**Modules layer** -- thin glue.  ``PayrollBatch`` is the sole public entry
point for a pay run.  It owns its employee list for the lifetime of one
run; all arithmetic lives in the engines.

Pipeline
--------
Collect -> Validate -> Compute + Sort -> Report.  Linear, no retry, no
partial success.  A validation failure aborts the run before any pay
slip is computed or reported.

Failure modes
-------------
* ``validate_entries`` returns a ``BatchValidation`` carrying the FIRST
  violation found (employees in insertion order, rate before hours, days
  in order).  Violations are not aggregated.
* ``process_payroll`` raises that violation (``InvalidHourlyRateError``
  or ``InvalidDailyHoursError``) to its caller.

Usage::

    batch = PayrollBatch()
    batch.add_employee(Employee("John Terence", Decimal("20.00"),
                                [8, 8, 8, 8, 8, 0, 0]))
    slips = batch.process_payroll(ConsolePaySlipReporter())
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from uuid import uuid4

from payroll_engines import PayCalculator
from payroll_kernel.exceptions import (
    InvalidDailyHoursError,
    InvalidHourlyRateError,
    PayrollInputError,
)
from payroll_kernel.logging_config import LogContext, get_logger
from payroll_modules.config import PayrollConfig
from payroll_modules.models import Employee, PaySlip
from payroll_modules.reporting import PaySlipReporter

logger = get_logger("modules.payroll.service")


@dataclass(frozen=True)
class BatchValidation:
    """Outcome of validating a batch: valid, or the first violation found."""

    error: PayrollInputError | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


class PayrollBatch:
    """
    Weekly payroll run over a collection of employees.

    Not thread-safe; one batch serves one run.
    """

    def __init__(
        self,
        calculator: PayCalculator | None = None,
        config: PayrollConfig | None = None,
    ):
        self._config = config or PayrollConfig()
        self._calculator = calculator or PayCalculator(policy=self._config.overtime)
        self._employees: list[Employee] = []

    def __len__(self) -> int:
        return len(self._employees)

    @property
    def employees(self) -> tuple[Employee, ...]:
        return tuple(self._employees)

    @property
    def calculator(self) -> PayCalculator:
        return self._calculator

    def add_employee(self, employee: Employee) -> None:
        """Append an employee. No validation, duplicates allowed."""
        self._employees.append(employee)
        logger.debug("employee_added", extra={
            "employee_name": employee.name,
            "employee_count": len(self._employees),
        })

    def validate_entries(self) -> BatchValidation:
        """
        Check every employee's rate and daily hours.

        Stops at the first violation:
            rate NaN, infinite or <= 0    -> InvalidHourlyRateError
            hours NaN, infinite or
            outside [min, max]            -> InvalidDailyHoursError

        Never raises; non-finite values are checked before any comparison.
        """
        low = self._config.min_daily_hours
        high = self._config.max_daily_hours

        for employee in self._employees:
            rate = employee.hourly_rate
            if not rate.is_finite() or rate <= 0:
                return self._rejected(InvalidHourlyRateError(employee.name, rate))

            for day_index, hours in enumerate(employee.daily_hours):
                if not hours.is_finite() or hours < low or hours > high:
                    return self._rejected(
                        InvalidDailyHoursError(employee.name, day_index, hours)
                    )

        return BatchValidation()

    def process_payroll(
        self,
        reporter: PaySlipReporter | None = None,
    ) -> tuple[PaySlip, ...]:
        """
        Validate, compute, sort by net pay descending, then report.

        Args:
            reporter: Receives ``start_report`` once, then one ``report``
                call per slip in final order.  Optional.

        Returns:
            Pay slips ordered by net pay, highest first.  Equal net pay
            keeps insertion order.

        Raises:
            InvalidHourlyRateError: first employee with rate <= 0.
            InvalidDailyHoursError: first day outside the allowed range.
        """
        t0 = time.monotonic()
        with LogContext.bind(run_id=str(uuid4())):
            logger.info("payroll_run_started", extra={
                "employee_count": len(self._employees),
            })

            self.validate_entries().raise_for_error()

            policy = self._calculator.policy
            slips = []
            for employee in self._employees:
                with LogContext.bind(employee_name=employee.name):
                    result = self._calculator.calculate(
                        employee.hourly_rate, employee.daily_hours,
                    )
                slips.append(PaySlip(
                    employee=employee,
                    result=result,
                    daily_multiplier=policy.daily_multiplier,
                    weekly_multiplier=policy.weekly_multiplier,
                ))
            # sorted() is stable, so ties keep insertion order
            ordered = tuple(sorted(slips, key=lambda s: s.net_pay, reverse=True))

            if reporter is not None:
                reporter.start_report(len(ordered))
                for slip in ordered:
                    reporter.report(slip)

            duration_ms = round((time.monotonic() - t0) * 1000, 2)
            logger.info("payroll_run_completed", extra={
                "employee_count": len(ordered),
                "total_gross": str(sum((s.result.gross_pay for s in ordered), 0)),
                "total_net": str(sum((s.net_pay for s in ordered), 0)),
                "duration_ms": duration_ms,
            })
            return ordered

    def _rejected(self, error: PayrollInputError) -> BatchValidation:
        logger.error("payroll_validation_failed", extra={
            "error_code": error.code,
            "error_message": str(error),
            "employee_name": getattr(error, "employee_name", None),
        })
        return BatchValidation(error=error)
