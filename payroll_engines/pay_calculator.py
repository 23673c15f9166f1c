"""
Pay Calculator (``payroll_engines.pay_calculator``).

Responsibility
--------------
Turns an hourly rate and a week of daily hours into gross pay, tax and
net pay.  Hour decomposition comes from ``payroll_engines.overtime``,
withholding from ``payroll_engines.withholding``.

Architecture position
---------------------
**Engines layer** -- stateless.  ``PayCalculator`` only holds the immutable
bracket table and overtime policy it was built with; every method is a
deterministic function of its arguments.

Failure modes
-------------
* None raised.  Input is assumed to have passed batch validation.

Usage:
    from decimal import Decimal
    from payroll_engines import PayCalculator

    result = PayCalculator().calculate(
        Decimal("20.00"), [Decimal(h) for h in (8, 8, 8, 8, 8, 0, 0)],
    )
    result.gross_pay == Decimal("800")  # True
    result.net_pay == Decimal("710")    # True
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from payroll_engines.overtime import (
    DEFAULT_OVERTIME_POLICY,
    OvertimePolicy,
    daily_overtime,
    regular_hours,
    weekly_overtime,
)
from payroll_engines.withholding import (
    DEFAULT_TAX_BRACKETS,
    TaxBracket,
    calculate_tax,
    validate_bracket_table,
)
from payroll_kernel.logging_config import get_logger

logger = get_logger("engines.pay_calculator")


@dataclass(frozen=True)
class PayResult:
    """
    Computed weekly pay figures for one employee.

    Immutable; all amounts are unrounded ``Decimal`` values.
    """

    regular_hours: Decimal
    daily_overtime_hours: Decimal
    weekly_overtime_hours: Decimal
    gross_pay: Decimal
    tax: Decimal
    net_pay: Decimal

    @property
    def overtime_hours(self) -> Decimal:
        """Daily plus weekly overtime hours."""
        return self.daily_overtime_hours + self.weekly_overtime_hours


def gross_pay(
    hourly_rate: Decimal,
    daily_hours: Sequence[Decimal],
    policy: OvertimePolicy = DEFAULT_OVERTIME_POLICY,
) -> Decimal:
    """regular x rate + daily OT x rate x 1.5 + weekly OT x rate x 1.75."""
    return (
        regular_hours(daily_hours, policy) * hourly_rate
        + daily_overtime(daily_hours, policy) * hourly_rate * policy.daily_multiplier
        + weekly_overtime(daily_hours, policy) * hourly_rate * policy.weekly_multiplier
    )


def net_pay(
    hourly_rate: Decimal,
    daily_hours: Sequence[Decimal],
    brackets: Sequence[TaxBracket] = DEFAULT_TAX_BRACKETS,
    policy: OvertimePolicy = DEFAULT_OVERTIME_POLICY,
) -> Decimal:
    """Gross pay less the withholding computed on it."""
    gross = gross_pay(hourly_rate, daily_hours, policy)
    return gross - calculate_tax(gross, brackets)


class PayCalculator:
    """
    Compute pay figures for validated employee input.

    Pure - no I/O.  The bracket table is checked once at construction.
    """

    def __init__(
        self,
        brackets: Sequence[TaxBracket] = DEFAULT_TAX_BRACKETS,
        policy: OvertimePolicy = DEFAULT_OVERTIME_POLICY,
    ):
        validate_bracket_table(brackets)
        self._brackets = tuple(brackets)
        self._policy = policy

    @property
    def brackets(self) -> tuple[TaxBracket, ...]:
        return self._brackets

    @property
    def policy(self) -> OvertimePolicy:
        return self._policy

    def regular_hours(self, daily_hours: Sequence[Decimal]) -> Decimal:
        return regular_hours(daily_hours, self._policy)

    def daily_overtime(self, daily_hours: Sequence[Decimal]) -> Decimal:
        return daily_overtime(daily_hours, self._policy)

    def weekly_overtime(self, daily_hours: Sequence[Decimal]) -> Decimal:
        return weekly_overtime(daily_hours, self._policy)

    def gross_pay(self, hourly_rate: Decimal, daily_hours: Sequence[Decimal]) -> Decimal:
        return gross_pay(hourly_rate, daily_hours, self._policy)

    def calculate_tax(self, gross: Decimal) -> Decimal:
        return calculate_tax(gross, self._brackets)

    def net_pay(self, hourly_rate: Decimal, daily_hours: Sequence[Decimal]) -> Decimal:
        return net_pay(hourly_rate, daily_hours, self._brackets, self._policy)

    def calculate(
        self,
        hourly_rate: Decimal,
        daily_hours: Sequence[Decimal],
    ) -> PayResult:
        """
        Compute every pay figure for one week in a single pass.

        Args:
            hourly_rate: Base hourly rate (validated > 0 by the caller).
            daily_hours: One value per day of the week.

        Returns:
            PayResult with hours breakdown, gross, tax and net.
        """
        regular = self.regular_hours(daily_hours)
        daily_ot = self.daily_overtime(daily_hours)
        weekly_ot = self.weekly_overtime(daily_hours)

        gross = (
            regular * hourly_rate
            + daily_ot * hourly_rate * self._policy.daily_multiplier
            + weekly_ot * hourly_rate * self._policy.weekly_multiplier
        )
        tax = self.calculate_tax(gross)

        result = PayResult(
            regular_hours=regular,
            daily_overtime_hours=daily_ot,
            weekly_overtime_hours=weekly_ot,
            gross_pay=gross,
            tax=tax,
            net_pay=gross - tax,
        )

        if weekly_ot < 0:
            logger.warning("weekly_overtime_negative", extra={
                "weekly_overtime_hours": str(weekly_ot),
                "daily_overtime_hours": str(daily_ot),
            })

        logger.debug("pay_calculated", extra={
            "hourly_rate": str(hourly_rate),
            "regular_hours": str(regular),
            "daily_overtime_hours": str(daily_ot),
            "weekly_overtime_hours": str(weekly_ot),
            "gross_pay": str(gross),
            "tax": str(tax),
            "net_pay": str(result.net_pay),
        })
        return result
