"""Pay slip reporters: the presentation side of a payroll run."""

from __future__ import annotations

import sys
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol, TextIO

from payroll_modules.models import PaySlip

CENTS = Decimal("0.01")


def fmt_money(value: Decimal) -> str:
    """Format an amount for display (e.g. $1,234.57)."""
    d = Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if d < 0 else ""
    return f"{sign}${abs(d):,.2f}"


def fmt_hours(value: Decimal) -> str:
    """Format hours without trailing zeros (8.50 -> 8.5, 40.0 -> 40)."""
    d = Decimal(str(value)).normalize()
    return f"{d:f}"


class PaySlipReporter(Protocol):
    """Receives the slips of one run, already in final order."""

    def start_report(self, employee_count: int) -> None: ...

    def report(self, slip: PaySlip) -> None: ...


class ConsolePaySlipReporter:
    """Prints the weekly payroll report as plain text."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self._stream)

    def start_report(self, employee_count: int) -> None:
        self._print("WEEKLY PAYROLL REPORT")

    def report(self, slip: PaySlip) -> None:
        employee = slip.employee
        result = slip.result

        self._print()
        self._print(f"PAY SLIP FOR: {employee.name}")
        self._print(f"Hourly Rate: {fmt_money(slip.regular_rate)}")
        self._print(
            "Daily Hours: " + ", ".join(fmt_hours(h) for h in employee.daily_hours)
        )

        self._print(
            f"Regular Hours: {fmt_hours(result.regular_hours)} "
            f"@ {fmt_money(slip.regular_rate)}"
        )
        self._print(
            f"Daily OT Hours: {fmt_hours(result.daily_overtime_hours)} "
            f"@ {fmt_money(slip.daily_overtime_rate)}"
        )
        self._print(
            f"Weekly OT Hours: {fmt_hours(result.weekly_overtime_hours)} "
            f"@ {fmt_money(slip.weekly_overtime_rate)}"
        )

        self._print(f"Gross Pay: {fmt_money(result.gross_pay)}")
        self._print(f"Tax Withheld: {fmt_money(result.tax)}")
        self._print(f"NET PAY: {fmt_money(result.net_pay)}")
