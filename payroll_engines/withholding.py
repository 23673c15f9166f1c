"""
Withholding Engine (``payroll_engines.withholding``).

Responsibility
--------------
Tiered tax withholding over a fixed, ordered bracket table.

Architecture position
---------------------
**Engines layer** -- pure functions, no I/O.  The bracket table is passed
as a parameter; ``DEFAULT_TAX_BRACKETS`` is the process-wide table.

Bracket walk
------------
Brackets are visited in ascending ceiling order.  At each bracket::

    if remaining <= 0: stop
    tax       += min(remaining, ceiling) * rate
    remaining -= ceiling

The ceiling itself is subtracted from ``remaining``, not the amount that
was taxed.  This is the published withholding schedule and the figures on
every pay slip depend on it, so it must not be replaced with a cumulative
marginal formula.  Reference traces:

    gross  800.00 -> 600 @ 0.10 + 200 @ 0.15               =  90.00
    gross 2000.00 -> 600 @ 0.10 + 1200 @ 0.15 + 200 @ 0.20 = 280.00

Failure modes
-------------
* ``validate_bracket_table`` raises ``InvalidBracketTableError``.
* ``calculate_tax`` raises nothing; gross <= 0 yields ``Decimal("0")``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from payroll_kernel.exceptions import InvalidBracketTableError
from payroll_kernel.logging_config import get_logger

logger = get_logger("engines.withholding")

UNBOUNDED = Decimal("Infinity")


@dataclass(frozen=True)
class TaxBracket:
    """One (ceiling, marginal rate) pair of the withholding schedule."""

    ceiling: Decimal
    rate: Decimal  # As decimal (e.g., 0.15 for 15%)

    @property
    def is_unbounded(self) -> bool:
        return self.ceiling == UNBOUNDED


@dataclass(frozen=True)
class BracketCharge:
    """Tax produced by a single bracket during the walk."""

    ceiling: Decimal
    rate: Decimal
    taxable: Decimal
    tax: Decimal


DEFAULT_TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(ceiling=Decimal("600"), rate=Decimal("0.10")),
    TaxBracket(ceiling=Decimal("1200"), rate=Decimal("0.15")),
    TaxBracket(ceiling=Decimal("2000"), rate=Decimal("0.20")),
    TaxBracket(ceiling=UNBOUNDED, rate=Decimal("0.25")),
)


def validate_bracket_table(brackets: Sequence[TaxBracket]) -> None:
    """
    Check that a bracket table is usable.

    Raises:
        InvalidBracketTableError: empty table, ceilings not strictly
            increasing, a rate outside [0, 1], or a bounded top bracket.
    """
    if not brackets:
        raise InvalidBracketTableError("table is empty")

    previous: Decimal | None = None
    for bracket in brackets:
        if previous is not None and bracket.ceiling <= previous:
            raise InvalidBracketTableError(
                f"ceiling {bracket.ceiling} does not exceed {previous}"
            )
        if not Decimal("0") <= bracket.rate <= Decimal("1"):
            raise InvalidBracketTableError(
                f"rate {bracket.rate} outside [0, 1]"
            )
        previous = bracket.ceiling

    if not brackets[-1].is_unbounded:
        raise InvalidBracketTableError("last bracket must be unbounded")


def calculate_tax_detail(
    gross: Decimal,
    brackets: Sequence[TaxBracket] = DEFAULT_TAX_BRACKETS,
) -> tuple[BracketCharge, ...]:
    """Walk the brackets and return the charge each one contributed."""
    charges: list[BracketCharge] = []
    remaining = gross

    for bracket in sorted(brackets, key=lambda b: b.ceiling):
        if remaining <= 0:
            break

        taxable = min(remaining, bracket.ceiling)
        charges.append(
            BracketCharge(
                ceiling=bracket.ceiling,
                rate=bracket.rate,
                taxable=taxable,
                tax=taxable * bracket.rate,
            )
        )
        remaining -= bracket.ceiling

    return tuple(charges)


def calculate_tax(
    gross: Decimal,
    brackets: Sequence[TaxBracket] = DEFAULT_TAX_BRACKETS,
) -> Decimal:
    """
    Total withholding for a gross amount.

    Args:
        gross: Weekly gross pay.
        brackets: Bracket table, any order (walked ascending by ceiling).

    Returns:
        Unrounded tax as ``Decimal``.
    """
    charges = calculate_tax_detail(gross, brackets)
    tax = sum((c.tax for c in charges), Decimal("0"))

    logger.debug("tax_calculated", extra={
        "gross": str(gross),
        "tax": str(tax),
        "brackets_used": len(charges),
    })
    return tax
