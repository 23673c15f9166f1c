"""
Module: payroll_engines
Responsibility:
    Package entrypoint that re-exports the public symbols of the pure pay
    calculation engines.  This is the import surface for payroll_modules.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import payroll_kernel (exceptions, logging) and sibling
    engine modules.  MUST NOT import payroll_modules or payroll_config.

Invariants enforced:
    - Decimal-only arithmetic.
    - Determinism: identical inputs always produce identical outputs.
"""

from payroll_engines.overtime import (
    DEFAULT_OVERTIME_POLICY,
    OvertimePolicy,
    daily_overtime,
    regular_hours,
    total_hours,
    weekly_overtime,
)
from payroll_engines.pay_calculator import (
    PayCalculator,
    PayResult,
    gross_pay,
    net_pay,
)
from payroll_engines.withholding import (
    DEFAULT_TAX_BRACKETS,
    UNBOUNDED,
    BracketCharge,
    TaxBracket,
    calculate_tax,
    calculate_tax_detail,
    validate_bracket_table,
)

__all__ = [
    # Overtime
    "DEFAULT_OVERTIME_POLICY",
    "OvertimePolicy",
    "daily_overtime",
    "regular_hours",
    "total_hours",
    "weekly_overtime",
    # Withholding
    "DEFAULT_TAX_BRACKETS",
    "UNBOUNDED",
    "BracketCharge",
    "TaxBracket",
    "calculate_tax",
    "calculate_tax_detail",
    "validate_bracket_table",
    # Calculator
    "PayCalculator",
    "PayResult",
    "gross_pay",
    "net_pay",
]
