"""
Payroll Module (``payroll_modules``).

Responsibility
--------------
Thin glue for a weekly pay run: employee records, batch validation,
ordering by net pay, and pay slip reporting.  All arithmetic is delegated
to ``payroll_engines``.

Architecture position
---------------------
**Modules layer** -- models, a config schema, the ``PayrollBatch`` service
facade and reporter collaborators.  Imports engines and kernel; never
reads files (see ``payroll_config``).

Failure modes
-------------
* ``MalformedRecordError`` -- employee built without exactly seven days.
* ``InvalidHourlyRateError`` / ``InvalidDailyHoursError`` -- raised by
  ``PayrollBatch.process_payroll`` for the first bad entry.
"""

from payroll_modules.config import PayrollConfig
from payroll_modules.models import DAYS_PER_WEEK, Employee, PaySlip
from payroll_modules.reporting import (
    ConsolePaySlipReporter,
    PaySlipReporter,
    fmt_hours,
    fmt_money,
)
from payroll_modules.service import BatchValidation, PayrollBatch

__all__ = [
    "BatchValidation",
    "ConsolePaySlipReporter",
    "DAYS_PER_WEEK",
    "Employee",
    "PaySlip",
    "PaySlipReporter",
    "PayrollBatch",
    "PayrollConfig",
    "fmt_hours",
    "fmt_money",
]
