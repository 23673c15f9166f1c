"""
Payroll Configuration Schema.

Defines the structure and defaults for payroll settings.
Values are loaded from YAML by ``payroll_config`` at runtime; the tax
bracket table is deliberately not part of this schema.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from payroll_engines import DEFAULT_OVERTIME_POLICY, OvertimePolicy
from payroll_kernel.logging_config import get_logger

logger = get_logger("modules.payroll.config")

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class PayrollConfig:
    """
    Configuration schema for the weekly payroll run.

    Field defaults reproduce the standard weekly rules:

        config = PayrollConfig(
            overtime=OvertimePolicy(daily_threshold=Decimal("10")),
            log_level="DEBUG",
        )
    """

    # Overtime
    overtime: OvertimePolicy = DEFAULT_OVERTIME_POLICY

    # Time entry limits, inclusive
    min_daily_hours: Decimal = Decimal("0")
    max_daily_hours: Decimal = Decimal("24")

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.min_daily_hours < 0:
            raise ValueError("min_daily_hours cannot be negative")
        if self.max_daily_hours <= self.min_daily_hours:
            raise ValueError(
                f"max_daily_hours ({self.max_daily_hours}) must exceed "
                f"min_daily_hours ({self.min_daily_hours})"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, "
                f"got '{self.log_level}'"
            )

        logger.debug(
            "payroll_config_initialized",
            extra={
                "daily_threshold": str(self.overtime.daily_threshold),
                "weekly_threshold": str(self.overtime.weekly_threshold),
                "min_daily_hours": str(self.min_daily_hours),
                "max_daily_hours": str(self.max_daily_hours),
                "log_level": self.log_level,
            },
        )

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)
