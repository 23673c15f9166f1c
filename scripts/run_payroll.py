#!/usr/bin/env python3
"""
Run the weekly payroll and print a pay slip per employee.

Loads settings and a roster from YAML, validates every entry, computes pay
and prints slips ordered by net pay, highest first.  Any error is reported
as a single line and the run ends normally.

Usage:
    python3 scripts/run_payroll.py                          # demo roster
    python3 scripts/run_payroll.py --roster week42.yaml
    python3 scripts/run_payroll.py --config settings.yaml --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Project root on sys.path
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from payroll_config import load_payroll_config, load_roster  # noqa: E402
from payroll_kernel.exceptions import PayrollError  # noqa: E402
from payroll_kernel.logging_config import (  # noqa: E402
    configure_logging,
    get_logger,
    set_log_level,
)
from payroll_modules import ConsolePaySlipReporter, PayrollBatch  # noqa: E402

logger = get_logger("scripts.run_payroll")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute weekly payroll with daily/weekly overtime and tiered tax.",
    )
    parser.add_argument(
        "--roster",
        type=Path,
        default=None,
        help="YAML roster file (default: bundled demo roster)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML settings file (default: payroll_config/sets/default.yaml)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override the log level from the settings file",
    )
    return parser


def main(argv: list[str] | None = None, stdout=None) -> int:
    args = build_parser().parse_args(argv)
    out = stdout or sys.stdout

    # Must precede load_payroll_config, which logs PAYROLL_CONFIG_TRACE
    configure_logging(level=logging.getLevelName(args.log_level or "INFO"))

    try:
        config = load_payroll_config(args.config)
        if not args.log_level:
            set_log_level(config.logging_level)

        batch = PayrollBatch(config=config)
        for employee in load_roster(args.roster):
            batch.add_employee(employee)

        batch.process_payroll(ConsolePaySlipReporter(out))
    except PayrollError as exc:
        logger.error("payroll_run_failed", exc_info=True)
        print(f"Error processing payroll: {exc}", file=out)
    except Exception as exc:
        logger.critical("payroll_run_crashed", exc_info=True)
        print(f"Error processing payroll: {exc}", file=out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
