"""
payroll_config -- public entrypoint for payroll settings and rosters.

Responsibility:
    The only way to turn YAML files into payroll inputs.  No other
    component reads configuration files.  ``load_payroll_config()``
    returns a validated ``PayrollConfig``; ``load_roster()`` returns the
    employees of one pay run, in file order.

Architecture position:
    Configuration -- sits above ``payroll_modules`` (whose schema it
    fills) and is consumed by the ``scripts/run_payroll.py`` entry point.
    Engines and modules MUST NEVER import from ``payroll_config``.

Failure modes:
    - ``PayrollConfigError`` -- missing file, invalid YAML, unknown
      sections, missing roster keys, non-numeric values.
    - ``MalformedRecordError`` -- a roster entry without exactly seven
      daily hour values.

Audit relevance:
    Every successful ``load_payroll_config()`` call emits a
    ``PAYROLL_CONFIG_TRACE`` log entry with the source path and the
    settings checksum, tying each run to the exact settings used.
"""

from __future__ import annotations

from pathlib import Path

from payroll_config.loader import (
    compute_checksum,
    load_yaml_file,
    parse_payroll_config,
    parse_roster,
)
from payroll_kernel.logging_config import get_logger
from payroll_modules.config import PayrollConfig
from payroll_modules.models import Employee

_logger = get_logger("config")

_SETS_DIR = Path(__file__).parent / "sets"
DEFAULT_CONFIG_PATH = _SETS_DIR / "default.yaml"
DEMO_ROSTER_PATH = _SETS_DIR / "demo_roster.yaml"


def load_payroll_config(path: Path | None = None) -> PayrollConfig:
    """
    Load payroll settings from YAML.

    Args:
        path: Settings file.  Defaults to ``payroll_config/sets/default.yaml``.

    Returns:
        PayrollConfig with every section validated.

    Raises:
        PayrollConfigError: If the file cannot be read or parsed.
    """
    source = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    config = parse_payroll_config(load_yaml_file(source), str(source))

    _logger.info(
        "PAYROLL_CONFIG_TRACE",
        extra={
            "trace_type": "PAYROLL_CONFIG_TRACE",
            "config_source": str(source),
            "checksum": compute_checksum(config),
            "log_level": config.log_level,
        },
    )
    return config


def load_roster(path: Path | None = None) -> tuple[Employee, ...]:
    """
    Load the employees of one pay run from YAML.

    Args:
        path: Roster file.  Defaults to the bundled demonstration roster.

    Raises:
        PayrollConfigError: If the file or an entry cannot be parsed.
        MalformedRecordError: If an entry does not have seven daily hours.
    """
    source = Path(path) if path is not None else DEMO_ROSTER_PATH
    employees = parse_roster(load_yaml_file(source), str(source))

    _logger.info("roster_loaded", extra={
        "roster_source": str(source),
        "employee_count": len(employees),
    })
    return employees


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEMO_ROSTER_PATH",
    "load_payroll_config",
    "load_roster",
]
