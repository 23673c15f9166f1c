"""
Configuration Loader (``payroll_config.loader``).

Responsibility
--------------
Loads YAML files and parses them into typed payroll inputs: the
``PayrollConfig`` settings schema and rosters of ``Employee`` records.
Callers should go through ``payroll_config.load_payroll_config`` and
``payroll_config.load_roster`` rather than calling the parsers directly.

Architecture position
---------------------
**Config layer** -- infrastructure tooling.  The only layer that reads
files.  Depends on ``payroll_modules`` for the target schema; modules and
engines never import from here.

Invariants enforced
-------------------
* Every parse error surfaces as ``PayrollConfigError`` naming the source
  file and the offending key; no silent defaults for required fields.
* Numbers become ``Decimal`` via ``str()`` so YAML floats do not leak
  binary rounding into pay amounts.
* ``compute_checksum`` produces a deterministic SHA-256 hash of the parsed
  settings for traceability.

Failure modes
-------------
* Missing or unreadable file  -> ``PayrollConfigError``.
* Malformed YAML              -> ``PayrollConfigError``.
* Wrong number of daily hours -> ``MalformedRecordError`` propagates.
"""

from __future__ import annotations

import hashlib
import json
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from payroll_engines import OvertimePolicy
from payroll_kernel.exceptions import PayrollConfigError
from payroll_modules.config import PayrollConfig
from payroll_modules.models import Employee

_SETTINGS_SECTIONS = frozenset({"overtime", "validation", "logging"})


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Postconditions:
        - Returns a ``dict`` (empty if the YAML document is empty).
    Raises:
        PayrollConfigError: file missing, unreadable, not YAML, or not a mapping.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise PayrollConfigError(str(path), f"cannot read file ({exc.strerror})") from exc
    except yaml.YAMLError as exc:
        raise PayrollConfigError(str(path), f"invalid YAML ({exc})") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise PayrollConfigError(str(path), "top level must be a mapping")
    return data


def parse_decimal(value: Any, source: str, key: str) -> Decimal:
    """Parse a YAML scalar (int, float or string) into a ``Decimal``."""
    if isinstance(value, bool) or value is None:
        raise PayrollConfigError(source, f"'{key}' must be a number, got {value!r}")
    try:
        parsed = Decimal(str(value))
    except InvalidOperation as exc:
        raise PayrollConfigError(
            source, f"'{key}' must be a number, got {value!r}"
        ) from exc
    if not parsed.is_finite():
        raise PayrollConfigError(source, f"'{key}' must be finite, got {value!r}")
    return parsed


def _require(data: dict[str, Any], key: str, source: str, where: str) -> Any:
    if key not in data:
        raise PayrollConfigError(source, f"missing key '{key}' in {where}")
    return data[key]


def parse_overtime(data: dict[str, Any], source: str) -> OvertimePolicy:
    """Parse the ``overtime`` section; absent keys keep their defaults."""
    if not isinstance(data, dict):
        raise PayrollConfigError(source, "'overtime' must be a mapping")
    defaults = OvertimePolicy()
    values = {
        name: parse_decimal(data[name], source, f"overtime.{name}")
        if name in data else getattr(defaults, name)
        for name in (
            "daily_threshold",
            "weekly_threshold",
            "daily_multiplier",
            "weekly_multiplier",
        )
    }
    unknown = set(data) - set(values)
    if unknown:
        raise PayrollConfigError(
            source, f"unknown overtime keys: {', '.join(sorted(unknown))}"
        )
    try:
        return OvertimePolicy(**values)
    except ValueError as exc:
        raise PayrollConfigError(source, str(exc)) from exc


def parse_payroll_config(data: dict[str, Any], source: str) -> PayrollConfig:
    """
    Parse a settings document into ``PayrollConfig``.

    Expected shape::

        overtime:
          daily_threshold: 8
          weekly_threshold: 40
          daily_multiplier: 1.5
          weekly_multiplier: 1.75
        validation:
          min_daily_hours: 0
          max_daily_hours: 24
        logging:
          level: INFO
    """
    unknown = set(data) - _SETTINGS_SECTIONS
    if unknown:
        raise PayrollConfigError(
            source, f"unknown sections: {', '.join(sorted(unknown))}"
        )

    kwargs: dict[str, Any] = {}
    if data.get("overtime"):
        kwargs["overtime"] = parse_overtime(data["overtime"], source)

    validation = data.get("validation") or {}
    if not isinstance(validation, dict):
        raise PayrollConfigError(source, "'validation' must be a mapping")
    if "min_daily_hours" in validation:
        kwargs["min_daily_hours"] = parse_decimal(
            validation["min_daily_hours"], source, "validation.min_daily_hours"
        )
    if "max_daily_hours" in validation:
        kwargs["max_daily_hours"] = parse_decimal(
            validation["max_daily_hours"], source, "validation.max_daily_hours"
        )

    logging_section = data.get("logging") or {}
    if not isinstance(logging_section, dict):
        raise PayrollConfigError(source, "'logging' must be a mapping")
    if "level" in logging_section:
        kwargs["log_level"] = str(logging_section["level"])

    try:
        return PayrollConfig(**kwargs)
    except ValueError as exc:
        raise PayrollConfigError(source, str(exc)) from exc


def parse_employee(data: dict[str, Any], source: str, index: int) -> Employee:
    """Parse one roster entry into an ``Employee``."""
    where = f"employees[{index}]"
    if not isinstance(data, dict):
        raise PayrollConfigError(source, f"{where} must be a mapping")

    name = _require(data, "name", source, where)
    rate = _require(data, "hourly_rate", source, where)
    hours = _require(data, "daily_hours", source, where)
    if not isinstance(hours, list):
        raise PayrollConfigError(source, f"{where}.daily_hours must be a list")

    return Employee(
        name=str(name),
        hourly_rate=parse_decimal(rate, source, f"{where}.hourly_rate"),
        daily_hours=tuple(
            parse_decimal(h, source, f"{where}.daily_hours[{day}]")
            for day, h in enumerate(hours)
        ),
    )


def parse_roster(data: dict[str, Any], source: str) -> tuple[Employee, ...]:
    """Parse a roster document (``employees:`` list) into employees, in file order."""
    entries = _require(data, "employees", source, "roster")
    if not isinstance(entries, list):
        raise PayrollConfigError(source, "'employees' must be a list")
    return tuple(
        parse_employee(entry, source, index) for index, entry in enumerate(entries)
    )


def compute_checksum(config: PayrollConfig) -> str:
    """Deterministic SHA-256 of the effective settings."""
    canonical = {
        "daily_threshold": str(config.overtime.daily_threshold),
        "weekly_threshold": str(config.overtime.weekly_threshold),
        "daily_multiplier": str(config.overtime.daily_multiplier),
        "weekly_multiplier": str(config.overtime.weekly_multiplier),
        "min_daily_hours": str(config.min_daily_hours),
        "max_daily_hours": str(config.max_daily_hours),
        "log_level": config.log_level,
    }
    payload = json.dumps(canonical, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode()).hexdigest()
