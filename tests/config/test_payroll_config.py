"""
Tests for payroll settings and roster loading.

Covers:
- Bundled default settings and demo roster
- Overrides from YAML
- PayrollConfigError for unreadable, malformed or incomplete files
- Checksum determinism
"""

from decimal import Decimal
from pathlib import Path
from textwrap import dedent

import pytest

from payroll_config import (
    DEFAULT_CONFIG_PATH,
    DEMO_ROSTER_PATH,
    load_payroll_config,
    load_roster,
)
from payroll_config.loader import compute_checksum, parse_payroll_config
from payroll_kernel.exceptions import MalformedRecordError, PayrollConfigError
from payroll_modules import PayrollConfig


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(dedent(text))
    return path


class TestDefaultSettings:

    def test_bundled_files_exist(self):
        assert DEFAULT_CONFIG_PATH.is_file()
        assert DEMO_ROSTER_PATH.is_file()

    def test_default_matches_schema_defaults(self):
        config = load_payroll_config()

        assert config.overtime.daily_threshold == Decimal("8")
        assert config.overtime.weekly_threshold == Decimal("40")
        assert config.overtime.daily_multiplier == Decimal("1.5")
        assert config.overtime.weekly_multiplier == Decimal("1.75")
        assert config.min_daily_hours == Decimal("0")
        assert config.max_daily_hours == Decimal("24")
        assert config.log_level == "INFO"
        assert compute_checksum(config) == compute_checksum(PayrollConfig())

    def test_trace_logged(self, captured_logs):
        config = load_payroll_config()

        traces = [r for r in captured_logs() if r["message"] == "PAYROLL_CONFIG_TRACE"]
        assert len(traces) == 1
        assert traces[0]["checksum"] == compute_checksum(config)


class TestSettingsOverrides:

    def test_partial_overtime_section(self, tmp_path):
        path = _write(tmp_path, "s.yaml", """
            overtime:
              weekly_threshold: 35
        """)
        config = load_payroll_config(path)

        assert config.overtime.weekly_threshold == Decimal("35")
        assert config.overtime.daily_threshold == Decimal("8")

    def test_float_values_parsed_exactly(self, tmp_path):
        path = _write(tmp_path, "s.yaml", """
            overtime:
              daily_multiplier: 1.1
        """)
        assert load_payroll_config(path).overtime.daily_multiplier == Decimal("1.1")

    def test_validation_and_logging(self, tmp_path):
        path = _write(tmp_path, "s.yaml", """
            validation:
              max_daily_hours: 16
            logging:
              level: debug
        """)
        config = load_payroll_config(path)

        assert config.max_daily_hours == Decimal("16")
        assert config.log_level == "DEBUG"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = _write(tmp_path, "s.yaml", "")
        assert compute_checksum(load_payroll_config(path)) == compute_checksum(PayrollConfig())


class TestSettingsErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(PayrollConfigError, match="cannot read file") as exc_info:
            load_payroll_config(tmp_path / "nope.yaml")
        assert exc_info.value.code == "PAYROLL_CONFIG_ERROR"

    def test_invalid_yaml(self, tmp_path):
        path = _write(tmp_path, "s.yaml", "overtime: [unclosed\n")
        with pytest.raises(PayrollConfigError, match="invalid YAML"):
            load_payroll_config(path)

    def test_top_level_list(self, tmp_path):
        path = _write(tmp_path, "s.yaml", "- a\n- b\n")
        with pytest.raises(PayrollConfigError, match="mapping"):
            load_payroll_config(path)

    def test_unknown_section(self, tmp_path):
        path = _write(tmp_path, "s.yaml", """
            tax_brackets:
              - [600, 0.10]
        """)
        with pytest.raises(PayrollConfigError, match="unknown sections: tax_brackets"):
            load_payroll_config(path)

    def test_unknown_overtime_key(self, tmp_path):
        path = _write(tmp_path, "s.yaml", """
            overtime:
              holiday_multiplier: 2
        """)
        with pytest.raises(PayrollConfigError, match="holiday_multiplier"):
            load_payroll_config(path)

    def test_non_numeric(self, tmp_path):
        path = _write(tmp_path, "s.yaml", """
            overtime:
              daily_threshold: eight
        """)
        with pytest.raises(PayrollConfigError, match="overtime.daily_threshold"):
            load_payroll_config(path)

    @pytest.mark.parametrize("value", [".nan", ".inf", "-.inf"])
    def test_non_finite_rejected(self, tmp_path, value):
        path = _write(tmp_path, "s.yaml", f"overtime:\n  weekly_threshold: {value}\n")
        with pytest.raises(PayrollConfigError, match="must be finite"):
            load_payroll_config(path)

    def test_schema_violation_wrapped(self):
        with pytest.raises(PayrollConfigError, match="must exceed"):
            parse_payroll_config({"validation": {"max_daily_hours": 0}}, "inline")

    def test_bad_log_level(self):
        with pytest.raises(PayrollConfigError, match="log_level"):
            parse_payroll_config({"logging": {"level": "LOUD"}}, "inline")

    def test_non_positive_threshold(self):
        with pytest.raises(PayrollConfigError, match="daily_threshold"):
            parse_payroll_config({"overtime": {"daily_threshold": 0}}, "inline")


class TestRoster:

    def test_demo_roster(self):
        employees = load_roster()

        assert [e.name for e in employees] == ["John Terence", "Janine Reyes", "Michael John"]
        assert employees[2].hourly_rate == Decimal("18.50")
        assert employees[1].daily_hours == tuple(
            Decimal(h) for h in (9, 8, 10, 7, 8, 6, 0)
        )

    def test_custom_roster(self, tmp_path):
        path = _write(tmp_path, "r.yaml", """
            employees:
              - name: Ana
                hourly_rate: 22.75
                daily_hours: [8, 8, 8, 8, 8, 4.5, 0]
        """)
        (ana,) = load_roster(path)

        assert ana.hourly_rate == Decimal("22.75")
        assert ana.daily_hours[5] == Decimal("4.5")

    def test_invalid_values_pass_through_to_validation(self, tmp_path):
        path = _write(tmp_path, "r.yaml", """
            employees:
              - name: Zero
                hourly_rate: 0
                daily_hours: [25, 8, 8, 8, 8, 0, 0]
        """)
        (emp,) = load_roster(path)
        assert emp.hourly_rate == Decimal("0")

    def test_missing_employees_key(self, tmp_path):
        path = _write(tmp_path, "r.yaml", "staff: []\n")
        with pytest.raises(PayrollConfigError, match="missing key 'employees'"):
            load_roster(path)

    @pytest.mark.parametrize("missing", ["name", "hourly_rate", "daily_hours"])
    def test_missing_employee_key(self, tmp_path, missing):
        entry = {"name": "A", "hourly_rate": "20", "daily_hours": [8, 8, 8, 8, 8, 0, 0]}
        del entry[missing]
        lines = ["employees:", "  - " + "\n    ".join(
            f"{k}: {v}" for k, v in entry.items()
        )]
        path = _write(tmp_path, "r.yaml", "\n".join(lines) + "\n")

        with pytest.raises(PayrollConfigError, match=f"missing key '{missing}' in employees\\[0\\]"):
            load_roster(path)

    def test_wrong_day_count(self, tmp_path):
        path = _write(tmp_path, "r.yaml", """
            employees:
              - name: Short Week
                hourly_rate: 20
                daily_hours: [8, 8, 8, 8, 8, 8]
        """)
        with pytest.raises(MalformedRecordError) as exc_info:
            load_roster(path)
        assert exc_info.value.day_count == 6

    @pytest.mark.parametrize("value", [".nan", ".inf"])
    def test_non_finite_rate_rejected(self, tmp_path, value):
        path = _write(tmp_path, "r.yaml", f"""
            employees:
              - name: A
                hourly_rate: {value}
                daily_hours: [8, 8, 8, 8, 8, 0, 0]
        """)
        with pytest.raises(PayrollConfigError, match=r"employees\[0\].hourly_rate"):
            load_roster(path)

    def test_non_numeric_hours(self, tmp_path):
        path = _write(tmp_path, "r.yaml", """
            employees:
              - name: A
                hourly_rate: 20
                daily_hours: [8, 8, lots, 8, 8, 0, 0]
        """)
        with pytest.raises(PayrollConfigError, match=r"daily_hours\[2\]"):
            load_roster(path)
