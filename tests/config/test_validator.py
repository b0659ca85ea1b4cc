from pathlib import Path

import pytest

from fincalc.backend.config import settings
from fincalc.backend.config.schema import CalculatorSettings, ScheduleDisplayConfig
from fincalc.backend.config.validator import main, validate_files, validate_settings


def test_bundled_defaults_are_valid() -> None:
    results = validate_files([settings.DEFAULTS_FILE])
    assert all(not issues for issues in results.values()), results


def test_validator_flags_out_of_range_default_rate() -> None:
    errors = validate_settings(CalculatorSettings(default_annual_rate=1.5))

    assert any("default_annual_rate" in error and "between 0 and 1" in error for error in errors)


def test_validator_flags_zero_default_rate() -> None:
    errors = validate_settings(CalculatorSettings(default_annual_rate=0.0))

    assert any("undefined" in error for error in errors)


def test_validator_flags_blank_currency_symbol() -> None:
    broken = CalculatorSettings(
        schedule_display=ScheduleDisplayConfig(currency_symbol="  "),
    )

    errors = validate_settings(broken)

    assert any(error.startswith("schedule_display") for error in errors)


def test_validate_files_reports_load_failures(tmp_path: Path) -> None:
    broken = tmp_path / "broken.yaml"
    broken.write_text("tax_rate: 3\n", encoding="utf-8")
    missing = tmp_path / "missing.yaml"

    results = validate_files([broken, missing])

    assert results[broken] and "broken.yaml" in results[broken][0]
    assert results[missing] and "not found" in results[missing][0]


def test_main_reports_ok(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(settings.DEFAULTS_FILE)]) == 0
    assert "OK" in capsys.readouterr().out


def test_main_reports_issues(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "zero.yaml"
    path.write_text("default_annual_rate: 0\n", encoding="utf-8")

    assert main([str(path)]) == 1
    assert "1 issue(s) detected" in capsys.readouterr().out
