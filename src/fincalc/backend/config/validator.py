"""Utilities for validating calculator defaults and surfacing issues."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .schema import CalculatorSettings, ConfigurationError, ScheduleDisplayConfig
from .settings import load_settings_file, resolve_settings_path


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_default_rate(rate: float) -> list[str]:
    errors: list[str] = []

    if rate < 0 or rate > 1:
        errors.append(
            _format_scope(
                "default_annual_rate",
                f"rate {rate} should be a decimal fraction between 0 and 1",
            )
        )
    if rate == 0:
        errors.append(
            _format_scope(
                "default_annual_rate",
                "a zero default rate leaves loan payments undefined",
            )
        )

    return errors


def _validate_schedule_display(display: ScheduleDisplayConfig) -> list[str]:
    errors: list[str] = []

    if not display.currency_symbol.strip():
        errors.append(
            _format_scope("schedule_display", "currency symbol must not be blank")
        )

    return errors


def validate_settings(settings: CalculatorSettings) -> list[str]:
    """Return human-readable issues detected in ``settings``."""

    errors: list[str] = []
    errors.extend(_validate_default_rate(settings.default_annual_rate))
    errors.extend(_validate_schedule_display(settings.schedule_display))
    return errors


def validate_files(paths: Sequence[Path]) -> dict[Path, list[str]]:
    """Validate every file in ``paths`` and return issues keyed by path."""

    results: dict[Path, list[str]] = {}

    for path in paths:
        try:
            settings = load_settings_file(path)
        except (FileNotFoundError, ConfigurationError) as error:
            results[path] = [str(error)]
            continue
        results[path] = validate_settings(settings)

    return results


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate calculator defaults files and report issues."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Defaults files to validate (defaults to the active configuration)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    paths = args.paths or [resolve_settings_path()]

    exit_code = 0

    for path, issues in validate_files(paths).items():
        if issues:
            exit_code = 1
            print(f"[{path}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{path}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
