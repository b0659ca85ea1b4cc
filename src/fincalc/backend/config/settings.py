"""Configuration loader wrapping the calculator defaults schema."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import CalculatorSettings, ConfigurationError

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
DEFAULTS_FILE = CONFIG_DIRECTORY / "defaults.yaml"
CONFIG_PATH_ENV = "FINCALC_CONFIG_PATH"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def resolve_settings_path() -> Path:
    """Return the defaults file, honouring the ``FINCALC_CONFIG_PATH`` override."""

    override = os.getenv(CONFIG_PATH_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULTS_FILE


def load_settings_file(path: Path) -> CalculatorSettings:
    """Parse and validate the defaults stored at ``path``."""

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    raw_settings = _load_yaml(path)

    try:
        return CalculatorSettings.model_validate(raw_settings)
    except ValidationError as error:
        raise ConfigurationError(
            f"Configuration validation failed for {path.name}: {error}"
        ) from error


@lru_cache(maxsize=1)
def load_settings() -> CalculatorSettings:
    """Load and cache the process-wide calculator defaults."""

    return load_settings_file(resolve_settings_path())


__all__ = [
    "CONFIG_DIRECTORY",
    "CONFIG_PATH_ENV",
    "DEFAULTS_FILE",
    "load_settings",
    "load_settings_file",
    "resolve_settings_path",
]
