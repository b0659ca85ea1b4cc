"""Test configuration utilities and shared fixtures."""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from fincalc.backend.app import create_app  # noqa: E402
from fincalc.backend.config import settings  # noqa: E402
from fincalc.backend.services import state  # noqa: E402
from fincalc.backend.services.state import (  # noqa: E402
    CalculationClock,
    CalculationContext,
    TaxConfiguration,
)

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, start: datetime = START) -> None:
        self.current = start

    def advance(self, delta: timedelta) -> None:
        self.current += delta

    def __call__(self) -> datetime:
        return self.current


@pytest.fixture(autouse=True)
def isolated_defaults(monkeypatch: pytest.MonkeyPatch):
    """Reload the bundled defaults and rebuild the process-wide context per test."""

    monkeypatch.delenv(settings.CONFIG_PATH_ENV, raising=False)
    settings.load_settings.cache_clear()
    state.reset_default_context()

    yield

    settings.load_settings.cache_clear()
    state.reset_default_context()


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def context(fake_clock: FakeClock) -> CalculationContext:
    """Return an isolated calculation context with a controllable clock."""

    return CalculationContext(
        tax=TaxConfiguration(),
        clock=CalculationClock(clock=fake_clock),
    )


@pytest.fixture()
def app(context: CalculationContext) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(context)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
