"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from base_reporter import App, reporter


@pytest.fixture
def app() -> App:
    """Create a fresh app with no reporter installed."""
    return App({"is_app": True})


@pytest.fixture
def equipped_app(app: App) -> App:
    """Create an app with the reporter installed."""
    app.use(reporter())
    return app
