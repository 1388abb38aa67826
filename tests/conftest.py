"""Shared fixtures."""

from datetime import date

import pytest

from obswindow.models.config import CouncilServer


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep developer .env files and OBSWINDOW_* variables out of the tests."""
    for name in (
        "OBSWINDOW_LOG_LEVEL",
        "OBSWINDOW_DEFAULT_INTERVAL",
        "OBSWINDOW_DEFAULT_TIME",
        "OBSWINDOW_TIMEZONE",
        "OBSWINDOW_SERVERS",
        "OBSWINDOW_MEASUREMENTS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def start_date():
    return date(2014, 8, 1)


@pytest.fixture
def horizons():
    return CouncilServer(name="Horizons", base_url="http://hilltopserver.horizons.govt.nz")
