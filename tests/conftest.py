"""Shared fixtures for resolver tests."""

from pathlib import Path

import pytest

from helm_chart_resolver.settings import Settings, reset_settings


@pytest.fixture
def helm_home(tmp_path: Path) -> Path:
    """A Helm home with both cache directories in place."""
    home = tmp_path / "helm"
    (home / "cache" / "archive").mkdir(parents=True)
    (home / "repository" / "cache").mkdir(parents=True)
    return home


@pytest.fixture
def settings(helm_home: Path) -> Settings:
    return Settings(home=helm_home)


@pytest.fixture(autouse=True)
def _reset_global_settings():
    reset_settings()
    yield
    reset_settings()
