"""Pytest fixtures for markstyle tests."""

import pytest

from markstyle import config
from markstyle.config import Settings
from markstyle.core.style import MarkdownStyle


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop the cached global settings around every test."""
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def style(settings: Settings) -> MarkdownStyle:
    """The default markdown style."""
    return MarkdownStyle.from_settings(settings)
