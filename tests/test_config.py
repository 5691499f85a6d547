"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from markstyle.config import Settings, get_settings, load_settings


class TestSettings:
    """Tests for the Settings model."""

    def test_defaults(self, settings: Settings):
        """Test the default style values."""
        assert settings.body_font == "Helvetica"
        assert settings.bold_italic_font == "Helvetica-BoldOblique"
        assert settings.code_font == "Courier"
        assert settings.body_font_size == 16.0
        assert settings.header1_font_size == 28.0
        assert settings.header2_font_size == 24.0
        assert settings.header3_font_size == 20.0
        assert settings.text_color == "#000000"
        assert settings.list_head_indent == 4.0

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch):
        """Test values are read from MARKSTYLE_ variables."""
        monkeypatch.setenv("MARKSTYLE_FONT_SIZE", "12")
        monkeypatch.setenv("MARKSTYLE_CODE_FONT", "Menlo")

        settings = Settings(_env_file=None)

        assert settings.body_font_size == 12.0
        assert settings.code_font == "Menlo"

    def test_color_normalized(self):
        """Test hex colors are upper-cased."""
        settings = Settings(_env_file=None, MARKSTYLE_TEXT_COLOR="#1976d2")

        assert settings.text_color == "#1976D2"

    def test_invalid_color(self):
        """Test a color that is not #RRGGBB is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MARKSTYLE_TEXT_COLOR="black")

    def test_invalid_font_size(self):
        """Test font sizes must be positive."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MARKSTYLE_FONT_SIZE=0)

    def test_negative_indent(self):
        """Test the list indent cannot be negative."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, MARKSTYLE_LIST_INDENT=-1)


class TestGlobalSettings:
    """Tests for get_settings and load_settings."""

    def test_get_settings_is_cached(self):
        """Test the same instance is returned until reloaded."""
        assert get_settings() is get_settings()

    def test_load_settings_from_env_file(self, tmp_path: Path):
        """Test loading a specific .env file."""
        env_file = tmp_path / "style.env"
        env_file.write_text(
            "MARKSTYLE_CODE_FONT=Menlo\nMARKSTYLE_LIST_INDENT=12\n",
            encoding="utf-8",
        )

        settings = load_settings(env_file)

        assert settings.code_font == "Menlo"
        assert settings.list_head_indent == 12.0
        assert get_settings() is settings
