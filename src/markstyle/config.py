"""Configuration management for markstyle."""

import re
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


class Settings(BaseSettings):
    """Style defaults via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Font faces (reportlab standard font names by default)
    body_font: str = Field(default="Helvetica", alias="MARKSTYLE_BODY_FONT")
    bold_font: str = Field(default="Helvetica-Bold", alias="MARKSTYLE_BOLD_FONT")
    italic_font: str = Field(
        default="Helvetica-Oblique",
        alias="MARKSTYLE_ITALIC_FONT",
    )
    bold_italic_font: str = Field(
        default="Helvetica-BoldOblique",
        alias="MARKSTYLE_BOLD_ITALIC_FONT",
    )
    code_font: str = Field(default="Courier", alias="MARKSTYLE_CODE_FONT")

    # Font sizes in points
    body_font_size: float = Field(default=16.0, gt=0, alias="MARKSTYLE_FONT_SIZE")
    header1_font_size: float = Field(
        default=28.0,
        gt=0,
        alias="MARKSTYLE_HEADER1_SIZE",
    )
    header2_font_size: float = Field(
        default=24.0,
        gt=0,
        alias="MARKSTYLE_HEADER2_SIZE",
    )
    header3_font_size: float = Field(
        default=20.0,
        gt=0,
        alias="MARKSTYLE_HEADER3_SIZE",
    )

    # Text foreground color as #RRGGBB
    text_color: str = Field(default="#000000", alias="MARKSTYLE_TEXT_COLOR")

    # Head indent applied to list paragraphs
    list_head_indent: float = Field(
        default=4.0,
        ge=0,
        alias="MARKSTYLE_LIST_INDENT",
    )

    @field_validator("text_color")
    @classmethod
    def _check_hex_color(cls, value: str) -> str:
        if not HEX_COLOR_PATTERN.match(value):
            raise ValueError(f"Expected a #RRGGBB color, got {value!r}")
        return value.upper()


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
