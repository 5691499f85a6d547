"""Style resolution for markdown tags."""

from markstyle.core.style import MarkdownStyle, inline_style, default_templates

__all__ = [
    "MarkdownStyle",
    "inline_style",
    "default_templates",
]
