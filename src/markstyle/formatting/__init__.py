"""Markdown tags and the text attributes resolved for them."""

from markstyle.formatting.tags import (
    MarkdownTag,
    ATOMIC_VALUES,
    COMBINED_VALUES,
    VALID_VALUES,
    HEADER_VALUES,
)
from markstyle.formatting.attributes import (
    FontSpec,
    FrozenParagraphStyle,
    hanging_indent_style,
    StyleAttributes,
    MARKDOWN_ATTRIBUTE_NAME,
    FONT_ATTRIBUTE_NAME,
    FOREGROUND_COLOR_ATTRIBUTE_NAME,
    PARAGRAPH_STYLE_ATTRIBUTE_NAME,
    markdown_for,
)

__all__ = [
    "MarkdownTag",
    "ATOMIC_VALUES",
    "COMBINED_VALUES",
    "VALID_VALUES",
    "HEADER_VALUES",
    "FontSpec",
    "FrozenParagraphStyle",
    "hanging_indent_style",
    "StyleAttributes",
    "MARKDOWN_ATTRIBUTE_NAME",
    "FONT_ATTRIBUTE_NAME",
    "FOREGROUND_COLOR_ATTRIBUTE_NAME",
    "PARAGRAPH_STYLE_ATTRIBUTE_NAME",
    "markdown_for",
]
