"""markstyle - resolve markdown tags to text rendering attributes."""

__version__ = "0.1.0"

from markstyle.formatting import (
    MarkdownTag,
    FontSpec,
    StyleAttributes,
    MARKDOWN_ATTRIBUTE_NAME,
    markdown_for,
)
from markstyle.core import MarkdownStyle, inline_style

__all__ = [
    "__version__",
    "MarkdownTag",
    "FontSpec",
    "StyleAttributes",
    "MARKDOWN_ATTRIBUTE_NAME",
    "markdown_for",
    "MarkdownStyle",
    "inline_style",
]
