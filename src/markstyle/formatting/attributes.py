"""Text attributes resolved for a markdown tag.

A ``StyleAttributes`` record bundles the concrete values a renderer applies
to a run of text. Fonts, colors and paragraph styles are stored as given and
never interpreted here. By reading the ``markdown`` field (or the
``markdownKey`` entry of the mapping view) one can determine which markdown
tag a particular set of attributes corresponds to.
"""

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Union

from reportlab.lib.colors import Color
from reportlab.lib.styles import ParagraphStyle

from markstyle.formatting.tags import MarkdownTag


# Keys of the mapping view, relied on by callers inspecting attributes
MARKDOWN_ATTRIBUTE_NAME = "markdownKey"
FONT_ATTRIBUTE_NAME = "font"
FOREGROUND_COLOR_ATTRIBUTE_NAME = "foregroundColor"
PARAGRAPH_STYLE_ATTRIBUTE_NAME = "paragraphStyle"


@dataclass(frozen=True)
class FontSpec:
    """A font face and point size.

    Attributes:
        name: Font face name (e.g., "Helvetica-Bold")
        size: Point size
    """

    name: str
    size: float

    def __str__(self) -> str:
        return f"{self.name} {self.size:g}pt"


class FrozenParagraphStyle(ParagraphStyle):
    """A ParagraphStyle whose properties cannot change once built.

    Resolved attributes share one paragraph style, so it must not be
    adjusted in place. Derive a new ``ParagraphStyle`` to change it.
    """

    def __init__(self, name: str, **kw: Any) -> None:
        super().__init__(name, **kw)
        self.__dict__["_frozen"] = True

    def __setattr__(self, name: str, value: Any) -> None:
        if self.__dict__.get("_frozen"):
            raise AttributeError(
                f"Cannot set {name!r}: paragraph style {self.name!r} is read-only"
            )
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(
            f"Cannot delete {name!r}: paragraph style {self.name!r} is read-only"
        )

    @classmethod
    def from_style(cls, style: ParagraphStyle) -> "FrozenParagraphStyle":
        """Return a read-only copy of a paragraph style."""
        if isinstance(style, cls):
            return style
        properties = {
            key: value
            for key, value in vars(style).items()
            if key not in ("name", "parent", "_frozen")
        }
        return cls(style.name, **properties)


def hanging_indent_style(name: str, indent: float) -> FrozenParagraphStyle:
    """Build a paragraph style indenting every line after the first."""
    return FrozenParagraphStyle(name, leftIndent=indent, firstLineIndent=-indent)


@dataclass(frozen=True)
class StyleAttributes:
    """The attributes displayed for one markdown tag.

    Attributes:
        markdown: The tag these attributes were resolved for
        font: Font to render the text with
        foreground_color: Text color, if the style sets one
        paragraph_style: Paragraph layout, if the style sets one
    """

    markdown: MarkdownTag
    font: FontSpec
    foreground_color: Optional[Color] = None
    paragraph_style: Optional[ParagraphStyle] = None

    def with_overrides(self, **changes: Any) -> "StyleAttributes":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        """Return the attributes keyed by their stable attribute names.

        Entries that are not set are left out; the markdown entry is
        always present.
        """
        attrs: dict[str, Any] = {
            MARKDOWN_ATTRIBUTE_NAME: self.markdown,
            FONT_ATTRIBUTE_NAME: self.font,
        }
        if self.foreground_color is not None:
            attrs[FOREGROUND_COLOR_ATTRIBUTE_NAME] = self.foreground_color
        if self.paragraph_style is not None:
            attrs[PARAGRAPH_STYLE_ATTRIBUTE_NAME] = self.paragraph_style
        return attrs


def markdown_for(
    attributes: Union[StyleAttributes, Mapping[str, Any]],
) -> MarkdownTag:
    """Recover the markdown tag a set of attributes was resolved for.

    Mappings without a markdown entry are plain text (``MarkdownTag.NONE``).
    """
    if isinstance(attributes, StyleAttributes):
        return attributes.markdown
    return attributes.get(MARKDOWN_ATTRIBUTE_NAME, MarkdownTag.NONE)
