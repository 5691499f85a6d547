"""Mapping between markdown tags and text attributes."""

import logging
from typing import Any, Optional

from reportlab.lib.colors import HexColor
from markstyle.config import Settings, get_settings
from markstyle.formatting.attributes import (
    FontSpec,
    FrozenParagraphStyle,
    StyleAttributes,
    hanging_indent_style,
)
from markstyle.formatting.tags import MarkdownTag

logger = logging.getLogger(__name__)


# Template name -> tag the template must be resolved for
TEMPLATE_TAGS: dict[str, MarkdownTag] = {
    "default": MarkdownTag.NONE,
    "header1": MarkdownTag.HEADER1,
    "header2": MarkdownTag.HEADER2,
    "header3": MarkdownTag.HEADER3,
    "bold": MarkdownTag.BOLD,
    "italic": MarkdownTag.ITALIC,
    "bold_italic": MarkdownTag.BOLD_ITALIC,
    "code": MarkdownTag.CODE,
}

LIST_TAGS = frozenset({
    MarkdownTag.LIST,
    MarkdownTag.LIST_PREFIX,
    MarkdownTag.LIST_BOLD,
    MarkdownTag.LIST_ITALIC,
    MarkdownTag.LIST_BOLD_ITALIC,
    MarkdownTag.LIST_CODE,
})


def default_templates(settings: Optional[Settings] = None) -> dict[str, Any]:
    """Build the default templates and list paragraph style from settings."""
    settings = settings or get_settings()
    size = settings.body_font_size

    return {
        "default": StyleAttributes(
            markdown=MarkdownTag.NONE,
            font=FontSpec(settings.body_font, size),
            foreground_color=HexColor(settings.text_color),
        ),
        "header1": StyleAttributes(
            markdown=MarkdownTag.HEADER1,
            font=FontSpec(settings.bold_font, settings.header1_font_size),
        ),
        "header2": StyleAttributes(
            markdown=MarkdownTag.HEADER2,
            font=FontSpec(settings.bold_font, settings.header2_font_size),
        ),
        "header3": StyleAttributes(
            markdown=MarkdownTag.HEADER3,
            font=FontSpec(settings.bold_font, settings.header3_font_size),
        ),
        "bold": StyleAttributes(
            markdown=MarkdownTag.BOLD,
            font=FontSpec(settings.bold_font, size),
        ),
        "italic": StyleAttributes(
            markdown=MarkdownTag.ITALIC,
            font=FontSpec(settings.italic_font, size),
        ),
        "bold_italic": StyleAttributes(
            markdown=MarkdownTag.BOLD_ITALIC,
            font=FontSpec(settings.bold_italic_font, size),
        ),
        "code": StyleAttributes(
            markdown=MarkdownTag.CODE,
            font=FontSpec(settings.code_font, size),
        ),
        "list_paragraph_style": hanging_indent_style(
            "List", settings.list_head_indent
        ),
    }


class MarkdownStyle:
    """Resolve markdown tags to the text attributes they are displayed with.

    One template is held per explicitly styled tag, plus a default used for
    plain text and for any tag combination that has no style of its own.
    List variants are not stored: they are the attributes of the same tag
    without the list bit, plus the shared list paragraph style.

    Templates are fixed at construction. Use ``with_overrides`` to derive a
    differently configured style.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        **templates: Any,
    ) -> None:
        """Initialize the style.

        Args:
            settings: Settings to build missing templates from
                (default: the global settings)
            **templates: Templates to use instead of the defaults, by name
                (``default``, ``header1``, ``header2``, ``header3``,
                ``bold``, ``italic``, ``bold_italic``, ``code``) and the
                ``list_paragraph_style``

        Raises:
            ValueError: If a template name is unknown or a template is not
                tagged with the tag it is registered for
        """
        unknown = set(templates) - set(TEMPLATE_TAGS) - {"list_paragraph_style"}
        if unknown:
            raise ValueError(
                f"Unknown style templates: {', '.join(sorted(unknown))}"
            )

        if len(templates) == len(TEMPLATE_TAGS) + 1:
            values = dict(templates)
        else:
            values = default_templates(settings)
            values.update(templates)

        for name, tag in TEMPLATE_TAGS.items():
            template = values[name]
            if template.markdown != tag:
                raise ValueError(
                    f"Template {name!r} is tagged {template.markdown.describe()}, "
                    f"expected {tag.describe()}"
                )

        self._templates: dict[str, StyleAttributes] = {
            name: values[name] for name in TEMPLATE_TAGS
        }
        # read-only copy, shared by every list result
        self._list_paragraph_style = FrozenParagraphStyle.from_style(
            values["list_paragraph_style"]
        )
        self._by_tag: dict[MarkdownTag, StyleAttributes] = {
            tag: self._templates[name]
            for name, tag in TEMPLATE_TAGS.items()
            if tag is not MarkdownTag.NONE
        }

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "MarkdownStyle":
        """Create the default style from settings."""
        return cls(settings=settings)

    def with_overrides(self, **templates: Any) -> "MarkdownStyle":
        """Return a new style with some templates replaced."""
        values: dict[str, Any] = dict(self._templates)
        values["list_paragraph_style"] = self._list_paragraph_style
        values.update(templates)
        return type(self)(**values)

    @property
    def default_attributes(self) -> StyleAttributes:
        return self._templates["default"]

    @property
    def header1_attributes(self) -> StyleAttributes:
        return self._templates["header1"]

    @property
    def header2_attributes(self) -> StyleAttributes:
        return self._templates["header2"]

    @property
    def header3_attributes(self) -> StyleAttributes:
        return self._templates["header3"]

    @property
    def bold_attributes(self) -> StyleAttributes:
        return self._templates["bold"]

    @property
    def italic_attributes(self) -> StyleAttributes:
        return self._templates["italic"]

    @property
    def bold_italic_attributes(self) -> StyleAttributes:
        return self._templates["bold_italic"]

    @property
    def code_attributes(self) -> StyleAttributes:
        return self._templates["code"]

    @property
    def list_paragraph_style(self) -> FrozenParagraphStyle:
        return self._list_paragraph_style

    def attributes_for(self, markdown: MarkdownTag) -> StyleAttributes:
        """Return the attributes associated with the given markdown tag.

        Tags without a style of their own, including invalid combinations
        such as ``HEADER1 | BOLD``, get the default attributes.
        """
        template = self._by_tag.get(markdown)
        if template is not None:
            return template

        if markdown in LIST_TAGS:
            attrs = self._list_attributes_for(markdown)
            if attrs is not None:
                return attrs

        if markdown is not MarkdownTag.NONE:
            logger.debug(
                "No style for markdown %s, using default attributes",
                markdown.describe(),
            )
        return self.default_attributes

    def attributes(self, markdown: MarkdownTag) -> dict[str, Any]:
        """Return the attributes for the given tag as a new mapping."""
        return self.attributes_for(markdown).as_dict()

    def _list_attributes_for(
        self, markdown: MarkdownTag
    ) -> Optional[StyleAttributes]:
        """Return the attributes for a list tag.

        These are the attributes of the tag minus the list bit, tagged with
        the list tag and carrying the list paragraph style. Returns None if
        the tag is not a valid list tag.
        """
        if not (markdown.is_valid and markdown.is_list):
            return None

        base = self.attributes_for(markdown.subtract(MarkdownTag.LIST))
        return base.with_overrides(
            markdown=markdown,
            paragraph_style=self._list_paragraph_style,
        )


def inline_style(settings: Optional[Settings] = None) -> MarkdownStyle:
    """Create the style used for inline text, where headers are not enlarged.

    All header levels use the bold font at body size.
    """
    style = MarkdownStyle.from_settings(settings)
    header_font = style.bold_attributes.font
    return style.with_overrides(
        header1=style.header1_attributes.with_overrides(font=header_font),
        header2=style.header2_attributes.with_overrides(font=header_font),
        header3=style.header3_attributes.with_overrides(font=header_font),
    )
