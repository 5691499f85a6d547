"""Markdown tags applied to a run of text.

A tag is a bitmask: each atomic tag owns one bit and the combined tags are
fixed unions of those bits. Any bit pattern can be built, including bits
above SYNTAX, but only the enumerated values are meaningful to the style
resolver.
"""

from enum import Flag, KEEP


class MarkdownTag(Flag, boundary=KEEP):
    """Markdown tag flags (combinable with |).

    Unknown high bits are kept rather than rejected, so such tags are
    simply not valid.
    """

    # atomic
    NONE = 0
    HEADER1 = 1 << 0
    HEADER2 = 1 << 1
    HEADER3 = 1 << 2
    BOLD = 1 << 3
    ITALIC = 1 << 4
    CODE = 1 << 5
    LIST = 1 << 6
    LIST_PREFIX = 1 << 7

    # marks the markdown syntax characters themselves
    SYNTAX = 1 << 8

    # combined
    BOLD_ITALIC = BOLD | ITALIC
    LIST_BOLD = LIST | BOLD
    LIST_ITALIC = LIST | ITALIC
    LIST_BOLD_ITALIC = LIST | BOLD | ITALIC
    LIST_CODE = LIST | CODE

    def combine(self, other: "MarkdownTag") -> "MarkdownTag":
        """Return the union of both tags."""
        return self | other

    def contains(self, other: "MarkdownTag") -> bool:
        """Check if every bit of ``other`` is set in this tag."""
        return (self.value & other.value) == other.value

    def subtract(self, other: "MarkdownTag") -> "MarkdownTag":
        """Return this tag with the bits of ``other`` cleared."""
        return type(self)(self.value & ~other.value)

    @property
    def is_valid(self) -> bool:
        """Check if this tag is exactly one of the enumerated values."""
        return self in _VALID_SET

    @property
    def is_header(self) -> bool:
        """Check if this tag is exactly one of the header levels."""
        return self in _HEADER_SET

    @property
    def is_list(self) -> bool:
        """Check if the list bit is set."""
        return self.contains(MarkdownTag.LIST)

    def describe(self) -> str:
        """Return a display name, e.g. ``LIST_BOLD`` or ``HEADER1|BOLD``."""
        member = type(self).__members__.get(self.name or "")
        if member is self:
            return self.name
        parts = [bit.name for bit in ATOMIC_BITS if bit.value & self.value]
        unknown = self.value & ~_KNOWN_BITS
        if unknown:
            parts.append(f"0x{unknown:x}")
        return "|".join(parts)

    @classmethod
    def from_names(cls, *names: str) -> "MarkdownTag":
        """Build a tag by combining member names.

        Names are matched case-insensitively and may use ``-`` or spaces in
        place of underscores, so ``"list-code"`` and ``"LIST_CODE"`` are
        the same tag.

        Raises:
            ValueError: If a name does not match any tag
        """
        tag = cls.NONE
        for name in names:
            key = name.strip().upper().replace("-", "_").replace(" ", "_")
            member = cls.__members__.get(key)
            if member is None:
                raise ValueError(
                    f"Unknown markdown tag: {name!r}. "
                    f"Valid tags: {', '.join(n.lower() for n in cls.__members__)}"
                )
            tag |= member
        return tag


# Single-bit members in bit order, SYNTAX included
ATOMIC_BITS: tuple[MarkdownTag, ...] = (
    MarkdownTag.HEADER1,
    MarkdownTag.HEADER2,
    MarkdownTag.HEADER3,
    MarkdownTag.BOLD,
    MarkdownTag.ITALIC,
    MarkdownTag.CODE,
    MarkdownTag.LIST,
    MarkdownTag.LIST_PREFIX,
    MarkdownTag.SYNTAX,
)

ATOMIC_VALUES: tuple[MarkdownTag, ...] = (
    MarkdownTag.HEADER1,
    MarkdownTag.HEADER2,
    MarkdownTag.HEADER3,
    MarkdownTag.BOLD,
    MarkdownTag.ITALIC,
    MarkdownTag.CODE,
    MarkdownTag.LIST,
    MarkdownTag.LIST_PREFIX,
)

COMBINED_VALUES: tuple[MarkdownTag, ...] = (
    MarkdownTag.BOLD_ITALIC,
    MarkdownTag.LIST_BOLD,
    MarkdownTag.LIST_ITALIC,
    MarkdownTag.LIST_BOLD_ITALIC,
    MarkdownTag.LIST_CODE,
)

VALID_VALUES: tuple[MarkdownTag, ...] = ATOMIC_VALUES + COMBINED_VALUES

HEADER_VALUES: tuple[MarkdownTag, ...] = (
    MarkdownTag.HEADER1,
    MarkdownTag.HEADER2,
    MarkdownTag.HEADER3,
)

_VALID_SET = frozenset(VALID_VALUES)
_HEADER_SET = frozenset(HEADER_VALUES)

_KNOWN_BITS = sum(bit.value for bit in ATOMIC_BITS)
