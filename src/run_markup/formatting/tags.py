"""Inline formatting tags.

The declaration order of ``Tag`` is the order in which tags are opened.
Output of every consumer depends on it, so it must not be reordered.
"""

from enum import Enum


class Tag(Enum):
    """Abstract inline formatting marker, valued by its markup name."""

    # Keep this order: tags are (re)opened in declaration order
    BOLD = "b"
    ITALIC = "i"
    STRIKE = "s"
    UNDERLINE = "u"
    SUPERSCRIPT = "sup"
    SUBSCRIPT = "sub"

    @property
    def tag_name(self) -> str:
        """Lowercase markup element name for this tag."""
        return self.value


# Explicit open order, independent of how any set of tags iterates
TAG_ORDER: tuple[Tag, ...] = (
    Tag.BOLD,
    Tag.ITALIC,
    Tag.STRIKE,
    Tag.UNDERLINE,
    Tag.SUPERSCRIPT,
    Tag.SUBSCRIPT,
)
