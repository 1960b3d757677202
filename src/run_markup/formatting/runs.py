"""Character run models consumed by the attribute mapper.

Two run shapes exist:

- ``StyledRun``: the style-aware OOXML model. Underline is a pattern,
  vertical alignment can be set on the run or inherited from a named
  character style resolved through the document's style table.
- ``LegacyRun``: the flat binary-format model. Underline is a numeric
  code and vertical alignment is a small integer index.

Both share only the bold/italic/strikethrough booleans.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class VerticalAlignment(Enum):
    """Superscript/subscript positioning of a run or style."""

    NONE = "baseline"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"


class UnderlinePattern(Enum):
    """Underline patterns (values follow OOXML ``ST_Underline``)."""

    NONE = "none"
    SINGLE = "single"
    WORDS = "words"
    DOUBLE = "double"
    THICK = "thick"
    DOTTED = "dotted"
    DOTTED_HEAVY = "dottedHeavy"
    DASH = "dash"
    DASHED_HEAVY = "dashedHeavy"
    DASH_LONG = "dashLong"
    DASH_LONG_HEAVY = "dashLongHeavy"
    DOT_DASH = "dotDash"
    DASH_DOT_HEAVY = "dashDotHeavy"
    DOT_DOT_DASH = "dotDotDash"
    DASH_DOT_DOT_HEAVY = "dashDotDotHeavy"
    WAVE = "wave"
    WAVY_HEAVY = "wavyHeavy"
    WAVY_DOUBLE = "wavyDouble"


@dataclass(frozen=True)
class StyleRecord:
    """The part of a named document style the mapper cares about.

    Attributes:
        name: Style identifier as referenced by runs
        vertical_alignment: Vertical alignment defined by the style
    """

    name: str
    vertical_alignment: VerticalAlignment = VerticalAlignment.NONE


class StyleResolver(ABC):
    """Document-level lookup of named styles."""

    @abstractmethod
    def resolve_style(self, name: Optional[str]) -> Optional[StyleRecord]:
        """Return the style called ``name``.

        Empty, missing or unknown names resolve to None, never an error.
        """
        ...


class MappingStyleResolver(StyleResolver):
    """Style resolver backed by a plain ``{name: StyleRecord}`` mapping."""

    def __init__(self, styles: Optional[dict[str, StyleRecord]] = None) -> None:
        self._styles = dict(styles or {})

    def add(self, record: StyleRecord) -> None:
        """Register a style record under its own name."""
        self._styles[record.name] = record

    def resolve_style(self, name: Optional[str]) -> Optional[StyleRecord]:
        if not name:
            return None
        return self._styles.get(name)


class CharacterRun(ABC):
    """Capabilities shared by every run shape."""

    @abstractmethod
    def is_bold(self) -> bool:
        ...

    @abstractmethod
    def is_italic(self) -> bool:
        ...

    @abstractmethod
    def is_strikethrough(self) -> bool:
        ...


class StyledRun(CharacterRun):
    """Style-aware run (OOXML word-processing model)."""

    @abstractmethod
    def underline_pattern(self) -> UnderlinePattern:
        """Underline pattern set directly on the run."""
        ...

    @abstractmethod
    def vertical_alignment(self) -> VerticalAlignment:
        """Vertical alignment set directly on the run."""
        ...

    @abstractmethod
    def style_name(self) -> Optional[str]:
        """Name of the character style applied to the run, if any.

        May be an empty string.
        """
        ...

    @property
    @abstractmethod
    def styles(self) -> StyleResolver:
        """Style table of the document the run belongs to."""
        ...


# Values of LegacyRun.sub_super_script_index
ISS_NONE = 0
ISS_SUPERSCRIPTED = 1
ISS_SUBSCRIPTED = 2


@dataclass
class LegacyRun(CharacterRun):
    """Run from the flat legacy (binary .doc) model.

    Attributes:
        text: Run text
        bold: Bold flag
        italic: Italic flag
        strikethrough: Strikethrough flag
        underline_code: Underline kind, 0 means no underline
        sub_super_script_index: 0 none, 1 superscript, 2 subscript
    """

    text: str = ""
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline_code: int = 0
    sub_super_script_index: int = ISS_NONE

    def is_bold(self) -> bool:
        return self.bold

    def is_italic(self) -> bool:
        return self.italic

    def is_strikethrough(self) -> bool:
        return self.strikethrough
