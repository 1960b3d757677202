"""python-docx adapters for the style-aware run model."""

from typing import Optional

from docx.oxml.ns import qn
from docx.text.run import Run

from run_markup.formatting.runs import (
    StyledRun,
    StyleRecord,
    StyleResolver,
    UnderlinePattern,
    VerticalAlignment,
)


def _font_vertical_alignment(font) -> VerticalAlignment:
    """Read vertical alignment from a python-docx ``Font``."""
    if font is None:
        return VerticalAlignment.NONE
    if font.superscript:
        return VerticalAlignment.SUPERSCRIPT
    if font.subscript:
        return VerticalAlignment.SUBSCRIPT
    return VerticalAlignment.NONE


class DocxStyleTable(StyleResolver):
    """Style table of a .docx document, keyed by style id.

    Records are built once, on first lookup.
    """

    def __init__(self, document) -> None:
        self._document = document
        self._records: Optional[dict[str, StyleRecord]] = None

    def resolve_style(self, name: Optional[str]) -> Optional[StyleRecord]:
        if not name:
            return None
        if self._records is None:
            self._records = self._load()
        return self._records.get(name)

    def _load(self) -> dict[str, StyleRecord]:
        records: dict[str, StyleRecord] = {}
        for style in self._document.styles:
            style_id = style.style_id
            if not style_id:
                continue
            # Numbering styles carry no font
            font = getattr(style, "font", None)
            records[style_id] = StyleRecord(
                name=style_id,
                vertical_alignment=_font_vertical_alignment(font),
            )
        return records


class DocxRun(StyledRun):
    """``StyledRun`` view of a python-docx ``Run``.

    Only properties set directly on the run are read; the character
    style is reached through ``style_name`` and ``styles``.
    """

    def __init__(self, run: Run, styles: StyleResolver) -> None:
        self._run = run
        self._styles = styles

    @property
    def text(self) -> str:
        return self._run.text

    def is_bold(self) -> bool:
        return bool(self._run.bold)

    def is_italic(self) -> bool:
        return bool(self._run.italic)

    def is_strikethrough(self) -> bool:
        return bool(self._run.font.strike)

    def underline_pattern(self) -> UnderlinePattern:
        # python-docx has no public accessor for the raw w:u/@w:val pattern
        rPr = self._run._r.rPr
        u = rPr.find(qn("w:u")) if rPr is not None else None
        if u is None:
            return UnderlinePattern.NONE
        val = u.get(qn("w:val"))
        if val is None:
            return UnderlinePattern.SINGLE
        try:
            return UnderlinePattern(val)
        except ValueError:
            # Unknown pattern names still underline
            return UnderlinePattern.SINGLE

    def vertical_alignment(self) -> VerticalAlignment:
        return _font_vertical_alignment(self._run.font)

    def style_name(self) -> Optional[str]:
        # Run.style returns a resolved style object, not the w:rStyle id
        return self._run._r.style

    @property
    def styles(self) -> StyleResolver:
        return self._styles
