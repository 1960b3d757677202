"""Pytest fixtures for Run Markup tests."""

import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pytest
from docx import Document
from docx.enum.style import WD_STYLE_TYPE
from docx.enum.text import WD_UNDERLINE

import run_markup.config
from run_markup.formatting.runs import (
    MappingStyleResolver,
    StyledRun,
    StyleResolver,
    UnderlinePattern,
    VerticalAlignment,
)
from run_markup.sinks.base import MarkupSink, SinkError
from run_markup.sinks.recording import RecordingSink


@dataclass
class FakeStyledRun(StyledRun):
    """In-memory styled run for mapper tests."""

    bold: bool = False
    italic: bool = False
    strike: bool = False
    underline: UnderlinePattern = UnderlinePattern.NONE
    alignment: VerticalAlignment = VerticalAlignment.NONE
    style: Optional[str] = None
    resolver: StyleResolver = field(default_factory=MappingStyleResolver)

    def is_bold(self) -> bool:
        return self.bold

    def is_italic(self) -> bool:
        return self.italic

    def is_strikethrough(self) -> bool:
        return self.strike

    def underline_pattern(self) -> UnderlinePattern:
        return self.underline

    def vertical_alignment(self) -> VerticalAlignment:
        return self.alignment

    def style_name(self) -> Optional[str]:
        return self.style

    @property
    def styles(self) -> StyleResolver:
        return self.resolver


class FailingSink(MarkupSink):
    """Sink that accepts ``limit`` events, then raises SinkError."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.recorder = RecordingSink()

    @property
    def events(self) -> list[tuple[str, str]]:
        return self.recorder.events

    def _check(self) -> None:
        if len(self.events) >= self.limit:
            raise SinkError("sink rejected event")

    def open_tag(self, name: str) -> None:
        self._check()
        self.recorder.open_tag(name)

    def close_tag(self, name: str) -> None:
        self._check()
        self.recorder.close_tag(name)

    def characters(self, text: str) -> None:
        self._check()
        self.recorder.characters(text)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Drop the cached global settings around every test."""
    monkeypatch.setattr(run_markup.config, "_settings", None)
    yield


@pytest.fixture
def styled_run():
    """Factory for in-memory styled runs."""
    return FakeStyledRun


@pytest.fixture
def failing_sink():
    """Factory for sinks that fail after a number of events."""
    return FailingSink


@pytest.fixture
def sink() -> RecordingSink:
    """A fresh recording sink."""
    return RecordingSink()


@pytest.fixture
def sample_document():
    """A python-docx document exercising every tag source."""
    doc = Document()

    note_style = doc.styles.add_style("NoteMark", WD_STYLE_TYPE.CHARACTER)
    note_style.font.superscript = True
    index_style = doc.styles.add_style("IndexMark", WD_STYLE_TYPE.CHARACTER)
    index_style.font.subscript = True

    para = doc.add_paragraph()
    para.add_run("E = mc")
    run = para.add_run("2")
    run.font.superscript = True

    para = doc.add_paragraph()
    run = para.add_run("bold ")
    run.bold = True
    run = para.add_run("both")
    run.bold = True
    run.italic = True
    para.add_run(" end")

    doc.add_paragraph("")

    para = doc.add_paragraph()
    para.add_run("See note")
    run = para.add_run("1")
    run.style = note_style

    para = doc.add_paragraph()
    run = para.add_run("single")
    run.underline = True
    run = para.add_run("double")
    run.underline = WD_UNDERLINE.DOUBLE
    run = para.add_run("gone")
    run.font.strike = True

    para = doc.add_paragraph()
    para.add_run("a < b & c")

    return doc


@pytest.fixture
def sample_docx(tmp_path: Path, sample_document) -> Path:
    """The sample document saved to a temporary .docx file."""
    path = tmp_path / "sample.docx"
    sample_document.save(str(path))
    return path


@pytest.fixture
def malformed_docx(tmp_path: Path, sample_docx: Path) -> Path:
    """A .docx package whose main document part is not well-formed XML."""
    path = tmp_path / "malformed.docx"
    with zipfile.ZipFile(sample_docx) as src, zipfile.ZipFile(path, "w") as dst:
        for item in src.infolist():
            data = src.read(item.filename)
            if item.filename == "word/document.xml":
                data = b"<w:document><broken"
            dst.writestr(item, data)
    return path


@pytest.fixture
def damaged_docx(tmp_path: Path, sample_docx: Path) -> Path:
    """A .docx archive with a zeroed-out local file header."""
    data = bytearray(sample_docx.read_bytes())
    data[:30] = bytes(30)
    path = tmp_path / "damaged.docx"
    path.write_bytes(bytes(data))
    return path
