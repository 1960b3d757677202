"""Stream the body text of a .docx file as inline markup."""

import zipfile
from dataclasses import dataclass
from pathlib import Path

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from lxml.etree import XMLSyntaxError

from run_markup.formats.docx_runs import DocxRun, DocxStyleTable
from run_markup.formatting.reconciler import RunFormatter
from run_markup.sinks.base import MarkupSink


PARAGRAPH_TAG = "p"


class ExtractionError(Exception):
    """The input document could not be read."""

    pass


@dataclass
class ExtractionStats:
    """Counters collected while extracting a document.

    Attributes:
        paragraphs: Paragraph elements emitted
        runs: Non-empty runs emitted
        tags_opened: Formatting tags opened
        tags_closed: Formatting tags closed
    """

    paragraphs: int = 0
    runs: int = 0
    tags_opened: int = 0
    tags_closed: int = 0


class DocxExtractor:
    """Extract paragraphs and run formatting from Word (.docx) files.

    Each body paragraph becomes a ``p`` element. Inside it, formatting
    tags are opened and closed run by run and closed again at the end of
    the paragraph, so no formatting crosses a paragraph boundary.
    """

    def __init__(self, skip_empty_paragraphs: bool = True) -> None:
        self.skip_empty_paragraphs = skip_empty_paragraphs

    def load(self, path: Path):
        """Open the document at ``path`` with python-docx.

        Raises:
            ExtractionError: If the file is missing, damaged or not a Word
                document
        """
        try:
            return Document(str(path))
        except (
            PackageNotFoundError,
            zipfile.BadZipFile,
            XMLSyntaxError,
            KeyError,
            ValueError,
        ) as e:
            raise ExtractionError(f"Cannot open {path}: {e}") from e

    def extract(self, path: Path, sink: MarkupSink) -> ExtractionStats:
        """Send the document at ``path`` to ``sink``.

        Raises:
            ExtractionError: If the document cannot be loaded
        """
        return self.extract_document(self.load(path), sink)

    def extract_document(self, document, sink: MarkupSink) -> ExtractionStats:
        """Send an already loaded python-docx document to ``sink``."""
        stats = ExtractionStats()
        styles = DocxStyleTable(document)

        for para in document.paragraphs:
            if self.skip_empty_paragraphs and not para.text.strip():
                continue

            sink.open_tag(PARAGRAPH_TAG)
            formatter = RunFormatter(sink)
            for run in para.runs:
                if not run.text:
                    continue
                formatter.apply(DocxRun(run, styles))
                sink.characters(run.text)
                stats.runs += 1
            formatter.close()
            sink.close_tag(PARAGRAPH_TAG)

            stats.paragraphs += 1
            stats.tags_opened += formatter.opened
            stats.tags_closed += formatter.closed

        return stats
