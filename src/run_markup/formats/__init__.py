"""Document format readers for Run Markup."""

from run_markup.formats.docx_runs import DocxRun, DocxStyleTable
from run_markup.formats.docx_extractor import (
    DocxExtractor,
    ExtractionError,
    ExtractionStats,
)

__all__ = [
    "DocxRun",
    "DocxStyleTable",
    "DocxExtractor",
    "ExtractionError",
    "ExtractionStats",
]

SUPPORTED_EXTENSIONS = (".docx",)
