"""PDF text extractor implementation."""

from __future__ import annotations

from typing import BinaryIO

from src.models.enums import DocumentFormat

from .base import TextExtractor


class PdfExtractor(TextExtractor):
    """Extractor using the pypdf library.

    Text is pulled page by page in page order. Multi-column layouts are not
    reconstructed, so columns may interleave differently from reading order.
    """

    format = DocumentFormat.PDF
    PAGE_SEPARATOR = "\n"

    def extract_stream(self, stream: BinaryIO) -> str:
        from pypdf import PdfReader

        reader = PdfReader(stream)
        pages = [page.extract_text() or "" for page in reader.pages]
        return self.PAGE_SEPARATOR.join(pages)
