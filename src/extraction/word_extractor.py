"""Word (.docx) text extractor implementation."""

from __future__ import annotations

from typing import BinaryIO

from src.models.enums import DocumentFormat

from .base import TextExtractor


class WordExtractor(TextExtractor):
    """Extractor using the python-docx library.

    Paragraph text is concatenated in document order, one paragraph per line.
    Tables, styling and embedded objects are not reproduced.
    """

    format = DocumentFormat.WORD
    PARAGRAPH_SEPARATOR = "\n"

    def extract_stream(self, stream: BinaryIO) -> str:
        from docx import Document

        document = Document(stream)
        return self.PARAGRAPH_SEPARATOR.join(
            paragraph.text for paragraph in document.paragraphs
        )
