"""Plain-text extraction from Word, PDF and text documents."""

from __future__ import annotations

from .base import (
    SUPPORTED_EXTENSIONS,
    ExtractionError,
    ExtractionIOError,
    TextExtractor,
    UnsupportedFormatError,
    classify_format,
)
from .extractors import create_extractor, extract, file_dialog_filter, is_supported
from .pdf_extractor import PdfExtractor
from .text_extractor import PlainTextExtractor
from .word_extractor import WordExtractor

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "ExtractionError",
    "ExtractionIOError",
    "UnsupportedFormatError",
    "TextExtractor",
    "WordExtractor",
    "PdfExtractor",
    "PlainTextExtractor",
    "classify_format",
    "create_extractor",
    "extract",
    "file_dialog_filter",
    "is_supported",
]
