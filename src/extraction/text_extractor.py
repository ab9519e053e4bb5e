"""Plain-text extractor implementation."""

from __future__ import annotations

from typing import BinaryIO

from src.models.enums import DocumentFormat

from .base import TextExtractor


class PlainTextExtractor(TextExtractor):
    """Decodes raw bytes as strict UTF-8; no BOM stripping or newline changes."""

    format = DocumentFormat.PLAIN_TEXT

    def extract_stream(self, stream: BinaryIO) -> str:
        return stream.read().decode("utf-8")
