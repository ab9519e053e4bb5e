"""Base classes and shared utilities for document text extractors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from src.models.enums import DocumentFormat

# Suffix -> format family. Matched case-insensitively against the end of the file name.
_SUFFIX_FORMATS: dict[str, DocumentFormat] = {
    ".docx": DocumentFormat.WORD,
    ".doc": DocumentFormat.WORD,
    ".pdf": DocumentFormat.PDF,
    ".txt": DocumentFormat.PLAIN_TEXT,
}

SUPPORTED_EXTENSIONS: tuple[str, ...] = tuple(_SUFFIX_FORMATS)


class ExtractionError(Exception):
    """Base class for failures raised while turning a document into text."""


class UnsupportedFormatError(ExtractionError):
    """Raised when a file's extension matches none of the supported families."""


class ExtractionIOError(ExtractionError):
    """Raised when reading or decoding an otherwise supported file fails."""


def classify_format(path: str | Path) -> DocumentFormat:
    """Return the format family implied by the file name's suffix.

    Pure: the file is not opened and does not need to exist. The whole file
    name is matched, so a bare ``.txt`` counts as plain text.
    """
    name = Path(path).name.lower()
    for suffix, document_format in _SUFFIX_FORMATS.items():
        if name.endswith(suffix):
            return document_format
    return DocumentFormat.UNRECOGNIZED


class TextExtractor(ABC):
    """Turns an open binary stream of one document family into text."""

    format: DocumentFormat

    def extract(self, path: Path) -> str:
        """Open ``path`` read-only and extract its text.

        The file handle is closed on every exit path. Any read, decode or
        parse failure surfaces as :class:`ExtractionIOError` carrying the
        underlying message.
        """
        try:
            with open(path, "rb") as stream:
                return self.extract_stream(stream)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionIOError(str(exc)) from exc

    @abstractmethod
    def extract_stream(self, stream: BinaryIO) -> str:
        pass
