"""Text extractor factory and the public extraction entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from src.models.enums import DocumentFormat

from .base import (
    SUPPORTED_EXTENSIONS,
    TextExtractor,
    UnsupportedFormatError,
    classify_format,
)
from .pdf_extractor import PdfExtractor
from .text_extractor import PlainTextExtractor
from .word_extractor import WordExtractor

logger = logging.getLogger(__name__)

__all__ = [
    "create_extractor",
    "extract",
    "is_supported",
    "file_dialog_filter",
]

_EXTRACTORS: dict[DocumentFormat, type[TextExtractor]] = {
    DocumentFormat.WORD: WordExtractor,
    DocumentFormat.PDF: PdfExtractor,
    DocumentFormat.PLAIN_TEXT: PlainTextExtractor,
}


def _valid_options() -> str:
    return ", ".join(f"'{fmt.value}'" for fmt in DocumentFormat.supported())


def _unsupported_message(path: str | Path) -> str:
    return (
        f"Unsupported file format: {Path(path).name}. "
        f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
    )


def create_extractor(document_format: DocumentFormat | str) -> TextExtractor:
    """Factory function to create an extractor for a document family.

    Args:
        document_format: A DocumentFormat member or its value
                         ('word', 'pdf' or 'plain-text', case-insensitive).

    Returns:
        A TextExtractor instance.

    Raises:
        UnsupportedFormatError: If the format is not one of the supported families.
    """
    if isinstance(document_format, str) and not isinstance(document_format, DocumentFormat):
        try:
            document_format = DocumentFormat(document_format.lower())
        except ValueError:
            raise UnsupportedFormatError(
                f"Unknown document format: {document_format}. "
                f"Valid options are: {_valid_options()}"
            ) from None

    extractor_cls = _EXTRACTORS.get(document_format)
    if extractor_cls is None:
        raise UnsupportedFormatError(
            f"Unknown document format: {document_format.value}. "
            f"Valid options are: {_valid_options()}"
        )
    return extractor_cls()


def is_supported(path: str | Path) -> bool:
    """Return True when ``extract`` would accept the file name's suffix."""
    return classify_format(path) is not DocumentFormat.UNRECOGNIZED


def extract(path: str | Path) -> str:
    """Extract the text of a Word, PDF or plain-text document.

    The format is inferred from the file suffix only. The source file is
    opened read-only and never written to.

    Raises:
        UnsupportedFormatError: If the suffix matches no supported family.
        ExtractionIOError: If reading or decoding the file fails.
    """
    document_format = classify_format(path)
    if document_format is DocumentFormat.UNRECOGNIZED:
        raise UnsupportedFormatError(_unsupported_message(path))

    extractor = create_extractor(document_format)
    text = extractor.extract(Path(path))
    logger.debug(
        "Extracted %d characters from %s (%s)", len(text), path, document_format.value
    )
    return text


def file_dialog_filter() -> tuple[str, list[str]]:
    """Return the (description, glob patterns) pair for a file picker."""
    patterns = [f"*{suffix}" for suffix in SUPPORTED_EXTENSIONS]
    return f"Supported Documents ({', '.join(patterns)})", patterns
