"""Enumerations shared by the extraction and grammar check packages."""

from __future__ import annotations

from enum import Enum


class DocumentFormat(str, Enum):
    """Closed set of document families the extractor understands.

    ``UNRECOGNIZED`` is returned by suffix classification for anything outside
    the supported families; it never has an extractor of its own.
    """

    WORD = "word"
    PDF = "pdf"
    PLAIN_TEXT = "plain-text"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def supported(cls) -> list["DocumentFormat"]:
        return [m for m in cls if m is not cls.UNRECOGNIZED]
