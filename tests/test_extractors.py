"""Tests for document text extraction."""

from __future__ import annotations

import builtins
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.extraction import (
    SUPPORTED_EXTENSIONS,
    ExtractionIOError,
    PdfExtractor,
    PlainTextExtractor,
    UnsupportedFormatError,
    WordExtractor,
    classify_format,
    create_extractor,
    extract,
    file_dialog_filter,
    is_supported,
)
from src.models import DocumentFormat


def _write_pdf(path: Path, pages: list[str]) -> Path:
    """Write a minimal PDF with one line of Helvetica text per page."""
    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"",  # page tree, filled in once the page object numbers are known
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    kids = []
    for text in pages:
        page_number = len(objects) + 1
        content_number = page_number + 1
        kids.append(f"{page_number} 0 R")
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                "/Resources << /Font << /F1 3 0 R >> >> "
                f"/Contents {content_number} 0 R >>"
            ).encode("ascii")
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
        objects.append(
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )
    objects[1] = f"<< /Type /Pages /Kids [{' '.join(kids)}] /Count {len(pages)} >>".encode(
        "ascii"
    )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset

    path.write_bytes(bytes(out))
    return path


def _write_docx(path: Path, paragraphs: list[str]) -> Path:
    from docx import Document

    document = Document()
    for text in paragraphs:
        document.add_paragraph(text)
    document.save(str(path))
    return path


@pytest.mark.parametrize(
    "name, expected",
    [
        ("report.docx", DocumentFormat.WORD),
        ("REPORT.DOCX", DocumentFormat.WORD),
        ("legacy.doc", DocumentFormat.WORD),
        ("paper.pdf", DocumentFormat.PDF),
        ("Paper.Pdf", DocumentFormat.PDF),
        ("notes.txt", DocumentFormat.PLAIN_TEXT),
        ("archive.tar.txt", DocumentFormat.PLAIN_TEXT),
        ("notes.md", DocumentFormat.UNRECOGNIZED),
        ("notes.txt.bak", DocumentFormat.UNRECOGNIZED),
        ("README", DocumentFormat.UNRECOGNIZED),
        (".txt", DocumentFormat.PLAIN_TEXT),
        ("dir/.pdf", DocumentFormat.PDF),
        ("NOTES.TXT", DocumentFormat.PLAIN_TEXT),
    ],
)
def test_classify_format(name: str, expected: DocumentFormat) -> None:
    assert classify_format(name) is expected


@pytest.mark.parametrize(
    "name", ["a.docx", "a.DOC", "a.pdf", "a.TXT", "a.md", "a.rtf", "a", "a.docx.zip"]
)
def test_is_supported_agrees_with_extract(tmp_path: Path, name: str) -> None:
    path = tmp_path / name
    supported = is_supported(path)
    if supported:
        # The file doesn't exist, so a supported suffix fails on I/O instead
        with pytest.raises(ExtractionIOError):
            extract(path)
    else:
        with pytest.raises(UnsupportedFormatError):
            extract(path)


def test_bare_extension_file_names_are_supported(tmp_path: Path) -> None:
    assert is_supported(".txt")
    assert is_supported("dir/.pdf")

    path = tmp_path / ".txt"
    path.write_bytes(b"hidden notes")
    assert extract(path) == "hidden notes"


def test_is_supported_does_not_touch_filesystem(tmp_path: Path) -> None:
    assert is_supported(tmp_path / "missing" / "file.pdf")


def test_unsupported_message_names_file_and_extensions(tmp_path: Path) -> None:
    path = tmp_path / "slides.pptx"
    path.write_bytes(b"data")

    with pytest.raises(UnsupportedFormatError) as exc_info:
        extract(path)
    message = str(exc_info.value)
    assert "slides.pptx" in message
    for suffix in SUPPORTED_EXTENSIONS:
        assert suffix in message


@pytest.mark.parametrize(
    "content",
    [
        "Plain ASCII text.",
        "Grüße aus Köln, naïve café, 日本語のテキスト, emoji 😀",
        "",
    ],
)
def test_plain_text_round_trip(tmp_path: Path, content: str) -> None:
    path = tmp_path / "sample.txt"
    path.write_bytes(content.encode("utf-8"))
    assert extract(path) == content


def test_plain_text_keeps_bom_and_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "windows.txt"
    path.write_bytes(b"\xef\xbb\xbfFirst line\r\nSecond line\r\n")

    text = extract(path)
    assert text == "\ufeffFirst line\r\nSecond line\r\n"


def test_plain_text_invalid_utf8_is_io_error(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes("café".encode("latin-1"))

    with pytest.raises(ExtractionIOError, match="utf-8"):
        extract(path)


def test_missing_file_is_io_error(tmp_path: Path) -> None:
    with pytest.raises(ExtractionIOError):
        extract(tmp_path / "missing.txt")


def test_word_document_paragraphs_in_order(tmp_path: Path) -> None:
    path = _write_docx(
        tmp_path / "essay.docx",
        ["Their going to the park.", "It was a sunny day.", "Café au lait."],
    )

    text = extract(path)
    assert text.strip() == "Their going to the park.\nIt was a sunny day.\nCafé au lait."


def test_word_document_with_uppercase_suffix(tmp_path: Path) -> None:
    path = _write_docx(tmp_path / "ESSAY.DOCX", ["Hello."])
    assert "Hello." in extract(path)


def test_corrupt_word_document_is_io_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.docx"
    path.write_bytes(b"not a zip archive")

    with pytest.raises(ExtractionIOError):
        extract(path)


def test_pdf_pages_extracted_in_order(tmp_path: Path) -> None:
    path = _write_pdf(tmp_path / "paper.pdf", ["First page text", "Second page text"])

    text = extract(path)
    assert "First page text" in text
    assert "Second page text" in text
    assert text.index("First page text") < text.index("Second page text")


def test_empty_pdf_is_io_error(tmp_path: Path) -> None:
    path = tmp_path / "empty.pdf"
    path.write_bytes(b"")

    with pytest.raises(ExtractionIOError):
        extract(path)


def test_extract_does_not_modify_source(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_bytes(b"unchanged")
    before = path.stat().st_mtime_ns

    extract(path)

    assert path.read_bytes() == b"unchanged"
    assert path.stat().st_mtime_ns == before


@pytest.mark.parametrize(
    "name, payload",
    [
        ("ok.txt", b"fine"),
        ("bad.txt", b"\xff\xfe\xfa"),
        ("bad.docx", b"not a zip"),
        ("bad.pdf", b"%PDF-garbage"),
    ],
)
def test_file_handle_closed_on_every_path(monkeypatch, tmp_path: Path, name: str, payload: bytes) -> None:
    path = tmp_path / name
    path.write_bytes(payload)
    opened = []

    def tracking_open(*args, **kwargs):
        handle = builtins.open(*args, **kwargs)
        opened.append(handle)
        return handle

    monkeypatch.setattr("src.extraction.base.open", tracking_open, raising=False)

    try:
        extract(path)
    except ExtractionIOError:
        pass

    assert len(opened) == 1
    assert opened[0].closed


def test_create_extractor_by_enum_and_name() -> None:
    assert isinstance(create_extractor(DocumentFormat.WORD), WordExtractor)
    assert isinstance(create_extractor("pdf"), PdfExtractor)
    assert isinstance(create_extractor("PLAIN-TEXT"), PlainTextExtractor)


@pytest.mark.parametrize("name", ["markdown", "unrecognized", DocumentFormat.UNRECOGNIZED])
def test_create_extractor_invalid_type(name) -> None:
    with pytest.raises(UnsupportedFormatError, match="Valid options are"):
        create_extractor(name)


def test_extractors_report_their_format() -> None:
    for fmt in DocumentFormat.supported():
        assert create_extractor(fmt).format is fmt


def test_file_dialog_filter() -> None:
    description, patterns = file_dialog_filter()

    assert patterns == ["*.docx", "*.doc", "*.pdf", "*.txt"]
    assert description == "Supported Documents (*.docx, *.doc, *.pdf, *.txt)"


def test_create_extractor_error_lists_supported_formats() -> None:
    with pytest.raises(UnsupportedFormatError) as exc_info:
        create_extractor("rtf")
    assert "Valid options are: 'word', 'pdf', 'plain-text'" in str(exc_info.value)
