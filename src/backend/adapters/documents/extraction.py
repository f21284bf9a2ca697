from __future__ import annotations

import io
import logging
from enum import Enum
from pathlib import PurePath
from typing import Optional

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from .errors import (
    DocumentExtractionError,
    DocumentTooLargeError,
    EmptyDocumentError,
    UnsupportedDocumentKindError,
)

logger = logging.getLogger(__name__)


class DocumentKind(str, Enum):
    TEXT = "text"
    PDF = "pdf"


_EXTENSIONS = {
    ".txt": DocumentKind.TEXT,
    ".pdf": DocumentKind.PDF,
}

_CONTENT_TYPES = {
    "text/plain": DocumentKind.TEXT,
    "application/pdf": DocumentKind.PDF,
}


def detect_kind(filename: Optional[str], content_type: Optional[str] = None) -> DocumentKind:
    """Resolve the document kind from the file extension, then the content type."""
    suffix = PurePath(filename or "").suffix.lower()
    if suffix in _EXTENSIONS:
        return _EXTENSIONS[suffix]
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type in _CONTENT_TYPES:
        return _CONTENT_TYPES[media_type]
    raise UnsupportedDocumentKindError(suffix or media_type)


def ensure_within_limit(data: bytes, limit: int) -> None:
    if len(data) > limit:
        raise DocumentTooLargeError(len(data), limit)


def extract_text(data: bytes, kind: DocumentKind | str) -> str:
    """Return the textual content of `data`.

    Plain text is decoded as UTF-8 and returned as-is. PDF pages are extracted
    in document order and joined with newlines.
    """
    try:
        kind = DocumentKind(kind)
    except ValueError as exc:
        raise UnsupportedDocumentKindError(str(kind)) from exc

    if not data:
        raise EmptyDocumentError("Uploaded document is empty.")

    if kind == DocumentKind.TEXT:
        text = _extract_plain_text(data)
    else:
        text = _extract_pdf_text(data)

    if not text.strip():
        raise EmptyDocumentError("No readable text found in the document.")
    return text


def _extract_plain_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EmptyDocumentError("Text file is not valid UTF-8.") from exc


def _extract_pdf_text(data: bytes) -> str:
    try:
        reader = PdfReader(io.BytesIO(data))
        parts = []
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                parts.append(page_text)
    except (PyPdfError, ValueError, KeyError, TypeError) as exc:
        logger.warning("PDF extraction failed: %s", exc)
        raise DocumentExtractionError(f"Failed to read PDF document: {exc}") from exc
    return "\n".join(parts)
