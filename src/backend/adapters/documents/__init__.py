"""Text extraction for uploaded documents (plain text and PDF)."""

from .errors import (
    DocumentExtractionError,
    DocumentInputError,
    DocumentTooLargeError,
    EmptyDocumentError,
    UnsupportedDocumentKindError,
)
from .extraction import DocumentKind, detect_kind, ensure_within_limit, extract_text

__all__ = [
    "DocumentExtractionError",
    "DocumentInputError",
    "DocumentKind",
    "DocumentTooLargeError",
    "EmptyDocumentError",
    "UnsupportedDocumentKindError",
    "detect_kind",
    "ensure_within_limit",
    "extract_text",
]
