from __future__ import annotations


class DocumentInputError(ValueError):
    """The uploaded document cannot be scanned because of the caller's input."""


class UnsupportedDocumentKindError(DocumentInputError):
    def __init__(self, kind: str):
        super().__init__(f"Unsupported document type: {kind or 'unknown'}. Upload a .pdf or .txt file.")
        self.kind = kind


class DocumentTooLargeError(DocumentInputError):
    def __init__(self, size: int, limit: int):
        super().__init__(f"Document is {size} bytes; the limit is {limit} bytes.")
        self.size = size
        self.limit = limit


class EmptyDocumentError(DocumentInputError):
    pass


class DocumentExtractionError(RuntimeError):
    """Text could not be recovered from a document of a supported kind."""
