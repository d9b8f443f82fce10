"""Custom exceptions for intake context with document references."""

from pathlib import Path
from typing import Optional


class DocumentLoadError(Exception):
    """
    Exception raised when a document cannot be turned into plain text.

    Attributes:
        message: Error description
        path: Path of the document that failed to load
        mime_type: MIME type the document was loaded as
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        mime_type: Optional[str] = None,
    ):
        self.message = message
        self.path = path
        self.mime_type = mime_type

        parts = [message]

        if path:
            parts.append(f"\nDocument: {path}")

        if mime_type:
            parts.append(f"MIME type: {mime_type}")

        super().__init__("\n".join(parts))


class UnsupportedDocumentError(DocumentLoadError):
    """
    Exception raised for document types that cannot be read as plain text.

    Binary formats (PDF, DOCX) are recognized upload types but are not decoded.
    """

    pass


class EmptyDocumentError(ValueError):
    """
    Exception raised when a resume or job description has no text to analyze.

    Raised at the validation boundary only; extraction itself accepts empty text.
    """

    pass
