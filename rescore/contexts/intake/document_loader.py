"""
Plain-text document loading for the Intake context.

Accepts the same upload types as the resume builder (plain text, PDF, DOCX)
but only decodes plain text. Binary formats are recognized so callers can
report them clearly, then rejected with UnsupportedDocumentError.
"""

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Optional

from rescore.contexts.intake.exceptions import DocumentLoadError, UnsupportedDocumentError
from rescore.contexts.intake.extractor import ExtractedProfile, extract_profile
from rescore.contexts.intake.logger import _log_debug, _log_warning

PLAIN_TEXT = "text/plain"
PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Upload MIME type -> file extension
SUPPORTED_MIME_TYPES = MappingProxyType(
    {
        PLAIN_TEXT: ".txt",
        PDF: ".pdf",
        DOCX: ".docx",
    }
)

# Types that are accepted on upload but cannot be decoded here
BINARY_MIME_TYPES = frozenset({PDF, DOCX})

_MIME_BY_SUFFIX = {
    ".txt": PLAIN_TEXT,
    ".text": PLAIN_TEXT,
    ".md": PLAIN_TEXT,
    ".pdf": PDF,
    ".docx": DOCX,
}


@dataclass(frozen=True)
class ParsedDocument:
    """
    A loaded document with its extracted profile.

    Attributes:
        raw_text: Decoded document text
        profile: Profile extracted from raw_text
        source: Path the text was read from
    """

    raw_text: str
    profile: ExtractedProfile
    source: Optional[Path] = None


def is_valid_file_type(mime_type: str) -> bool:
    """Check whether a MIME type is an accepted upload type."""
    return mime_type in SUPPORTED_MIME_TYPES


def get_file_extension(mime_type: str) -> str:
    """File extension for an upload MIME type, or "" when unknown."""
    return SUPPORTED_MIME_TYPES.get(mime_type, "")


def guess_mime_type(path: Path) -> Optional[str]:
    """Guess the upload MIME type from a file suffix."""
    return _MIME_BY_SUFFIX.get(Path(path).suffix.lower())


def load_document_text(path: Path, mime_type: Optional[str] = None) -> str:
    """
    Read a document as plain text.

    Args:
        path: Document path
        mime_type: Upload MIME type; guessed from the suffix when omitted

    Returns:
        Document text decoded as UTF-8

    Raises:
        UnsupportedDocumentError: If the type is binary or unknown
        DocumentLoadError: If the file cannot be read or decoded
    """
    path = Path(path)
    mime_type = mime_type or guess_mime_type(path)

    if mime_type is None or not is_valid_file_type(mime_type):
        raise UnsupportedDocumentError(
            f"Unsupported file type: {mime_type or path.suffix or 'unknown'}",
            path=path,
            mime_type=mime_type,
        )

    if mime_type in BINARY_MIME_TYPES:
        _log_warning(f"Binary document rejected: {path.name} ({mime_type})")
        raise UnsupportedDocumentError(
            f"{get_file_extension(mime_type)} documents are not supported; provide plain text",
            path=path,
            mime_type=mime_type,
        )

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Failed to read document: {e}", path=path, mime_type=mime_type) from e

    _log_debug(f"Loaded {path.name}: {len(text)} chars")
    return text


def parse_document(path: Path, mime_type: Optional[str] = None) -> ParsedDocument:
    """
    Load a document and extract its profile.

    Raises:
        UnsupportedDocumentError: If the type is binary or unknown
        DocumentLoadError: If the file cannot be read or decoded
    """
    path = Path(path)
    raw_text = load_document_text(path, mime_type=mime_type)
    return ParsedDocument(raw_text=raw_text, profile=extract_profile(raw_text), source=path)
