"""
Intake Context

Responsibilities:
- Loads plain-text resumes and job postings
- Extracts skills, experience, education and certification signals from text
- Produces immutable ExtractedProfile values for the Targeting context

Owns: Skill dictionary, extraction patterns, document loading
Never: Scores or compares profiles
"""

from rescore.contexts.intake.document_loader import (
    ParsedDocument,
    load_document_text,
    parse_document,
)
from rescore.contexts.intake.extractor import ExtractedProfile, extract_profile

__all__ = [
    "ExtractedProfile",
    "ParsedDocument",
    "extract_profile",
    "load_document_text",
    "parse_document",
]
