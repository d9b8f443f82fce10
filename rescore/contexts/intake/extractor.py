"""
Profile extraction from plain text.

Turns a resume or a job posting into an ExtractedProfile: the skills it names
and the raw experience, education and certification phrases it contains.
Job postings go through exactly the same pipeline as resumes.

Extraction is a best-effort pattern scan. It never raises for string input;
text with no recognizable signals yields an empty profile.
"""

from dataclasses import dataclass
from typing import Iterable

from rescore.contexts.intake.extraction_patterns import (
    CERTIFICATION_PATTERNS,
    EDUCATION_PATTERNS,
    EXPERIENCE_PATTERNS,
    MIN_SKILL_TOKEN_LENGTH,
    SKILL_CUE_PATTERNS,
    SKILL_DICTIONARY,
    SKILL_LIST_SEPARATORS,
)
from rescore.contexts.intake.logger import log_profile_extracted


@dataclass(frozen=True)
class ExtractedProfile:
    """
    Structured signals extracted from one document.

    Attributes:
        skills: Unique skill names. Dictionary hits keep their canonical casing,
            free-text hits are lowercase. Uniqueness is case-insensitive.
        experience_phrases: Matched experience snippets, duplicates allowed
        education_phrases: Matched degree/institution snippets
        certification_phrases: Matched certification snippets
    """

    skills: tuple[str, ...] = ()
    experience_phrases: tuple[str, ...] = ()
    education_phrases: tuple[str, ...] = ()
    certification_phrases: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (
            self.skills
            or self.experience_phrases
            or self.education_phrases
            or self.certification_phrases
        )

    def to_dict(self) -> dict[str, list[str]]:
        """Serialize with the field names used by upload records."""
        return {
            "skills": list(self.skills),
            "experience": list(self.experience_phrases),
            "education": list(self.education_phrases),
            "certifications": list(self.certification_phrases),
        }


def extract_profile(text: str) -> ExtractedProfile:
    """
    Extract an ExtractedProfile from raw document text.

    Args:
        text: Resume or job posting text (may be empty)

    Returns:
        Profile derived only from the text, the skill dictionary and the
        extraction patterns. Identical text always yields an equal profile.
    """
    normalized = _normalize(text)

    profile = ExtractedProfile(
        skills=extract_skills(normalized),
        experience_phrases=extract_experience(normalized),
        education_phrases=extract_education(normalized),
        certification_phrases=extract_certifications(normalized),
    )
    log_profile_extracted(profile, len(normalized))
    return profile


def extract_skills(text: str) -> tuple[str, ...]:
    """
    Find skills by dictionary substring scan plus cue-phrase skill lists.

    Dictionary names are tested as plain substrings of the lowercased text,
    without word boundaries. Lists introduced by cues such as "proficient in"
    or "tools:" are split on , ; & and tokens longer than two characters kept.

    Args:
        text: Document text

    Returns:
        Skills in dictionary order followed by free-text order, deduplicated
    """
    normalized = _normalize(text)

    found = [skill for skill in SKILL_DICTIONARY if skill.lower() in normalized]

    for pattern in SKILL_CUE_PATTERNS:
        for match in pattern.finditer(normalized):
            for token in SKILL_LIST_SEPARATORS.split(match.group(1)):
                token = token.strip()
                if len(token) > MIN_SKILL_TOKEN_LENGTH:
                    found.append(token)

    return _unique_case_insensitive(found)


def extract_experience(text: str) -> tuple[str, ...]:
    """Years-of-experience phrases, then role and seniority title phrases."""
    return _match_phrases(EXPERIENCE_PATTERNS, _normalize(text))


def extract_education(text: str) -> tuple[str, ...]:
    """Degree, degree-abbreviation and institution phrases."""
    return _match_phrases(EDUCATION_PATTERNS, _normalize(text))


def extract_certifications(text: str) -> tuple[str, ...]:
    """'Certified in' phrases, vendor certifications and certification acronyms."""
    return _match_phrases(CERTIFICATION_PATTERNS, _normalize(text))


def _normalize(text: str) -> str:
    return (text or "").lower()


def _match_phrases(patterns: Iterable, text: str) -> tuple[str, ...]:
    # Whole matches, pattern by pattern, each in order of appearance
    return tuple(match.group(0) for pattern in patterns for match in pattern.finditer(text))


def _unique_case_insensitive(items: Iterable[str]) -> tuple[str, ...]:
    seen = set()
    unique = []
    for item in items:
        key = item.lower()
        if key not in seen:
            seen.add(key)
            unique.append(item)
    return tuple(unique)
