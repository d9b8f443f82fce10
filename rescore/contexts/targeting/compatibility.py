"""
Resume / job-posting compatibility scoring.

Compares a candidate ExtractedProfile with a job ExtractedProfile along three
dimensions and combines them with fixed weights:

    overall = skills * 0.5 + experience * 0.3 + education * 0.2

Experience and education only check whether the
job asks for something and whether the candidate shows anything at all.
Every branch has a defined result, so scoring never raises.
"""

import math
import re
from dataclasses import dataclass, field

from rescore.contexts.intake.exceptions import EmptyDocumentError
from rescore.contexts.intake.extractor import ExtractedProfile, extract_profile
from rescore.contexts.targeting.logger import log_compatibility_result
from rescore.contexts.targeting.skill_matching import has_match

# =============================================================================
# SCORING CONSTANTS
# =============================================================================

SKILLS_WEIGHT = 0.5
EXPERIENCE_WEIGHT = 0.3
EDUCATION_WEIGHT = 0.2

# Score for a dimension the job does not ask about
NO_REQUIREMENT_SCORE = 100

EXPERIENCE_PRESENT_SCORE = 80
EXPERIENCE_ABSENT_SCORE = 20
EDUCATION_PRESENT_SCORE = 90
EDUCATION_ABSENT_SCORE = 30

# educationMatch is reported when the education score clears this bar
EDUCATION_MATCH_THRESHOLD = 70

# Experience level labels, most senior first, with minimum years
SENIOR = "Senior"
MID_LEVEL = "Mid-level"
JUNIOR = "Junior"
ENTRY_LEVEL = "Entry-level"
EXPERIENCE_LEVELS = (SENIOR, MID_LEVEL, JUNIOR, ENTRY_LEVEL)
SENIOR_MIN_YEARS = 7
MID_LEVEL_MIN_YEARS = 3
MAX_YEARS_DIGITS = 9

MAX_SKILLS_IN_RECOMMENDATION = 3
DIVERSE_SKILL_COUNT = 10
NARROW_SKILL_COUNT = 5

RECOMMEND_MISSING_SKILLS = "Consider learning these missing skills: {skills}"
RECOMMEND_EXPERIENCE = "Add more details about your work experience and projects"
RECOMMEND_EDUCATION = "Include your educational background"
RECOMMEND_CERTIFICATIONS = "Consider obtaining relevant certifications for your field"

STRENGTH_SKILLS = "Diverse skill set"
STRENGTH_EXPERIENCE = "Relevant work experience"
STRENGTH_EDUCATION = "Strong educational background"

IMPROVEMENT_SKILLS = "Expand technical skill set"
IMPROVEMENT_CERTIFICATIONS = "Obtain relevant industry certifications"

_DIGITS = re.compile(r"\d+")


# =============================================================================
# REPORT STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class DetailedAnalysis:
    """
    Breakdown that accompanies the scores.

    Attributes:
        skills_matched: Candidate skills that match some job skill
        skills_missing: Same content as CompatibilityReport.missing_skills
        experience_level: One of EXPERIENCE_LEVELS
        education_match: Whether the education score is above 70
        strengths: Fixed-text strengths found in the candidate profile
        improvements: Fixed-text improvement areas for the candidate
    """

    skills_matched: tuple[str, ...] = ()
    skills_missing: tuple[str, ...] = ()
    experience_level: str = ENTRY_LEVEL
    education_match: bool = False
    strengths: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "skillsMatched": list(self.skills_matched),
            "skillsMissing": list(self.skills_missing),
            "experienceLevel": self.experience_level,
            "educationMatch": self.education_match,
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
        }


@dataclass(frozen=True)
class CompatibilityReport:
    """
    Result of scoring one candidate against one job posting.

    All scores are integers in 0-100. The caller owns the report; nothing in
    this module keeps a reference to it.
    """

    overall_score: int
    skills_score: int
    experience_score: int
    education_score: int
    missing_skills: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    detailed_analysis: DetailedAnalysis = field(default_factory=DetailedAnalysis)

    def to_dict(self) -> dict:
        """
        Serialize to the analysis response body.

        Returns:
            Dict with camelCase keys, lists instead of tuples
        """
        return {
            "overallScore": self.overall_score,
            "skillsScore": self.skills_score,
            "experienceScore": self.experience_score,
            "educationScore": self.education_score,
            "missingSkills": list(self.missing_skills),
            "recommendations": list(self.recommendations),
            "detailedAnalysis": self.detailed_analysis.to_dict(),
        }


# =============================================================================
# ENTRY POINTS
# =============================================================================


def validate_inputs(candidate_text: str, job_text: str) -> None:
    """
    Reject empty input before scoring.

    Used by callers that accept text from users. calculate_compatibility()
    itself accepts empty text.

    Raises:
        EmptyDocumentError: If either text is missing or whitespace-only
    """
    if not (candidate_text or "").strip() or not (job_text or "").strip():
        raise EmptyDocumentError("Resume text and job description are required")


def calculate_compatibility(candidate_text: str, job_text: str) -> CompatibilityReport:
    """
    Score a resume against a job posting.

    Both texts go through the same extraction pipeline; the job posting is
    treated as just another document.

    Args:
        candidate_text: Resume text
        job_text: Job posting text

    Returns:
        CompatibilityReport for the pair
    """
    return compare_profiles(extract_profile(candidate_text), extract_profile(job_text))


def compare_profiles(candidate: ExtractedProfile, job: ExtractedProfile) -> CompatibilityReport:
    """
    Score a candidate profile against a job profile.

    Args:
        candidate: Profile extracted from the resume
        job: Profile extracted from the job posting

    Returns:
        CompatibilityReport with scores, missing skills and recommendations
    """
    skills_score = score_skills(candidate.skills, job.skills)
    experience_score = score_experience(candidate.experience_phrases, job.experience_phrases)
    education_score = score_education(candidate.education_phrases, job.education_phrases)
    overall_score = round_half_up(
        skills_score * SKILLS_WEIGHT
        + experience_score * EXPERIENCE_WEIGHT
        + education_score * EDUCATION_WEIGHT
    )

    missing_skills = find_missing_skills(candidate.skills, job.skills)
    skills_matched = tuple(skill for skill in candidate.skills if has_match(skill, job.skills))

    report = CompatibilityReport(
        overall_score=overall_score,
        skills_score=skills_score,
        experience_score=experience_score,
        education_score=education_score,
        missing_skills=missing_skills,
        recommendations=build_recommendations(candidate, missing_skills),
        detailed_analysis=DetailedAnalysis(
            skills_matched=skills_matched,
            skills_missing=missing_skills,
            experience_level=determine_experience_level(candidate.experience_phrases),
            education_match=education_score > EDUCATION_MATCH_THRESHOLD,
            strengths=identify_strengths(candidate),
            improvements=identify_improvements(candidate),
        ),
    )
    log_compatibility_result(report)
    return report


# =============================================================================
# DIMENSION SCORES
# =============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def score_skills(candidate_skills, job_skills) -> int:
    """Percentage of job skills matched by at least one candidate skill."""
    if not job_skills:
        return NO_REQUIREMENT_SCORE

    matched = sum(1 for skill in job_skills if has_match(skill, candidate_skills))
    return round_half_up(100 * matched / len(job_skills))


def score_experience(candidate_phrases, job_phrases) -> int:
    if not job_phrases:
        return NO_REQUIREMENT_SCORE
    return EXPERIENCE_PRESENT_SCORE if candidate_phrases else EXPERIENCE_ABSENT_SCORE


def score_education(candidate_phrases, job_phrases) -> int:
    if not job_phrases:
        return NO_REQUIREMENT_SCORE
    return EDUCATION_PRESENT_SCORE if candidate_phrases else EDUCATION_ABSENT_SCORE


def find_missing_skills(candidate_skills, job_skills) -> tuple[str, ...]:
    """Job skills with no matching candidate skill, in job order."""
    return tuple(skill for skill in job_skills if not has_match(skill, candidate_skills))


# =============================================================================
# NARRATIVE
# =============================================================================


def determine_experience_level(experience_phrases) -> str:
    """
    Label seniority from the largest number mentioned in experience phrases.

    Any digit run counts, not only year counts.
    """
    runs = [run.lstrip("0") or "0" for run in _DIGITS.findall(" ".join(experience_phrases))]
    if not runs:
        return ENTRY_LEVEL

    # Compare as strings first; int() refuses digit strings beyond a few thousand chars
    largest = max(runs, key=lambda run: (len(run), run))
    max_years = int(largest) if len(largest) <= MAX_YEARS_DIGITS else math.inf
    if max_years >= SENIOR_MIN_YEARS:
        return SENIOR
    if max_years >= MID_LEVEL_MIN_YEARS:
        return MID_LEVEL
    return JUNIOR


def build_recommendations(candidate: ExtractedProfile, missing_skills) -> tuple[str, ...]:
    recommendations = []

    if missing_skills:
        top_missing = ", ".join(missing_skills[:MAX_SKILLS_IN_RECOMMENDATION])
        recommendations.append(RECOMMEND_MISSING_SKILLS.format(skills=top_missing))

    if not candidate.experience_phrases:
        recommendations.append(RECOMMEND_EXPERIENCE)

    if not candidate.education_phrases:
        recommendations.append(RECOMMEND_EDUCATION)

    if not candidate.certification_phrases:
        recommendations.append(RECOMMEND_CERTIFICATIONS)

    return tuple(recommendations)


def identify_strengths(candidate: ExtractedProfile) -> tuple[str, ...]:
    strengths = []

    if len(candidate.skills) > DIVERSE_SKILL_COUNT:
        strengths.append(STRENGTH_SKILLS)

    if candidate.experience_phrases:
        strengths.append(STRENGTH_EXPERIENCE)

    if candidate.education_phrases:
        strengths.append(STRENGTH_EDUCATION)

    return tuple(strengths)


def identify_improvements(candidate: ExtractedProfile) -> tuple[str, ...]:
    improvements = []

    if len(candidate.skills) < NARROW_SKILL_COUNT:
        improvements.append(IMPROVEMENT_SKILLS)

    if not candidate.certification_phrases:
        improvements.append(IMPROVEMENT_CERTIFICATIONS)

    return tuple(improvements)
