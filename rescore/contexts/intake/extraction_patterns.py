"""
Skill dictionary and regex patterns for profile extraction.

Every pattern here is applied to LOWERCASED text, so none of them carry
re.IGNORECASE. Pattern order inside each convenience list is significant:
phrases are reported pattern by pattern, then by position in the text.

Pattern classes follow the intake convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Convenience lists for iteration
"""

import re
from dataclasses import dataclass

# =============================================================================
# SKILL DICTIONARY
# =============================================================================

# Canonical casing is what ends up in ExtractedProfile.skills.
# Matching is a plain substring test, so short names ("Go", "AI") also hit
# inside longer words.
SKILL_DICTIONARY = (
    # Languages and frontend
    "JavaScript",
    "TypeScript",
    "React",
    "Vue",
    "Angular",
    "Node.js",
    "Python",
    "Java",
    # Backend frameworks and data stores
    "Spring",
    "Django",
    "Flask",
    "SQL",
    "NoSQL",
    "MongoDB",
    "PostgreSQL",
    "MySQL",
    # Cloud and delivery
    "AWS",
    "Azure",
    "Google Cloud",
    "Docker",
    "Kubernetes",
    "Git",
    "CI/CD",
    "REST",
    "GraphQL",
    # Web tooling
    "HTML",
    "CSS",
    "SASS",
    "Redux",
    "Express",
    "Jest",
    "Cypress",
    "Webpack",
    "Vite",
    "Next.js",
    "Nuxt.js",
    "Vue.js",
    "React Native",
    "Flutter",
    "Swift",
    "Kotlin",
    # Systems and other ecosystems
    "C++",
    "C#",
    ".NET",
    "Ruby",
    "Rails",
    "PHP",
    "Laravel",
    "Go",
    "Rust",
    "Scala",
    # Data and ML
    "Machine Learning",
    "AI",
    "Data Science",
    "TensorFlow",
    "PyTorch",
    "Pandas",
    "NumPy",
    # Process, design and management
    "Agile",
    "Scrum",
    "DevOps",
    "Microservices",
    "API Design",
    "Database Design",
    "UI/UX",
    "Figma",
    "Adobe Creative Suite",
    "Project Management",
    "Leadership",
)

# Free-text skill lists are split on these separators
SKILL_LIST_SEPARATORS = re.compile(r"[,;&]")

# Free-text tokens must be longer than this after trimming
MIN_SKILL_TOKEN_LENGTH = 2


# =============================================================================
# SKILL CUE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SkillCuePatterns:
    """
    Phrases that introduce a free-text list of skills.

    Group 1 captures the list up to the next period.
    """

    # "proficient in python, go" / "knowledge of docker & helm"
    CUE_PHRASE: re.Pattern = re.compile(
        r"(?:proficient in|experienced with|skilled in|knowledge of)\s+([^.]+)"
    )

    # "technologies: kafka; spark" / "tools: jira, confluence"
    LABEL: re.Pattern = re.compile(r"(?:technologies|tools|languages):\s*([^.]+)")


SKILL_CUE_PATTERNS = [
    SkillCuePatterns.CUE_PHRASE,
    SkillCuePatterns.LABEL,
]


# =============================================================================
# EXPERIENCE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ExperiencePatterns:
    """
    Patterns for experience indicators.

    The two year patterns overlap on purpose: "5 years experience" satisfies
    both and is reported twice. Both only start at the first digit of a run,
    so a long run of digits is scanned once instead of once per position.
    """

    # "5 years experience", "3+ years of experience"
    YEARS: re.Pattern = re.compile(r"(?<!\d)(\d+)\+?\s*years?\s+(?:of\s+)?experience")

    # "10 years of professional work experience"
    YEARS_QUALIFIED: re.Pattern = re.compile(
        r"(?<!\d)(\d+)\+?\s*years?\s+(?:of\s+)?(?:professional\s+)?(?:work\s+)?experience"
    )

    # "worked as a data engineer at acme"
    ROLE_CUE: re.Pattern = re.compile(r"(?:worked as|position as|role as|served as)\s+([^.]+)")

    # "senior software engineer" - letters and whitespace only
    SENIORITY_TITLE: re.Pattern = re.compile(r"(?:senior|junior|lead|principal)\s+([a-z\s]+)")


YEARS_PATTERNS = [
    ExperiencePatterns.YEARS,
    ExperiencePatterns.YEARS_QUALIFIED,
]

TITLE_PATTERNS = [
    ExperiencePatterns.ROLE_CUE,
    ExperiencePatterns.SENIORITY_TITLE,
]

EXPERIENCE_PATTERNS = YEARS_PATTERNS + TITLE_PATTERNS


# =============================================================================
# EDUCATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class EducationPatterns:
    """
    Patterns for degrees and institutions.
    """

    # "bachelor of science", "degree engineering"
    DEGREE_FIELD: re.Pattern = re.compile(
        r"(?:bachelor|master|phd|doctorate|degree|diploma|certificate)\s+(?:of\s+)?"
        r"(?:science|arts|engineering|business|computer science)"
    )

    # "bs in physics", "mba in finance"
    DEGREE_ABBREVIATION: re.Pattern = re.compile(r"(?:bs|ba|ms|ma|mba|phd)\s+in\s+([^.]+)")

    # "university of michigan"
    INSTITUTION: re.Pattern = re.compile(r"(?:university|college|institute)\s+of\s+([^.]+)")


EDUCATION_PATTERNS = [
    EducationPatterns.DEGREE_FIELD,
    EducationPatterns.DEGREE_ABBREVIATION,
    EducationPatterns.INSTITUTION,
]


# =============================================================================
# CERTIFICATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class CertificationPatterns:
    """
    Patterns for professional certifications.
    """

    # "certified in project management"
    CERTIFIED_IN: re.Pattern = re.compile(r"(?:certified|certification)\s+in\s+([^.]+)")

    # "aws certified", "oracle certification"
    VENDOR: re.Pattern = re.compile(
        r"(?:aws|azure|google cloud|cisco|microsoft|oracle)\s+(?:certified|certification)"
    )

    # Bare acronyms
    ACRONYM: re.Pattern = re.compile(r"(?:pmp|cissp|cisa|cism|comptia)")


CERTIFICATION_PATTERNS = [
    CertificationPatterns.CERTIFIED_IN,
    CertificationPatterns.VENDOR,
    CertificationPatterns.ACRONYM,
]
