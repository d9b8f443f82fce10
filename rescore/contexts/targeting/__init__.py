"""
Targeting Context

Responsibilities:
- Decides whether resume skills cover job skills
- Scores skills, experience and education with fixed weights
- Produces missing skills, strengths, improvements and recommendations

Owns: Skill equivalence, scoring weights, report structure
Never: Reads files or extracts signals from raw text directly
"""

from rescore.contexts.targeting.compatibility import (
    CompatibilityReport,
    DetailedAnalysis,
    calculate_compatibility,
    compare_profiles,
    validate_inputs,
)
from rescore.contexts.targeting.report import format_report
from rescore.contexts.targeting.skill_matching import is_skill_match

__all__ = [
    "CompatibilityReport",
    "DetailedAnalysis",
    "calculate_compatibility",
    "compare_profiles",
    "format_report",
    "is_skill_match",
    "validate_inputs",
]
