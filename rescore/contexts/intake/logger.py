"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
Intake runs inside scoring sessions, so it has no setup function of its own;
output appears once setup_logger() has started a session.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_profile_extracted(profile, text_length: int) -> None:
    """
    Log a one-line summary of an extraction at debug level.

    Args:
        profile: ExtractedProfile just produced
        text_length: Number of characters scanned
    """
    _log_debug(
        f"Extracted profile from {text_length} chars: "
        f"{len(profile.skills)} skills, "
        f"{len(profile.experience_phrases)} experience, "
        f"{len(profile.education_phrases)} education, "
        f"{len(profile.certification_phrases)} certification phrases"
    )
