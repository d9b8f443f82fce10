"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from rescore.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, candidate: str = "", job: str = "") -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this scoring session
        candidate: Candidate document label for the provenance header
        job: Job posting label for the provenance header

    Returns:
        Path to log file

    Example:
        from rescore.contexts.targeting.logger import setup_targeting_logger, _log_info

        log_file = setup_targeting_logger(log_dir, candidate="resume.txt", job="job.txt")
        _log_info("Scoring...")
    """
    return _setup_logger(
        context_name="target",
        log_dir=log_dir,
        extra_provenance={"Candidate": candidate or "-", "Job posting": job or "-"},
    )


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_compatibility_result(report, verbose: bool = False) -> None:
    """
    Log the scores of a compatibility report.

    Args:
        report: CompatibilityReport from compare_profiles()
        verbose: Also log every recommendation at info level
    """
    _log_debug(
        f"Scores: overall={report.overall_score} skills={report.skills_score} "
        f"experience={report.experience_score} education={report.education_score}"
    )
    if report.missing_skills:
        _log_debug(f"  Missing skills: {', '.join(report.missing_skills)}")

    if verbose:
        _log_info(f"Overall compatibility: {report.overall_score}/100")
        for i, recommendation in enumerate(report.recommendations, 1):
            _log_info(f"  Recommendation {i}: {recommendation}")
