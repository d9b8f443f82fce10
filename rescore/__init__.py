"""
RESCORE - Rule-based Evaluation of Skills, Certifications, Observed Roles and Education

A deterministic compatibility engine that reads a candidate resume and a job
posting as plain text and reports how well they line up.

Architecture:
- Intake Context: Plain-text loading and profile extraction
- Targeting Context: Skill matching, weighted scoring and recommendations

Log output is off until rescore.utils.logger.setup_logger() starts a session.
"""

from loguru import logger

__version__ = "0.1.0"

logger.disable("rescore")
