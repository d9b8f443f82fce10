"""
Session logging for rescore scripts.

The library is silent on import: rescore/__init__.py disables loguru output
for the "rescore" namespace, and setup_logger() turns it back on for a
scripted session. Context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

import rescore

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(context_name: str, log_dir: Path, extra_provenance: dict = None) -> Path:
    """
    Start a logging session for one context.

    Replaces any existing sinks with a DEBUG file sink at
    log_dir/{context_name}.log and an INFO console sink, re-enables the
    rescore namespace, and writes a provenance header.

    Args:
        context_name: Context identifier, also the log file stem (e.g. "target")
        log_dir: Directory for this session, created if missing
        extra_provenance: Additional key-value pairs for the provenance header

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)
    logger.enable("rescore")

    log_provenance(
        {
            "rescore": rescore.__version__,
            "Context": context_name,
            "Session": log_dir,
            **(extra_provenance or {}),
        }
    )

    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Log the command line, working directory and Python version, then extra_context."""
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.info(f"{key}: {value}")

    logger.info("=" * 80)
