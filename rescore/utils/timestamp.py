"""Timestamp helper for naming log sessions."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a compact, filename-safe stamp.

    Returns:
        Timestamp like "20260114_183540"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
