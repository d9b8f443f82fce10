"""
Shared utilities for RESCORE.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Text report formatting
- Timestamps for log sessions
"""

from rescore.utils.timestamp import now

__all__ = ["now"]
