"""Utility modules for markfmt.

Provides:
- logger: get_logger for logging
"""

from markfmt.utils.logger import get_logger

__all__ = [
    "get_logger",
]
