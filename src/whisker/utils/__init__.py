"""Utility modules for Whisker.

Provides:
- logger: get_logger for logging
"""

from whisker.utils.logger import get_logger

__all__ = [
    "get_logger",
]
