"""Utility modules for autolink.

Provides:
- logger: get_logger for logging
"""

from autolink.utils.logger import get_logger

__all__ = [
    "get_logger",
]
