"""
Shared Utilities

Helpers used by the fare scripts.
"""

from .logging_config import setup_logging

__all__ = [
    "setup_logging",
]
