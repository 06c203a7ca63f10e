"""Utility functions for csslogo.

This module provides:

- Logging setup and configuration
- Generation statistics
"""

from csslogo.utils.logging import GenerationStats, configure_logging

__all__ = [
    "GenerationStats",
    "configure_logging",
]
