"""Output layer for csslogo.

Key classes:
- LogoWriter: Persist rendered documents to files or streams
"""

from csslogo.io.writer import LogoWriter

__all__ = [
    "LogoWriter",
]
