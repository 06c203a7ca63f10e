"""Domain models for csslogo.

This module contains the value types the geometry core passes between
stages. All models are immutable (frozen dataclasses) and carry no
behavior beyond construction and serialization.

Key classes:
- Point: A 2D coordinate
- LetterformKind: Open hook ("C") or closed curl ("S")
- AnchorSet: Six labeled anchors of a letterform skeleton
- PathCommand / PathInstruction: Path-drawing instructions
"""

from csslogo.domain.path import PathCommand, PathInstruction
from csslogo.domain.point import AnchorSet, LetterformKind, Point, format_number

__all__: list[str] = [
    # Enums
    "LetterformKind",
    "PathCommand",
    # Core types
    "AnchorSet",
    "PathInstruction",
    "Point",
    # Serialization
    "format_number",
]
