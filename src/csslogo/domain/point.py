"""Core geometric types for letterform construction.

This module defines the fundamental geometric types used throughout csslogo:
- Point: A 2D coordinate in SVG user space
- LetterformKind: Enum for the two letterform variants
- AnchorSet: The six labeled anchors (A-F) of a letterform skeleton
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


def format_number(value: float) -> str:
    """Serialize a coordinate for SVG output.

    Integral values are written without a fractional part and negative
    zero is written as "0". Everything else uses the shortest repr that
    round-trips.

    Args:
        value: Coordinate value

    Returns:
        Text representation of the value
    """
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D SVG user space (y grows downward).

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> "Point":
        """Return a new point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def format(self) -> str:
        """Serialize as an "x,y" pair."""
        return f"{format_number(self.x)},{format_number(self.y)}"


class LetterformKind(Enum):
    """Letterform variant.

    - OPEN_HOOK: the "C" - a straight stroke joins the two bowls
    - CLOSED_CURL: the "S" - a tension-controlled curve joins the two bowls
    """

    OPEN_HOOK = "open-hook"
    CLOSED_CURL = "closed-curl"
    C = "open-hook"
    S = "closed-curl"

    @property
    def css_class(self) -> str:
        """Class attribute used on the emitted path element."""
        return "C" if self is LetterformKind.OPEN_HOOK else "S"

    @property
    def lower_direction(self) -> int:
        """Horizontal sign of the lower half's control points at E.

        The lower bowl opens toward the side D sits on: left for the
        open hook, right for the closed curl.
        """
        return -1 if self is LetterformKind.OPEN_HOOK else 1


@dataclass(frozen=True, slots=True)
class AnchorSet:
    """The six anchors of a letterform skeleton.

    ```
       ╭──╴B╶──╮
       │       │
       C       A        A, C at y = -h1
       │                B at y = -(h1 + h2)
       ╰───────╮        D, F at y = +h1
               │        E at y = +(h1 + h2)
       F       D        (S-shape shown; the C-shape swaps D and F)
       │       │
       ╰──╴E╶──╯
    ```

    Attributes:
        a: Upper right, start of the path
        b: Top extreme
        c: Upper left
        d: Lower anchor joined to C by the middle segment
        e: Bottom extreme
        f: Lower anchor, end of the path
    """

    a: Point
    b: Point
    c: Point
    d: Point
    e: Point
    f: Point

    def __iter__(self) -> Iterator[Point]:
        return iter((self.a, self.b, self.c, self.d, self.e, self.f))
