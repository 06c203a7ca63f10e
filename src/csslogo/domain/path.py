"""Path instruction types.

A letterform is an ordered sequence of SVG path commands. Only the three
commands the logo needs are modeled: move, line and cubic curve.
"""

from dataclasses import dataclass
from enum import Enum

from csslogo.domain.point import Point


class PathCommand(Enum):
    """SVG path command, valued by its command letter."""

    MOVE = "M"
    LINE = "L"
    CURVE = "C"

    @property
    def arity(self) -> int:
        """Number of coordinate pairs the command takes."""
        return 3 if self is PathCommand.CURVE else 1


@dataclass(frozen=True, slots=True)
class PathInstruction:
    """One drawing command with its coordinate pairs.

    Attributes:
        command: The path command
        points: Coordinate pairs; the end point is always last
    """

    command: PathCommand
    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        if len(self.points) != self.command.arity:
            raise ValueError(
                f"{self.command.name} takes {self.command.arity} point(s), "
                f"got {len(self.points)}"
            )

    @classmethod
    def move(cls, to: Point) -> "PathInstruction":
        return cls(PathCommand.MOVE, (to,))

    @classmethod
    def line(cls, to: Point) -> "PathInstruction":
        return cls(PathCommand.LINE, (to,))

    @classmethod
    def curve(cls, control1: Point, control2: Point, to: Point) -> "PathInstruction":
        return cls(PathCommand.CURVE, (control1, control2, to))

    def to_svg(self) -> str:
        """Serialize as path data, e.g. "C 18,-38 12,-50 0,-50"."""
        return " ".join([self.command.value, *(p.format() for p in self.points)])
