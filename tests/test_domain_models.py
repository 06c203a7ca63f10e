"""Tests for domain models to verify they work correctly."""

import pytest

from csslogo.domain import (
    AnchorSet,
    LetterformKind,
    PathCommand,
    PathInstruction,
    Point,
    format_number,
)


class TestFormatNumber:
    """Tests for coordinate serialization."""

    def test_integral_float(self) -> None:
        """Integral floats print without a fractional part."""
        assert format_number(18.0) == "18"
        assert format_number(-26.0) == "-26"

    def test_int(self) -> None:
        assert format_number(120) == "120"

    def test_negative_zero(self) -> None:
        """Negative zero prints as plain zero."""
        assert format_number(-0.0) == "0"

    def test_fraction(self) -> None:
        assert format_number(1.5) == "1.5"
        assert format_number(-0.25) == "-0.25"

    def test_shortest_repr(self) -> None:
        """Fractions use the shortest round-tripping form."""
        assert format_number(0.1 + 0.2) == "0.30000000000000004"


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        p = Point(18, -26)
        assert p.x == 18
        assert p.y == -26

    def test_offset_returns_new_point(self) -> None:
        """Offsetting leaves the original untouched."""
        p = Point(0, -50)
        q = p.offset(dx=12)
        assert q == Point(12, -50)
        assert p == Point(0, -50)

    def test_offset_vertical(self) -> None:
        assert Point(18, -26).offset(dy=-12) == Point(18, -38)

    def test_format(self) -> None:
        assert Point(18, -26).format() == "18,-26"
        assert Point(0.5, -0.0).format() == "0.5,0"

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestLetterformKind:
    """Tests for LetterformKind enum."""

    def test_aliases(self) -> None:
        assert LetterformKind.C is LetterformKind.OPEN_HOOK
        assert LetterformKind.S is LetterformKind.CLOSED_CURL

    def test_css_class(self) -> None:
        assert LetterformKind.OPEN_HOOK.css_class == "C"
        assert LetterformKind.CLOSED_CURL.css_class == "S"

    def test_lower_direction(self) -> None:
        assert LetterformKind.OPEN_HOOK.lower_direction == -1
        assert LetterformKind.CLOSED_CURL.lower_direction == 1

    def test_only_two_members(self) -> None:
        assert len(list(LetterformKind)) == 2


class TestAnchorSet:
    """Tests for AnchorSet class."""

    def _anchors(self) -> AnchorSet:
        return AnchorSet(
            a=Point(1, 1),
            b=Point(2, 2),
            c=Point(3, 3),
            d=Point(4, 4),
            e=Point(5, 5),
            f=Point(6, 6),
        )

    def test_iteration_order(self) -> None:
        assert [p.x for p in self._anchors()] == [1, 2, 3, 4, 5, 6]

    def test_unpacking(self) -> None:
        a, _, _, _, _, f = self._anchors()
        assert a == Point(1, 1)
        assert f == Point(6, 6)


class TestPathInstruction:
    """Tests for PathInstruction class."""

    def test_move(self) -> None:
        instruction = PathInstruction.move(Point(18, -26))
        assert instruction.command is PathCommand.MOVE
        assert instruction.to_svg() == "M 18,-26"

    def test_line(self) -> None:
        assert PathInstruction.line(Point(-18, 26)).to_svg() == "L -18,26"

    def test_curve(self) -> None:
        instruction = PathInstruction.curve(Point(18, -38), Point(12, -50), Point(0, -50))
        assert instruction.to_svg() == "C 18,-38 12,-50 0,-50"
        assert instruction.points[-1] == Point(0, -50)

    def test_arity_checked(self) -> None:
        """Wrong number of points is rejected."""
        with pytest.raises(ValueError, match="CURVE takes 3"):
            PathInstruction(PathCommand.CURVE, (Point(0, 0),))

    def test_command_arity(self) -> None:
        assert PathCommand.MOVE.arity == 1
        assert PathCommand.LINE.arity == 1
        assert PathCommand.CURVE.arity == 3
