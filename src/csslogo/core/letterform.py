"""Letterform path construction.

Both letterforms share one skeleton and one control-point convention:
outward tension t1 at A, C, D and F, horizontal tension t2 at the extremes
B and E. They differ only in the middle segment C -> D, which is a straight
line for the open hook and a curve with inward tension t3 for the closed
curl.
"""

from csslogo.config import LogoConfig
from csslogo.core.anchors import derive_anchors
from csslogo.domain import AnchorSet, LetterformKind, PathInstruction
from csslogo.exceptions import MissingTensionError

# Separator between serialized commands in the d attribute
COMMAND_SEPARATOR = " \n"


def build_letterform(
    kind: LetterformKind,
    anchors: AnchorSet,
    t1: float,
    t2: float,
    t3: float | None = None,
) -> tuple[PathInstruction, ...]:
    """Build the path instructions of one letterform.

    Args:
        kind: Open hook ("C") or closed curl ("S")
        anchors: Skeleton anchors from derive_anchors
        t1: Outward tension at A, C, D and F
        t2: Horizontal tension at B and E
        t3: Inward tension at C and D; ignored for the open hook

    Returns:
        Six instructions: move to A, then the A-B, B-C, C-D, D-E and E-F
        segments

    Raises:
        MissingTensionError: If a closed curl is requested without t3
    """
    a, b, c, d, e, f = anchors

    if kind is LetterformKind.OPEN_HOOK:
        middle = PathInstruction.line(d)
    else:
        if t3 is None:
            raise MissingTensionError(kind.value)
        middle = PathInstruction.curve(c.offset(dy=t3), d.offset(dy=-t3), d)

    sign = kind.lower_direction
    return (
        PathInstruction.move(a),
        PathInstruction.curve(a.offset(dy=-t1), b.offset(dx=t2), b),
        PathInstruction.curve(b.offset(dx=-t2), c.offset(dy=-t1), c),
        middle,
        PathInstruction.curve(d.offset(dy=t1), e.offset(dx=sign * t2), e),
        PathInstruction.curve(e.offset(dx=-sign * t2), f.offset(dy=t1), f),
    )


def letterform_for_config(
    kind: LetterformKind, config: LogoConfig
) -> tuple[PathInstruction, ...]:
    """Derive anchors from a config and build the letterform."""
    anchors = derive_anchors(config.w1, config.h1, config.h2, kind)
    return build_letterform(kind, anchors, config.t1, config.t2, config.t3)


def path_data(instructions: tuple[PathInstruction, ...]) -> str:
    """Serialize instructions into an SVG d attribute value."""
    return COMMAND_SEPARATOR.join(i.to_svg() for i in instructions)
