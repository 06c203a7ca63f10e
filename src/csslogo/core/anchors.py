"""Anchor point derivation shared by both letterform builders."""

from csslogo.domain import AnchorSet, LetterformKind, Point


def derive_anchors(
    w1: float,
    h1: float,
    h2: float,
    kind: LetterformKind = LetterformKind.CLOSED_CURL,
) -> AnchorSet:
    """Derive the six anchors of a letterform skeleton.

    A, C, D and F sit at +-w1 horizontally and +-h1 vertically; B and E are
    the vertical extremes at +-(h1 + h2) on the center line. The two kinds
    differ only in which side D and F sit on: the open hook keeps D under C
    and F under A, the closed curl swaps them.

    Inputs are not validated; zero sizes simply collapse the shape.

    Args:
        w1: Half-width
        h1: Inner half-height
        h2: Outer height added to h1 for B and E
        kind: Letterform kind

    Returns:
        AnchorSet with points A through F
    """
    lower_x = -w1 if kind is LetterformKind.OPEN_HOOK else w1
    return AnchorSet(
        a=Point(w1, -h1),
        b=Point(0, -(h1 + h2)),
        c=Point(-w1, -h1),
        d=Point(lower_x, h1),
        e=Point(0, h1 + h2),
        f=Point(-lower_x, h1),
    )
