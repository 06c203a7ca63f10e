"""SVG document assembly.

Positions three letterforms (C, S, S) side by side on a framed canvas and
serializes the result in a single pass. Rendering is a pure function of
the configuration: identical configs yield byte-identical documents.
"""

from xml.sax.saxutils import escape

from csslogo.config import CanvasProfile, LogoConfig
from csslogo.core.letterform import letterform_for_config, path_data
from csslogo.domain import LetterformKind, format_number

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Identifier used for metadata ids when the config carries none
DEFAULT_IDENTIFIER = "logo"

# Source order of the letterforms; the last one sits at offset 0
LETTERFORMS: tuple[LetterformKind, ...] = (
    LetterformKind.OPEN_HOOK,
    LetterformKind.CLOSED_CURL,
    LetterformKind.CLOSED_CURL,
)

_ATTRIBUTE_ENTITIES = {'"': "&quot;"}


def _attr(value: str) -> str:
    return escape(value, _ATTRIBUTE_ENTITIES)


def _num(value: float) -> str:
    return format_number(value)


def stride(config: LogoConfig) -> float:
    """Horizontal step between adjacent letterforms: full width plus kerning."""
    return config.w1 * 2 + config.k


def placements(config: LogoConfig) -> list[tuple[LetterformKind, float]]:
    """Horizontal offset of each letterform, in source order.

    Returns:
        (kind, x_offset) pairs: the C at -2 strides, then the two S shapes
        at -1 and 0 strides
    """
    step = stride(config)
    count = len(LETTERFORMS)
    return [
        (kind, -((count - 1 - index) * step)) for index, kind in enumerate(LETTERFORMS)
    ]


def frame_path(profile: CanvasProfile, r: float) -> str:
    """Path data of the background frame.

    The frame spans the whole canvas with the top-left corner square and
    the other three rounded by r. A zero radius emits no arcs at all.

    Args:
        profile: Canvas profile giving the edge coordinates
        r: Corner radius

    Returns:
        SVG path data, one command per line
    """
    lo, hi = profile.min, profile.max
    if r == 0:
        commands = [
            f"M{_num(lo)},{_num(lo)}",
            f"H{_num(hi)}",
            f"V{_num(hi)}",
            f"H{_num(lo)}",
            "Z",
        ]
    else:
        arc = f"A {_num(r)} {_num(r)} 0 0 1"
        commands = [
            f"M{_num(lo)},{_num(lo)}",
            f"H{_num(hi - r)}",
            f"{arc} {_num(hi)} {_num(lo + r)}",
            f"V{_num(hi - r)}",
            f"{arc} {_num(hi - r)} {_num(hi)}",
            f"H{_num(lo + r)}",
            f"{arc} {_num(lo)} {_num(hi - r)}",
            "Z",
        ]
    return "\n      ".join(commands)


def group_translation(config: LogoConfig) -> tuple[float, float]:
    """Translation anchoring the rightmost letterform at the frame offset."""
    hi = config.profile.max
    return (
        hi - config.o - config.w1,
        hi - config.h1 - config.h2 - config.o,
    )


def _root_open(config: LogoConfig) -> str:
    profile = config.profile
    attrs = [
        f'xmlns="{SVG_NAMESPACE}"',
        f'viewBox="{_num(profile.min)} {_num(profile.min)} '
        f'{profile.size} {profile.size}"',
        f'width="{profile.size}"',
        'fill="none"',
    ]
    if config.id is not None:
        attrs.append(f'id="{_attr(config.id)}"')
    if config.has_metadata:
        attrs.append('role="img"')
        attrs.append(f'aria-labelledby="{_attr(" ".join(_metadata_ids(config)))}"')
    return f"<svg {' '.join(attrs)}>"


def _metadata_ids(config: LogoConfig) -> list[str]:
    ident = config.id if config.id is not None else DEFAULT_IDENTIFIER
    ids = []
    if config.title is not None:
        ids.append(f"{ident}-title")
    if config.description is not None:
        ids.append(f"{ident}-desc")
    return ids


def _metadata(config: LogoConfig) -> list[str]:
    ident = config.id if config.id is not None else DEFAULT_IDENTIFIER
    lines = []
    if config.title is not None:
        lines.append(f'  <title id="{_attr(ident)}-title">{escape(config.title)}</title>')
    if config.description is not None:
        lines.append(
            f'  <desc id="{_attr(ident)}-desc">{escape(config.description)}</desc>'
        )
    return lines


def _letterform_element(kind: LetterformKind, offset: float, config: LogoConfig) -> str:
    d = path_data(letterform_for_config(kind, config))
    return (
        f'    <path class="{kind.css_class}"\n'
        f'      transform="translate({_num(offset)} 0)"\n'
        f'      d="{d}"\n'
        f"    />"
    )


def render_logo(config: LogoConfig | None = None) -> str:
    """Render the logo as a self-contained SVG document.

    Args:
        config: Logo configuration (default: LogoConfig())

    Returns:
        The SVG document text
    """
    if config is None:
        config = LogoConfig()

    gx, gy = group_translation(config)
    lines = [_root_open(config)]
    lines.extend(_metadata(config))
    lines.append(
        f'  <path d="{frame_path(config.profile, config.r)}"\n'
        f'  fill="{_attr(config.bg)}" />'
    )
    lines.append(
        f'  <g class="CSS"\n'
        f'    stroke-width="{_num(config.s)}" stroke="{_attr(config.fg)}"\n'
        f'    transform="translate({_num(gx)} {_num(gy)})"\n'
        f"  >"
    )
    for kind, offset in placements(config):
        lines.append(_letterform_element(kind, offset, config))
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines) + "\n"
