"""Core generation algorithms for csslogo.

This module contains:

- Anchor derivation (six skeleton points from three sizes)
- Letterform path construction (open hook "C", closed curl "S")
- Document assembly (frame, group, three placed letterforms)
- Orchestration of rendering and writing variants

Everything except LogoProcessor is pure: no I/O, no shared state, and
identical input always yields identical output.

Key functions:
- derive_anchors: Compute anchors A-F for a letterform kind
- build_letterform: Build the path instructions of one letterform
- render_logo: Render a full SVG document from a LogoConfig

Key classes:
- LogoProcessor: Renders variants and writes them to disk
"""

from csslogo.core.anchors import derive_anchors
from csslogo.core.document import (
    frame_path,
    group_translation,
    placements,
    render_logo,
    stride,
)
from csslogo.core.letterform import build_letterform, letterform_for_config, path_data
from csslogo.core.processor import LogoProcessor

__all__ = [
    # Processor classes
    "LogoProcessor",
    # Geometry functions
    "build_letterform",
    "derive_anchors",
    "frame_path",
    "group_translation",
    "letterform_for_config",
    "path_data",
    "placements",
    "render_logo",
    "stride",
]
