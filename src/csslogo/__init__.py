"""csslogo - Generate the CSS logo as a scalable vector graphic.

csslogo computes the control points of three stylized letterforms
("C", "S", "S") from a handful of numeric parameters and assembles them
into a self-contained SVG document on a rounded-rectangle frame.

Example:
    $ csslogo out/

This will create css.svg, css.square.svg, css.light.svg and css.dark.svg
in the out/ directory.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
