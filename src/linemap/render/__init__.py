"""SVG rendering of computed line diagrams."""

from linemap.render.svg import render_svg

__all__ = ["render_svg"]
