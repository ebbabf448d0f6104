"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 60.0
"""Default padding around the entire SVG canvas."""

TITLE_HEIGHT: float = 50.0
"""Vertical space reserved above the diagram for the title."""

LEGEND_GAP: float = 30.0
"""Gap between diagram content and the legend below it."""

# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
LEGEND_LINE_HEIGHT: float = 24.0
"""Vertical height per trip entry in legend."""

LEGEND_PADDING: float = 12.0
"""Internal padding of legend box."""

LEGEND_SWATCH_WIDTH: float = 24.0
"""Width of color swatch line in legend."""

LEGEND_TEXT_GAP: float = 12.0
"""Gap between swatch end and label text."""

LEGEND_CHAR_WIDTH_RATIO: float = 0.55
"""Character width as a fraction of font size for legend text sizing."""

LEGEND_BORDER_RADIUS: int = 6
"""Corner radius for legend background rectangle."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_CHAR_WIDTH_RATIO: float = 0.6
"""Character width as a fraction of font size for label backgrounds."""

LABEL_PAD_X: float = 6.0
"""Horizontal padding of the label background box."""

LABEL_PAD_Y: float = 3.0
"""Vertical padding of the label background box."""
