"""Layout constants used across layout modules.

Centralizes the defaults of the configuration surface so the engine, the
path builders, and the CLI agree on them.
"""

# ---------------------------------------------------------------------------
# Position mapping
# ---------------------------------------------------------------------------
STOP_SPACING: float = 100.0
"""Horizontal distance between consecutive layers."""

LANE_HEIGHT: float = 60.0
"""Vertical distance between consecutive lanes."""

INBOUND_Y: float = 0.0
"""Y of inbound lane 0. Y grows downward; inbound lanes stack upward."""

OUTBOUND_Y: float = 240.0
"""Y of outbound lane 0. Outbound lanes stack downward, below inbound."""

# ---------------------------------------------------------------------------
# Path geometry
# ---------------------------------------------------------------------------
GRID_SIZE: float = 100.0
"""Base grid unit used as the step size for diagonal interpolation."""

LENGTH_EPSILON: float = 0.001
"""Inbound/outbound path lengths closer than this are considered equal."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
LABEL_OFFSET: float = 25.0
"""Vertical distance from stop center to label anchor."""

CHAR_WIDTH: float = 7.0
"""Approximate pixel width of a single character at default font size."""

FONT_HEIGHT: float = 14.0
"""Approximate pixel height of default font."""

LABEL_MARGIN: float = 2.0
"""Overlap detection margin for labels."""

COLLISION_MULTIPLIER: float = 1.8
"""Label offset multiplier when resolving collisions."""
