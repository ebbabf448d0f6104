"""Layout engine: layering, lanes, coordinate mapping and path geometry."""

from linemap.layout.engine import build_trip_paths, compute_layout

__all__ = ["build_trip_paths", "compute_layout"]
