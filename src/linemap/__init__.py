"""linemap: schematic transit line diagrams from route trips and stops."""

__version__ = "0.1.0"
