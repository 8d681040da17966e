"""Tool server for searching vacation rentals on e-chalupy.cz."""

__version__ = "1.0.0"
