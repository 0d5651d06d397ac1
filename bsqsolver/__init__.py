"""Find and draw a largest empty square on an obstacle map."""

__version__ = "1.0.0"
__all__ = ["cli", "mapfile", "numbering", "square"]