"""Terminal canvas for drawing, cloning, undoing and exporting simple shapes."""

__version__ = "0.1.0"

__all__ = ["__version__"]