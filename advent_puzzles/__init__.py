"""Solutions to seventeen days of programming puzzles, one module per day."""

__version__ = "0.1.0"