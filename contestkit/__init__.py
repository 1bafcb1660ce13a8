"""Solutions to short competitive programming problems, grouped into week1 to week4."""

__version__ = "0.1.0"
__all__ = ["week1", "week2", "week3", "week4"]