"""Styled terminal typography rendered as ANSI strings."""

__version__ = "0.1.0"
__all__ = ["style", "theme", "table", "typography"]