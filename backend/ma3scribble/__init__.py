"""PNG → grandMA3 scribble conversion service."""

__version__ = "0.1.0"
