"""Daily puzzle solutions with a command-line runner."""

__version__ = "0.1.0"