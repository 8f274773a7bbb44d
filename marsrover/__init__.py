"""Rover squad simulation on a rectangular plateau, with a command-line runner."""

__version__ = "0.1.0"
__all__ = ["app", "cli", "config", "parser", "rover"]