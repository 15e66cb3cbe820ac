"""Reminders for timers and appointments, kept in a JSON file, with a daemon that alerts when they are due."""

__version__ = "0.1.0"
__all__ = ["__version__"]