"""
clock_reminder package.

Hosts the desktop entry point and the logging setup shared by the reminder
runtime in ``core``.
"""

__all__ = [
    "main",
    "logger",
]
