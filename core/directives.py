"""
Default format directives bound to an activity source.
"""

from __future__ import annotations

from typing import Dict

from core.activity import ActivitySource
from core.formatter import Expression

DEFAULT_MESSAGE_TEMPLATE = "You are working on %h for %c"
DEFAULT_EMPTY_TEXT = "Drink some tea and start the next task"


def format_duration(minutes: float) -> str:
    """Format a minute count as ``H:MM``."""
    total = max(0, int(minutes))
    hours, remainder = divmod(total, 60)
    return f"{hours}:{remainder:02d}"


def default_directives(source: ActivitySource) -> Dict[str, Expression]:
    """
    %h -- current task label
    %c -- elapsed clocked time as H:MM
    %m -- elapsed clocked time in whole minutes
    """
    return {
        "h": source.current_label,
        "c": lambda: format_duration(source.elapsed_minutes()),
        "m": lambda: int(source.elapsed_minutes()),
    }
