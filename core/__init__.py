"""
Core reminder runtime: formatter, sink chain, lifecycle and scheduler.
"""

from .errors import (  # noqa: F401
    ConfigurationError,
    DirectiveEvaluationError,
    ReminderError,
    SinkDeliveryError,
    StateTransitionError,
)
from .formatter import FormatDirective, render  # noqa: F401
from .lifecycle import LifecycleState, ReminderLifecycle  # noqa: F401
from .scheduler import ReminderScheduler  # noqa: F401
from .settings import ReminderConfig  # noqa: F401
from .sinks import NotificationSink, SinkChain  # noqa: F401
