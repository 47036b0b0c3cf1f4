"""Expand iCalendar recurrence rules into Unix-millisecond occurrences."""

from .const import __version__
from ._engine import DateutilEngine, RecurrenceEngine
from ._timezone import reinterpret_fields
from .exceptions import RuleSyntaxError, TimezoneResolutionError
from .expander import (
    RecurrenceExpander,
    format_start,
    generate_all,
    generate_between,
)

__all__ = [
    "__version__",
    "DateutilEngine",
    "RecurrenceEngine",
    "RecurrenceExpander",
    "RuleSyntaxError",
    "TimezoneResolutionError",
    "format_start",
    "generate_all",
    "generate_between",
    "reinterpret_fields",
]
