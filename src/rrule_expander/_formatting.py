"""Fixed-width formatting for iCalendar date-time values."""

from __future__ import annotations

from datetime import datetime

from .const import DTSTART_TEMPLATE


def _pad(value: int, width: int = 2) -> str:
    """Zero-pad a calendar field to a fixed width."""
    return str(value).rjust(width, "0")


def format_dtstart(moment: datetime, tzid: str) -> str:
    """Render ``moment``'s wall-clock fields as a ``DTSTART;TZID=...;`` line."""
    return DTSTART_TEMPLATE.format(
        tzid=tzid,
        year=_pad(moment.year, 4),
        month=_pad(moment.month),
        day=_pad(moment.day),
        hour=_pad(moment.hour),
        minute=_pad(moment.minute),
        second=_pad(moment.second),
    )
