"""Expand RRULE text into occurrence timestamps and format DTSTART lines."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo

from ._engine import DateutilEngine, RecurrenceEngine
from ._formatting import format_dtstart
from ._timezone import (
    UTC_ZONE,
    from_millis,
    local_zone_name,
    reinterpret_fields,
    resolve_zone,
    to_millis,
)
from .const import LOCAL, UTC

_LOGGER = logging.getLogger(__name__)

WindowQuery = Callable[[int, int], list[int]]


class RecurrenceExpander:
    """Turns recurrence rules into Unix-millisecond occurrence lists.

    dateutil hands back occurrences whose wall-clock fields are labelled UTC
    (or carry no zone at all). With a display zone of ``"UTC"`` those
    instants are returned as they are. Any other display zone only selects
    the shifted mode: the fields are kept and moved into the host zone, so
    a 09:00 occurrence stays 09:00 on the host's clock.

    Usage::

        expander = RecurrenceExpander()
        expander.generate_all(
            "DTSTART:20240101T090000Z\\nRRULE:FREQ=DAILY;COUNT=3",
            "Europe/Berlin",
        )
        in_window = expander.generate_between(rule_text, "UTC")
        in_window(start_ms, end_ms)
    """

    def __init__(self, engine: RecurrenceEngine | None = None) -> None:
        self._engine = engine or DateutilEngine()

    def generate_all(self, rule_text: str, display_timezone: str) -> list[int]:
        """Return every occurrence of a bounded rule.

        The rule must carry COUNT or UNTIL; an unbounded rule never finishes
        expanding.

        Raises:
            ValueError: If the rule text cannot be parsed.
            zoneinfo.ZoneInfoNotFoundError: If the host zone is unknown.
        """
        zone = _display_zone(display_timezone)
        rule = self._engine.parse(rule_text)
        occurrences = self._engine.expand_all(rule)
        _LOGGER.debug(
            "Expanded %d occurrences for display zone %s",
            len(occurrences), display_timezone,
        )
        return [_shift(occ, zone) for occ in occurrences]

    def generate_between(self, rule_text: str, display_timezone: str) -> WindowQuery:
        """Bind a rule and zone; the result answers inclusive window queries.

        The rule is parsed here, so a malformed rule fails on this call and
        not on the first window. Nothing is expanded until a window is given.
        """
        zone = _display_zone(display_timezone)
        rule = self._engine.parse(rule_text)

        def between(window_start: int, window_end: int) -> list[int]:
            start = _to_rule_space(window_start, zone)
            end = _to_rule_space(window_end, zone)
            try:
                occurrences = self._engine.expand_within(rule, start, end)
            except TypeError:
                # Naive DTSTART: dateutil cannot compare it with aware bounds.
                start = start.replace(tzinfo=None)
                end = end.replace(tzinfo=None)
                occurrences = self._engine.expand_within(rule, start, end)
            _LOGGER.debug(
                "Found %d occurrences between %s and %s",
                len(occurrences), start, end,
            )
            return [_shift(occ, zone) for occ in occurrences]

        return between

    def format_start(self, posix_millis: int, timezone: str | None = None) -> str:
        """Format an instant as ``DTSTART;TZID=<zone>:YYYYMMDDThhmmss;``.

        Without a zone (all-day events) the host zone is used and its IANA
        name is written as the TZID.
        """
        tzid = local_zone_name() if timezone is None or timezone == LOCAL else timezone
        moment = from_millis(posix_millis, resolve_zone(tzid))
        return format_dtstart(moment, tzid)


# --------------------------------------------------------------------------- #
#  Shift helpers
# --------------------------------------------------------------------------- #


def _display_zone(name: str) -> ZoneInfo:
    """Zone the occurrence fields are reattached to: UTC, or else the host."""
    if name == UTC:
        return UTC_ZONE
    return resolve_zone(LOCAL)


def _shift(occurrence: datetime, zone: ZoneInfo) -> int:
    """Map an engine occurrence to the Unix-ms instant shown to the caller."""
    if zone is UTC_ZONE:
        return to_millis(occurrence)
    return to_millis(reinterpret_fields(occurrence, UTC_ZONE, zone))


def _to_rule_space(ts_ms: int, zone: ZoneInfo) -> datetime:
    """Inverse of ``_shift`` for window bounds.

    The bound's wall-clock fields in ``zone`` are relabelled UTC.
    """
    return reinterpret_fields(from_millis(ts_ms), zone, UTC_ZONE)


# --------------------------------------------------------------------------- #
#  Module-level shortcuts
# --------------------------------------------------------------------------- #

_DEFAULT = RecurrenceExpander()


def generate_all(rule_text: str, display_timezone: str) -> list[int]:
    """Shortcut for ``RecurrenceExpander().generate_all``."""
    return _DEFAULT.generate_all(rule_text, display_timezone)


def generate_between(rule_text: str, display_timezone: str) -> WindowQuery:
    """Shortcut for ``RecurrenceExpander().generate_between``."""
    return _DEFAULT.generate_between(rule_text, display_timezone)


def format_start(posix_millis: int, timezone: str | None = None) -> str:
    """Shortcut for ``RecurrenceExpander().format_start``."""
    return _DEFAULT.format_start(posix_millis, timezone)
