"""Recurrence engine backed by dateutil.rrule."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Protocol, Union

from dateutil.rrule import rrule, rruleset, rrulestr

_LOGGER = logging.getLogger(__name__)

RuleHandle = Union[rrule, rruleset]

_UNTIL = re.compile(r"UNTIL=([^;\r\n]+)", re.IGNORECASE)
_AWARE_DTSTART = re.compile(
    r"DTSTART(?:;TZID=[^:\r\n]+:|[:=]\d{8}T\d{6}Z)", re.IGNORECASE
)


class RecurrenceEngine(Protocol):
    """Parses RRULE text and enumerates its occurrences."""

    def parse(self, rule_text: str) -> RuleHandle:
        ...

    def expand_all(self, rule: RuleHandle) -> list[datetime]:
        ...

    def expand_within(
        self, rule: RuleHandle, start: datetime, end: datetime
    ) -> list[datetime]:
        ...


def _fix_rrule_until_tz(rule_text: str) -> str:
    """Make UNTIL values agree with DTSTART on tz-awareness.

    dateutil raises ``ValueError`` when one of UNTIL and DTSTART carries a
    timezone and the other does not. Producers often emit a bare
    ``UNTIL=20210429`` next to a UTC or TZID start, so for an aware DTSTART
    the UNTIL is made UTC (``T000000Z`` for bare dates). For a naive or
    missing DTSTART a trailing ``Z`` is dropped instead.
    """
    aware = _AWARE_DTSTART.search(rule_text) is not None

    def _fix_until(m: re.Match) -> str:
        val = m.group(1)
        is_utc = val.upper().endswith("Z")
        if aware:
            if is_utc:
                return m.group(0)
            # Bare date like "20210429" -> UTC midnight
            if "T" not in val.upper():
                val = f"{val}T000000"
            return f"UNTIL={val}Z"
        if is_utc:
            return f"UNTIL={val[:-1]}"
        return m.group(0)

    return _UNTIL.sub(_fix_until, rule_text)


class DateutilEngine:
    """``RecurrenceEngine`` implementation using ``dateutil.rrule.rrulestr``."""

    def parse(self, rule_text: str) -> RuleHandle:
        """Parse RRULE text into a dateutil rule.

        Raises:
            ValueError: If dateutil cannot parse the text.
        """
        fixed = _fix_rrule_until_tz(rule_text)
        if fixed != rule_text:
            _LOGGER.debug("Normalised UNTIL: %r -> %r", rule_text, fixed)
        return rrulestr(fixed)

    def expand_all(self, rule: RuleHandle) -> list[datetime]:
        return list(rule)

    def expand_within(
        self, rule: RuleHandle, start: datetime, end: datetime
    ) -> list[datetime]:
        return rule.between(start, end, inc=True)
