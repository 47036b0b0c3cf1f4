"""Public names for the errors raised by the recurrence and timezone delegates.

Nothing in this package wraps delegate errors. These aliases only let callers
catch them without importing dateutil or zoneinfo themselves.
"""

from __future__ import annotations

from zoneinfo import ZoneInfoNotFoundError

# dateutil.rrule.rrulestr raises a plain ValueError for text it cannot parse.
# ZoneInfo raises ValueError too for malformed keys such as "../x", so a bad
# zone name can surface under this alias as well as under the one below.
RuleSyntaxError = ValueError

TimezoneResolutionError = ZoneInfoNotFoundError

__all__ = ["RuleSyntaxError", "TimezoneResolutionError"]
