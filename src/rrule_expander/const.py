"""Constants for the RRULE expander."""

from typing import Final

__version__ = "0.1.0"

UTC: Final = "UTC"
LOCAL: Final = "local"

DTSTART_TEMPLATE: Final = "DTSTART;TZID={tzid}:{year}{month}{day}T{hour}{minute}{second};"
