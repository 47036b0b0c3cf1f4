"""Timezone resolution and epoch-millisecond conversions."""

from __future__ import annotations

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

from tzlocal import get_localzone_name

from .const import LOCAL

UTC_ZONE = ZoneInfo("UTC")


def local_zone_name() -> str:
    """Return the host's IANA zone name, e.g. ``"Europe/Berlin"``."""
    return get_localzone_name()


def resolve_zone(name: str | None) -> ZoneInfo:
    """Resolve a zone name; ``None`` or ``"local"`` means the host zone.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If the name is not a known zone.
    """
    if name is None or name == LOCAL:
        return ZoneInfo(local_zone_name())
    return ZoneInfo(name)


def to_millis(moment: datetime) -> int:
    """Convert a datetime to Unix milliseconds. Naive values count as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC_ZONE)
    return int(moment.timestamp() * 1000)


def from_millis(ts_ms: int, tz: tzinfo = UTC_ZONE) -> datetime:
    """Convert Unix milliseconds to an aware datetime in ``tz``."""
    return datetime.fromtimestamp(ts_ms / 1000, tz=tz)


def reinterpret_fields(moment: datetime, from_zone: tzinfo, to_zone: tzinfo) -> datetime:
    """Keep the wall-clock fields of ``moment`` but move them to another zone.

    The fields are read as ``moment`` appears in ``from_zone`` (naive values
    are taken to already be in ``from_zone``) and reattached to ``to_zone``
    unchanged, so 09:00 in UTC becomes 09:00 in ``to_zone``.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=from_zone)
    return moment.astimezone(from_zone).replace(tzinfo=to_zone)
