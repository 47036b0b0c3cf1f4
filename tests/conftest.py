"""Shared fixtures for the RRULE expander tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

HOST_ZONE = "Asia/Tokyo"


@pytest.fixture
def pin_host_zone(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], str]:
    """Return a setter that makes tzlocal report the given host zone."""

    def _pin(name: str) -> str:
        monkeypatch.setattr(
            "rrule_expander._timezone.get_localzone_name", lambda: name
        )
        return name

    return _pin


@pytest.fixture
def host_zone(pin_host_zone: Callable[[str], str]) -> str:
    """Pin the host timezone so 'local' results do not depend on the machine.

    Asia/Tokyo has no DST, which keeps the expected offsets constant.
    """
    return pin_host_zone(HOST_ZONE)


@pytest.fixture
def new_york_host(pin_host_zone: Callable[[str], str]) -> str:
    """Pin the host timezone to America/New_York."""
    return pin_host_zone("America/New_York")
