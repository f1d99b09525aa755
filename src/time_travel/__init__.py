# src/time_travel/__init__.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Application-wide virtual clock.

Application code reads time through `system_time` (or the module-level
helpers below) instead of datetime.now(), so the whole process can be
moved in time by changing a single offset:

    system_time_offset.set_enabled(True)
    await travel_by(timedelta(days=3))
    today()            # three days from now
    await reset_to_home()

Tests should build their own SystemTimeOffset/SystemTime pair rather than
mutate the process-wide instances.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from .clock import Clock, clock
from .events import TimeTravelEvent, TimeTravelHandler
from .exceptions import TimeTravelError, TimeTravelNotEnabledError
from .system_time import SystemTime
from .system_time_offset import SystemTimeOffset, system_time_offset

# Process-wide facade over the process-wide store
system_time = SystemTime()


def now() -> datetime:
    return system_time.now()


def utcnow() -> datetime:
    return system_time.utcnow()


def today() -> datetime:
    return system_time.today()


def to_real_time(app_time: datetime | None) -> datetime | None:
    return system_time.to_real_time(app_time)


def from_real_time(real_time: datetime | None) -> datetime | None:
    return system_time.from_real_time(real_time)


async def travel_by(interval: timedelta) -> None:
    await system_time_offset.travel_by(interval)


async def reset_to_home() -> None:
    await system_time_offset.reset_to_home()


__all__ = [
    # Types
    "Clock",
    "SystemTime",
    "SystemTimeOffset",
    "TimeTravelEvent",
    "TimeTravelHandler",
    # Errors
    "TimeTravelError",
    "TimeTravelNotEnabledError",
    # Process-wide instances
    "clock",
    "system_time",
    "system_time_offset",
    # Helpers
    "now",
    "utcnow",
    "today",
    "to_real_time",
    "from_real_time",
    "travel_by",
    "reset_to_home",
]
