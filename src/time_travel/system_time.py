# src/time_travel/system_time.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Read-side helpers for the application's timeline.

Use to_real_time() whenever an application timestamp leaves the process
(third-party APIs, shared storage) and from_real_time() when a real
timestamp comes in. When time travel is disabled both are no-ops.

Naive timestamps are shifted by wall-clock arithmetic; aware ones are
shifted as instants and come back in their own timezone.
"""

from __future__ import annotations

from datetime import UTC, datetime, time, timedelta
from typing import overload

from .system_time_offset import SystemTimeOffset, system_time_offset


def _shift(value: datetime, delta: timedelta) -> datetime:
    # Aware values move as instants and keep their own timezone.
    if value.utcoffset() is None:
        return value + delta
    return (value.astimezone(UTC) + delta).astimezone(value.tzinfo)


class SystemTime:
    """Naive-datetime view of a SystemTimeOffset."""

    def __init__(self, offset_store: SystemTimeOffset | None = None) -> None:
        if offset_store is None:
            offset_store = system_time_offset
        self._store = offset_store

    @property
    def offset_store(self) -> SystemTimeOffset:
        return self._store

    def now(self) -> datetime:
        """Now according to the current timeline (naive local time)."""
        return self._store.now().replace(tzinfo=None)

    def utcnow(self) -> datetime:
        """UTC now according to the current timeline (naive)."""
        return self._store.utcnow().replace(tzinfo=None)

    def today(self) -> datetime:
        """Midnight of today according to the current timeline (local time)."""
        return datetime.combine(self.now().date(), time.min)

    @overload
    def to_real_time(self, app_time: datetime) -> datetime: ...

    @overload
    def to_real_time(self, app_time: None) -> None: ...

    def to_real_time(self, app_time: datetime | None) -> datetime | None:
        """
        Convert an application timestamp to real time.

        Returns the input unchanged when time travel is disabled, and None
        for None.
        """
        if app_time is None:
            return None
        enabled, offset = self._store.snapshot()
        if enabled:
            return _shift(app_time, -offset)
        return app_time

    @overload
    def from_real_time(self, real_time: datetime) -> datetime: ...

    @overload
    def from_real_time(self, real_time: None) -> None: ...

    def from_real_time(self, real_time: datetime | None) -> datetime | None:
        """
        Convert a real timestamp into application time.

        Returns the input unchanged when time travel is disabled, and None
        for None.
        """
        if real_time is None:
            return None
        enabled, offset = self._store.snapshot()
        if enabled:
            return _shift(real_time, offset)
        return real_time
