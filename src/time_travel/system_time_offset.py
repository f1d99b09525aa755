# src/time_travel/system_time_offset.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Holder of the time travel offset.

The offset is the signed distance between the application's timeline and
real time. It only changes through travel_by()/reset_to_home(), which
notify registered handlers before and after the change.
"""

from __future__ import annotations

import asyncio
import logging
import threading
import weakref
from datetime import UTC, datetime, timedelta

from .clock import Clock, clock as default_clock
from .config import TIME_TRAVEL_ENABLED
from .events import TimeTravelEvent, TimeTravelHandler
from .exceptions import TimeTravelError, TimeTravelNotEnabledError

logger = logging.getLogger(__name__)


def _handler_name(handler: TimeTravelHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class SystemTimeOffset:
    """
    Offset store for the application's virtual clock.

    Handlers are notified in two phases around every travel:

    * "time travelling" handlers run before the offset changes and receive
      the old offset.
    * "time travelled" handlers run after the offset changed and receive
      the new offset.

    Handlers observe only; they cannot veto a travel. If a handler raises,
    the exception propagates to the caller of travel_by(). A failure in a
    "time travelled" handler leaves the offset already moved, so callers
    that catch it should re-read `offset` instead of assuming a rollback.

    Travels started on the same event loop run one at a time, handlers
    included, so a handler must not travel on the store that called it.
    Travels running on different threads (different event loops) are not
    serialized against each other: the offset update itself stays atomic,
    but their handler phases can interleave.
    """

    def __init__(self, *, enabled: bool = False, clock: Clock | None = None) -> None:
        self._lock = threading.Lock()
        self._offset = timedelta(0)
        self._enabled = bool(enabled)
        self._clock = clock or default_clock
        self._time_travelling_handlers: list[TimeTravelHandler] = []
        self._time_travelled_handlers: list[TimeTravelHandler] = []
        self._travel_locks: weakref.WeakKeyDictionary[
            asyncio.AbstractEventLoop, asyncio.Lock
        ] = weakref.WeakKeyDictionary()

    # --------------------------------------------------------------------- #
    # state
    # --------------------------------------------------------------------- #
    @property
    def is_enabled(self) -> bool:
        """Return True if the offset is applied to observed time."""
        with self._lock:
            return self._enabled

    @is_enabled.setter
    def is_enabled(self, enabled: bool) -> None:
        self.set_enabled(enabled)

    def set_enabled(self, enabled: bool) -> None:
        enabled = bool(enabled)
        with self._lock:
            self._enabled = enabled
        logger.info("Time travel %s", "enabled" if enabled else "disabled")

    @property
    def offset(self) -> timedelta:
        """Current time travel offset (virtual time minus real time)."""
        with self._lock:
            return self._offset

    def snapshot(self) -> tuple[bool, timedelta]:
        """Return (is_enabled, offset) read together under the lock."""
        with self._lock:
            return self._enabled, self._offset

    # --------------------------------------------------------------------- #
    # current time
    # --------------------------------------------------------------------- #
    def now(self) -> datetime:
        """Now according to the current timeline, as an aware local datetime."""
        enabled, offset = self.snapshot()
        real_now = self._clock.now().astimezone()
        if enabled:
            return real_now + offset
        return real_now

    def utcnow(self) -> datetime:
        """UTC now according to the current timeline, as an aware datetime."""
        enabled, offset = self.snapshot()
        real_now = self._clock.now(UTC)
        if enabled:
            return real_now + offset
        return real_now

    # --------------------------------------------------------------------- #
    # handlers
    # --------------------------------------------------------------------- #
    def add_time_travelling_handler(self, handler: TimeTravelHandler) -> TimeTravelHandler:
        """Register a handler awaited before every travel. Usable as a decorator."""
        with self._lock:
            self._time_travelling_handlers.append(handler)
        logger.debug("Registered time travelling handler %s", _handler_name(handler))
        return handler

    def remove_time_travelling_handler(self, handler: TimeTravelHandler) -> None:
        with self._lock:
            self._time_travelling_handlers.remove(handler)

    def add_time_travelled_handler(self, handler: TimeTravelHandler) -> TimeTravelHandler:
        """Register a handler awaited after every travel. Usable as a decorator."""
        with self._lock:
            self._time_travelled_handlers.append(handler)
        logger.debug("Registered time travelled handler %s", _handler_name(handler))
        return handler

    def remove_time_travelled_handler(self, handler: TimeTravelHandler) -> None:
        with self._lock:
            self._time_travelled_handlers.remove(handler)

    async def _notify(
        self, phase: str, handlers: list[TimeTravelHandler], event: TimeTravelEvent
    ) -> None:
        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                e.add_note(f"raised by {phase} handler {_handler_name(handler)}")
                raise

    # --------------------------------------------------------------------- #
    # travel
    # --------------------------------------------------------------------- #
    # travel
    # --------------------------------------------------------------------- #
    def _travel_lock(self) -> asyncio.Lock:
        """Return the lock serializing travels on the running event loop."""
        loop = asyncio.get_running_loop()
        with self._lock:
            lock = self._travel_locks.get(loop)
            if lock is None:
                lock = asyncio.Lock()
                self._travel_locks[loop] = lock
            return lock

    def _check_reachable(self, offset: timedelta) -> None:
        """Raise TimeTravelError if now() could not be computed at this offset."""
        real_now = self._clock.now(UTC)
        try:
            real_now + offset
            real_now.astimezone() + offset
        except OverflowError as e:
            raise TimeTravelError(
                f"Cannot travel to an offset of {offset}: date out of range"
            ) from e

    async def _travel(self, interval: timedelta) -> None:
        with self._lock:
            if not self._enabled:
                raise TimeTravelNotEnabledError()
            before = self._offset
            travelling = list(self._time_travelling_handlers)
        try:
            target = before + interval
        except OverflowError as e:
            raise TimeTravelError(f"Cannot travel by {interval}: offset out of range") from e
        self._check_reachable(target)

        await self._notify(
            "time travelling", travelling, TimeTravelEvent(before, interval)
        )

        # Add to the live value: a travel on another thread may have
        # committed meanwhile.
        with self._lock:
            self._offset = self._offset + interval
            after = self._offset
            travelled = list(self._time_travelled_handlers)
        logger.info("Time travelling by %s (offset %s -> %s)", interval, before, after)

        await self._notify(
            "time travelled", travelled, TimeTravelEvent(after, interval)
        )

    async def travel_by(self, interval: timedelta) -> None:
        """
        Move the application in time by the given interval.

        Raises TimeTravelNotEnabledError when time travel is disabled, and
        TimeTravelError when the resulting time would be out of range. In
        both cases nothing changes and no handler runs.
        """
        async with self._travel_lock():
            await self._travel(interval)

    async def reset_to_home(self) -> None:
        """Travel back to home time, where the offset is exactly zero."""
        async with self._travel_lock():
            await self._travel(-self.offset)


# Process-wide instance
system_time_offset = SystemTimeOffset(enabled=TIME_TRAVEL_ENABLED)
