# src/time_travel/clock.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Real wall-clock source used underneath the virtual timeline."""

from datetime import UTC, datetime, tzinfo


class Clock:
    """
    Thin wrapper over the host's wall clock.

    Time travel never touches this class: it only reads it and adds the
    current offset. Tests swap in a fake clock with the same two methods.
    """

    def now(self, tz: tzinfo | None = None) -> datetime:
        """Get the current real time (naive local time when tz is None)."""
        return datetime.now(tz)

    def utcnow(self) -> datetime:
        """Get the current real UTC time as a naive datetime."""
        return datetime.now(UTC).replace(tzinfo=None)


# Global instance
clock = Clock()
