# src/time_travel/events.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class TimeTravelEvent:
    """
    Payload handed to time travel handlers.

    Handlers registered for the "time travelling" phase see the offset in
    effect before the jump; "time travelled" handlers see the offset that
    was just committed. travel_by is the same for both.
    """

    current_offset: timedelta
    travel_by: timedelta


# Handler type: async function(event) -> None
TimeTravelHandler = Callable[[TimeTravelEvent], Awaitable[None]]
