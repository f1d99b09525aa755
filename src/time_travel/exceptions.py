# src/time_travel/exceptions.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""
Exception types for time travel.
"""


class TimeTravelError(RuntimeError):
    """Base class for time travel related errors."""


class TimeTravelNotEnabledError(TimeTravelError):
    """Raised when travelling (or resetting) while time travel is disabled."""

    def __init__(self, message: str = "Time travel is not enabled"):
        super().__init__(message)
