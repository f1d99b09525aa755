# src/time_travel/config.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#

import os

# Configuration constants loaded from environment variables


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    return default


# Whether the process-wide offset store starts with time travel enabled
TIME_TRAVEL_ENABLED: bool = _env_flag("TIME_TRAVEL_ENABLED", False)
