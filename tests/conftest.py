# tests/conftest.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
# Import pytest early so fixtures from test_utils register cleanly
import pytest  # noqa: F401

# Register fixtures from test_utils without an "unused import".
pytest_plugins = ["test_utils"]
