# -*- coding: utf-8 -*-
"""Location: ./tests/conftest.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
"""

# Third-Party
import pytest

# First-Party
from veriform.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so environment changes in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
