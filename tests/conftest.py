# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures."""

import pytest

from genro_hyper.config import HyperSettings, reset_settings
from genro_hyper.html import ElementRegistry


@pytest.fixture(autouse=True)
def clean_state():
    """Fresh cached settings and custom element registry for every test."""
    reset_settings()
    ElementRegistry.clear()
    yield
    reset_settings()
    ElementRegistry.clear()


@pytest.fixture
def settings():
    return HyperSettings()
