# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Configuration for genro-hyper: settings models and logging setup."""

from .logging import configure_logging
from .settings import HyperSettings, get_settings, reset_settings

__all__ = [
    "HyperSettings",
    "configure_logging",
    "get_settings",
    "reset_settings",
]
