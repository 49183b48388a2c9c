# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Unified settings: init kwargs, env vars and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs
  2. Env vars, ``HYPER_*`` prefix with ``__`` as nested delimiter
     (e.g. ``HYPER_SECURITY__LOCKED_SIGNALS__LOG_VIOLATIONS=false``)
  3. Code defaults baked into the section models
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from .models import IconsConfig, RouteDiscoveryConfig, SecurityConfig


class HyperSettings(BaseSettings):
    """Frozen settings object shared by the html, signals and routing layers."""

    model_config = {
        "frozen": True,
        "env_prefix": "HYPER_",
        "env_nested_delimiter": "__",
    }

    debug: bool = False

    route_discovery: RouteDiscoveryConfig = Field(default_factory=RouteDiscoveryConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    icons: IconsConfig = Field(default_factory=IconsConfig)


@lru_cache(maxsize=1)
def get_settings() -> HyperSettings:
    """Return the process-wide settings, built once from the environment."""
    return HyperSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
