# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Pydantic configuration sections with code-baked defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_ROUTE_TRANSFORMERS: tuple[str, ...] = (
    "genro_hyper.routing.transformers:reject_private_methods",
    "genro_hyper.routing.transformers:handle_do_not_discover",
    "genro_hyper.routing.transformers:handle_route_attribute",
    "genro_hyper.routing.transformers:handle_wheres",
    "genro_hyper.routing.transformers:add_default_route_name",
    "genro_hyper.routing.transformers:validate_optional_parameters",
    "genro_hyper.routing.transformers:move_routes_starting_with_parameters_last",
)


class RouteDiscoveryConfig(BaseModel):
    """[route_discovery] section.

    Discovery is opt-in. ``view_directories`` maps a route name prefix to a
    template directory. ``pending_route_transformers`` holds callables or
    ``module:attribute`` strings applied in order to the pending routes.
    """

    model_config = {"frozen": True}

    enabled: bool = False
    controller_directories: list[Path] = Field(default_factory=list)
    view_directories: dict[str, Path] = Field(default_factory=dict)
    pending_route_transformers: list[Any] = Field(
        default_factory=lambda: list(DEFAULT_ROUTE_TRANSFORMERS)
    )


class LockedSignalsConfig(BaseModel):
    """[security.locked_signals] section."""

    model_config = {"frozen": True}

    log_violations: bool = True


class SecurityConfig(BaseModel):
    """[security] section."""

    model_config = {"frozen": True}

    locked_signals: LockedSignalsConfig = Field(default_factory=LockedSignalsConfig)


class IconsConfig(BaseModel):
    """[icons] section."""

    model_config = {"frozen": True}

    cache: bool = False
    default_provider: str | None = None
