# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Settings-driven route discovery."""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import Any

import structlog

from ..config.settings import HyperSettings, get_settings
from ..exceptions import RouteDiscoveryError
from .discovery import ViewRoute, discover_controllers, discover_views
from .pending import PendingRoute
from .transformers import PendingRouteTransformer

log = structlog.get_logger("genro_hyper.routing")


@dataclass
class DiscoveredRoutes:
    controllers: list[PendingRoute] = field(default_factory=list)
    views: list[ViewRoute] = field(default_factory=list)

    def __len__(self) -> int:
        return sum(len(route.actions) for route in self.controllers) + len(self.views)


def resolve_transformer(entry: Any) -> PendingRouteTransformer:
    """Return a transformer from a callable or a ``module:attribute`` string.

    Raises:
        RouteDiscoveryError: If the entry cannot be resolved to a callable.
    """
    if callable(entry):
        return entry
    if not isinstance(entry, str) or ':' not in entry:
        raise RouteDiscoveryError(
            f"Route transformer must be a callable or 'module:attribute', got {entry!r}"
        )
    module_name, _, attribute = entry.partition(':')
    try:
        transformer = getattr(importlib.import_module(module_name), attribute)
    except (ImportError, AttributeError) as exc:
        raise RouteDiscoveryError(f"Cannot resolve route transformer {entry!r}: {exc}") from exc
    if not callable(transformer):
        raise RouteDiscoveryError(f"Route transformer {entry!r} is not callable")
    return transformer


class RouteRegistrar:
    """Run discovery for the directories configured in ``route_discovery``.

    Args:
        settings: Settings to read; defaults to :func:`get_settings`.
        root_package: Dotted package of the controller directories, when
            they are importable.
    """

    def __init__(self, settings: HyperSettings | None = None, root_package: str | None = None) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.root_package = root_package

    def transformers(self) -> list[PendingRouteTransformer]:
        return [
            resolve_transformer(entry)
            for entry in self.settings.route_discovery.pending_route_transformers
        ]

    def discover(self) -> DiscoveredRoutes:
        """Discover configured controllers and views; empty when disabled."""
        config = self.settings.route_discovery
        result = DiscoveredRoutes()
        if not config.enabled:
            log.debug("route_discovery_disabled")
            return result

        transformers = self.transformers()
        for directory in config.controller_directories:
            routes = discover_controllers(directory, self.root_package, transformers)
            log.info("controllers_discovered", directory=str(directory),
                     controllers=len(routes),
                     actions=sum(len(route.actions) for route in routes))
            result.controllers.extend(routes)

        for prefix, directory in config.view_directories.items():
            views = discover_views(directory, prefix)
            log.info("views_discovered", directory=str(directory), prefix=prefix, views=len(views))
            result.views.extend(views)
        return result
