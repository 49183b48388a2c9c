# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Route discovery for controllers and views.

Discovery produces pending routes; registering them with a router is up
to the host application.
"""

from .attributes import (
    ALPHA,
    ALPHANUMERIC,
    NUMERIC,
    UUID,
    RouteInfo,
    do_not_discover,
    prefix,
    route,
    where,
)
from .discovery import ViewRoute, discover_controllers, discover_views
from .pending import PendingRoute, PendingRouteAction, PendingRouteFactory
from .registrar import DiscoveredRoutes, RouteRegistrar, resolve_transformer
from .transformers import (
    add_default_route_name,
    default_route_transformers,
    handle_do_not_discover,
    handle_route_attribute,
    handle_wheres,
    move_routes_starting_with_parameters_last,
    reject_private_methods,
    validate_optional_parameters,
)

__all__ = [
    # Decorators
    "route",
    "do_not_discover",
    "where",
    "prefix",
    "RouteInfo",
    "ALPHA",
    "ALPHANUMERIC",
    "NUMERIC",
    "UUID",
    # Pending routes
    "PendingRoute",
    "PendingRouteAction",
    "PendingRouteFactory",
    # Discovery
    "ViewRoute",
    "discover_controllers",
    "discover_views",
    "DiscoveredRoutes",
    "RouteRegistrar",
    "resolve_transformer",
    # Transformers
    "default_route_transformers",
    "reject_private_methods",
    "handle_do_not_discover",
    "handle_route_attribute",
    "handle_wheres",
    "add_default_route_name",
    "validate_optional_parameters",
    "move_routes_starting_with_parameters_last",
]
