# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Pending route transformers.

A transformer takes the list of pending routes and returns the list to
pass on; it may mutate routes in place, drop them or reorder them. The
default pipeline is :func:`default_route_transformers`; settings may
replace it with any list of callables or ``module:attribute`` strings.
"""

from __future__ import annotations

import sys
from typing import Callable

import structlog

from .attributes import DO_NOT_DISCOVER_MARKER, WHERES_MARKER, get_marker
from .pending import PendingRoute, PendingRouteAction, join_uri

log = structlog.get_logger("genro_hyper.routing")

PendingRouteTransformer = Callable[[list[PendingRoute]], list[PendingRoute]]

# Actions whose conventional name differs from their last URI segment
_METHOD_ROUTE_NAMES = frozenset({'show', 'store', 'edit', 'update', 'destroy', 'delete'})

# Name of the conventional controller base class, whose methods never route
BASE_CONTROLLER_NAME = 'Controller'


def _defined_on_base(action: PendingRouteAction) -> bool:
    owner = action.method.__qualname__.rpartition('.')[0]
    return owner == BASE_CONTROLLER_NAME


def reject_private_methods(routes: list[PendingRoute]) -> list[PendingRoute]:
    """Drop underscore methods and methods inherited from a ``Controller`` base."""
    for route in routes:
        route.actions = [
            action for action in route.actions
            if (action.method_name == '__call__' or not action.method_name.startswith('_'))
            and not _defined_on_base(action)
        ]
    return routes


def handle_do_not_discover(routes: list[PendingRoute]) -> list[PendingRoute]:
    kept = [route for route in routes if not get_marker(route.controller, DO_NOT_DISCOVER_MARKER)]
    for route in kept:
        route.actions = [
            action for action in route.actions
            if not get_marker(action.method, DO_NOT_DISCOVER_MARKER)
        ]
    return kept


def handle_route_attribute(routes: list[PendingRoute]) -> list[PendingRoute]:
    """Apply ``@route`` options.

    Controller-level middleware and domain apply to every action; the
    action-level decorator can add middleware and override everything else.
    """
    for route in routes:
        controller_info = route.route_attribute()
        for action in route.actions:
            if controller_info is not None:
                action.add_middleware(controller_info.middleware)
                if controller_info.domain:
                    action.domain = controller_info.domain

            info = action.route_attribute()
            if info is None:
                continue
            if info.name:
                action.name = info.name
            action.add_middleware(info.middleware)
            if info.methods:
                action.methods = list(info.methods)
            if info.uri:
                action.uri = join_uri(route.uri, info.uri)
            if info.full_uri:
                action.uri = info.full_uri.strip('/')
            if info.domain:
                action.domain = info.domain
    return routes


def handle_wheres(routes: list[PendingRoute]) -> list[PendingRoute]:
    """Apply ``@where`` constraints; action constraints win over the controller's."""
    for route in routes:
        controller_wheres = get_marker(route.controller, WHERES_MARKER) or {}
        for action in route.actions:
            for param, constraint in controller_wheres.items():
                action.add_where(param, constraint)
            for param, constraint in (get_marker(action.method, WHERES_MARKER) or {}).items():
                action.add_where(param, constraint)
    return routes


def add_default_route_name(routes: list[PendingRoute]) -> list[PendingRoute]:
    """Name unnamed actions from their URI: ``users/{user}/edit`` -> ``users.edit``."""
    for route in routes:
        for action in route.actions:
            if action.name:
                continue
            segments = [
                segment for segment in action.uri.split('/')
                if segment and not segment.startswith('{')
            ]
            method_name = action.method_name
            if method_name in _METHOD_ROUTE_NAMES and (not segments or segments[-1] != method_name):
                segments.append(method_name)
            action.name = '.'.join(segments) or None
    return routes


def validate_optional_parameters(routes: list[PendingRoute]) -> list[PendingRoute]:
    """Warn about required URI parameters following optional ones."""
    for route in routes:
        for action in route.actions:
            has_optional = False
            for segment in action.uri.split('/'):
                if not (segment.startswith('{') and segment.endswith('}')):
                    continue
                optional = segment.endswith('?}')
                if has_optional and not optional:
                    log.warning(
                        "required_parameter_after_optional",
                        controller=route.controller.__qualname__,
                        method=action.method_name,
                        uri=action.uri,
                    )
                    break
                has_optional = has_optional or optional
    return routes


def move_routes_starting_with_parameters_last(routes: list[PendingRoute]) -> list[PendingRoute]:
    """Order catch-all controllers (URIs starting with ``{``) after the others.

    Among them, those with deeper parameter URIs come first.
    """

    def sort_key(route: PendingRoute) -> int:
        if not any(action.uri.startswith('{') for action in route.actions):
            return 0
        return max(
            sys.maxsize - len(action.uri.split('/')) if action.uri.startswith('{') else sys.maxsize
            for action in route.actions
        )

    return sorted(routes, key=sort_key)


def default_route_transformers() -> list[PendingRouteTransformer]:
    return [
        reject_private_methods,
        handle_do_not_discover,
        handle_route_attribute,
        handle_wheres,
        add_default_route_name,
        validate_optional_parameters,
        move_routes_starting_with_parameters_last,
    ]
