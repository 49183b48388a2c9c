# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Discovery decorators for controller classes and their methods.

Example:
    >>> @prefix('admin/users')
    ... @route(middleware='auth')
    ... class UserController:
    ...     @route(method='post', name='users.import')
    ...     def import_csv(self): ...
    ...
    ...     @where('user', NUMERIC)
    ...     def show(self, user): ...
    ...
    ...     @do_not_discover
    ...     def helper(self): ...
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

T = TypeVar('T')

HTTP_VERBS = ('GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS')

ALPHA = '[a-zA-Z]+'
NUMERIC = '[0-9]+'
ALPHANUMERIC = '[a-zA-Z0-9]+'
UUID = r'[\da-fA-F]{8}-[\da-fA-F]{4}-[\da-fA-F]{4}-[\da-fA-F]{4}-[\da-fA-F]{12}'

ROUTE_MARKER = '__hyper_route__'
DO_NOT_DISCOVER_MARKER = '__hyper_do_not_discover__'
WHERES_MARKER = '__hyper_wheres__'
PREFIX_MARKER = '__hyper_prefix__'


def _as_list(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


@dataclass(frozen=True)
class RouteInfo:
    """Options given to :func:`route`. Unknown HTTP verbs are dropped."""

    methods: tuple[str, ...] = ()
    uri: str | None = None
    full_uri: str | None = None
    name: str | None = None
    middleware: tuple[str, ...] = field(default_factory=tuple)
    domain: str | None = None


def get_marker(target: Any, marker: str) -> Any:
    """Read a discovery marker set directly on target (not inherited)."""
    if isinstance(target, type):
        return target.__dict__.get(marker)
    return getattr(target, marker, None)


def route(
    method: str | list[str] | None = None,
    uri: str | None = None,
    full_uri: str | None = None,
    name: str | None = None,
    middleware: str | list[str] | None = None,
    domain: str | None = None,
) -> Callable[[T], T]:
    """Override discovered routing options of a controller or action."""
    methods = tuple(
        verb for verb in (item.upper() for item in _as_list(method)) if verb in HTTP_VERBS
    )
    info = RouteInfo(
        methods=methods,
        uri=uri,
        full_uri=full_uri,
        name=name,
        middleware=tuple(_as_list(middleware)),
        domain=domain,
    )

    def decorator(target: T) -> T:
        setattr(target, ROUTE_MARKER, info)
        return target

    return decorator


def do_not_discover(target: T) -> T:
    """Exclude a controller or action from discovery."""
    setattr(target, DO_NOT_DISCOVER_MARKER, True)
    return target


def where(param: str, constraint: str) -> Callable[[T], T]:
    """Constrain a URI parameter with a regular expression. Stackable."""

    def decorator(target: T) -> T:
        wheres = dict(get_marker(target, WHERES_MARKER) or {})
        wheres[param] = constraint
        setattr(target, WHERES_MARKER, wheres)
        return target

    return decorator


def prefix(value: str) -> Callable[[type], type]:
    """Replace the URI derived from a controller's location."""

    def decorator(target: type) -> type:
        setattr(target, PREFIX_MARKER, value.strip('/'))
        return target

    return decorator
