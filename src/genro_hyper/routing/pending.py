# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Pending routes: discovered controllers before registration.

A :class:`PendingRoute` is one controller class, a
:class:`PendingRouteAction` one of its methods. Transformers
(see :mod:`.transformers`) refine them; the host router registers them.
"""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Any, Callable

from ..exceptions import RouteDiscoveryError
from ..html.attributes import kebab
from .attributes import PREFIX_MARKER, ROUTE_MARKER, RouteInfo, get_marker

# Methods mapped to the controller URI itself
COMMON_METHOD_NAMES = frozenset({
    'index', '__call__', 'get', 'show', 'store', 'update', 'destroy', 'delete',
})

_SCALAR_ANNOTATIONS = (int, str, float, bool, Any)
_SCALAR_ANNOTATION_NAMES = frozenset({'int', 'str', 'float', 'bool', 'Any', 'typing.Any'})

_DISCOVERED_PACKAGE = '_hyper_discovered'


def http_methods_for(name: str) -> list[str]:
    """HTTP verbs implied by a controller method name."""
    if name == 'store':
        return ['POST']
    if name == 'update':
        return ['PUT', 'PATCH']
    if name in ('destroy', 'delete'):
        return ['DELETE']
    return ['GET']


def join_uri(*parts: str | None) -> str:
    return '/'.join(part.strip('/') for part in parts if part and part.strip('/'))


def _is_url_parameter(param: inspect.Parameter) -> bool:
    if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
        return False
    annotation = param.annotation
    if annotation is param.empty:
        return True
    if isinstance(annotation, str):
        return annotation in _SCALAR_ANNOTATION_NAMES
    return annotation in _SCALAR_ANNOTATIONS


@dataclass
class PendingRouteAction:
    """One routable controller method.

    Attributes:
        method: The function object, as defined on the controller.
        controller: Controller class.
        uri: Full URI, controller part included.
        methods: HTTP verbs.
        middleware: Middleware names, deduplicated.
        wheres: Parameter name to regex constraint.
        name: Route name.
        domain: Domain constraint.
    """

    method: Callable[..., Any]
    controller: type
    uri: str = ''
    methods: list[str] = field(default_factory=list)
    middleware: list[str] = field(default_factory=list)
    wheres: dict[str, str] = field(default_factory=dict)
    name: str | None = None
    domain: str | None = None

    @classmethod
    def from_method(cls, method: Callable[..., Any], controller: type,
                    controller_uri: str = '') -> PendingRouteAction:
        action = cls(method=method, controller=controller)
        action.uri = join_uri(controller_uri, action.relative_uri())
        action.methods = http_methods_for(action.method_name)
        return action

    @property
    def method_name(self) -> str:
        return self.method.__name__

    def url_parameters(self) -> list[inspect.Parameter]:
        params = list(inspect.signature(self.method).parameters.values())
        if params and params[0].name in ('self', 'cls'):
            params = params[1:]
        return [param for param in params if _is_url_parameter(param)]

    def relative_uri(self) -> str:
        """Method segment plus ``{param}`` / ``{param?}`` segments.

        Required parameters following an optional one are left out.
        """
        segments: list[str] = []
        if self.method_name not in COMMON_METHOD_NAMES:
            segments.append(kebab(self.method_name))
        has_optional = False
        for param in self.url_parameters():
            if param.default is not param.empty:
                has_optional = True
                segments.append(f'{{{param.name}?}}')
            elif not has_optional:
                segments.append(f'{{{param.name}}}')
        return '/'.join(segments)

    def route_attribute(self) -> RouteInfo | None:
        return get_marker(self.method, ROUTE_MARKER)

    def add_where(self, param: str, constraint: str) -> PendingRouteAction:
        self.wheres[param] = constraint
        return self

    def add_middleware(self, middleware: list[str] | tuple[str, ...]) -> PendingRouteAction:
        merged = list(middleware) + self.middleware
        self.middleware = list(dict.fromkeys(merged))
        return self

    def action(self) -> type | tuple[type, str]:
        """Invokable controllers route to the class, others to (class, method)."""
        if self.method_name == '__call__':
            return self.controller
        return (self.controller, self.method_name)


@dataclass
class PendingRoute:
    """A discovered controller and its actions."""

    path: Path
    controller: type
    uri: str
    actions: list[PendingRouteAction] = field(default_factory=list)

    @property
    def module(self) -> str:
        return self.controller.__module__

    @property
    def short_controller_name(self) -> str:
        name = self.controller.__name__
        return name[:-len('Controller')] if name.endswith('Controller') else name

    def route_attribute(self) -> RouteInfo | None:
        return get_marker(self.controller, ROUTE_MARKER)


class PendingRouteFactory:
    """Build pending routes from the controller modules of a directory.

    Args:
        registering_directory: Root of the controller tree; URIs are
            derived from paths relative to it.
        root_package: Dotted package matching registering_directory. When
            given, modules are imported by name; otherwise they are loaded
            from their file under a private package name.
    """

    def __init__(self, registering_directory: str | Path, root_package: str | None = None) -> None:
        self.registering_directory = Path(registering_directory)
        self.root_package = root_package

    def make(self, path: str | Path) -> list[PendingRoute]:
        """Return one pending route per concrete ``*Controller`` class in path."""
        path = Path(path)
        module = self.import_module(path)
        routes = []
        for _, controller in inspect.getmembers(module, inspect.isclass):
            if not self.is_controller(controller, module):
                continue
            uri = self.discover_uri(path, controller)
            actions = [
                PendingRouteAction.from_method(method, controller, uri)
                for _, method in inspect.getmembers(controller, inspect.isfunction)
                if not method.__name__.startswith('__') or method.__name__ == '__call__'
            ]
            routes.append(PendingRoute(path=path, controller=controller, uri=uri, actions=actions))
        return routes

    @staticmethod
    def is_controller(candidate: type, module: ModuleType) -> bool:
        return (
            candidate.__module__ == module.__name__
            and candidate.__name__.endswith('Controller')
            and candidate.__name__ != 'Controller'
            and not inspect.isabstract(candidate)
        )

    def discover_uri(self, path: Path, controller: type) -> str:
        """Kebab-case directory segments plus the controller's short name.

        ``index`` segments are dropped; a ``@prefix`` replaces the result.
        """
        custom = get_marker(controller, PREFIX_MARKER)
        if custom is not None:
            return custom
        relative = path.relative_to(self.registering_directory).parent
        name = controller.__name__[:-len('Controller')]
        parts = [*relative.parts, name]
        return '/'.join(kebab(part) for part in parts if part and part.lower() != 'index')

    def module_name(self, path: Path) -> str:
        relative = path.relative_to(self.registering_directory).with_suffix('')
        dotted = '.'.join(relative.parts)
        return f'{self.root_package or _DISCOVERED_PACKAGE}.{dotted}'

    def import_module(self, path: Path) -> ModuleType:
        """Import a controller module.

        Raises:
            RouteDiscoveryError: If the module cannot be imported.
        """
        name = self.module_name(path)
        try:
            if self.root_package:
                return importlib.import_module(name)
            spec = importlib.util.spec_from_file_location(name, path)
            if spec is None or spec.loader is None:
                raise RouteDiscoveryError(f"Cannot load controller module from {path}")
            module = importlib.util.module_from_spec(spec)
            sys.modules[name] = module
            try:
                spec.loader.exec_module(module)
            except BaseException:
                sys.modules.pop(name, None)
                raise
            return module
        except RouteDiscoveryError:
            raise
        except Exception as exc:
            raise RouteDiscoveryError(f"Cannot import controller module {path}: {exc}") from exc
