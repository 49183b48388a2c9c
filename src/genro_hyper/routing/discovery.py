# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Controller and view discovery.

Example:
    >>> routes = discover_controllers('app/controllers', root_package='app.controllers')
    >>> for route in routes:
    ...     for action in route.actions:
    ...         router.add(action.methods, '/' + action.uri, action.action(), name=action.name)
    >>> discover_views('templates/pages', prefix='pages')
    [ViewRoute(uri='/', view='index.html', name='pages'), ...]
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from ..exceptions import RouteDiscoveryError
from ..html.attributes import kebab
from .pending import PendingRoute, PendingRouteFactory
from .transformers import PendingRouteTransformer, default_route_transformers

TEMPLATE_EXTENSIONS = ('.html', '.jinja', '.jinja2', '.j2')


@dataclass(frozen=True)
class ViewRoute:
    """A template served directly at a URI.

    Attributes:
        uri: Absolute URI (``'/'`` for the directory root).
        view: Template name relative to the discovered directory.
        name: Dotted route name.
    """

    uri: str
    view: str
    name: str


def _controller_files(directory: Path) -> list[Path]:
    """Python files of directory, then of its subdirectories (recursively)."""
    files = sorted(
        path for path in directory.glob('*.py')
        if path.is_file() and not path.name.startswith('_')
    )
    for subdirectory in sorted(path for path in directory.iterdir() if path.is_dir()):
        if subdirectory.name.startswith(('_', '.')):
            continue
        files.extend(_controller_files(subdirectory))
    return files


def discover_controllers(
    directory: str | Path,
    root_package: str | None = None,
    transformers: Iterable[PendingRouteTransformer] | None = None,
) -> list[PendingRoute]:
    """Build and transform the pending routes of a controller directory.

    Args:
        directory: Controller tree root.
        root_package: Dotted package name of directory, if importable.
        transformers: Pipeline to apply; defaults to
            :func:`~.transformers.default_route_transformers`.

    Raises:
        RouteDiscoveryError: If directory does not exist or a module
            fails to import.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise RouteDiscoveryError(f"Controller directory not found: {directory}")

    factory = PendingRouteFactory(directory, root_package)
    routes: list[PendingRoute] = []
    for path in _controller_files(directory):
        routes.extend(factory.make(path))

    if transformers is None:
        transformers = default_route_transformers()
    for transformer in transformers:
        routes = transformer(routes)
    return routes


def _strip_extension(name: str, extensions: tuple[str, ...]) -> str | None:
    for extension in extensions:
        if name.endswith(extension):
            return name[:-len(extension)]
    return None


def discover_views(
    directory: str | Path,
    prefix: str = '',
    extensions: tuple[str, ...] = TEMPLATE_EXTENSIONS,
) -> list[ViewRoute]:
    """Map every template under directory to a view route.

    ``blog/index.html`` is served at ``/blog`` and named ``blog``;
    ``blog/new_post.html`` at ``/blog/new-post`` as ``blog.new-post``.
    The root index is named prefix, or ``home`` without one. Other names
    are prefixed with ``prefix.``.

    Raises:
        RouteDiscoveryError: If directory does not exist.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise RouteDiscoveryError(f"View directory not found: {directory}")

    views = []
    for path in sorted(directory.rglob('*')):
        if not path.is_file():
            continue
        relative = path.relative_to(directory)
        stem = _strip_extension(relative.name, extensions)
        if stem is None:
            continue
        segments = [*relative.parts[:-1], stem]
        if segments[-1] == 'index':
            segments.pop()
        segments = [kebab(segment) for segment in segments]

        if segments:
            name = '.'.join(segments)
            name = f'{prefix}.{name}' if prefix else name
        else:
            name = prefix or 'home'
        views.append(ViewRoute(uri='/' + '/'.join(segments), view=relative.as_posix(), name=name))
    return views
