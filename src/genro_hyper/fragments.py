# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Template fragments: render one named region of a Jinja2 template.

A template marks regions with::

    {% fragment "todo-list" %}
      <ul id="todo-list">...</ul>
    {% endfragment %}

A full render of the template outputs the region in place
(:class:`FragmentExtension` compiles the markers away). A partial update
renders only that region with :func:`render_fragment`, without running the
rest of the template.

Example:
    >>> env = Environment(loader=FileSystemLoader('templates'),
    ...                   extensions=[FragmentExtension])
    >>> render_fragment(env, 'todos.html', 'todo-list', todos=todos)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

import structlog
from jinja2 import Environment, nodes
from jinja2.ext import Extension
from jinja2.parser import Parser

from .exceptions import FragmentError

log = structlog.get_logger("genro_hyper.fragments")

_OPEN = re.compile(r"""\{%-?\s*fragment\s+(["'])(?P<name>.+?)\1\s*-?%\}""")
_CLOSE = re.compile(r"""\{%-?\s*endfragment\s*-?%\}""")


class FragmentExtension(Extension):
    """Jinja2 tag ``{% fragment "name" %}...{% endfragment %}``.

    Compiles to the enclosed body: full renders are unaffected.
    """

    tags = {"fragment"}

    def parse(self, parser: Parser) -> list[nodes.Node]:
        next(parser.stream)
        parser.parse_expression()
        return parser.parse_statements(("name:endfragment",), drop_needle=True)


@dataclass(frozen=True)
class FragmentMarker:
    """One open or close marker found in a template source.

    Attributes:
        kind: ``'open'`` or ``'close'``.
        name: Fragment name (None for close markers).
        start: Offset of the first character of the marker.
        end: Offset just past the marker.
    """

    kind: str
    name: str | None
    start: int
    end: int


class FragmentParser:
    """Locate fragment markers in a template source."""

    @staticmethod
    def normalize(source: str) -> str:
        return source.replace("\r\n", "\n").replace("\r", "\n")

    def parse(self, source: str) -> list[FragmentMarker]:
        """Return every marker of source (line endings normalized), by offset."""
        source = self.normalize(source)
        markers = [
            FragmentMarker("open", match.group("name"), match.start(), match.end())
            for match in _OPEN.finditer(source)
        ]
        markers.extend(
            FragmentMarker("close", None, match.start(), match.end())
            for match in _CLOSE.finditer(source)
        )
        return sorted(markers, key=lambda marker: marker.start)


def extract_fragment(source: str, name: str) -> str:
    """Return the source between the named marker and its matching close.

    Nested fragments are kept in the result; their markers are balanced
    against the outer one.

    Raises:
        FragmentError: If the fragment is missing, defined twice or not closed.
    """
    parser = FragmentParser()
    source = parser.normalize(source)
    markers = parser.parse(source)

    opens = [index for index, marker in enumerate(markers)
             if marker.kind == "open" and marker.name == name]
    if not opens:
        raise FragmentError(f"Fragment '{name}' not found in template.")
    if len(opens) > 1:
        raise FragmentError(f"Fragment '{name}' is defined {len(opens)} times.")

    start = markers[opens[0]]
    depth = 1
    for marker in markers[opens[0] + 1:]:
        depth += 1 if marker.kind == "open" else -1
        if depth == 0:
            return source[start.end:marker.start]

    raise FragmentError(f"Fragment '{name}' has no matching endfragment.")


def render_fragment(
    environment: Environment, template_name: str, fragment: str, **context: Any
) -> str:
    """Render only the named fragment of a template.

    Args:
        environment: Host Jinja2 environment; its loader provides the source.
        template_name: Template to read.
        fragment: Fragment name.
        **context: Template variables.

    Raises:
        FragmentError: If the fragment cannot be extracted.
        jinja2.TemplateNotFound: If the template does not exist.
    """
    if environment.loader is None:
        raise FragmentError("Rendering fragments requires an environment with a loader.")
    source, _, _ = environment.loader.get_source(environment, template_name)
    try:
        fragment_source = extract_fragment(source, fragment)
    except FragmentError as exc:
        log.warning("fragment_extraction_failed", template=template_name,
                    fragment=fragment, reason=str(exc))
        raise

    if FragmentExtension.identifier not in environment.extensions:
        environment.add_extension(FragmentExtension)
    return environment.from_string(fragment_source).render(**context)


def fragment_markers(name: str) -> tuple[str, str]:
    """Open and close markers for name, for generating templates."""
    return f'{{% fragment "{name}" %}}', "{% endfragment %}"
