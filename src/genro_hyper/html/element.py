# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element base classes - the foundation of every HTML element.

Hierarchy:
    Element            tag, attributes, classes, rendering
    ├── TextElement    single text or raw-HTML body (title, script, style)
    │   └── ContainerElement   ordered children (div, li, form, ...)
    └── VoidElement    no children, no closing tag (meta, link, wbr, ...)

Every concrete subclass declaring ``tag_name`` is registered in
``Element._element_tags`` when the class is created, which is what the
:class:`~genro_hyper.html.registry.Html` factory looks up.

Example:
    >>> Div().id('main').class_('card shadow').content(
    ...     P('Hello <World>'),
    ...     Hr(),
    ... ).to_html()
    '<div class="card shadow" id="main"><p>Hello &lt;World&gt;</p><hr /></div>'

Escaping:
    Attribute names and values, text and string children are escaped with
    markupsafe. ``markupsafe.Markup`` children and ``html()`` content are
    emitted verbatim: sanitizing them is the caller's responsibility.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar, Iterator

from markupsafe import Markup, escape

from ..exceptions import CircularReferenceError, InvalidTagError, VoidElementError
from .attributes import (
    ActionAttributes,
    AriaAttributes,
    DataAttributes,
    DatastarAttributes,
    GlobalAttributes,
)
from .evaluation import _MISSING, ConditionalRendering, EvaluatesClosures, is_deferred

_TAG_PATTERN = re.compile(r'^[a-zA-Z][a-zA-Z0-9-]*$')
_WHITESPACE = re.compile(r'\s+')

MAX_NESTING_DEPTH = 100

# https://html.spec.whatwg.org/multipage/syntax.html#void-elements
VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
})

DOCTYPE = '<!DOCTYPE html>\n'


def validate_tag(tag: str) -> str:
    """Return the lowercased tag, or raise InvalidTagError."""
    if not tag:
        raise InvalidTagError('HTML tag name cannot be empty.')
    if not _TAG_PATTERN.match(tag):
        raise InvalidTagError(
            f'Invalid HTML tag name: "{escape(tag)}". Tag names must start with '
            'a letter and contain only letters, numbers, and hyphens.'
        )
    return tag.lower()


def _flatten(items: Any, depth: int = 0) -> Iterator[Any]:
    if depth > MAX_NESTING_DEPTH:
        raise RecursionError(
            f'Maximum nesting depth of {MAX_NESTING_DEPTH} exceeded. '
            'Possible circular reference or overly deep structure.'
        )
    for item in items:
        if isinstance(item, (list, tuple)):
            yield from _flatten(item, depth + 1)
        else:
            yield item


class Element(
    ConditionalRendering,
    EvaluatesClosures,
    GlobalAttributes,
    AriaAttributes,
    DataAttributes,
    DatastarAttributes,
    ActionAttributes,
):
    """Base HTML element: a tag, an attribute bag and a class list.

    Attributes set with :meth:`attr` keep callables as-is; they are
    evaluated at render time. ``True`` and ``''`` render as bare boolean
    attributes, ``False`` removes the attribute and ``None`` omits it.

    Attributes:
        tag_name: Tag registered for the class (None for abstract bases).
    """

    tag_name: ClassVar[str | None] = None

    # Class-level dict mapping tag -> element class
    _element_tags: ClassVar[dict[str, type[Element]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Register the class under its tag_name, if it declares one."""
        super().__init_subclass__(**kwargs)
        tag = cls.__dict__.get('tag_name')
        if tag:
            Element._element_tags[tag] = cls

    def __init__(self, tag: str | None = None) -> None:
        tag = tag or type(self).tag_name
        self.tag = validate_tag(tag or '')
        self._attributes: dict[str, Any] = {}
        self._classes: list[Any] = []

    @classmethod
    def make(cls, *args: Any, **kwargs: Any) -> Element:
        """Factory alias for the constructor."""
        return cls(*args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{self.tag}>, attributes={list(self._attributes)})"

    # ==================== Attributes ====================

    def attr(self, name: str, value: Any) -> Element:
        """Set or overwrite one attribute.

        Args:
            name: Attribute name.
            value: Literal value, or a callable resolved at render time.
                A literal ``False`` removes the attribute.

        Returns:
            self, for chaining.
        """
        if value is False:
            self._attributes.pop(name, None)
        else:
            self._attributes[name] = value
        return self

    def get_attr(self, name: str, default: Any = None) -> Any:
        """Return the resolved value of an attribute, or default."""
        if name not in self._attributes:
            return default
        return self.evaluate(self._attributes[name])

    def has_attr(self, name: str) -> bool:
        return name in self._attributes

    @property
    def attributes(self) -> dict[str, Any]:
        """Copy of the raw attribute bag (callables unresolved)."""
        return dict(self._attributes)

    def class_(self, *classes: Any) -> Element:
        """Append CSS classes.

        Accepts strings (split on whitespace), nested lists/tuples and
        callables returning either. Order is preserved; nothing is merged.
        """
        for entry in classes:
            if is_deferred(entry):
                self._classes.append(entry)
            else:
                self._classes.extend(self._normalize_classes(entry))
        return self

    @staticmethod
    def _normalize_classes(entry: Any) -> list[str]:
        if not entry:
            return []
        if isinstance(entry, str):
            entry = [entry]
        elif not isinstance(entry, (list, tuple)):
            entry = [str(entry)]
        names: list[str] = []
        for item in _flatten(entry):
            if isinstance(item, str):
                names.extend(name for name in _WHITESPACE.split(item.strip()) if name)
        return names

    @property
    def classes(self) -> list[str]:
        """Resolved class names in insertion order."""
        names: list[str] = []
        for entry in self._classes:
            if is_deferred(entry):
                names.extend(self._normalize_classes(self.evaluate(entry)))
            else:
                names.append(entry)
        return names

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_ELEMENTS

    def _default_injection(self, name: str) -> Any:
        if name == 'element':
            return self
        if name == 'tag':
            return self.tag
        if name == 'attributes':
            return self.attributes
        if name == 'classes':
            return list(self._classes)
        return _MISSING

    # ==================== Tree ====================

    def contains(self, element: Element) -> bool:
        """True if element is a descendant of this one."""
        return False

    # ==================== Rendering ====================

    def render_attributes(self) -> str:
        """Serialize class and attributes, with a leading space if non-empty."""
        parts: list[str] = []

        classes = self.classes
        if classes:
            parts.append(f'class="{escape(" ".join(classes))}"')

        for name, value in self._attributes.items():
            value = self.evaluate(value)
            if value is None or value is False:
                continue
            if value is True or value == '':
                parts.append(str(escape(name)))
            else:
                parts.append(f'{escape(name)}="{escape(value)}"')

        return ' ' + ' '.join(parts) if parts else ''

    def _before_render(self) -> None:
        """Hook run at the start of to_html()."""
        pass

    def _render_after(self) -> str:
        """Markup emitted right after the element (e.g. error divs)."""
        return ''

    def _render(self) -> str:
        raise NotImplementedError

    def to_html(self) -> str:
        """Serialize the element and its subtree, depth first."""
        self._before_render()
        return self._render() + self._render_after()

    def render(self, layout: str | None = None, environment: Any = None) -> str:
        """Render the element, optionally wrapped in a Jinja2 layout.

        Args:
            layout: Template name; the element HTML is passed as ``slot``.
            environment: jinja2.Environment used to load the layout.
        """
        html = self.to_html()
        if layout is None:
            return html
        if environment is None:
            raise ValueError('Rendering with a layout requires a Jinja2 environment')
        return environment.get_template(layout).render(slot=Markup(html))

    def __str__(self) -> str:
        return self.to_html()

    def __html__(self) -> Markup:
        return Markup(self.to_html())

    def debug(self) -> dict[str, Any]:
        """Snapshot of the element state for debugging."""
        return {
            'tag': self.tag,
            'class': type(self).__name__,
            'attributes': self.attributes,
            'classes': self.classes,
            'is_void': self.is_void,
            'children_count': 0,
        }


class TextElement(Element):
    """Element with a single text (escaped) or raw-HTML body.

    ``text()`` and ``html()`` are mutually exclusive: the last call wins.
    """

    def __init__(self, text: Any = None, tag: str | None = None) -> None:
        super().__init__(tag)
        self._text: Any = None
        self._raw: Any = None
        if text:
            self.text(text)

    def text(self, content: Any) -> TextElement:
        """Set text content, escaped at render time."""
        self._text = content
        self._raw = None
        return self

    def html(self, content: Any) -> TextElement:
        """Set raw HTML content, emitted unescaped."""
        self._raw = content
        self._text = None
        return self

    def _render_body(self) -> str:
        if self._raw is not None:
            return str(self.evaluate(self._raw))
        if self._text is not None:
            return str(escape(self.evaluate(self._text)))
        return ''

    def _render(self) -> str:
        return f'<{self.tag}{self.render_attributes()}>{self._render_body()}</{self.tag}>'


class ContainerElement(TextElement):
    """Element holding an ordered list of children.

    Children are elements, strings (escaped on render) or objects exposing
    ``__html__`` such as ``markupsafe.Markup`` (emitted verbatim).
    """

    def __init__(self, text: Any = None, tag: str | None = None) -> None:
        self._children: list[Any] = []
        super().__init__(text, tag)

    def content(self, *items: Any) -> ContainerElement:
        """Append children.

        Args:
            *items: Elements, strings, Markup, lists/tuples (flattened),
                callables (evaluated now) or None (skipped).

        Raises:
            CircularReferenceError: If an item is or contains this element.
            TypeError: For any other item type.
        """
        for item in _flatten(items):
            item = self.evaluate(item)
            if isinstance(item, (list, tuple)):
                self.content(*item)
                continue
            if item is None:
                continue
            if isinstance(item, Element):
                if item is self or item.contains(self):
                    raise CircularReferenceError(
                        'Circular reference detected: element cannot contain itself. '
                        f'Element of type {type(item).__name__} is already in the tree.'
                    )
                self._children.append(item)
            elif isinstance(item, str) or hasattr(item, '__html__'):
                self._children.append(item)
            else:
                raise TypeError(
                    'Content must be str, Element, list, callable, or None. '
                    f'Got: {type(item).__name__}'
                )
        return self

    def child(self, item: Any) -> ContainerElement:
        return self.content(item)

    def children(self, items: Any) -> ContainerElement:
        return self.content(*items)

    def html(self, content: Any) -> ContainerElement:
        """Append raw HTML as a child, emitted unescaped."""
        self._children.append(Markup(self.evaluate(content)))
        return self

    def get_children(self) -> list[Any]:
        return list(self._children)

    def contains(self, element: Element) -> bool:
        for child in self._children:
            if child is element:
                return True
            if isinstance(child, Element) and child.contains(element):
                return True
        return False

    def walk(self) -> Iterator[Element]:
        """Yield descendant elements depth first, parents before children."""
        for child in self._children:
            if isinstance(child, Element):
                yield child
                if isinstance(child, ContainerElement):
                    yield from child.walk()

    def _default_injection(self, name: str) -> Any:
        if name == 'container':
            return self
        if name == 'children':
            return self.get_children()
        return super()._default_injection(name)

    @staticmethod
    def _render_child(child: Any) -> str:
        if isinstance(child, Element):
            return child.to_html()
        if hasattr(child, '__html__'):
            return str(child.__html__())
        return str(escape(child))

    def _render_body(self) -> str:
        parts = []
        if self._text is not None:
            parts.append(str(escape(self.evaluate(self._text))))
        parts.extend(self._render_child(child) for child in self._children)
        return ''.join(parts)

    def debug(self) -> dict[str, Any]:
        info = super().debug()
        info['children_count'] = len(self._children)
        return info


class VoidElement(Element):
    """Self-closing element: never holds children, never emits a closing tag."""

    def _reject(self, what: str) -> VoidElementError:
        return VoidElementError(f'Void element <{self.tag}> cannot have {what}')

    def content(self, *items: Any) -> VoidElement:
        raise self._reject('children')

    def child(self, item: Any) -> VoidElement:
        raise self._reject('children')

    def children(self, items: Any) -> VoidElement:
        raise self._reject('children')

    def text(self, content: Any) -> VoidElement:
        raise self._reject('text content')

    def html(self, content: Any) -> VoidElement:
        raise self._reject('HTML content')

    @property
    def is_void(self) -> bool:
        return True

    def _render(self) -> str:
        return f'<{self.tag}{self.render_attributes()} />'


class GenericElement(ContainerElement):
    """Container element for an arbitrary tag (custom elements, rare tags)."""

    def __init__(self, tag: str, text: Any = None) -> None:
        super().__init__(text, tag)
