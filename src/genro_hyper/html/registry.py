# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element factory and custom element registry.

Built-in elements register themselves through ``Element.__init_subclass__``.
Applications add their own components with :class:`ElementRegistry`; both
are reachable through the :data:`Html` factory.

Example:
    >>> Html.div('Hello').class_('greeting').to_html()
    '<div class="greeting">Hello</div>'
    >>> ElementRegistry.register('user-card', UserCard)
    >>> Html.user_card(user).to_html()
"""

from __future__ import annotations

from typing import Any, Callable

from .element import Element, GenericElement
from .elements import HtmlDocument


def _normalize(name: str) -> str:
    return name.replace('-', '_')


class ElementRegistry:
    """Process-wide registry of custom element classes.

    Names are normalized from kebab-case to snake_case, so ``'user-card'``
    is reachable as ``Html.user_card``.
    """

    _custom: dict[str, type[Element]] = {}

    @classmethod
    def register(cls, name: str, element_class: type[Element]) -> None:
        """Register element_class under name.

        Raises:
            TypeError: If element_class is not an Element subclass.
        """
        if not (isinstance(element_class, type) and issubclass(element_class, Element)):
            raise TypeError(
                f"Custom element '{name}' must extend Element. "
                f"Got: {getattr(element_class, '__name__', type(element_class).__name__)}"
            )
        cls._custom[_normalize(name)] = element_class

    @classmethod
    def has(cls, name: str) -> bool:
        return _normalize(name) in cls._custom

    @classmethod
    def get(cls, name: str) -> type[Element] | None:
        return cls._custom.get(_normalize(name))

    @classmethod
    def make(cls, name: str, *args: Any, **kwargs: Any) -> Element:
        """Instantiate a registered custom element.

        Raises:
            KeyError: If name is not registered.
        """
        element_class = cls.get(name)
        if element_class is None:
            raise KeyError(f"Custom element '{name}' is not registered.")
        return element_class.make(*args, **kwargs)

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._custom.pop(_normalize(name), None)

    @classmethod
    def all(cls) -> dict[str, type[Element]]:
        return dict(cls._custom)

    @classmethod
    def clear(cls) -> None:
        cls._custom.clear()


class HtmlFactory:
    """Attribute-style access to every known element.

    ``Html.<name>(*args)`` looks up custom elements first, then the
    built-in tags registered on :class:`Element`.
    """

    def __getattr__(self, name: str) -> Callable[..., Element]:
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        custom = ElementRegistry.get(name)
        if custom is not None:
            return custom.make

        element_tags = Element._element_tags
        tag = _normalize(name).replace('_', '-')
        for key in (name, tag):
            if key in element_tags:
                return element_tags[key].make

        raise AttributeError(f"'{type(self).__name__}' has no element '{name}'")

    def element(self, tag: str, text: Any = None) -> GenericElement:
        """Generic container for any tag, e.g. custom elements."""
        return GenericElement(tag, text)

    def document(self) -> HtmlDocument:
        """``<html>`` root with the doctype enabled."""
        return HtmlDocument().with_doctype()

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(Element._element_tags)
                      | set(ElementRegistry.all()))


Html = HtmlFactory()
