# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Icon element: renders provider SVG with the element's attributes.

The SVG comes from the :class:`~genro_hyper.services.icons.IconManager`
bound with ``use_icon_manager()`` (or passed with :meth:`Icon.manager`).
Class, id, data-* and ARIA attributes set on the element are injected
into the opening ``<svg`` tag.

Example:
    >>> with use_icon_manager(manager):
    ...     Icon('home').lg().class_('text-blue-500').to_html()
    '<svg class="text-blue-500 h-6 w-6" aria-hidden="true" ...'
"""

from __future__ import annotations

import re
from typing import Any

from markupsafe import escape

from ...services.icons import IconManager, current_icon_manager
from ..element import Element

SIZE_CLASSES = {
    'xs': 'h-3 w-3',
    'sm': 'h-4 w-4',
    'md': 'h-5 w-5',
    'lg': 'h-6 w-6',
    'xl': 'h-8 w-8',
    '2xl': 'h-10 w-10',
    '3xl': 'h-12 w-12',
}

_CUSTOM_SIZE = re.compile(r'\b(h-|w-|size-)\d+')
_SVG_OPEN = re.compile(r'<svg([^>]*)>')


class Icon(Element):
    """An SVG icon resolved by name.

    Args:
        name: Icon name, e.g. ``'home'`` or ``'heroicon-s-home'``.
        provider: Provider name; None searches the default provider first.
    """

    tag_name = 'icon'

    def __init__(self, name: str = '', provider: str | None = None) -> None:
        super().__init__('svg')
        self.name = name
        self._provider = provider
        self._variant: str | None = None
        self._size = 'md'
        self._semantic = False
        self._label: str | None = None
        self._manager: IconManager | None = None

    def provider(self, provider: str) -> Icon:
        self._provider = provider
        return self

    def variant(self, variant: str) -> Icon:
        self._variant = variant
        return self

    def solid(self) -> Icon:
        return self.variant('solid')

    def outline(self) -> Icon:
        return self.variant('outline')

    def mini(self) -> Icon:
        return self.variant('mini')

    def micro(self) -> Icon:
        return self.variant('micro')

    def size(self, size: str) -> Icon:
        """A preset (xs, sm, md, lg, xl, 2xl, 3xl) or custom classes."""
        self._size = size
        return self

    def xs(self) -> Icon:
        return self.size('xs')

    def sm(self) -> Icon:
        return self.size('sm')

    def md(self) -> Icon:
        return self.size('md')

    def lg(self) -> Icon:
        return self.size('lg')

    def xl(self) -> Icon:
        return self.size('xl')

    def xxl(self) -> Icon:
        return self.size('2xl')

    def xxxl(self) -> Icon:
        return self.size('3xl')

    def semantic(self, value: bool | str = True) -> Icon:
        """Expose the icon to screen readers; a string is its label."""
        if isinstance(value, str):
            self._semantic = True
            self._label = value
        else:
            self._semantic = value
        return self

    def manager(self, manager: IconManager) -> Icon:
        """Resolve with this manager instead of the context-bound one."""
        self._manager = manager
        return self

    @property
    def classes(self) -> list[str]:
        names = super().classes
        if not _CUSTOM_SIZE.search(' '.join(names)):
            names.extend(SIZE_CLASSES.get(self._size, self._size).split())
        return names

    def _before_render(self) -> None:
        super()._before_render()
        if self._semantic:
            self.attr('aria-hidden', False)
            self.attr('role', 'img')
            if self._label is not None:
                self.attr('aria-label', self._label)
        else:
            self.attr('aria-hidden', 'true')

    def _render(self) -> str:
        manager = self._manager or current_icon_manager()
        svg = manager.resolve(self.name, self._provider, self._variant)
        if self._semantic and self._label is not None:
            title = f'<title>{escape(self._label)}</title>'
            svg = _SVG_OPEN.sub(lambda match: match.group(0) + title, svg, count=1)
        return svg.replace('<svg', '<svg' + self.render_attributes(), 1)

    def debug(self) -> dict[str, Any]:
        info = super().debug()
        info.update(name=self.name, provider=self._provider, variant=self._variant)
        return info
