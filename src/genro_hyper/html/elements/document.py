# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Document elements: html, head, body, base, title."""

from __future__ import annotations

from typing import Any

from ..element import DOCTYPE, ContainerElement, TextElement, VoidElement


class HtmlDocument(ContainerElement):
    """The ``<html>`` root element.

    Example:
        >>> HtmlDocument().lang('en').with_doctype().to_html()
        '<!DOCTYPE html>\\n<html lang="en"></html>'
    """

    tag_name = 'html'

    def __init__(self, text: Any = None, tag: str | None = None) -> None:
        super().__init__(text, tag)
        self._doctype = False

    def xmlns(self, namespace: Any):
        return self.attr('xmlns', namespace)

    def with_doctype(self, enabled: bool = True):
        """Prefix the output with ``<!DOCTYPE html>`` and a newline."""
        self._doctype = enabled
        return self

    def _render(self) -> str:
        html = super()._render()
        return DOCTYPE + html if self._doctype else html


class Head(ContainerElement):
    tag_name = 'head'


class Body(ContainerElement):
    tag_name = 'body'


class Base(VoidElement):
    """``<base>``: document base URL and default target."""

    tag_name = 'base'

    def href(self, url: Any):
        return self.attr('href', url)

    def target(self, target: Any):
        return self.attr('target', target)


class Title(TextElement):
    tag_name = 'title'
