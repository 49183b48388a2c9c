# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Metadata elements: link, meta, script, style.

Script and style bodies are emitted raw: JavaScript and CSS must not be
HTML-escaped.
"""

from __future__ import annotations

from typing import Any

from ..element import TextElement, VoidElement
from ..mixins import LinkAttributes, MetaAttributes


class Link(LinkAttributes, MetaAttributes, VoidElement):
    tag_name = 'link'


class Meta(MetaAttributes, VoidElement):
    tag_name = 'meta'


class Script(TextElement):
    """``<script>`` with a raw body.

    Example:
        >>> Script('if (a < b) go()').to_html()
        '<script>if (a < b) go()</script>'
    """

    tag_name = 'script'

    def __init__(self, content: Any = None, tag: str | None = None) -> None:
        super().__init__(None, tag)
        if content:
            self.html(content)

    def raw_content(self, content: Any):
        return self.html(content)

    def src(self, url: Any):
        return self.attr('src', url)

    def type(self, mime_type: Any):
        return self.attr('type', mime_type)

    def async_(self, is_async: Any = True):
        return self.attr('async', is_async)

    def defer(self, defer: Any = True):
        return self.attr('defer', defer)


class Style(TextElement):
    """``<style>`` with a raw CSS body."""

    tag_name = 'style'

    def __init__(self, css: Any = None, tag: str | None = None) -> None:
        super().__init__(None, tag)
        if css:
            self.html(css)

    def raw_content(self, css: Any):
        return self.html(css)

    def media(self, query: Any):
        return self.attr('media', query)
