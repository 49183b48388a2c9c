# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Text-level elements: anchors, headings, phrasing and edit content."""

from __future__ import annotations

from typing import Any

from ..element import ContainerElement, TextElement
from ..mixins import LinkAttributes


class A(LinkAttributes, ContainerElement):
    """Hyperlink.

    Example:
        >>> A('Docs').href('/docs').target('_blank').to_html()
        '<a href="/docs" target="_blank">Docs</a>'
    """

    tag_name = 'a'


class H1(ContainerElement):
    tag_name = 'h1'


class H2(ContainerElement):
    tag_name = 'h2'


class H3(ContainerElement):
    tag_name = 'h3'


class H4(ContainerElement):
    tag_name = 'h4'


class H5(ContainerElement):
    tag_name = 'h5'


class H6(ContainerElement):
    tag_name = 'h6'


class Strong(ContainerElement):
    tag_name = 'strong'


class Em(ContainerElement):
    tag_name = 'em'


class Small(ContainerElement):
    tag_name = 'small'


class Code(ContainerElement):
    tag_name = 'code'


class Pre(ContainerElement):
    tag_name = 'pre'


class Abbr(ContainerElement):
    tag_name = 'abbr'


class Address(ContainerElement):
    tag_name = 'address'


class B(ContainerElement):
    tag_name = 'b'


class Bdi(ContainerElement):
    tag_name = 'bdi'


class Bdo(ContainerElement):
    """Direction override; set the direction with ``dir()``."""

    tag_name = 'bdo'


class Blockquote(ContainerElement):
    tag_name = 'blockquote'

    def cite(self, url: Any):
        return self.attr('cite', url)


class Cite(ContainerElement):
    tag_name = 'cite'


class Data(ContainerElement):
    tag_name = 'data'

    def value(self, value: Any):
        return self.attr('value', value)


class Dfn(ContainerElement):
    tag_name = 'dfn'


class I(ContainerElement):  # noqa: E742
    tag_name = 'i'


class Mark(ContainerElement):
    tag_name = 'mark'


class Q(ContainerElement):
    tag_name = 'q'

    def cite(self, url: Any):
        return self.attr('cite', url)


class S(ContainerElement):
    tag_name = 's'


class Sub(ContainerElement):
    tag_name = 'sub'


class Sup(ContainerElement):
    tag_name = 'sup'


class U(ContainerElement):
    tag_name = 'u'


class Ruby(ContainerElement):
    tag_name = 'ruby'


class Rt(ContainerElement):
    tag_name = 'rt'


class Rp(ContainerElement):
    tag_name = 'rp'


class Del(ContainerElement):
    """Removed text; ``Ins`` is its counterpart."""

    tag_name = 'del'

    def cite(self, url: Any):
        return self.attr('cite', url)

    def datetime(self, when: Any):
        return self.attr('datetime', when)


class Ins(ContainerElement):
    tag_name = 'ins'

    def cite(self, url: Any):
        return self.attr('cite', url)

    def datetime(self, when: Any):
        return self.attr('datetime', when)


class Time(ContainerElement):
    """Machine-readable date or time.

    Example:
        >>> Time('Monday').datetime('2025-01-06').to_html()
        '<time datetime="2025-01-06">Monday</time>'
    """

    tag_name = 'time'

    def datetime(self, when: Any):
        return self.attr('datetime', when)


class Kbd(TextElement):
    tag_name = 'kbd'


class Samp(TextElement):
    tag_name = 'samp'


class Var(TextElement):
    tag_name = 'var'
