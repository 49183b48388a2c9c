# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""List elements: ul, ol, li, dl, dt, dd."""

from __future__ import annotations

from typing import Any

from ..element import ContainerElement


class Ul(ContainerElement):
    tag_name = 'ul'


class Ol(ContainerElement):
    """Ordered list."""

    tag_name = 'ol'

    def start(self, value: Any):
        return self.attr('start', value)

    def type(self, marker: Any):
        """Marker type: '1', 'a', 'A', 'i' or 'I'."""
        return self.attr('type', marker)

    def reversed(self, is_reversed: Any = True):
        return self.attr('reversed', is_reversed)


class Li(ContainerElement):
    tag_name = 'li'

    def value(self, ordinal: Any):
        return self.attr('value', ordinal)


class Dl(ContainerElement):
    tag_name = 'dl'


class Dt(ContainerElement):
    tag_name = 'dt'


class Dd(ContainerElement):
    tag_name = 'dd'
