# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Table elements."""

from __future__ import annotations

from typing import Any

from ..element import ContainerElement, VoidElement
from ..mixins import TableAttributes


class Table(ContainerElement):
    tag_name = 'table'


class Caption(ContainerElement):
    tag_name = 'caption'


class Thead(ContainerElement):
    tag_name = 'thead'


class Tbody(ContainerElement):
    tag_name = 'tbody'


class Tfoot(ContainerElement):
    tag_name = 'tfoot'


class Tr(ContainerElement):
    tag_name = 'tr'


class Th(TableAttributes, ContainerElement):
    """Header cell. ``scope()`` only accepts row, col, rowgroup, colgroup."""

    tag_name = 'th'


class Td(TableAttributes, ContainerElement):
    tag_name = 'td'


class Colgroup(TableAttributes, ContainerElement):
    tag_name = 'colgroup'

    def span(self, span: Any):
        return self.attr('span', span)


class Col(TableAttributes, VoidElement):
    """Column styling hook inside a ``<colgroup>``."""

    tag_name = 'col'

    def span(self, span: Any):
        return self.attr('span', span)
