# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Embedded and scripting elements: noscript, portal, slot, wbr."""

from __future__ import annotations

from typing import Any

from ..element import ContainerElement, VoidElement


class Noscript(ContainerElement):
    tag_name = 'noscript'


class Portal(ContainerElement):
    tag_name = 'portal'

    def src(self, url: Any):
        return self.attr('src', url)

    def referrerpolicy(self, policy: Any):
        return self.attr('referrerpolicy', policy)


class Slot(ContainerElement):
    """Web component ``<slot>``."""

    tag_name = 'slot'

    def name(self, name: Any):
        return self.attr('name', name)


class Wbr(VoidElement):
    tag_name = 'wbr'

