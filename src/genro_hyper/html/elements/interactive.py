# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Interactive elements: details, dialog, menu, summary."""

from __future__ import annotations

from ..element import ContainerElement
from ..mixins import InteractiveAttributes


class Details(InteractiveAttributes, ContainerElement):
    tag_name = 'details'


class Dialog(InteractiveAttributes, ContainerElement):
    tag_name = 'dialog'


class Menu(ContainerElement):
    tag_name = 'menu'


class Summary(ContainerElement):
    tag_name = 'summary'
