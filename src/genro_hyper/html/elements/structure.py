# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Structural and sectioning elements."""

from __future__ import annotations

from ..element import ContainerElement, VoidElement


class Div(ContainerElement):
    tag_name = 'div'


class Span(ContainerElement):
    tag_name = 'span'


class P(ContainerElement):
    tag_name = 'p'


class Main(ContainerElement):
    tag_name = 'main'


class Section(ContainerElement):
    tag_name = 'section'


class Article(ContainerElement):
    tag_name = 'article'


class Aside(ContainerElement):
    tag_name = 'aside'


class Header(ContainerElement):
    tag_name = 'header'


class Footer(ContainerElement):
    tag_name = 'footer'


class Nav(ContainerElement):
    tag_name = 'nav'


class Hr(VoidElement):
    tag_name = 'hr'


class Br(VoidElement):
    tag_name = 'br'


class Search(ContainerElement):
    tag_name = 'search'
