# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attribute mixins for element groups (table cells, links, meta, media, forms)."""

from __future__ import annotations

from typing import Any

from .attributes import _EnumeratedMixin

TABLE_SCOPES = ('row', 'col', 'rowgroup', 'colgroup')
CROSSORIGIN_VALUES = ('anonymous', 'use-credentials')
LOADING_VALUES = ('lazy', 'eager')
PRELOAD_VALUES = ('none', 'metadata', 'auto')


class TableAttributes(_EnumeratedMixin):
    """Attributes of table cells (th, td)."""

    def colspan(self, span: Any):
        return self.attr('colspan', span)

    def rowspan(self, span: Any):
        return self.attr('rowspan', span)

    def headers(self, header_ids: Any):
        return self.attr('headers', header_ids)

    def scope(self, scope: Any):
        """Set scope; only row, col, rowgroup and colgroup are accepted.

        Raises:
            InvalidAttributeError: For any other value. Existing attributes
                are left untouched.
        """
        scope = self.evaluate(scope)
        self._check_enumerated('scope', scope, TABLE_SCOPES,
                               "'row', 'col', 'rowgroup', or 'colgroup'")
        return self.attr('scope', scope)

    def abbr(self, abbreviation: Any):
        return self.attr('abbr', abbreviation)


class LinkAttributes:
    """Hyperlink attributes (a, link)."""

    def href(self, url: Any):
        return self.attr('href', url)

    def target(self, target: Any):
        return self.attr('target', target)

    def rel(self, relationship: Any):
        return self.attr('rel', relationship)

    def download(self, filename: Any = True):
        """True gives a bare attribute, False removes it, a string names the file."""
        return self.attr('download', self.evaluate(filename))

    def hreflang(self, lang: Any):
        return self.attr('hreflang', lang)

    def type(self, mime_type: Any):
        return self.attr('type', mime_type)

    def ping(self, urls: Any):
        return self.attr('ping', urls)

    def referrerpolicy(self, policy: Any):
        return self.attr('referrerpolicy', policy)


class MetaAttributes(_EnumeratedMixin):
    """Document metadata attributes (meta, link)."""

    def charset(self, charset: Any):
        return self.attr('charset', charset)

    def name(self, name: Any):
        return self.attr('name', name)

    def content(self, content: Any):
        return self.attr('content', content)

    def http_equiv(self, value: Any):
        return self.attr('http-equiv', value)

    def property(self, prop: Any):
        return self.attr('property', prop)

    def media(self, query: Any):
        return self.attr('media', query)

    def sizes(self, sizes: Any):
        return self.attr('sizes', sizes)

    def as_(self, kind: Any):
        return self.attr('as', kind)

    def crossorigin(self, value: Any = True):
        value = self.evaluate(value)
        if isinstance(value, bool):
            return self.attr('crossorigin', 'anonymous' if value else False)
        self._check_enumerated('crossorigin', value, CROSSORIGIN_VALUES,
                               "'anonymous' or 'use-credentials'")
        return self.attr('crossorigin', value)

    def integrity(self, digest: Any):
        return self.attr('integrity', digest)


class InteractiveAttributes:
    """Attributes of interactive elements (details, dialog)."""

    def open(self, is_open: Any = True):
        return self.attr('open', is_open)


class FormAttributes:
    """Attributes shared by form controls."""

    def name(self, name: Any):
        return self.attr('name', name)

    def value(self, value: Any):
        return self.attr('value', value)

    def form(self, form_id: Any):
        return self.attr('form', form_id)

    def autocomplete(self, value: Any):
        return self.attr('autocomplete', value)

    def autofocus(self, autofocus: Any = True):
        return self.attr('autofocus', autofocus)


class InputAttributes:
    """Constraint and state attributes of inputs, textareas and selects."""

    def type(self, input_type: Any):
        return self.attr('type', input_type)

    def placeholder(self, text: Any):
        return self.attr('placeholder', text)

    def required(self, required: Any = True):
        return self.attr('required', required)

    def disabled(self, disabled: Any = True):
        return self.attr('disabled', disabled)

    def readonly(self, readonly: Any = True):
        return self.attr('readonly', readonly)

    def checked(self, checked: Any = True):
        return self.attr('checked', checked)

    def multiple(self, multiple: Any = True):
        return self.attr('multiple', multiple)

    def min(self, value: Any):
        return self.attr('min', value)

    def max(self, value: Any):
        return self.attr('max', value)

    def step(self, value: Any):
        return self.attr('step', value)

    def minlength(self, length: Any):
        return self.attr('minlength', length)

    def maxlength(self, length: Any):
        return self.attr('maxlength', length)

    def pattern(self, regex: Any):
        return self.attr('pattern', regex)


class MediaAttributes(_EnumeratedMixin):
    """Source, sizing and playback attributes of embedded media."""

    def src(self, url: Any):
        return self.attr('src', url)

    def alt(self, text: Any):
        return self.attr('alt', text)

    def width(self, width: Any):
        return self.attr('width', width)

    def height(self, height: Any):
        return self.attr('height', height)

    def loading(self, value: Any):
        """Set loading; only lazy and eager are accepted."""
        value = self.evaluate(value)
        self._check_enumerated('loading', value, LOADING_VALUES, "'lazy' or 'eager'")
        return self.attr('loading', value)

    def controls(self, controls: Any = True):
        return self.attr('controls', controls)

    def autoplay(self, autoplay: Any = True):
        return self.attr('autoplay', autoplay)

    def loop(self, loop: Any = True):
        return self.attr('loop', loop)

    def muted(self, muted: Any = True):
        return self.attr('muted', muted)

    def poster(self, url: Any):
        return self.attr('poster', url)

    def preload(self, value: Any):
        """Set preload; only none, metadata and auto are accepted."""
        value = self.evaluate(value)
        self._check_enumerated('preload', value, PRELOAD_VALUES,
                               "'none', 'metadata', or 'auto'")
        return self.attr('preload', value)
