# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Form elements.

Input, Textarea and Select carry :class:`HasValidation`; Form carries
:class:`ManagesValidation` and coordinates its fields at render time.
"""

from __future__ import annotations

from typing import Any

from ..element import ContainerElement, TextElement, VoidElement
from ..mixins import FormAttributes, InputAttributes
from ..validation import HasValidation, ManagesValidation

# Inputs whose value changes on click or pick rather than on keystroke
_CHANGE_EVENT_TYPES = frozenset({'checkbox', 'radio', 'file', 'color'})


class Form(ManagesValidation, ContainerElement):
    """``<form>``.

    Example:
        >>> Form().action('/login').method('post').novalidate().to_html()
        '<form action="/login" method="post" novalidate></form>'
    """

    tag_name = 'form'

    @property
    def default_event(self) -> str:
        return 'submit__prevent'

    def action(self, url: Any):
        return self.attr('action', url)

    def method(self, method: Any):
        return self.attr('method', method)

    def enctype(self, enctype: Any):
        return self.attr('enctype', enctype)

    def novalidate(self, novalidate: Any = True):
        return self.attr('novalidate', novalidate)

    def target(self, target: Any):
        return self.attr('target', target)


class Input(HasValidation, FormAttributes, InputAttributes, VoidElement):
    tag_name = 'input'

    @property
    def default_event(self) -> str:
        input_type = self.get_attr('type')
        return 'change' if input_type in _CHANGE_EVENT_TYPES else 'input'

    def size(self, size: Any):
        return self.attr('size', size)

    def list(self, datalist_id: Any):
        return self.attr('list', datalist_id)

    def accept(self, mime_types: Any):
        return self.attr('accept', mime_types)


class Textarea(HasValidation, FormAttributes, InputAttributes, TextElement):
    """``<textarea>``; the constructor argument is its escaped text."""

    tag_name = 'textarea'

    def rows(self, rows: Any):
        return self.attr('rows', rows)

    def cols(self, cols: Any):
        return self.attr('cols', cols)

    def wrap(self, wrap: Any):
        return self.attr('wrap', wrap)


class Select(HasValidation, FormAttributes, InputAttributes, ContainerElement):
    tag_name = 'select'

    @property
    def default_event(self) -> str:
        return 'change'

    def size(self, size: Any):
        return self.attr('size', size)


class Option(TextElement):
    tag_name = 'option'

    def value(self, value: Any):
        return self.attr('value', value)

    def selected(self, selected: Any = True):
        return self.attr('selected', selected)

    def disabled(self, disabled: Any = True):
        return self.attr('disabled', disabled)

    def label(self, label: Any):
        return self.attr('label', label)


class Label(ContainerElement):
    tag_name = 'label'

    def for_(self, input_id: Any):
        return self.attr('for', input_id)


class Button(FormAttributes, ContainerElement):
    tag_name = 'button'

    def type(self, button_type: Any):
        return self.attr('type', button_type)

    def disabled(self, disabled: Any = True):
        return self.attr('disabled', disabled)


class Fieldset(FormAttributes, ContainerElement):
    tag_name = 'fieldset'

    def disabled(self, disabled: Any = True):
        return self.attr('disabled', disabled)


class Legend(ContainerElement):
    tag_name = 'legend'


class Datalist(ContainerElement):
    """Suggestion list bound to an input through its ``list`` attribute."""

    tag_name = 'datalist'


class Optgroup(ContainerElement):
    tag_name = 'optgroup'

    def label(self, label: Any):
        return self.attr('label', label)

    def disabled(self, disabled: Any = True):
        return self.attr('disabled', disabled)


class Meter(ContainerElement):
    """Scalar gauge within a known range.

    Example:
        >>> Meter().value(0.7).low(0.2).high(0.8).to_html()
        '<meter value="0.7" low="0.2" high="0.8"></meter>'
    """

    tag_name = 'meter'

    def value(self, value: Any):
        return self.attr('value', value)

    def min(self, value: Any):
        return self.attr('min', value)

    def max(self, value: Any):
        return self.attr('max', value)

    def low(self, value: Any):
        return self.attr('low', value)

    def high(self, value: Any):
        return self.attr('high', value)

    def optimum(self, value: Any):
        return self.attr('optimum', value)


class Progress(ContainerElement):
    tag_name = 'progress'

    def value(self, value: Any):
        return self.attr('value', value)

    def max(self, value: Any):
        return self.attr('max', value)


class Output(FormAttributes, ContainerElement):
    tag_name = 'output'

    def for_(self, input_ids: Any):
        """Space-separated ids of the controls the result is computed from."""
        return self.attr('for', input_ids)
