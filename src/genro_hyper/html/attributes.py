# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attribute mixins shared by every element.

- GlobalAttributes: HTML5 global attributes (id, title, lang, dir, ...)
- AriaAttributes: WAI-ARIA role and state attributes
- DataAttributes: plain ``data-*`` attributes
- DatastarAttributes: Datastar reactivity attributes (``data-signals``,
  ``data-on:*``, ``data-bind``, ...)
- ActionAttributes: backend action helpers (``post``, ``patchx``,
  ``navigate``, ...) written as ``data-on:*`` attributes

All setters go through ``attr()`` and return the element for chaining.
"""

from __future__ import annotations

import json
import re
from typing import Any, Iterable

from markupsafe import escape

from ..exceptions import InvalidAttributeError
from ..signals import current_signals, extract_locked_signals

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')

# JSON_HEX_TAG | JSON_HEX_APOS | JSON_HEX_AMP equivalents
_JSON_HEX = {'<': '\\u003C', '>': '\\u003E', '&': '\\u0026', "'": '\\u0027'}


def to_attribute_json(data: Any) -> str:
    """Compact JSON with markup-sensitive characters hex-escaped."""
    encoded = json.dumps(data, separators=(',', ':'), ensure_ascii=False)
    for char, replacement in _JSON_HEX.items():
        encoded = encoded.replace(char, replacement)
    return encoded


def kebab(name: str) -> str:
    """Convert camelCase or snake_case to kebab-case."""
    return _CAMEL_BOUNDARY.sub('-', name).replace('_', '-').lower()


def _bool_string(value: Any) -> str:
    return 'true' if value else 'false'


class _EnumeratedMixin:
    """Shared check for attributes restricted to a fixed set of values."""

    def _check_enumerated(
        self, attribute: str, value: Any, allowed: Iterable[str], expected: str
    ) -> None:
        if value not in tuple(allowed):
            raise InvalidAttributeError(
                f"Invalid value for {attribute} attribute on <{self.tag}> element. "
                f"Expected {expected}, got: '{escape(str(value))}'."
            )


class GlobalAttributes(_EnumeratedMixin):
    """HTML5 global attributes."""

    def id(self, value: Any):
        return self.attr('id', value)

    def title(self, value: Any):
        return self.attr('title', value)

    def lang(self, value: Any):
        return self.attr('lang', value)

    def dir(self, direction: Any):
        direction = self.evaluate(direction)
        self._check_enumerated('dir', direction, ('ltr', 'rtl', 'auto'),
                               "'ltr', 'rtl', or 'auto'")
        return self.attr('dir', direction)

    def hidden(self, hidden: Any = True):
        return self.attr('hidden', hidden)

    def tabindex(self, index: Any):
        return self.attr('tabindex', index)

    def accesskey(self, key: Any):
        return self.attr('accesskey', key)

    def style(self, css: Any):
        return self.attr('style', css)

    def translate(self, translate: Any = True):
        return self.attr('translate', 'yes' if self.evaluate(translate) else 'no')

    def contenteditable(self, editable: Any = True):
        editable = self.evaluate(editable)
        if isinstance(editable, bool):
            editable = _bool_string(editable)
        self._check_enumerated('contenteditable', editable,
                               ('true', 'false', 'plaintext-only'),
                               "true, false, or 'plaintext-only'")
        return self.attr('contenteditable', editable)

    def draggable(self, draggable: Any = True):
        return self.attr('draggable', _bool_string(self.evaluate(draggable)))

    def spellcheck(self, spellcheck: Any = True):
        return self.attr('spellcheck', _bool_string(self.evaluate(spellcheck)))


class AriaAttributes(_EnumeratedMixin):
    """WAI-ARIA attributes. Boolean states render as 'true'/'false'."""

    def role(self, role: Any):
        return self.attr('role', role)

    def aria_label(self, label: Any):
        return self.attr('aria-label', label)

    def aria_labelledby(self, ids: Any):
        return self.attr('aria-labelledby', ids)

    def aria_describedby(self, ids: Any):
        return self.attr('aria-describedby', ids)

    def aria_hidden(self, hidden: Any = True):
        return self.attr('aria-hidden', _bool_string(self.evaluate(hidden)))

    def aria_live(self, value: Any):
        value = self.evaluate(value)
        self._check_enumerated('aria-live', value, ('off', 'polite', 'assertive'),
                               "'off', 'polite', or 'assertive'")
        return self.attr('aria-live', value)

    def aria_expanded(self, expanded: Any = True):
        return self.attr('aria-expanded', _bool_string(self.evaluate(expanded)))

    def aria_selected(self, selected: Any = True):
        return self.attr('aria-selected', _bool_string(self.evaluate(selected)))

    def aria_checked(self, checked: Any = True):
        checked = self.evaluate(checked)
        if isinstance(checked, bool):
            checked = _bool_string(checked)
        self._check_enumerated('aria-checked', checked, ('true', 'false', 'mixed'),
                               "true, false, or 'mixed'")
        return self.attr('aria-checked', checked)

    def aria_disabled(self, disabled: Any = True):
        return self.attr('aria-disabled', _bool_string(self.evaluate(disabled)))

    def aria_current(self, value: Any = True):
        value = self.evaluate(value)
        if isinstance(value, bool):
            return self.attr('aria-current', 'true' if value else False)
        self._check_enumerated(
            'aria-current', value,
            ('page', 'step', 'location', 'date', 'time', 'true', 'false'),
            "a boolean or one of 'page', 'step', 'location', 'date', 'time'",
        )
        return self.attr('aria-current', value)


class DataAttributes:
    """Plain ``data-*`` attributes."""

    def data_attribute(self, name: str, value: Any):
        """Set ``data-{kebab(name)}``; ``userId`` and ``user_id`` give ``data-user-id``."""
        return self.attr(f'data-{kebab(name)}', value)


def _to_plain(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if hasattr(value, 'model_dump'):
        return _to_plain(value.model_dump())
    if hasattr(value, 'to_dict'):
        return _to_plain(value.to_dict())
    return value


def _with_modifiers(name: str, modifiers: Iterable[str] | None) -> str:
    if modifiers:
        return name + '__' + '__'.join(modifiers)
    return name


class DatastarAttributes:
    """Datastar reactivity attributes.

    Signals whose name ends with ``_`` are locked: when ``data_signals``
    declares them, their values are recorded in the active
    :class:`~genro_hyper.signals.LockedSignals` store so later requests can
    be checked for tampering.
    """

    def data_signals(self, data: Any):
        data = _to_plain(self.evaluate(data))
        if isinstance(data, dict) and extract_locked_signals(data):
            store = current_signals()
            if store is not None:
                store.store(data)
        return self.attr('data-signals', to_attribute_json(data))

    def data_bind(self, signal: str):
        return self.attr('data-bind', signal)

    def data_text(self, expression: str):
        return self.attr('data-text', expression)

    def data_on(self, event: str, action: str, modifiers: Iterable[str] | None = None):
        return self.attr('data-on:' + _with_modifiers(event, modifiers), action)

    def data_show(self, condition: str):
        return self.attr('data-show', condition)

    def data_if(self, condition: str):
        return self.attr('data-if', condition)

    def data_for(self, expression: str, key: str | None = None):
        name = 'data-for' if key is None else f'data-for__key.{key}'
        return self.attr(name, expression)

    def data_error(self, field: str):
        return self.attr('data-error', field)

    def data_attr(self, attribute: str, expression: str):
        return self.attr(f'data-attr:{attribute}', expression)

    def data_class(self, classes: dict[str, str]):
        return self.attr('data-class', json.dumps(classes, separators=(',', ':')))

    def data_class_if(self, class_name: str, condition: str):
        return self.attr(f'data-class:{class_name}', condition)

    def data_style(self, prop: str, expression: str):
        return self.attr(f'data-style:{prop}', expression)

    def data_computed(self, name: str, expression: str):
        return self.attr(f'data-computed:{name}', expression)

    def data_effect(self, expression: str):
        return self.attr('data-effect', expression)

    def data_init(self, expression: str):
        return self.attr('data-init', expression)

    def data_on_signal_patch(self, expression: str):
        return self.attr('data-on-signal-patch', expression)

    def data_indicator(self, signal: str):
        return self.attr('data-indicator', signal)

    def data_ref(self, name: str):
        return self.attr('data-ref', name)

    def data_on_intersect(self, expression: str, modifiers: Iterable[str] | None = None):
        return self.attr(_with_modifiers('data-on-intersect', modifiers), expression)

    def data_on_interval(self, expression: str, modifiers: Iterable[str] | None = None):
        return self.attr(_with_modifiers('data-on-interval', modifiers), expression)


class ActionAttributes:
    """Datastar backend actions bound to a DOM event.

    Each helper writes ``data-on:{event}="@{action}('{url}')"``. Without an
    explicit event the element's :attr:`default_event` is used. Options
    are appended as hex-escaped JSON.

    Example:
        >>> Button('Save').postx('/todos').to_html()
        '<button data-on:click="@postx(&#39;/todos&#39;)">Save</button>'
    """

    @property
    def default_event(self) -> str:
        return 'click'

    @staticmethod
    def _action(action: str, *arguments: str, options: dict[str, Any] | None = None) -> str:
        parts = [f"'{argument}'" for argument in arguments]
        if options:
            parts.append(to_attribute_json(_to_plain(options)))
        return f"@{action}({', '.join(parts)})"

    def _bind_action(self, action: str, url: str, event: str | None,
                     options: dict[str, Any] | None):
        return self.data_on(event or self.default_event, self._action(action, url, options=options))

    def get(self, url: str, event: str | None = None, options: dict[str, Any] | None = None):
        return self._bind_action('get', url, event, options)

    def post(self, url: str, event: str | None = None, options: dict[str, Any] | None = None):
        return self._bind_action('post', url, event, options)

    def put(self, url: str, event: str | None = None, options: dict[str, Any] | None = None):
        return self._bind_action('put', url, event, options)

    def patch(self, url: str, event: str | None = None, options: dict[str, Any] | None = None):
        return self._bind_action('patch', url, event, options)

    def delete(self, url: str, event: str | None = None, options: dict[str, Any] | None = None):
        return self._bind_action('delete', url, event, options)

    # x variants send the page CSRF token as a header

    def postx(self, url: str, event: str | None = None, options: dict[str, Any] | None = None):
        return self._bind_action('postx', url, event, options)

    def putx(self, url: str, event: str | None = None, options: dict[str, Any] | None = None):
        return self._bind_action('putx', url, event, options)

    def patchx(self, url: str, event: str | None = None, options: dict[str, Any] | None = None):
        return self._bind_action('patchx', url, event, options)

    def deletex(self, url: str, event: str | None = None, options: dict[str, Any] | None = None):
        return self._bind_action('deletex', url, event, options)

    def navigate(self, url: str, event: str | None = None, key: str | None = None,
                 options: dict[str, Any] | None = None):
        """Client-side navigation; key names the region to update."""
        arguments = (url,) if key is None else (url, key)
        return self.data_on(event or self.default_event,
                            self._action('navigate', *arguments, options=options))

    def dispatch(self, event_name: str, event: str | None = None,
                 detail: dict[str, Any] | None = None):
        """Dispatch a browser CustomEvent, with optional detail payload."""
        return self.data_on(event or self.default_event,
                            self._action('dispatch', event_name, options=detail))
