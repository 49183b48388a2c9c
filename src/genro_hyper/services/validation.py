# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Validation helpers: rule-to-HTML5 mapping and the live validation registry."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator


def split_rules(rules: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split a ``'required|min:3'`` rule string (or list) into single rules."""
    if isinstance(rules, str):
        rules = rules.split('|')
    return [rule.strip() for rule in rules if isinstance(rule, str) and rule.strip()]


class ValidationRuleTransformer:
    """Translate server-side validation rules into HTML5 constraint attributes.

    Example:
        >>> ValidationRuleTransformer.to_html5_attributes('required|email|max:80')
        {'required': '', 'type': 'email', 'maxlength': '80', 'max': '80'}

    Rules without an HTML5 counterpart are ignored.
    """

    @classmethod
    def to_html5_attributes(cls, rules: str | list[str]) -> dict[str, str]:
        attributes: dict[str, str] = {}
        for rule in split_rules(rules):
            attributes.update(cls.transform_rule(rule) or {})
        return attributes

    @classmethod
    def transform_rule(cls, rule: str) -> dict[str, str] | None:
        if rule == 'required':
            return {'required': ''}
        if rule == 'email':
            return {'type': 'email'}
        if rule == 'url':
            return {'type': 'url'}
        if rule in ('numeric', 'integer'):
            return {'type': 'number'}
        if rule.startswith('min:'):
            value = rule[4:]
            # minlength for text inputs, min for numbers
            return {'minlength': value, 'min': value}
        if rule.startswith('max:'):
            value = rule[4:]
            return {'maxlength': value, 'max': value}
        if rule.startswith('between:'):
            low, _, high = rule[8:].partition(',')
            low, high = low.strip(), high.strip()
            return {'minlength': low, 'maxlength': high, 'min': low, 'max': high}
        if rule.startswith('regex:'):
            return {'pattern': rule[6:].strip('/')}
        return None


class FormValidationRegistry:
    """Per-request registry of live-validated fields.

    Fields rendered with ``validate(..., live=True)`` register here so the
    host's ``/validate/{field}`` endpoint can look up their rules.
    """

    def __init__(self) -> None:
        self._rules: dict[str, str] = {}
        self._messages: dict[str, dict[str, Any]] = {}
        self._attributes: dict[str, dict[str, Any]] = {}

    def register(
        self,
        field: str,
        rules: str,
        messages: dict[str, Any] | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        self._rules[field] = rules
        if messages:
            self._messages[field] = dict(messages)
        if attributes:
            self._attributes[field] = dict(attributes)

    def rules_for(self, field: str) -> str | None:
        return self._rules.get(field)

    def messages_for(self, field: str) -> dict[str, Any]:
        return self._messages.get(field, {})

    def attributes_for(self, field: str) -> dict[str, Any]:
        return self._attributes.get(field, {})

    def fields(self) -> list[str]:
        return list(self._rules)

    def clear(self) -> None:
        self._rules.clear()
        self._messages.clear()
        self._attributes.clear()


_current_registry: ContextVar[FormValidationRegistry | None] = ContextVar(
    'genro_hyper_validation_registry', default=None
)


def current_registry() -> FormValidationRegistry:
    """Return the registry bound to the current context.

    Raises:
        LookupError: If no registry is bound (see use_registry).
    """
    registry = _current_registry.get()
    if registry is None:
        raise LookupError("No FormValidationRegistry bound; wrap rendering in use_registry()")
    return registry


@contextmanager
def use_registry(registry: FormValidationRegistry) -> Iterator[FormValidationRegistry]:
    """Bind registry for the duration of the block (one request)."""
    token = _current_registry.set(registry)
    try:
        yield registry
    finally:
        _current_registry.reset(token)
