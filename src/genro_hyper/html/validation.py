# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Validation wiring for form fields and forms.

HasValidation is mixed into field elements (input, textarea, select).
ManagesValidation is mixed into Form and orchestrates its fields:
signal declaration, error divs and validation groups.

All injection happens in ``_before_render``, so the builder calls can be
made in any order and rendering twice produces the same markup.

Example:
    >>> Form().with_signals().with_errors().content(
    ...     Input().name('email').validate('required|email', client_side=True),
    ... ).to_html()
    '<form data-signals="{&#34;errors&#34;:[],&#34;email&#34;:&#34;&#34;}">'
    '<input name="email" required type="email" />'
    '<div class="text-red-500 text-sm mt-1" data-error="email"></div></form>'
"""

from __future__ import annotations

from typing import Any, Callable

from ..services.validation import ValidationRuleTransformer, current_registry
from .element import GenericElement

DEFAULT_ERROR_CLASS = 'text-red-500 text-sm mt-1'
LIVE_DEBOUNCE = '300ms'


class HasValidation:
    """Server-side rules attached to a field, plus their client-side echo."""

    _validation_rules: dict[str, Any]
    _validation_messages: dict[str, Any]
    _validation_attributes: dict[str, Any]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._validation_rules = {}
        self._validation_messages = {}
        self._validation_attributes = {}
        self._client_side_validation = False
        self._live_validation = False
        self._error_div = False
        self._error_class: Any = DEFAULT_ERROR_CLASS

    def validate(
        self,
        rules: Any,
        messages: Any = None,
        attributes: Any = None,
        client_side: bool = False,
        live: bool = False,
    ):
        """Attach validation rules.

        Args:
            rules: Rule string stored under this field's ``name`` (ignored
                if the field has none), or a mapping of field to rules
                merged as-is. May be a callable.
            messages: Custom messages mapping, merged.
            attributes: Custom attribute names mapping, merged.
            client_side: Emit the HTML5 constraint attributes for the rules.
            live: Validate on the server while the user types.
        """
        rules = self.evaluate(rules)
        messages = self.evaluate(messages) or {}
        attributes = self.evaluate(attributes) or {}

        field = self.get_attr('name')
        if isinstance(rules, str):
            if field:
                self._validation_rules[field] = rules
        elif isinstance(rules, dict):
            self._validation_rules.update(rules)

        self._validation_messages.update(messages)
        self._validation_attributes.update(attributes)
        self._client_side_validation = client_side
        self._live_validation = live
        return self

    def with_error(self, class_: Any = DEFAULT_ERROR_CLASS):
        """Emit a ``data-error`` div right after the field."""
        self._error_div = True
        self._error_class = class_
        return self

    def get_validation_rules(self) -> dict[str, Any]:
        return dict(self._validation_rules)

    def get_validation_data(self) -> dict[str, dict[str, Any]]:
        return {
            'rules': dict(self._validation_rules),
            'messages': dict(self._validation_messages),
            'attributes': dict(self._validation_attributes),
        }

    def collect_validation_data(self) -> dict[str, dict[str, Any]]:
        """Validation data of this element merged with all its descendants."""
        data = self.get_validation_data()
        for descendant in getattr(self, 'walk', tuple)():
            if isinstance(descendant, HasValidation):
                child = descendant.get_validation_data()
                for key in data:
                    data[key].update(child[key])
        return data

    @property
    def default_event(self) -> str:
        """DOM event that triggers live validation."""
        return 'input'

    def _own_rules(self) -> tuple[str | None, Any]:
        field = self.get_attr('name')
        if not field or field not in self._validation_rules:
            return None, None
        return field, self._validation_rules[field]

    def _before_render(self) -> None:
        super()._before_render()
        if self._client_side_validation:
            self._apply_html5_attributes()
        if self._live_validation:
            self._apply_live_validation()

    def _apply_html5_attributes(self) -> None:
        field, rules = self._own_rules()
        if field is None:
            return
        for name, value in ValidationRuleTransformer.to_html5_attributes(rules).items():
            if not self.has_attr(name):
                self.attr(name, value)

    def _apply_live_validation(self) -> None:
        field, rules = self._own_rules()
        if field is None:
            return
        current_registry().register(
            field, rules, self._validation_messages, self._validation_attributes
        )
        self.data_on(
            f'{self.default_event}__debounce.{LIVE_DEBOUNCE}',
            f"@patchx('/validate/{field}')",
        )

    def _render_after(self) -> str:
        html = super()._render_after()
        if not self._error_div:
            return html
        field = self.get_attr('name')
        if not field:
            return html
        error = GenericElement('div').data_error(field).class_(self.evaluate(self._error_class))
        return html + error.to_html()


class ManagesValidation(HasValidation):
    """Form-level validation: groups, signal declaration, error divs."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._auto_errors = False
        self._auto_signals = False
        self._validation_groups: dict[str, list[str]] = {}

    def with_errors(self, class_: Any = DEFAULT_ERROR_CLASS):
        """Give every validated descendant an error div."""
        self._auto_errors = True
        self._error_class = class_
        return self

    def with_signals(self):
        """Declare ``errors`` and one empty signal per validated field."""
        self._auto_signals = True
        return self

    def validation_group(self, name: str, paths: list[str]):
        """Name a subset of fields, e.g. one step of a multi-step form."""
        self._validation_groups[name] = list(paths)
        return self

    def get_validation_rules(self, group: str | None = None) -> dict[str, Any]:
        """Rules of the whole form, optionally restricted to a group.

        An unknown group returns every rule.
        """
        rules = self.collect_validation_data()['rules']
        if group is not None and group in self._validation_groups:
            paths = set(self._validation_groups[group])
            return {field: rule for field, rule in rules.items() if field in paths}
        return rules

    def walk_children(self, callback: Callable[[Any], Any]) -> None:
        """Call callback on every descendant, depth first."""
        for descendant in self.walk():
            callback(descendant)

    def _before_render(self) -> None:
        super()._before_render()
        if self._auto_signals:
            self._inject_validation_signals()
        if self._auto_errors:
            self._inject_error_divs()

    def _inject_validation_signals(self) -> None:
        signals: dict[str, Any] = {'errors': []}
        for field in self.get_validation_rules():
            signals[field] = ''
        self.data_signals(signals)

    def _inject_error_divs(self) -> None:
        def attach(child: Any) -> None:
            if isinstance(child, HasValidation) and HasValidation.get_validation_rules(child):
                child.with_error(self._error_class)

        self.walk_children(attach)
