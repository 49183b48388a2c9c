# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for field validation, form orchestration and rule helpers."""

import pytest

from genro_hyper.html import Div, Form, Input, Select, Textarea
from genro_hyper.services import (
    FormValidationRegistry,
    ValidationRuleTransformer,
    current_registry,
    use_registry,
)
from genro_hyper.services.validation import split_rules


class TestValidationRuleTransformer:
    """Tests for rule to HTML5 attribute mapping."""

    def test_basic_rules(self):
        """Test required, type and length rules."""
        attrs = ValidationRuleTransformer.to_html5_attributes('required|email|max:80')
        assert attrs == {'required': '', 'type': 'email', 'maxlength': '80', 'max': '80'}

    def test_numeric_rules(self):
        """Test numeric and integer map to type=number."""
        assert ValidationRuleTransformer.to_html5_attributes('integer') == {'type': 'number'}
        assert ValidationRuleTransformer.to_html5_attributes(['numeric', 'min:1']) == {
            'type': 'number', 'minlength': '1', 'min': '1',
        }

    def test_between(self):
        """Test between sets both bounds."""
        assert ValidationRuleTransformer.to_html5_attributes('between:2, 10') == {
            'minlength': '2', 'maxlength': '10', 'min': '2', 'max': '10',
        }

    def test_regex(self):
        """Test regex delimiters are stripped."""
        assert ValidationRuleTransformer.to_html5_attributes('regex:/^[a-z]+$/') == {
            'pattern': '^[a-z]+$',
        }

    def test_unknown_rules_ignored(self):
        """Test rules without an HTML5 counterpart are ignored."""
        assert ValidationRuleTransformer.to_html5_attributes('confirmed|unique:users') == {}

    def test_split_rules(self):
        """Test rule splitting trims and drops empties."""
        assert split_rules(' required || url ') == ['required', 'url']


class TestFormValidationRegistry:
    """Tests for the live validation registry."""

    def test_register_and_lookup(self):
        """Test registered rules, messages and attributes are retrievable."""
        registry = FormValidationRegistry()
        registry.register('email', 'required|email', {'email.required': 'Needed'}, {'email': 'E-mail'})
        assert registry.rules_for('email') == 'required|email'
        assert registry.messages_for('email') == {'email.required': 'Needed'}
        assert registry.attributes_for('email') == {'email': 'E-mail'}
        assert registry.fields() == ['email']
        registry.clear()
        assert registry.rules_for('email') is None
        assert registry.messages_for('email') == {}

    def test_use_registry_scopes_current(self):
        """Test use_registry binds a registry for the block only."""
        registry = FormValidationRegistry()
        with use_registry(registry):
            assert current_registry() is registry
        with pytest.raises(LookupError):
            current_registry()

    def test_current_registry_requires_binding(self):
        """Test there is no shared fallback registry outside use_registry."""
        with pytest.raises(LookupError, match='use_registry'):
            current_registry()

    def test_registries_do_not_leak_between_requests(self):
        """Test fields registered in one request are absent from the next."""
        with use_registry(FormValidationRegistry()):
            Input().name('email').validate('required', live=True).to_html()
        with use_registry(FormValidationRegistry()) as second:
            assert second.fields() == []


class TestHasValidation:
    """Tests for field-level validation."""

    def test_rules_stored_under_name(self):
        """Test a rule string is stored under the field name."""
        field = Input().name('email').validate('required|email')
        assert field.get_validation_rules() == {'email': 'required|email'}

    def test_rules_without_name_ignored(self):
        """Test a rule string on an unnamed field is ignored."""
        assert Input().validate('required').get_validation_rules() == {}

    def test_rules_mapping_merged(self):
        """Test a rules mapping is merged as-is."""
        field = Input().validate({'a': 'required'}).validate({'b': 'email'})
        assert field.get_validation_rules() == {'a': 'required', 'b': 'email'}

    def test_deferred_rules(self):
        """Test rules may be given as a callable."""
        field = Input().name('age').validate(lambda: 'integer')
        assert field.get_validation_rules() == {'age': 'integer'}

    def test_validation_data(self):
        """Test messages and attributes are kept with the rules."""
        field = Input().name('email').validate(
            'required', messages={'email.required': 'Needed'}, attributes={'email': 'E-mail'}
        )
        assert field.get_validation_data() == {
            'rules': {'email': 'required'},
            'messages': {'email.required': 'Needed'},
            'attributes': {'email': 'E-mail'},
        }

    def test_server_only_adds_nothing(self):
        """Test validation without client_side leaves the markup alone."""
        html = Input().name('email').validate('required|email').to_html()
        assert html == '<input name="email" />'

    def test_client_side_attributes(self):
        """Test client-side mode adds HTML5 constraint attributes."""
        html = Input().name('email').validate('required|email', client_side=True).to_html()
        assert html == '<input name="email" required type="email" />'

    def test_client_side_does_not_override(self):
        """Test existing attributes win over derived ones."""
        html = Input().name('age').type('text').validate('numeric|min:3', client_side=True).to_html()
        assert html == '<input name="age" type="text" minlength="3" min="3" />'

    def test_render_is_idempotent(self):
        """Test rendering twice gives the same markup."""
        field = Input().name('email').validate('required', client_side=True).with_error()
        assert field.to_html() == field.to_html()

    def test_with_error_emits_sibling_div(self):
        """Test with_error() renders an error div after the field."""
        html = Input().name('email').validate('required').with_error().to_html()
        assert html == (
            '<input name="email" />'
            '<div class="text-red-500 text-sm mt-1" data-error="email"></div>'
        )

    def test_with_error_custom_class(self):
        """Test a custom error class."""
        html = Textarea().name('bio').with_error('err').to_html()
        assert html == '<textarea name="bio"></textarea><div class="err" data-error="bio"></div>'

    def test_with_error_requires_name(self):
        """Test no error div is emitted for an unnamed field."""
        assert Input().with_error().to_html() == '<input />'

    def test_live_validation(self):
        """Test live mode registers the field and adds a debounced action."""
        registry = FormValidationRegistry()
        with use_registry(registry):
            html = Input().name('email').validate('required', live=True).to_html()
        assert registry.rules_for('email') == 'required'
        assert (
            'data-on:input__debounce.300ms="@patchx(&#39;/validate/email&#39;)"' in html
        )

    def test_live_validation_requires_registry(self):
        """Test live rendering outside use_registry fails instead of sharing state."""
        field = Input().name('email').validate('required', live=True)
        with pytest.raises(LookupError):
            field.to_html()

    def test_live_validation_change_event(self):
        """Test checkboxes and selects validate on change."""
        with use_registry(FormValidationRegistry()):
            checkbox = Input().type('checkbox').name('terms').validate('required', live=True)
            select = Select().name('country').validate('required', live=True)
            checkbox.to_html()
            select.to_html()
        assert checkbox.has_attr('data-on:change__debounce.300ms')
        assert select.has_attr('data-on:change__debounce.300ms')


class TestManagesValidation:
    """Tests for form-level validation orchestration."""

    def _form(self):
        return Form().content(
            Input().name('email').validate('required|email'),
            Div().content(Input().name('age').validate('integer')),
            Input().name('note'),
        )

    def test_collects_rules_from_descendants(self):
        """Test rules are gathered from the whole subtree."""
        assert self._form().get_validation_rules() == {'email': 'required|email', 'age': 'integer'}

    def test_validation_group(self):
        """Test groups filter rules; unknown groups return all."""
        form = self._form().validation_group('step1', ['email', 'missing'])
        assert form.get_validation_rules('step1') == {'email': 'required|email'}
        assert form.get_validation_rules('nope') == {'email': 'required|email', 'age': 'integer'}

    def test_with_signals_and_errors(self):
        """Test signals and error divs are injected at render time."""
        form = Form().with_signals().with_errors('err').content(
            Input().name('email').validate('required'),
            Input().name('note'),
        )
        assert form.to_html() == (
            '<form data-signals="{&#34;errors&#34;:[],&#34;email&#34;:&#34;&#34;}">'
            '<input name="email" /><div class="err" data-error="email"></div>'
            '<input name="note" />'
            '</form>'
        )

    def test_error_divs_noop_without_rules(self):
        """Test no error div is injected when no field is validated."""
        form = Form().with_errors().content(Input().name('x'))
        assert form.to_html() == '<form><input name="x" /></form>'

    def test_errors_signal_always_declared(self):
        """Test with_signals declares errors even without validated fields."""
        form = Form().with_signals().with_errors().content(Div('x'))
        assert form.to_html() == (
            '<form data-signals="{&#34;errors&#34;:[]}"><div>x</div></form>'
        )

    def test_form_render_is_idempotent(self):
        """Test rendering a form twice gives the same markup."""
        form = self._form().with_signals().with_errors()
        assert form.to_html() == form.to_html()

    def test_walk_children(self):
        """Test walk_children visits descendants depth first."""
        form = self._form()
        seen = []
        form.walk_children(lambda child: seen.append(child.tag))
        assert seen == ['input', 'div', 'input', 'input']

    def test_form_attributes(self):
        """Test form-specific attributes."""
        html = Form().action('/login').method('post').novalidate().to_html()
        assert html == '<form action="/login" method="post" novalidate></form>'
