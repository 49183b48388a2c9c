# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Element, TextElement, ContainerElement and VoidElement."""

import pytest
from jinja2 import DictLoader, Environment
from markupsafe import Markup

from genro_hyper import (
    CircularReferenceError,
    ClosureResolutionError,
    InvalidTagError,
    VoidElementError,
)
from genro_hyper.html import (
    Br,
    Div,
    GenericElement,
    Hr,
    Input,
    Li,
    Meta,
    P,
    Span,
    Ul,
    Wbr,
    validate_tag,
)


class TestTagValidation:
    """Tests for tag name validation."""

    def test_tag_is_lowercased(self):
        """Test tags are normalized to lowercase."""
        assert GenericElement('My-Widget').tag == 'my-widget'

    def test_invalid_tag_raises(self):
        """Test tags not matching the tag pattern are rejected."""
        with pytest.raises(InvalidTagError):
            GenericElement('1div')

    def test_invalid_tag_message_is_escaped(self):
        """Test the offending tag is HTML-escaped in the message."""
        with pytest.raises(InvalidTagError) as exc_info:
            GenericElement('<script>')
        assert '&lt;script&gt;' in str(exc_info.value)
        assert '<script>' not in str(exc_info.value)

    def test_empty_tag_raises(self):
        """Test an empty tag is rejected."""
        with pytest.raises(InvalidTagError):
            validate_tag('')

    def test_invalid_tag_is_a_value_error(self):
        """Test InvalidTagError can be caught as ValueError."""
        with pytest.raises(ValueError):
            GenericElement('bad tag')


class TestAttributes:
    """Tests for attr() and attribute rendering."""

    def test_class_renders_first(self):
        """Test class comes first, then attributes in insertion order."""
        html = Div().id('main').class_('card shadow').attr('data-x', '1').to_html()
        assert html == '<div class="card shadow" id="main" data-x="1"></div>'

    def test_true_renders_bare(self):
        """Test True gives a bare boolean attribute."""
        assert Div().hidden().to_html() == '<div hidden></div>'

    def test_empty_string_renders_bare(self):
        """Test an empty string gives a bare attribute."""
        assert Div().attr('data-flag', '').to_html() == '<div data-flag></div>'

    def test_none_is_omitted(self):
        """Test None values are not rendered."""
        assert Div().attr('title', None).to_html() == '<div></div>'

    def test_false_removes_attribute(self):
        """Test a literal False removes a previously set attribute."""
        div = Div().id('a').id(False)
        assert div.has_attr('id') is False
        assert div.to_html() == '<div></div>'

    def test_values_are_escaped(self):
        """Test attribute values are HTML-escaped."""
        html = Div().title('a "b" <c>').to_html()
        assert html == '<div title="a &#34;b&#34; &lt;c&gt;"></div>'

    def test_overwrite_keeps_position(self):
        """Test setting an attribute again overwrites its value in place."""
        html = Div().id('a').title('t').id('b').to_html()
        assert html == '<div id="b" title="t"></div>'

    def test_numbers_are_stringified(self):
        """Test numeric values render as strings."""
        assert Div().tabindex(0).to_html() == '<div tabindex="0"></div>'

    def test_attributes_returns_copy(self):
        """Test the attributes property is a copy of the bag."""
        div = Div().id('a')
        div.attributes['id'] = 'changed'
        assert div.get_attr('id') == 'a'


class TestClasses:
    """Tests for class_()."""

    def test_split_on_whitespace(self):
        """Test class strings are split on whitespace."""
        assert Div().class_('  a   b ').classes == ['a', 'b']

    def test_nested_lists_are_flattened(self):
        """Test nested class lists are flattened in order."""
        assert Div().class_(['a', ['b', ('c d',)]], 'e').classes == ['a', 'b', 'c', 'd', 'e']

    def test_falsy_entries_skipped(self):
        """Test None and empty entries add nothing."""
        assert Div().class_(None, '', []).to_html() == '<div></div>'

    def test_deferred_classes(self):
        """Test callables are resolved at render time."""
        state = {'active': False}
        div = Div().class_('btn', lambda: 'active' if state['active'] else None)
        assert div.to_html() == '<div class="btn"></div>'
        state['active'] = True
        assert div.to_html() == '<div class="btn active"></div>'

    def test_classes_are_escaped(self):
        """Test class names are escaped."""
        assert Div().class_('a"b').to_html() == '<div class="a&#34;b"></div>'


class TestDeferredEvaluation:
    """Tests for closure evaluation with parameter injection."""

    def test_closure_renders_like_literal(self):
        """Test a closure renders the same as its literal value."""
        assert Div().id(lambda: 'x').to_html() == Div().id('x').to_html()

    def test_tag_injection(self):
        """Test the tag parameter is injected."""
        div = Div().attr('data-tag', lambda tag: tag.upper())
        assert div.to_html() == '<div data-tag="DIV"></div>'

    def test_element_injection(self):
        """Test the element parameter is the element itself."""
        div = Div().id('box')
        div.attr('data-ref', lambda element: element.get_attr('id'))
        assert div.get_attr('data-ref') == 'box'

    def test_container_and_children_injection(self):
        """Test containers inject container and children."""
        ul = Ul().content(Li('a'), Li('b'))
        ul.attr('data-count', lambda children: len(children))
        assert ul.get_attr('data-count') == 2
        assert ul.evaluate(lambda container: container) is ul

    def test_explicit_injection_wins(self):
        """Test explicit injections take precedence over defaults."""
        assert Div().evaluate(lambda tag: tag, tag='span') == 'span'

    def test_parameter_default_used(self):
        """Test the parameter default is used when nothing else resolves."""
        assert Div().evaluate(lambda missing='fallback': missing) == 'fallback'

    def test_unresolvable_parameter_raises(self):
        """Test a required unknown parameter raises ClosureResolutionError."""
        div = Div().attr('x', lambda unknown: unknown)
        with pytest.raises(ClosureResolutionError, match="unknown"):
            div.to_html()

    def test_nested_callables_are_evaluated(self):
        """Test a callable returning a callable is evaluated again."""
        assert Div().evaluate(lambda: (lambda tag: tag)) == 'div'

    def test_classes_are_not_called(self):
        """Test classes are treated as literals, not closures."""
        assert Div().evaluate(int) is int

    def test_attribute_evaluated_at_render_time(self):
        """Test deferred attributes see state at render time."""
        state = {'label': 'before'}
        div = Div().aria_label(lambda: state['label'])
        state['label'] = 'after'
        assert div.to_html() == '<div aria-label="after"></div>'


class TestConditionalRendering:
    """Tests for when() and unless()."""

    def test_when_true_applies(self):
        """Test when() applies the callback on a truthy condition."""
        assert Div().when(True, lambda d: d.id('x')).to_html() == '<div id="x"></div>'

    def test_when_false_skips(self):
        """Test when() skips the callback on a falsy condition."""
        assert Div().when(False, lambda d: d.id('x')).to_html() == '<div></div>'

    def test_unless_with_callable_condition(self):
        """Test unless() accepts a callable condition."""
        assert Div().unless(lambda: False, lambda d: d.id('x')).get_attr('id') == 'x'

    def test_callback_returning_none_keeps_chain(self):
        """Test a callback returning None still returns the element."""
        div = Div()
        assert div.when(True, lambda d: None) is div


class TestContainerContent:
    """Tests for ContainerElement.content() and friends."""

    def test_text_is_escaped(self):
        """Test constructor text is escaped."""
        assert P('Hello <World>').to_html() == '<p>Hello &lt;World&gt;</p>'

    def test_nested_children(self):
        """Test children render depth first."""
        html = Ul().content(Li('one'), Li('two')).to_html()
        assert html == '<ul><li>one</li><li>two</li></ul>'

    def test_lists_flattened_and_none_skipped(self):
        """Test nested lists are flattened and None skipped."""
        html = Div().content(['a', ['b', P('c')]], None).to_html()
        assert html == '<div>ab<p>c</p></div>'

    def test_string_children_escaped(self):
        """Test string children are escaped."""
        assert Div().content('<b>').to_html() == '<div>&lt;b&gt;</div>'

    def test_markup_children_raw(self):
        """Test Markup children are emitted verbatim."""
        assert Div().content(Markup('<b>x</b>')).to_html() == '<div><b>x</b></div>'

    def test_html_appends_raw_child(self):
        """Test html() appends unescaped markup after the text."""
        assert Div('a').html('<i>b</i>').to_html() == '<div>a<i>b</i></div>'

    def test_callables_evaluated_immediately(self):
        """Test callable content is evaluated when added."""
        assert Div().content(lambda container: container.tag).to_html() == '<div>div</div>'

    def test_invalid_type_raises(self):
        """Test unsupported content types raise TypeError."""
        with pytest.raises(TypeError, match="int"):
            Div().content(42)

    def test_self_reference_raises(self):
        """Test adding an element to itself raises."""
        div = Div()
        with pytest.raises(CircularReferenceError):
            div.content(div)

    def test_cycle_raises(self):
        """Test adding an ancestor as a child raises."""
        outer = Div()
        inner = Span()
        outer.content(Div().content(inner))
        with pytest.raises(CircularReferenceError):
            inner.content(outer)

    def test_excessive_nesting_raises(self):
        """Test nesting lists deeper than the limit raises RecursionError."""
        items = 'x'
        for _ in range(105):
            items = [items]
        with pytest.raises(RecursionError):
            Div().content(items)

    def test_child_and_children_aliases(self):
        """Test child() and children() append like content()."""
        html = Ul().child(Li('a')).children([Li('b'), Li('c')]).to_html()
        assert html == '<ul><li>a</li><li>b</li><li>c</li></ul>'

    def test_get_children_returns_copy(self):
        """Test get_children() returns a new list."""
        div = Div().content(P())
        div.get_children().clear()
        assert len(div.get_children()) == 1

    def test_walk_is_depth_first(self):
        """Test walk() yields parents before their children."""
        first = Li('a')
        second = Li('b')
        ul = Ul().content(first, second)
        div = Div().content(ul)
        assert list(div.walk()) == [ul, first, second]

    def test_debug(self):
        """Test debug() reports element state."""
        info = Div().id('x').class_('c').content(P(), 'text').debug()
        assert info['tag'] == 'div'
        assert info['attributes'] == {'id': 'x'}
        assert info['classes'] == ['c']
        assert info['children_count'] == 2
        assert info['is_void'] is False


class TestVoidElements:
    """Tests for void elements."""

    def test_renders_self_closing(self):
        """Test void elements render without a closing tag."""
        assert Hr().to_html() == '<hr />'
        assert Br().class_('x').to_html() == '<br class="x" />'
        assert Wbr().to_html() == '<wbr />'

    @pytest.mark.parametrize('operation', [
        lambda element: element.content('x'),
        lambda element: element.child(Div()),
        lambda element: element.children([Div()]),
        lambda element: element.text('x'),
        lambda element: element.html('<b>'),
    ])
    def test_content_rejected(self, operation):
        """Test every content operation raises VoidElementError."""
        with pytest.raises(VoidElementError, match="<hr>"):
            operation(Hr())

    def test_void_error_is_type_error(self):
        """Test VoidElementError can be caught as TypeError."""
        with pytest.raises(TypeError):
            Br().content('x')

    def test_is_void(self):
        """Test is_void is True for void elements only."""
        assert Input().is_void is True
        assert Div().is_void is False

    def test_meta_content_is_an_attribute(self):
        """Test meta's content() sets the content attribute."""
        html = Meta().name('viewport').content('width=device-width').to_html()
        assert html == '<meta name="viewport" content="width=device-width" />'


class TestRendering:
    """Tests for to_html(), __str__, __html__ and render()."""

    def test_str_delegates_to_html(self):
        """Test str() gives the same output as to_html()."""
        div = Div('x')
        assert str(div) == div.to_html() == '<div>x</div>'

    def test_html_protocol(self):
        """Test elements are safe markup inside autoescaped templates."""
        env = Environment(autoescape=True)
        template = env.from_string('<main>{{ element }}</main>')
        assert template.render(element=P('<x>')) == '<main><p>&lt;x&gt;</p></main>'

    def test_render_without_layout(self):
        """Test render() without layout equals to_html()."""
        assert Div('x').render() == '<div>x</div>'

    def test_render_with_layout(self):
        """Test render() wraps the element in a layout template slot."""
        env = Environment(
            loader=DictLoader({'layout.html': '<body>{{ slot }}</body>'}),
            autoescape=True,
        )
        assert Div('x').render('layout.html', env) == '<body><div>x</div></body>'

    def test_render_layout_requires_environment(self):
        """Test a layout without environment raises ValueError."""
        with pytest.raises(ValueError):
            Div().render('layout.html')

    def test_make_factory(self):
        """Test make() is a constructor alias."""
        assert Div.make('x').to_html() == '<div>x</div>'
