# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Fluent HTML element builder.

Example:
    >>> from genro_hyper.html import Html
    >>> Html.ul().content(Html.li('one'), Html.li('two')).to_html()
    '<ul><li>one</li><li>two</li></ul>'
"""

from .element import (
    DOCTYPE,
    MAX_NESTING_DEPTH,
    VOID_ELEMENTS,
    ContainerElement,
    Element,
    GenericElement,
    TextElement,
    VoidElement,
    validate_tag,
)
from .elements import *  # noqa: F401,F403
from .elements import __all__ as _elements_all
from .evaluation import ConditionalRendering, EvaluatesClosures, is_deferred
from .registry import ElementRegistry, Html, HtmlFactory
from .validation import HasValidation, ManagesValidation

__all__ = [
    "DOCTYPE",
    "MAX_NESTING_DEPTH",
    "VOID_ELEMENTS",
    "ConditionalRendering",
    "ContainerElement",
    "Element",
    "ElementRegistry",
    "EvaluatesClosures",
    "GenericElement",
    "HasValidation",
    "Html",
    "HtmlFactory",
    "ManagesValidation",
    "TextElement",
    "VoidElement",
    "is_deferred",
    "validate_tag",
    *_elements_all,
]
