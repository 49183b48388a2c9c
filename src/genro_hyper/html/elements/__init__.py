# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Concrete HTML element classes.

Importing this package registers every tag in ``Element._element_tags``.
"""

from .document import Base, Body, Head, HtmlDocument, Title
from .embedded import Noscript, Portal, Slot, Wbr
from .forms import (
    Button,
    Datalist,
    Fieldset,
    Form,
    Input,
    Label,
    Legend,
    Meter,
    Optgroup,
    Option,
    Output,
    Progress,
    Select,
    Textarea,
)
from .icon import Icon
from .interactive import Details, Dialog, Menu, Summary
from .lists import Dd, Dl, Dt, Li, Ol, Ul
from .media import (
    Area,
    Audio,
    Canvas,
    Embed,
    Figcaption,
    Figure,
    Iframe,
    Img,
    Map,
    ObjectElement,
    Param,
    Picture,
    Source,
    Svg,
    Track,
    Video,
)
from .metadata import Link, Meta, Script, Style
from .structure import (
    Article,
    Aside,
    Br,
    Div,
    Footer,
    Header,
    Hr,
    Main,
    Nav,
    P,
    Search,
    Section,
    Span,
)
from .table import Caption, Col, Colgroup, Table, Tbody, Td, Tfoot, Th, Thead, Tr
from .text import (
    H1,
    H2,
    H3,
    H4,
    H5,
    H6,
    A,
    Abbr,
    Address,
    B,
    Bdi,
    Bdo,
    Blockquote,
    Cite,
    Code,
    Data,
    Del,
    Dfn,
    Em,
    I,
    Ins,
    Kbd,
    Mark,
    Pre,
    Q,
    Rp,
    Rt,
    Ruby,
    S,
    Samp,
    Small,
    Strong,
    Sub,
    Sup,
    Time,
    U,
    Var,
)

__all__ = [
    "A",
    "Abbr",
    "Address",
    "Area",
    "Article",
    "Aside",
    "Audio",
    "B",
    "Base",
    "Bdi",
    "Bdo",
    "Blockquote",
    "Body",
    "Br",
    "Button",
    "Canvas",
    "Caption",
    "Cite",
    "Code",
    "Col",
    "Colgroup",
    "Data",
    "Datalist",
    "Dd",
    "Del",
    "Details",
    "Dfn",
    "Dialog",
    "Div",
    "Dl",
    "Dt",
    "Em",
    "Embed",
    "Fieldset",
    "Figcaption",
    "Figure",
    "Footer",
    "Form",
    "H1",
    "H2",
    "H3",
    "H4",
    "H5",
    "H6",
    "Head",
    "Header",
    "Hr",
    "HtmlDocument",
    "I",
    "Icon",
    "Iframe",
    "Img",
    "Input",
    "Ins",
    "Kbd",
    "Label",
    "Legend",
    "Li",
    "Link",
    "Main",
    "Map",
    "Mark",
    "Menu",
    "Meta",
    "Meter",
    "Nav",
    "Noscript",
    "ObjectElement",
    "Ol",
    "Optgroup",
    "Option",
    "Output",
    "P",
    "Param",
    "Picture",
    "Portal",
    "Pre",
    "Progress",
    "Q",
    "Rp",
    "Rt",
    "Ruby",
    "S",
    "Samp",
    "Script",
    "Search",
    "Section",
    "Select",
    "Slot",
    "Small",
    "Source",
    "Span",
    "Strong",
    "Style",
    "Sub",
    "Summary",
    "Sup",
    "Svg",
    "Table",
    "Tbody",
    "Td",
    "Textarea",
    "Tfoot",
    "Th",
    "Thead",
    "Time",
    "Title",
    "Tr",
    "Track",
    "U",
    "Ul",
    "Var",
    "Video",
    "Wbr",
]
