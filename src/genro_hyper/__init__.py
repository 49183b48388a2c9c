# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Hyper - Fluent HTML element builder with Datastar glue.

Builds HTML5 markup from chainable element objects, renders named
template fragments for partial updates, guards locked signals against
tampering and discovers controller and view routes.
"""

__version__ = "0.1.0"

from .exceptions import (
    CircularReferenceError,
    ClosureResolutionError,
    FragmentError,
    HyperError,
    IconNotFoundError,
    InvalidAttributeError,
    InvalidTagError,
    ProviderNotRegisteredError,
    RouteDiscoveryError,
    SignalTamperedError,
    VoidElementError,
)
from .fragments import FragmentExtension, extract_fragment, fragment_markers, render_fragment
from .html import Element, ElementRegistry, Html
from .services import (
    FormValidationRegistry,
    HeroiconsProvider,
    IconManager,
    IconProvider,
    SvgDirectoryProvider,
    ValidationRuleTransformer,
    use_icon_manager,
    use_registry,
)
from .signals import LockedSignals, read_signals, use_signals

__all__ = [
    # Elements
    "Element",
    "ElementRegistry",
    "Html",
    # Fragments
    "FragmentExtension",
    "extract_fragment",
    "fragment_markers",
    "render_fragment",
    # Services
    "FormValidationRegistry",
    "HeroiconsProvider",
    "IconManager",
    "IconProvider",
    "SvgDirectoryProvider",
    "ValidationRuleTransformer",
    "use_icon_manager",
    "use_registry",
    # Signals
    "LockedSignals",
    "read_signals",
    "use_signals",
    # Exceptions
    "HyperError",
    "InvalidTagError",
    "InvalidAttributeError",
    "VoidElementError",
    "CircularReferenceError",
    "ClosureResolutionError",
    "IconNotFoundError",
    "ProviderNotRegisteredError",
    "SignalTamperedError",
    "FragmentError",
    "RouteDiscoveryError",
]
