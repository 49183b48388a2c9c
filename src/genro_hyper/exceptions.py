# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Hyper exceptions."""

from __future__ import annotations


class HyperError(Exception):
    """Base exception for Hyper errors."""

    pass


class InvalidTagError(HyperError, ValueError):
    """Raised when an element is created with an invalid tag name."""

    pass


class InvalidAttributeError(HyperError, ValueError):
    """Raised when an enumerated attribute receives a value outside its set."""

    pass


class VoidElementError(HyperError, TypeError):
    """Raised when content is added to a void element."""

    pass


class CircularReferenceError(HyperError, ValueError):
    """Raised when an element would end up containing itself."""

    pass


class ClosureResolutionError(HyperError, TypeError):
    """Raised when a deferred callable has a parameter that cannot be injected."""

    pass


class IconNotFoundError(HyperError, LookupError):
    """Raised when no provider can resolve an icon."""

    pass


class ProviderNotRegisteredError(HyperError, LookupError):
    """Raised when an icon provider name is not registered."""

    pass


class SignalTamperedError(HyperError):
    """Raised when a locked signal sent by the client differs from the stored one."""

    pass


class FragmentError(HyperError):
    """Raised when a template fragment is missing, duplicated or unbalanced."""

    pass


class RouteDiscoveryError(HyperError):
    """Raised when a controller module cannot be discovered."""

    pass
