# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Deferred value evaluation with parameter injection.

Attribute values, classes and content may be given as callables. They are
resolved lazily by :meth:`EvaluatesClosures.evaluate`, which inspects the
callable's signature and injects each parameter by name.

Example:
    >>> div = Div().attr('data-tag', lambda tag: tag.upper())
    >>> div.to_html()
    '<div data-tag="DIV"></div>'
"""

from __future__ import annotations

import inspect
from typing import Any, Callable

from ..exceptions import ClosureResolutionError

_MISSING = object()


def is_deferred(value: Any) -> bool:
    """True if value is a callable to be evaluated later (classes excluded)."""
    return callable(value) and not isinstance(value, type)


class EvaluatesClosures:
    """Mixin resolving deferred callables against the host object.

    Resolution order for each parameter of the callable:

    1. explicit ``injections`` passed to :meth:`evaluate`
    2. named defaults from :meth:`_default_injection`
    3. the parameter's own default value

    Subclasses extend :meth:`_default_injection` to expose more context.
    """

    def evaluate(self, value: Any, **injections: Any) -> Any:
        """Return value, calling it first if it is a deferred callable.

        Args:
            value: Literal or callable.
            **injections: Values injected by parameter name.

        Returns:
            The literal, or the callable's result (evaluated again if the
            result is itself callable).

        Raises:
            ClosureResolutionError: If a required parameter cannot be resolved.
        """
        while is_deferred(value):
            value = self._call_with_injection(value, injections)
        return value

    def _call_with_injection(self, func: Callable, injections: dict[str, Any]) -> Any:
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            # builtins without introspectable signature
            return func()

        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for param in signature.parameters.values():
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            resolved = self._resolve_parameter(param, injections)
            if param.kind is param.POSITIONAL_ONLY:
                args.append(resolved)
            else:
                kwargs[param.name] = resolved
        return func(*args, **kwargs)

    def _resolve_parameter(
        self, param: inspect.Parameter, injections: dict[str, Any]
    ) -> Any:
        if param.name in injections:
            return injections[param.name]

        default = self._default_injection(param.name)
        if default is not _MISSING:
            return default

        if param.default is not param.empty:
            return param.default

        raise ClosureResolutionError(
            f"Cannot resolve parameter '{param.name}' in closure. "
            "Parameter is required but no value could be resolved."
        )

    def _default_injection(self, name: str) -> Any:
        """Return the value injected for a parameter name, or _MISSING."""
        return _MISSING


class ConditionalRendering:
    """Mixin with when()/unless() for conditional chaining."""

    def when(self, condition: Any, callback: Callable[[Any], Any]) -> Any:
        """Apply callback(self) if condition is truthy; return its result."""
        if self.evaluate(condition):
            result = callback(self)
            return self if result is None else result
        return self

    def unless(self, condition: Any, callback: Callable[[Any], Any]) -> Any:
        """Apply callback(self) if condition is falsy; return its result."""
        if not self.evaluate(condition):
            result = callback(self)
            return self if result is None else result
        return self
