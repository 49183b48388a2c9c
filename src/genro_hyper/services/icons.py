# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Icon providers and the IconManager registry.

A provider turns an icon name (and optional variant) into SVG markup.
The manager holds named providers, one of them the default, and searches
them in order when no provider is given.

Example:
    >>> manager = IconManager()
    >>> manager.register('feather', SvgDirectoryProvider('/srv/icons/feather'))
    >>> manager.register('heroicons', HeroiconsProvider('/srv/icons/heroicons'))
    >>> manager.resolve('home')                  # default provider first
    >>> manager.resolve('home', variant='solid') # heroicons s-home.svg
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Iterator

import structlog

from ..config.settings import HyperSettings, get_settings
from ..exceptions import IconNotFoundError, ProviderNotRegisteredError

log = structlog.get_logger("genro_hyper.icons")


class IconProvider(ABC):
    """Contract for icon sources."""

    @abstractmethod
    def resolve(self, name: str, variant: str | None = None) -> str:
        """Return the SVG markup for name.

        Raises:
            IconNotFoundError: If the icon does not exist.
        """

    @abstractmethod
    def available(self) -> list[str]:
        """Return the sorted icon names this provider can resolve."""

    def has(self, name: str, variant: str | None = None) -> bool:
        try:
            self.resolve(name, variant)
        except IconNotFoundError:
            return False
        return True


class SvgDirectoryProvider(IconProvider):
    """Flat directory of ``{name}.svg`` files (Feather-style icon sets).

    Variants are ignored.
    """

    def __init__(self, base_path: str | Path) -> None:
        self.base_path = Path(base_path)

    @property
    def is_installed(self) -> bool:
        return self.base_path.is_dir()

    def resolve(self, name: str, variant: str | None = None) -> str:
        path = self.base_path / f"{name}.svg"
        if not path.is_file():
            raise IconNotFoundError(f"Icon '{name}' not found. Path: {path}.")
        return path.read_text(encoding="utf-8")

    def available(self) -> list[str]:
        if not self.is_installed:
            return []
        return sorted(path.stem for path in self.base_path.glob("*.svg"))


class HeroiconsProvider(IconProvider):
    """Heroicons flat layout: one directory, files prefixed by variant.

    ``o-home.svg`` (outline, the default), ``s-home.svg`` (solid),
    ``m-home.svg`` (mini), ``c-home.svg`` (micro). Names given as
    ``heroicon-s-home`` carry their own variant.
    """

    VARIANT_MAP = {
        "o": "o",
        "outline": "o",
        "s": "s",
        "solid": "s",
        "m": "m",
        "mini": "m",
        "c": "c",
        "micro": "c",
    }

    _PREFIXED = re.compile(r"^([osmc])-(.+)$")

    def __init__(self, base_path: str | Path) -> None:
        self.base_path = Path(base_path)

    @property
    def is_installed(self) -> bool:
        return self.base_path.is_dir()

    @staticmethod
    def parse_name(name: str) -> tuple[str, str]:
        """Split ``heroicon-{variant}-{name}`` into (variant, name)."""
        parts = name.split("-", 2)
        if len(parts) < 3:
            raise IconNotFoundError(
                f"Invalid Heroicon name format: '{name}'. "
                "Expected format: 'heroicon-{variant}-{name}' (e.g., 'heroicon-o-home')"
            )
        return parts[1], parts[2]

    def resolve(self, name: str, variant: str | None = None) -> str:
        if name.startswith("heroicon-"):
            variant, name = self.parse_name(name)
        variant = variant or "outline"
        prefix = self.VARIANT_MAP.get(variant, "o")
        path = self.base_path / f"{prefix}-{name}.svg"
        if not path.is_file():
            raise IconNotFoundError(
                f"Heroicon '{name}' not found in variant '{variant}'. Path: {path}."
            )
        return path.read_text(encoding="utf-8")

    def available(self) -> list[str]:
        if not self.is_installed:
            return []
        names = set()
        for path in self.base_path.glob("*.svg"):
            match = self._PREFIXED.match(path.stem)
            if match:
                names.add(match.group(2))
        return sorted(names)


class IconManager:
    """Registry of named icon providers with default-first resolution.

    Args:
        settings: Controls caching (``icons.cache``) and the initial
            default provider (``icons.default_provider``).
    """

    def __init__(self, settings: HyperSettings | None = None) -> None:
        self._settings = settings if settings is not None else get_settings()
        self._providers: dict[str, IconProvider] = {}
        self._default: str | None = self._settings.icons.default_provider
        self._cache: dict[tuple[str, str, str | None], str] = {}

    def register(self, name: str, provider: IconProvider | type[IconProvider]) -> IconManager:
        """Register a provider (instance, or class instantiated without args).

        The first registered provider becomes the default unless one is
        already configured.
        """
        if isinstance(provider, type):
            provider = provider()
        if not isinstance(provider, IconProvider):
            raise TypeError(
                f"Icon provider must implement IconProvider. Got: {type(provider).__name__}"
            )
        self._providers[name] = provider
        if self._default is None:
            self._default = name
        return self

    def set_default_provider(self, name: str) -> IconManager:
        if name not in self._providers:
            raise ProviderNotRegisteredError(
                f"Cannot set default provider '{name}': Provider not registered."
            )
        self._default = name
        return self

    @property
    def default_provider(self) -> str | None:
        return self._default

    def resolve(self, name: str, provider: str | None = None, variant: str | None = None) -> str:
        """Return SVG markup for an icon.

        With an explicit provider only that provider is used. Otherwise the
        default provider is tried first, then every registered provider in
        registration order.

        Raises:
            ProviderNotRegisteredError: If provider is given but unknown.
            IconNotFoundError: If no provider has the icon.
        """
        if provider is not None:
            if provider not in self._providers:
                raise ProviderNotRegisteredError(
                    f"Icon provider '{provider}' not registered. "
                    f"Available providers: {', '.join(self._providers)}"
                )
            return self._resolve_with_cache(provider, name, variant)

        if self._default in self._providers:
            try:
                return self._resolve_with_cache(self._default, name, variant)
            except IconNotFoundError:
                pass

        for provider_name, instance in self._providers.items():
            if instance.has(name, variant):
                return self._resolve_with_cache(provider_name, name, variant)

        raise IconNotFoundError(
            f"Icon '{name}' not found in any registered provider. "
            f"Available providers: {', '.join(self._providers)}."
        )

    def has(self, name: str, provider: str | None = None, variant: str | None = None) -> bool:
        try:
            self.resolve(name, provider, variant)
        except (IconNotFoundError, ProviderNotRegisteredError):
            return False
        return True

    def has_provider(self, name: str) -> bool:
        return name in self._providers

    def get_provider(self, name: str) -> IconProvider | None:
        return self._providers.get(name)

    @property
    def providers(self) -> dict[str, IconProvider]:
        return dict(self._providers)

    def clear_cache(self, provider: str | None = None) -> IconManager:
        """Drop cached SVGs, for one provider or all of them."""
        if provider is None:
            self._cache.clear()
        else:
            for key in [key for key in self._cache if key[0] == provider]:
                del self._cache[key]
        return self

    def _resolve_with_cache(self, provider: str, name: str, variant: str | None) -> str:
        if not self._settings.icons.cache:
            return self._providers[provider].resolve(name, variant)
        key = (provider, name, variant)
        if key not in self._cache:
            log.debug("icon_cache_miss", provider=provider, icon=name, variant=variant)
            self._cache[key] = self._providers[provider].resolve(name, variant)
        return self._cache[key]


_current_manager: ContextVar[IconManager | None] = ContextVar(
    "genro_hyper_icon_manager", default=None
)


def current_icon_manager() -> IconManager:
    """Return the IconManager bound to the current context.

    Raises:
        LookupError: If no manager is bound (see use_icon_manager).
    """
    manager = _current_manager.get()
    if manager is None:
        raise LookupError("No IconManager bound; wrap rendering in use_icon_manager()")
    return manager


@contextmanager
def use_icon_manager(manager: IconManager) -> Iterator[IconManager]:
    """Bind manager as the current IconManager for the block."""
    token = _current_manager.set(manager)
    try:
        yield manager
    finally:
        _current_manager.reset(token)
