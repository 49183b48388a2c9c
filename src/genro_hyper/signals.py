# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Locked signals - server-authoritative Datastar signals.

A signal whose name ends with ``_`` is *locked*: the server declares its
value and the client must send it back unchanged. Declared values are kept
encrypted (Fernet) in the session; :meth:`LockedSignals.validate` compares
the values sent by the client against them.

Example:
    >>> store = LockedSignals(session={}, key=Fernet.generate_key())
    >>> store.store({'user_id_': 42, 'count': 0})
    >>> store.validate({'user_id_': 42, 'count': 5})   # ok
    >>> store.validate({'user_id_': 7})                 # SignalTamperedError
"""

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Mapping, MutableMapping

import structlog
from cryptography.fernet import Fernet, InvalidToken

from .config.settings import HyperSettings, get_settings
from .exceptions import SignalTamperedError

log = structlog.get_logger("genro_hyper.signals")

SIGNALS_QUERY_KEY = "datastar"
SESSION_KEY = "hyper_locked_signals"

_current_signals: ContextVar[LockedSignals | None] = ContextVar(
    "genro_hyper_locked_signals", default=None
)


def is_locked(name: Any) -> bool:
    """True if name designates a locked signal (trailing underscore)."""
    return isinstance(name, str) and name.endswith("_")


def extract_locked_signals(signals: Mapping[str, Any]) -> dict[str, Any]:
    """Return only the locked entries of a signals mapping."""
    return {name: value for name, value in signals.items() if is_locked(name)}


def read_signals(
    query: Mapping[str, Any] | None = None, body: str | bytes | None = None
) -> dict[str, Any]:
    """Read Datastar signals from a request.

    The ``datastar`` query parameter takes precedence over the body.
    Anything that does not decode to a JSON object yields an empty dict.
    """
    raw: Any = None
    if query is not None:
        raw = query.get(SIGNALS_QUERY_KEY)
    if raw is None and body:
        raw = body
    if raw is None:
        return {}
    if isinstance(raw, dict):
        return raw
    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError):
        return {}
    return decoded if isinstance(decoded, dict) else {}


class LockedSignals:
    """Session-backed store of locked signal values.

    Args:
        session: Mutable mapping persisted by the host between requests.
        key: Fernet key (or Fernet instance) used to encrypt the payload.
        first_call: Whether this request starts a new page. On the first
            call stored values are replaced instead of merged. Defaults to
            True when the session holds no locked signals yet.
        settings: Settings controlling tamper logging.
    """

    def __init__(
        self,
        session: MutableMapping[str, Any],
        key: bytes | str | Fernet,
        first_call: bool | None = None,
        settings: HyperSettings | None = None,
    ) -> None:
        self.session = session
        self._fernet = key if isinstance(key, Fernet) else Fernet(key)
        self._first_call = SESSION_KEY not in session if first_call is None else first_call
        self._settings = settings

    @property
    def settings(self) -> HyperSettings:
        return self._settings if self._settings is not None else get_settings()

    # ==================== Storage ====================

    def store(self, signals: Mapping[str, Any]) -> None:
        """Record the locked entries of signals.

        The first store of a first-call request replaces whatever the
        session held; later stores merge into it.
        """
        locked = extract_locked_signals(signals)
        if not locked:
            return
        if self._first_call:
            self.clear()
            self._first_call = False
            final = locked
        else:
            final = {**(self.stored() or {}), **locked}
        self._write(final)

    def stored(self) -> dict[str, Any] | None:
        """Return stored locked signals, or None if absent or unreadable."""
        try:
            payload = self._read()
        except InvalidToken:
            return None
        if payload is None:
            return None
        signals = payload.get("signals")
        return signals if isinstance(signals, dict) else None

    def clear(self) -> None:
        self.session.pop(SESSION_KEY, None)

    def clear_signal(self, name: str) -> None:
        """Remove one locked signal; drop the whole entry when it was the last."""
        if not is_locked(name):
            return
        existing = self.stored()
        if not existing or name not in existing:
            return
        del existing[name]
        if existing:
            self._write(existing)
        else:
            self.clear()

    def update_signal(self, name: str, value: Any) -> None:
        """Set a locked signal server-side. A None value removes it."""
        if not is_locked(name):
            return
        if value is None:
            self.clear_signal(name)
            return
        existing = self.stored() or {}
        existing[name] = value
        self._write(existing)

    # ==================== Validation ====================

    def validate(self, incoming: Mapping[str, Any], **context: Any) -> None:
        """Check client signals against the stored locked values.

        A locked signal missing from ``incoming`` or sent back as None is
        accepted (client-side deletion). Extra ``context`` (ip, url, user id...) is attached to
        the tamper log entry.

        Raises:
            SignalTamperedError: On a changed value, an unexpected locked
                signal, or an invalid stored token.
        """
        if SESSION_KEY not in self.session:
            return
        try:
            payload = self._read()
        except InvalidToken:
            self._tampered(
                "Locked signals signature is invalid. Possible tampering detected.",
                context,
            )
        if payload is None or not isinstance(payload.get("signals"), dict):
            return

        stored = payload["signals"]
        current = extract_locked_signals(incoming)
        for name, original in stored.items():
            if current.get(name) is None:
                continue
            if current[name] != original:
                self._tampered(f"Locked signal '{name}' was tampered with.", context)
        for name in current:
            if name not in stored:
                self._tampered(f"Unexpected locked signal '{name}' was added.", context)

    def _tampered(self, message: str, context: dict[str, Any]) -> None:
        if self.settings.security.locked_signals.log_violations:
            log.warning("signal_tampering_detected", message=message, **context)
        raise SignalTamperedError(message)

    # ==================== Token I/O ====================

    def _write(self, signals: dict[str, Any]) -> None:
        payload = json.dumps({"signals": signals, "timestamp": int(time.time())})
        self.session[SESSION_KEY] = self._fernet.encrypt(payload.encode()).decode()

    def _read(self) -> dict[str, Any] | None:
        token = self.session.get(SESSION_KEY)
        if not isinstance(token, str):
            return None
        decoded = json.loads(self._fernet.decrypt(token.encode()))
        return decoded if isinstance(decoded, dict) else None


def current_signals() -> LockedSignals | None:
    """Return the locked signal store bound to the current request, if any."""
    return _current_signals.get()


@contextmanager
def use_signals(store: LockedSignals) -> Iterator[LockedSignals]:
    """Bind store as the current locked signal store for the block."""
    token = _current_signals.set(store)
    try:
        yield store
    finally:
        _current_signals.reset(token)
