# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for locked signals."""

import pytest
from cryptography.fernet import Fernet
from structlog.testing import capture_logs

from genro_hyper import SignalTamperedError
from genro_hyper.config import HyperSettings
from genro_hyper.html import Div
from genro_hyper.signals import (
    SESSION_KEY,
    LockedSignals,
    current_signals,
    extract_locked_signals,
    is_locked,
    read_signals,
    use_signals,
)


@pytest.fixture
def key():
    return Fernet.generate_key()


@pytest.fixture
def store(key, settings):
    return LockedSignals({}, key, settings=settings)


class TestHelpers:
    """Tests for signal helpers."""

    def test_is_locked(self):
        """Test a trailing underscore marks a locked signal."""
        assert is_locked('user_id_') is True
        assert is_locked('user_id') is False
        assert is_locked(3) is False

    def test_extract_locked(self):
        """Test only locked entries are extracted."""
        assert extract_locked_signals({'a_': 1, 'b': 2}) == {'a_': 1}

    def test_read_signals_from_query(self):
        """Test the datastar query parameter is decoded."""
        assert read_signals({'datastar': '{"a": 1}'}, b'{"b": 2}') == {'a': 1}

    def test_read_signals_from_body(self):
        """Test the JSON body is used without query parameter."""
        assert read_signals({}, b'{"b": 2}') == {'b': 2}

    @pytest.mark.parametrize('body', ['not json', '[1, 2]', '', None])
    def test_read_signals_invalid(self, body):
        """Test anything but a JSON object gives an empty dict."""
        assert read_signals(None, body) == {}


class TestStore:
    """Tests for storing locked signals."""

    def test_only_locked_signals_stored(self, store):
        """Test unlocked signals are not kept."""
        store.store({'user_id_': 42, 'count': 0})
        assert store.stored() == {'user_id_': 42}

    def test_payload_is_encrypted(self, store):
        """Test the session holds an opaque token."""
        store.store({'secret_': 'value'})
        token = store.session[SESSION_KEY]
        assert 'value' not in token

    def test_first_call_replaces_then_merges(self, key, settings):
        """Test the first store of a page clears old values, later stores merge."""
        session = {}
        LockedSignals(session, key, settings=settings).store({'old_': 1})
        fresh = LockedSignals(session, key, first_call=True, settings=settings)
        fresh.store({'a_': 1})
        fresh.store({'b_': 2})
        assert fresh.stored() == {'a_': 1, 'b_': 2}

    def test_existing_session_merges(self, key, settings):
        """Test a store over an existing session merges by default."""
        session = {}
        LockedSignals(session, key, settings=settings).store({'a_': 1})
        LockedSignals(session, key, settings=settings).store({'b_': 2})
        assert LockedSignals(session, key, settings=settings).stored() == {'a_': 1, 'b_': 2}

    def test_update_and_clear_signal(self, store):
        """Test server-side updates of single locked signals."""
        store.store({'a_': 1})
        store.update_signal('b_', 2)
        assert store.stored() == {'a_': 1, 'b_': 2}
        store.update_signal('b_', None)
        assert store.stored() == {'a_': 1}
        store.update_signal('plain', 5)
        assert store.stored() == {'a_': 1}
        store.clear_signal('a_')
        assert SESSION_KEY not in store.session

    def test_clear(self, store):
        """Test clear() drops every locked signal."""
        store.store({'a_': 1})
        store.clear()
        assert store.stored() is None


class TestValidate:
    """Tests for tamper detection."""

    def test_unchanged_values_pass(self, store):
        """Test unchanged locked values and any unlocked values pass."""
        store.store({'user_id_': 42})
        store.validate({'user_id_': 42, 'count': 5})

    def test_removed_signal_allowed(self, store):
        """Test a locked signal missing from the request is accepted."""
        store.store({'user_id_': 42})
        store.validate({})

    def test_null_deletion_allowed(self, store):
        """Test a locked signal sent back as null is a deletion, not tampering."""
        store.store({'user_id_': 42})
        with capture_logs() as logs:
            store.validate({'user_id_': None})
        assert logs == []

    def test_nothing_stored_passes(self, store):
        """Test validation passes when nothing was stored."""
        store.validate({'user_id_': 1})

    def test_changed_value_raises(self, store):
        """Test a modified locked value is detected."""
        store.store({'user_id_': 42})
        with pytest.raises(SignalTamperedError, match="'user_id_' was tampered with"):
            store.validate({'user_id_': 7})

    def test_added_signal_raises(self, store):
        """Test an unexpected locked signal is detected."""
        store.store({'user_id_': 42})
        with pytest.raises(SignalTamperedError, match="Unexpected locked signal 'role_'"):
            store.validate({'user_id_': 42, 'role_': 'admin'})

    def test_invalid_token_raises(self, store):
        """Test a corrupted token is treated as tampering."""
        store.session[SESSION_KEY] = 'garbage'
        assert store.stored() is None
        with pytest.raises(SignalTamperedError, match="signature is invalid"):
            store.validate({})

    def test_other_key_raises(self, key, settings):
        """Test a token encrypted with another key is rejected."""
        session = {}
        LockedSignals(session, key, settings=settings).store({'a_': 1})
        other = LockedSignals(session, Fernet.generate_key(), settings=settings)
        with pytest.raises(SignalTamperedError):
            other.validate({'a_': 1})

    def test_violation_logged(self, store):
        """Test tampering is logged as a warning with request context."""
        store.store({'a_': 1})
        with capture_logs() as logs:
            with pytest.raises(SignalTamperedError):
                store.validate({'a_': 2}, ip='10.0.0.1')
        assert len(logs) == 1
        assert logs[0]['event'] == 'signal_tampering_detected'
        assert logs[0]['log_level'] == 'warning'
        assert logs[0]['ip'] == '10.0.0.1'

    def test_violation_logging_disabled(self, key):
        """Test the log_violations flag silences the warning but still raises."""
        settings = HyperSettings(security={'locked_signals': {'log_violations': False}})
        store = LockedSignals({}, key, settings=settings)
        store.store({'a_': 1})
        with capture_logs() as logs:
            with pytest.raises(SignalTamperedError):
                store.validate({'a_': 2})
        assert logs == []


class TestElementIntegration:
    """Tests for data_signals with a bound store."""

    def test_data_signals_stores_locked(self, store):
        """Test declaring locked signals records them in the bound store."""
        with use_signals(store):
            assert current_signals() is store
            html = Div().data_signals({'user_id_': 1, 'count': 0}).to_html()
        assert current_signals() is None
        assert store.stored() == {'user_id_': 1}
        assert 'user_id_' in html

    def test_data_signals_without_store(self):
        """Test locked signals render normally without a bound store."""
        assert Div().data_signals({'a_': 1}).get_attr('data-signals') == '{"a_":1}'
