# tests/test_settings_store.py

"""
Tests for the Supabase-backed settings store.
"""

from unittest.mock import Mock

import pytest

from core.settings_store import StoreNotConfiguredError, SupabaseSettingsStore


def make_client(rows=None):
    mock_client = Mock()
    mock_query = Mock()
    mock_query.select.return_value = mock_query
    mock_query.eq.return_value = mock_query
    mock_query.limit.return_value = mock_query
    mock_query.upsert.return_value = mock_query
    mock_query.delete.return_value = mock_query
    mock_query.execute.return_value = Mock(data=rows)
    mock_client.table.return_value = mock_query
    return mock_client, mock_query


def test_get_returns_stored_value():
    mock_client, mock_query = make_client([{"value": '{"MANAGER": []}'}])
    store = SupabaseSettingsStore(client_factory=lambda: mock_client, table="system_settings")

    assert store.get("role_permissions_config") == '{"MANAGER": []}'
    mock_client.table.assert_called_with("system_settings")
    mock_query.select.assert_called_with("value")
    mock_query.eq.assert_called_with("key", "role_permissions_config")
    mock_query.limit.assert_called_with(1)


@pytest.mark.parametrize("rows", [[], None])
def test_get_missing_key_returns_none(rows):
    mock_client, _ = make_client(rows)
    store = SupabaseSettingsStore(client_factory=lambda: mock_client)

    assert store.get("custom_roles_config") is None


def test_upsert_on_key():
    mock_client, mock_query = make_client([])
    store = SupabaseSettingsStore(client_factory=lambda: mock_client)

    store.upsert("custom_roles_config", "[]")

    mock_query.upsert.assert_called_once_with(
        {"key": "custom_roles_config", "value": "[]"},
        on_conflict="key",
    )
    mock_query.execute.assert_called_once()


def test_delete_by_key():
    mock_client, mock_query = make_client([])
    store = SupabaseSettingsStore(client_factory=lambda: mock_client)

    store.delete("role_permissions_config")

    mock_query.delete.assert_called_once_with()
    mock_query.eq.assert_called_once_with("key", "role_permissions_config")


def test_unconfigured_client_raises():
    store = SupabaseSettingsStore(client_factory=lambda: None)

    with pytest.raises(StoreNotConfiguredError):
        store.get("role_permissions_config")


def test_client_errors_propagate():
    mock_client, mock_query = make_client()
    mock_query.execute.side_effect = ConnectionError("timeout")
    store = SupabaseSettingsStore(client_factory=lambda: mock_client)

    with pytest.raises(ConnectionError):
        store.get("role_permissions_config")
