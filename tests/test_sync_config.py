import dataclasses

import pytest

from sharing_instant.sync_config import (
    ADMIN,
    USER,
    ConnectionSettings,
    SyncConfig,
    SyncStatus,
)


def test_sync_engine_default_status():
    status = SyncStatus()
    assert status.is_connected is False
    assert status.is_sending_changes is False
    assert status.is_receiving_changes is False
    assert status.session_id is None
    assert status.last_sync_at is None


def test_sync_config_default_ws_uri():
    config = SyncConfig()
    assert config.ws_uri == "wss://api.instantdb.com/runtime/session"
    assert config.app_id == ""
    assert config.refresh_token is None
    assert config.admin_token is None


def test_status_is_mutable_like_engine_updates():
    status = SyncStatus()
    status.is_connected = True
    status.session_id = "sess-123"
    assert status == SyncStatus(is_connected=True, session_id="sess-123")


def test_admin_token_takes_precedence():
    config = SyncConfig(app_id="test-app", admin_token="token", refresh_token="secret")
    settings = config.connection_settings()
    assert settings.role == ADMIN
    assert settings.token == "token"
    assert settings.app_id == "test-app"


def test_refresh_token_gives_user_connection():
    config = SyncConfig(app_id="test-app", refresh_token="token")
    settings = config.connection_settings()
    assert settings == ConnectionSettings(
        app_id="test-app",
        ws_uri="wss://api.instantdb.com/runtime/session",
        role=USER,
        token="token",
    )


def test_anonymous_connection_is_admin_with_empty_token():
    settings = SyncConfig(app_id="test-app").connection_settings()
    assert settings.role == ADMIN
    assert settings.token == ""


def test_custom_ws_uri_is_carried_over():
    config = SyncConfig(app_id="my-app-id", ws_uri="wss://localhost/runtime/session")
    assert config.connection_settings().ws_uri == "wss://localhost/runtime/session"


def test_connection_settings_are_frozen():
    settings = SyncConfig(app_id="a").connection_settings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.token = "token"  # type: ignore[misc]
    assert settings.token == ""
    assert settings.app_id == "a"