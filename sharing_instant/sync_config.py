"""Configuration and status records for the sync engine."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WS_URI = "wss://api.instantdb.com/runtime/session"

ADMIN = "admin"
USER = "user"


@dataclass
class SyncStatus:
    """Current synchronization status of a sync engine.

    ``last_sync_at`` is a monotonic timestamp in seconds, or ``None``.
    """

    is_connected: bool = False
    is_sending_changes: bool = False
    is_receiving_changes: bool = False
    session_id: str | None = None
    last_sync_at: float | None = None


@dataclass(frozen=True)
class ConnectionSettings:
    """What a connection to the server is opened with.

    ``role`` is ``"admin"`` or ``"user"``; ``token`` is the admin token or
    the user's refresh token. An anonymous connection is an admin
    connection with an empty token.
    """

    app_id: str
    ws_uri: str
    role: str
    token: str


@dataclass
class SyncConfig:
    """Configuration for the sync engine."""

    app_id: str = ""
    ws_uri: str = DEFAULT_WS_URI
    refresh_token: str | None = None
    admin_token: str | None = None

    def connection_settings(self) -> ConnectionSettings:
        """Choose the connection credentials: admin token first, then refresh token."""
        if self.admin_token is not None:
            role, token = ADMIN, self.admin_token
        elif self.refresh_token is not None:
            role, token = USER, self.refresh_token
        else:
            role, token = ADMIN, ""
        return ConnectionSettings(
            app_id=self.app_id, ws_uri=self.ws_uri, role=role, token=token
        )


__all__ = [
    "ADMIN",
    "DEFAULT_WS_URI",
    "USER",
    "ConnectionSettings",
    "SyncConfig",
    "SyncStatus",
]