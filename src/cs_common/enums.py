"""Shared enums."""

from enum import Enum


class ConnectionStatus(str, Enum):
    """Outcome of a backing-store check (startup and health checks)."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
