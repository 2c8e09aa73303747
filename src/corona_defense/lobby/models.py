"""Lobby data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LobbyState(str, Enum):
    """Lifecycle of a lobby: ``forming -> active -> closed``.

    A forming lobby may also close directly (everyone left).
    """

    FORMING = "forming"
    ACTIVE = "active"
    CLOSED = "closed"


class LobbyStateError(RuntimeError):
    """An operation is not allowed in the lobby's current state."""


@dataclass(frozen=True)
class JoinResult:
    """Outcome of a join attempt.

    ``reason`` is empty when ``ok`` is True.
    """

    ok: bool
    reason: str = ""


@dataclass(frozen=True)
class LobbyInfo:
    """Read-only snapshot of a lobby, for listings."""

    id: int
    name: str
    state: LobbyState
    player_count: int
    max_players: int
    stage_number: int | None
    has_password: bool
