"""Game lobbies and the lobby registry."""

from corona_defense.lobby.lobby import Lobby, LobbyObserver
from corona_defense.lobby.models import JoinResult, LobbyInfo, LobbyState, LobbyStateError
from corona_defense.lobby.router import Router

__all__ = [
    "JoinResult",
    "Lobby",
    "LobbyInfo",
    "LobbyObserver",
    "LobbyState",
    "LobbyStateError",
    "Router",
]
