"""Router — registry of live lobbies."""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from corona_defense.lobby.lobby import Lobby

_logger = logging.getLogger(__name__)


class Router:
    """Assigns lobby IDs and keeps track of open lobbies.

    IDs start at 1 and are never reused within one router. The router
    observes every lobby it registers and forgets it once it closes.
    Not thread-safe.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._lobbies: dict[int, Lobby] = {}

    def register(self, lobby: Lobby) -> int:
        """Register *lobby* and return its new unique ID."""
        lobby_id = next(self._ids)
        self._lobbies[lobby_id] = lobby
        lobby.add_observer(self)
        _logger.debug("Registered lobby %d", lobby_id)
        return lobby_id

    def unregister(self, lobby_id: int) -> None:
        """Forget *lobby_id*; unknown IDs are ignored."""
        if self._lobbies.pop(lobby_id, None) is not None:
            _logger.debug("Unregistered lobby %d", lobby_id)

    def get(self, lobby_id: int) -> Lobby:
        """Return the open lobby *lobby_id*.

        Raises:
            KeyError: If no open lobby has that ID.
        """
        try:
            return self._lobbies[lobby_id]
        except KeyError:
            raise KeyError(f"Unknown lobby {lobby_id}") from None

    def lobbies(self) -> list[Lobby]:
        """Open lobbies, in registration order."""
        return list(self._lobbies.values())

    def __len__(self) -> int:
        return len(self._lobbies)

    # Lobby observer
    def on_close(self, lobby_id: int) -> None:
        self.unregister(lobby_id)
