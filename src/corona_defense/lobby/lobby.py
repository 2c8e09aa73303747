"""Lobby — one game session and its lifecycle."""

from __future__ import annotations

import logging
from typing import Protocol

from corona_defense.lobby.models import JoinResult, LobbyInfo, LobbyState, LobbyStateError
from corona_defense.lobby.router import Router
from corona_defense.stage.descriptor import StageDescriptor

_logger = logging.getLogger(__name__)


class LobbyObserver(Protocol):
    """Reacts to lobby lifecycle events."""

    def on_close(self, lobby_id: int) -> None:
        """Called once when lobby *lobby_id* closes."""


class Lobby:
    """A game session that players join before it starts.

    Parameters
    ----------
    name:
        Display name.
    password:
        Password required to join. Empty string means an open lobby.
    router:
        Registry that assigns this lobby's ID.
    stage:
        Stage to play. Can also be given to :meth:`start`.
    max_players:
        Player limit; joins beyond it are rejected.
    """

    def __init__(
        self,
        name: str,
        password: str,
        router: Router,
        stage: StageDescriptor | None = None,
        max_players: int = 4,
    ) -> None:
        if max_players < 1:
            raise ValueError("max_players must be >= 1")
        self.name = name
        self._password = password
        self._stage = stage
        self.max_players = max_players
        self._state = LobbyState.FORMING
        self._player_count = 0
        self._observers: list[LobbyObserver] = []
        self.id = router.register(self)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> LobbyState:
        return self._state

    @property
    def player_count(self) -> int:
        return self._player_count

    @property
    def stage(self) -> StageDescriptor | None:
        return self._stage

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    def join(self, password: str = "") -> JoinResult:
        """Try to add a player. Rejections are returned, not raised."""
        if self._state is not LobbyState.FORMING:
            return JoinResult(ok=False, reason=f"Lobby is {self._state.value}")
        if password != self._password:
            return JoinResult(ok=False, reason="Wrong password")
        if self._player_count >= self.max_players:
            return JoinResult(ok=False, reason="Lobby is full")
        self._player_count += 1
        return JoinResult(ok=True)

    def leave(self) -> None:
        """Remove a player. The lobby closes when the last player leaves.

        Raises:
            LobbyStateError: If the lobby is closed or has no players.
        """
        if self._state is LobbyState.CLOSED:
            raise LobbyStateError(f"Lobby {self.id} is closed")
        if self._player_count == 0:
            raise LobbyStateError(f"Lobby {self.id} has no players")
        self._player_count -= 1
        if self._player_count == 0:
            self.close()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, stage: StageDescriptor | None = None) -> None:
        """Move from ``forming`` to ``active``.

        Raises:
            LobbyStateError: If not forming, no players joined, or no stage is set.
        """
        if self._state is not LobbyState.FORMING:
            raise LobbyStateError(f"Cannot start lobby {self.id}: it is {self._state.value}")
        if self._player_count == 0:
            raise LobbyStateError(f"Cannot start lobby {self.id} without players")
        if stage is not None:
            self._stage = stage
        if self._stage is None:
            raise LobbyStateError(f"Cannot start lobby {self.id} without a stage")
        self._state = LobbyState.ACTIVE
        _logger.info("Lobby %d started on stage %d", self.id, self._stage.number)

    def close(self) -> None:
        """Close the lobby and notify observers. Closing twice is a no-op."""
        if self._state is LobbyState.CLOSED:
            return
        self._state = LobbyState.CLOSED
        _logger.info("Lobby %d closed", self.id)
        for observer in list(self._observers):
            observer.on_close(self.id)

    def add_observer(self, observer: LobbyObserver) -> None:
        self._observers.append(observer)

    def info(self) -> LobbyInfo:
        return LobbyInfo(
            id=self.id,
            name=self.name,
            state=self._state,
            player_count=self._player_count,
            max_players=self.max_players,
            stage_number=self._stage.number if self._stage is not None else None,
            has_password=bool(self._password),
        )
