"""Tests for the lobby Router registry."""

from __future__ import annotations

import pytest

from corona_defense.lobby.lobby import Lobby
from corona_defense.lobby.router import Router


class TestRouter:
    def test_ids_are_unique_and_increasing(self):
        router = Router()
        ids = [Lobby(f"room {i}", "", router).id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    def test_routers_number_independently(self):
        a, b = Router(), Router()
        assert Lobby("x", "", a).id == 1
        assert Lobby("y", "", b).id == 1

    def test_get_registered_lobby(self):
        router = Router()
        lobby = Lobby("room", "", router)
        assert router.get(lobby.id) is lobby

    def test_get_unknown_raises(self):
        with pytest.raises(KeyError):
            Router().get(42)

    def test_closed_lobby_is_unregistered(self):
        router = Router()
        keep = Lobby("keep", "", router)
        gone = Lobby("gone", "", router)
        gone.close()
        assert router.lobbies() == [keep]
        assert len(router) == 1
        with pytest.raises(KeyError):
            router.get(gone.id)

    def test_ids_not_reused_after_close(self):
        router = Router()
        first = Lobby("a", "", router)
        first.close()
        assert Lobby("b", "", router).id == 2

    def test_unregister_unknown_is_ignored(self):
        router = Router()
        router.unregister(99)
        assert len(router) == 0
