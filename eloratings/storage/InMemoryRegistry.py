from typing import Any, List

from ..interfaces import Registry

__all__ = ["InMemoryRegistry"]


class InMemoryRegistry(Registry):
    _players: List[Any]
    _games: List[Any]

    def __init__(self) -> None:
        self._players = []
        self._games = []

    def register_player(self, player: Any) -> None:
        self._players.append(player)

    def register_game(self, game: Any) -> None:
        self._games.append(game)

    def players(self) -> List[Any]:
        return list(self._players)

    def games(self) -> List[Any]:
        return list(self._games)

    def clear(self) -> None:
        self._players = []
        self._games = []
