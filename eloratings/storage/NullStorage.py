from typing import Any

from ..interfaces import Storage

__all__ = ["NullStorage"]


class NullStorage(Storage):
    def save_player(self, player: Any) -> None:
        pass

    def save_game(self, game: Any) -> None:
        pass
