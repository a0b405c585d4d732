import abc
from typing import Any

__all__ = ["Storage"]


class Storage(abc.ABC):
    '''
    Persistence hook. Players call `save_player` after every game they play,
    games call `save_game` once their result has been applied to both
    players.
    '''

    @abc.abstractmethod
    def save_player(self, player: Any) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def save_game(self, game: Any) -> None:
        raise NotImplementedError
