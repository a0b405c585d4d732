import abc
from typing import Any, List

__all__ = ["Registry"]


class Registry(abc.ABC):
    @abc.abstractmethod
    def register_player(self, player: Any) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def register_game(self, game: Any) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def players(self) -> List[Any]:
        raise NotImplementedError

    @abc.abstractmethod
    def games(self) -> List[Any]:
        raise NotImplementedError
