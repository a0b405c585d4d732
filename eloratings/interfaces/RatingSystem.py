import abc
from typing import Any

from .GameRecord import GameRecord

__all__ = ["RatingSystem"]


class RatingSystem(abc.ABC):
    @abc.abstractmethod
    def process_game(self, game: GameRecord) -> Any:
        raise NotImplementedError
