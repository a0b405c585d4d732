import logging
from contextlib import ExitStack, contextmanager
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional

from ..math.elo import EloRating
from .Configuration import config

if TYPE_CHECKING:
    from .Player import Player

__all__ = ["Game", "GameAlreadyResolved"]

logger = logging.getLogger(__name__)


class GameAlreadyResolved(RuntimeError):
    pass


@contextmanager
def holding(*players: "Player") -> Iterator[None]:
    # Stable ordering so two games sharing players can't deadlock.
    with ExitStack() as stack:
        for player in sorted(players, key=id):
            stack.enter_context(player._lock)
        yield


class Game:
    '''
    Two players and, once known, a result from the perspective of player
    one: 1 is a win, 0 a loss, 0.5 a draw.

    Setting the result rates both players against their ratings from before
    the game and tells them to update. A game can only be resolved once.
    '''
    one: "Player"
    two: "Player"
    ended: Optional[int]  # timestamp, seconds since epoch
    ratings: Dict["Player", EloRating]

    def __init__(
        self,
        one: "Player",
        two: "Player",
        result: Any = None,
        ended: Optional[int] = None,
    ) -> None:
        if one is two:
            raise ValueError("A player can't play a game against themselves")
        self.one = one
        self.two = two
        self.ended = ended
        self.ratings = {}
        self._result: Optional[float] = None

        registry = config().registry
        if registry is not None:
            registry.register_game(self)

        if result is not None:
            self.set_result(result)

    def __str__(self) -> str:
        return "%d::%d::%s" % (self.one.rating, self.two.rating, self._result)

    @property
    def result(self) -> Optional[float]:
        return self._result

    @result.setter
    def result(self, result: Any) -> None:
        self.set_result(result)

    @property
    def is_resolved(self) -> bool:
        return self._result is not None

    def set_result(self, result: Any) -> "Game":
        with holding(self.one, self.two):
            if self.is_resolved:
                raise GameAlreadyResolved("Game already has result %s" % self._result)

            # Reading the result validates it, so a bad result fails here
            # before either player is touched.
            rating_one = EloRating(self.one.rating, self.two.rating, self.one.k_factor, result)
            rating_two = EloRating(self.two.rating, self.one.rating, self.two.k_factor, 1.0 - rating_one.result)

            self._result = rating_one.result
            self.ratings = {self.one: rating_one, self.two: rating_two}
            logger.debug("Game resolved with %.2f: %s, %s", self._result, rating_one, rating_two)

            self.one._played(self)
            self.two._played(self)
        self.save()
        return self

    def win(self) -> "Game":
        return self.set_result(1.0)

    def lose(self) -> "Game":
        return self.set_result(0.0)

    def draw(self) -> "Game":
        return self.set_result(0.5)

    def set_winner(self, player: "Player") -> "Game":
        return self.set_result(1.0 if self._side(player) == 1 else 0.0)

    def set_loser(self, player: "Player") -> "Game":
        return self.set_result(0.0 if self._side(player) == 1 else 1.0)

    def new_rating(self, player: "Player") -> int:
        return self.ratings[player].new_rating

    def save(self) -> None:
        config().storage.save_game(self)

    def _side(self, player: "Player") -> int:
        if player is self.one:
            return 1
        if player is self.two:
            return 2
        raise ValueError("Player %s is not playing in this game" % player)
