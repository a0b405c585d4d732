from math import isnan
from numbers import Number
from typing import Any

__all__ = ["EloRating", "InvalidResult", "elo_expected", "elo_update"]


class InvalidResult(ValueError):
    pass


def elo_expected(rating: float, other_rating: float) -> float:
    try:
        return 1.0 / (1.0 + 10.0 ** ((float(other_rating) - float(rating)) / 400.0))
    except OverflowError:
        # the other side is so far ahead that 10 ** x no longer fits a float
        return 0.0


class EloRating:
    '''
    Rating change for one player of one game. Two of these are needed to
    rate both sides of a game, `Game` builds them for you.

    The result is not checked until it is read, so an instance can be built
    with anything and fail later when the new rating is asked for.
    '''
    old_rating: float
    other_rating: float
    k_factor: float

    def __init__(self, old_rating: float, other_rating: float, k_factor: float, result: Any) -> None:
        self.old_rating = old_rating
        self.other_rating = other_rating
        self.k_factor = k_factor
        self._result = result

    def __str__(self) -> str:
        return "%d -> %d (K=%s)" % (self.old_rating, self.new_rating, self.k_factor)

    @property
    def result(self) -> float:
        if not self.valid_result():
            raise InvalidResult("Invalid result: %r" % (self._result,))
        return float(self._result)

    def valid_result(self) -> bool:
        r = self._result
        if isinstance(r, bool) or not isinstance(r, Number):
            return False
        try:
            value = float(r)
        except TypeError:
            return False
        return not isnan(value) and 0.0 <= value <= 1.0

    @property
    def expected(self) -> float:
        return elo_expected(self.old_rating, self.other_rating)

    @property
    def change(self) -> float:
        return float(self.k_factor) * (self.result - self.expected)

    @property
    def new_rating(self) -> int:
        # int() truncates toward zero, which the reference ratings depend on
        return int(float(self.old_rating) + self.change)


def elo_update(old_rating: float, other_rating: float, k_factor: float, result: float) -> int:
    return EloRating(old_rating, other_rating, k_factor, result).new_rating
