from datetime import timezone
from typing import Any, Mapping, Optional

from dateutil import parser

from ..math.elo import InvalidResult

__all__ = ["GameRecord"]


RESULT_WORDS = {
    "win": 1.0,
    "won": 1.0,
    "loss": 0.0,
    "lose": 0.0,
    "lost": 0.0,
    "draw": 0.5,
}


class GameRecord:
    game_id: int
    one_id: int
    two_id: int
    result: float  # from the perspective of player one
    ended: Optional[int]  # timestamp, seconds since epoch

    def __init__(
        self,
        game_id: int,
        one_id: int,
        two_id: int,
        result: float,
        ended: Optional[int] = None,
    ):
        self.game_id = game_id
        self.one_id = one_id
        self.two_id = two_id
        self.result = result
        self.ended = ended

    def __str__(self) -> str:
        return "%d\t%d vs. %d: %.1f" % (
            self.game_id,
            self.one_id,
            self.two_id,
            self.result,
        )

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "GameRecord":
        return cls(
            game_id=int(row["game_id"]),
            one_id=int(row["one"]),
            two_id=int(row["two"]),
            result=parse_result(row["result"]),
            ended=parse_ended(row.get("ended")),
        )


def parse_result(value: Any) -> float:
    text = str(value).strip().lower()
    if text in RESULT_WORDS:
        return RESULT_WORDS[text]
    try:
        result = float(text)
    except ValueError:
        raise InvalidResult("Invalid result: %r" % (value,)) from None
    if not 0.0 <= result <= 1.0:
        raise InvalidResult("Invalid result: %r" % (value,))
    return result


def parse_ended(value: Any) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    ended = parser.parse(str(value))
    if ended.tzinfo is None:
        ended = ended.replace(tzinfo=timezone.utc)
    return int(ended.timestamp())
