import logging
import sqlite3
from collections import defaultdict
from typing import Any, DefaultDict, List, Tuple

from filelock import FileLock

from ..interfaces import Storage

__all__ = ["InMemoryStorage"]

logger = logging.getLogger(__name__)


def player_key(player: Any) -> int:
    player_id = getattr(player, "player_id", None)
    return id(player) if player_id is None else player_id


class InMemoryStorage(Storage):
    _games: List[Any]
    _rating_history: DefaultDict[int, List[Tuple[int, int]]]
    _sequence: int

    def __init__(self) -> None:
        self._games = []
        self._rating_history = defaultdict(lambda: [])
        self._sequence = 0

    def save_player(self, player: Any) -> None:
        # Players are saved right after the game that changed them was
        # appended to their history.
        game = player.games[-1] if player.games else None
        self._sequence += 1
        timestamp = self._sequence
        if game is not None and game.ended is not None:
            timestamp = game.ended
        self._rating_history[player_key(player)].append((timestamp, player.rating))

    def save_game(self, game: Any) -> None:
        self._games.append(game)

    def get_games(self) -> List[Any]:
        return list(self._games)

    def get_rating_history(self, player_id: int) -> List[Tuple[int, int]]:
        return list(self._rating_history.get(player_id, []))

    def get_last_rating(self, player_id: int) -> Any:
        history = self._rating_history.get(player_id)
        if not history:
            return None
        return history[-1][1]

    def save_rating_history(self, db_path: str, category: str = "overall") -> None:
        logger.info("Saving rating history to %s", db_path)
        with FileLock(db_path + ".lock"):
            connection = sqlite3.connect(db_path)
            try:
                cursor = connection.cursor()
                cursor.execute("""
                    CREATE TABLE IF NOT EXISTS rating_history(
                        category TEXT,
                        player_id INTEGER,
                        timestamp INTEGER,
                        rating INTEGER
                    )""")
                cursor.execute("""
                    CREATE INDEX IF NOT EXISTS index_ratings_by_player
                        ON rating_history
                        (player_id,timestamp)
                    """)
                cursor.executemany("""
                    INSERT INTO rating_history(category,player_id,timestamp,rating)
                        VALUES (?,?,?,?)
                    """,
                    ((category, player, timestamp, rating)
                        for (player, history) in self._rating_history.items()
                        for (timestamp, rating) in history
                    ),
                    )
                connection.commit()
            finally:
                connection.close()
        logger.info("Rating history saved.")
