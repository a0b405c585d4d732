import csv
from typing import Iterator

from eloratings import GameRecord

from .CLI import cli

__all__ = ["GameData"]

cli.add_argument("games", type=str, help="CSV file with game_id, one, two, result and ended columns")


class GameData:
    path: str

    def __init__(self, path: str) -> None:
        self.path = path

    def __iter__(self) -> Iterator[GameRecord]:
        with open(self.path, newline="") as f:
            for row in csv.DictReader(f):
                yield GameRecord.from_row(row)
