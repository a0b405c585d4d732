import logging
from typing import Dict, List, Optional, Tuple

from ..interfaces import GameRecord, RatingSystem
from .Game import Game
from .Player import Player

__all__ = ["EloLadder"]

logger = logging.getLogger(__name__)


class EloLadder(RatingSystem):
    '''Replays recorded games, one at a time, over players looked up by id.'''
    _players: Dict[int, Player]

    def __init__(self, players: Optional[Dict[int, Player]] = None) -> None:
        self._players = dict(players) if players else {}

    def get(self, player_id: int) -> Player:
        if player_id not in self._players:
            self._players[player_id] = Player(player_id=player_id)
        return self._players[player_id]

    def process_game(self, game: GameRecord) -> Game:
        one = self.get(game.one_id)
        two = self.get(game.two_id)
        logger.debug("Processing game %s", game)
        return one.versus(two, result=game.result, ended=game.ended)

    def all_players(self) -> Dict[int, Player]:
        return self._players

    def standings(self) -> List[Tuple[int, int]]:
        return sorted(
            ((player_id, player.rating) for player_id, player in self._players.items()),
            key=lambda entry: (-entry[1], entry[0]),
        )
