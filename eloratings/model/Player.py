import threading
from typing import Any, List, NamedTuple, Optional

from .Configuration import config
from .Game import Game

__all__ = ["Player", "PlayerView"]


class PlayerView(NamedTuple):
    '''Read-only snapshot of a player, handed to K-factor rule predicates.'''
    rating: int
    games_played: int
    pro: bool
    pro_rating: bool
    starter: bool


class Player:
    '''
    A contestant. Everything is optional, missing values fall back to the
    configuration:

        Player()                          # default rating, no games yet
        Player(rating=2100, games_played=40)
        Player(pro=True)                  # was a pro before, stays one
        Player(k_factor=10)               # skips the K-factor rules
    '''
    player_id: Optional[int]

    def __init__(
        self,
        rating: Optional[int] = None,
        games_played: Optional[int] = None,
        pro: bool = False,
        k_factor: Optional[int] = None,
        games: Optional[List[Game]] = None,
        player_id: Optional[int] = None,
    ) -> None:
        self._rating = rating
        self._games_played = games_played
        self._pro = pro
        self._k_factor = k_factor
        self._games = list(games) if games else []
        self.player_id = player_id
        self._lock = threading.RLock()

        registry = config().registry
        if registry is not None:
            registry.register_player(self)

    def __str__(self) -> str:
        if self.player_id is None:
            return "%d (%d games)" % (self.rating, self.games_played)
        return "%d: %d (%d games)" % (self.player_id, self.rating, self.games_played)

    @property
    def rating(self) -> int:
        if self._rating is None:
            self._rating = config().default_rating
        return self._rating

    @property
    def games(self) -> List[Game]:
        return self._games

    @property
    def games_played(self) -> int:
        # Seeded from the history once, counted on its own from then on.
        if self._games_played is None:
            self._games_played = len(self._games)
        return self._games_played

    @property
    def is_pro_rating(self) -> bool:
        return self.rating >= config().pro_rating_boundary

    @property
    def is_starter(self) -> bool:
        return self.games_played < config().starter_boundary

    @property
    def is_pro(self) -> bool:
        '''FIDE considers a player that once reached the pro rating a pro for life.'''
        return bool(self._pro)

    def view(self) -> PlayerView:
        return PlayerView(
            rating=self.rating,
            games_played=self.games_played,
            pro=self.is_pro,
            pro_rating=self.is_pro_rating,
            starter=self.is_starter,
        )

    @property
    def k_factor(self) -> int:
        if self._k_factor is not None:
            return self._k_factor
        view = self.view()
        for rule in config().effective_rules():
            if rule.predicate(view):
                return rule.k_factor
        return config().default_k_factor

    def versus(self, other_player: "Player", result: Any = None, ended: Optional[int] = None) -> Game:
        return Game(self, other_player, result=result, ended=ended)

    def wins_from(self, other_player: "Player", ended: Optional[int] = None) -> Game:
        return self.versus(other_player, ended=ended).win()

    def loses_from(self, other_player: "Player", ended: Optional[int] = None) -> Game:
        return self.versus(other_player, ended=ended).lose()

    def plays_draw(self, other_player: "Player", ended: Optional[int] = None) -> Game:
        return self.versus(other_player, ended=ended).draw()

    def save(self) -> None:
        config().storage.save_player(self)

    def _played(self, game: Game) -> None:
        # Only called by Game, once the ratings of both sides are known.
        with self._lock:
            self._games_played = self.games_played + 1
            self._games.append(game)
            self._rating = game.new_rating(self)
            if self.is_pro_rating:
                self._pro = True
        self.save()
