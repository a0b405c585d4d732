from .interfaces import GameRecord
from .math import EloRating, InvalidResult, elo_expected, elo_update
from .model import (
    Configuration,
    EloLadder,
    Game,
    GameAlreadyResolved,
    KFactorRule,
    Player,
    PlayerView,
    config,
    configure,
    reset_config,
)
from .storage import InMemoryRegistry, InMemoryStorage, NullStorage

__all__ = [
    "Configuration",
    "EloLadder",
    "EloRating",
    "Game",
    "GameAlreadyResolved",
    "GameRecord",
    "InMemoryRegistry",
    "InMemoryStorage",
    "InvalidResult",
    "KFactorRule",
    "NullStorage",
    "Player",
    "PlayerView",
    "config",
    "configure",
    "elo_expected",
    "elo_update",
    "reset_config",
]
