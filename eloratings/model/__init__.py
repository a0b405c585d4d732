from .Configuration import Configuration, KFactorRule, config, configure, reset_config
from .EloLadder import EloLadder
from .Game import Game, GameAlreadyResolved
from .Player import Player, PlayerView

__all__ = [
    "Configuration",
    "KFactorRule",
    "config",
    "configure",
    "reset_config",
    "EloLadder",
    "Game",
    "GameAlreadyResolved",
    "Player",
    "PlayerView",
]
