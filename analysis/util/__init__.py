from .CLI import cli
from .Config import config
from .GameData import GameData

__all__ = [
    "cli",
    "config",
    "GameData",
]
