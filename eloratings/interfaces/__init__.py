from .GameRecord import GameRecord
from .RatingSystem import RatingSystem
from .Registry import Registry
from .Storage import Storage

__all__ = [
    "GameRecord",
    "RatingSystem",
    "Registry",
    "Storage",
]
