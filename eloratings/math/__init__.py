from .elo import EloRating, InvalidResult, elo_expected, elo_update

__all__ = [
    "EloRating",
    "InvalidResult",
    "elo_expected",
    "elo_update",
]
