import argparse

from eloratings import Configuration, configure

from .CLI import cli

__all__ = ["config"]


class Config:
    def __init__(self) -> None:
        pass

    def __call__(self, args: argparse.Namespace, name: str) -> None:
        self.args = args
        configure(lambda c: configure_elo(c, args))
        self.name = name


elo_config = cli.add_argument_group("elo configuration")
elo_config.add_argument("--default-rating", dest="default_rating", type=int, default=1000, help="rating of new players")
elo_config.add_argument("--default-k-factor", dest="default_k_factor", type=int, default=15, help="K-factor when no rule applies")
elo_config.add_argument(
    "--pro-rating-boundary", dest="pro_rating_boundary", type=int, default=2400, help="lowest pro rating",
)
elo_config.add_argument(
    "--starter-boundary", dest="starter_boundary", type=int, default=30,
    help="players with fewer games than this are starters",
)
elo_config.add_argument(
    "--no-builtin-policy", dest="use_builtin_policy", action="store_false",
    help="don't use the FIDE K-factor rules",
)


def configure_elo(c: Configuration, args: argparse.Namespace) -> None:
    c.default_rating = args.default_rating
    c.default_k_factor = args.default_k_factor
    c.pro_rating_boundary = args.pro_rating_boundary
    c.starter_boundary = args.starter_boundary
    c.use_builtin_policy = args.use_builtin_policy


config = Config()
