#!/usr/bin/env -S PYTHONDONTWRITEBYTECODE=1 PYTHONPATH=..:. python3

import logging
import sys

from analysis.util import GameData, cli, config
from eloratings import Configuration, EloLadder, InMemoryStorage, configure

logger = logging.getLogger(__name__)

cli.add_argument(
    "--rating-history-db", dest="rating_history_db", type=str,
    help="Path to DB for ratings history (not saved by default)",
)
cli.add_argument("--verbose", "-v", dest="verbose", action="store_true", help="log every game")

config(cli.parse_args(), "replay")
logging.basicConfig(stream=sys.stdout, level=logging.DEBUG if config.args.verbose else logging.INFO)

storage = InMemoryStorage()


def use_storage(c: Configuration) -> None:
    c.storage = storage


configure(use_storage)
ladder = EloLadder()

count = 0
for game in GameData(config.args.games):
    ladder.process_game(game)
    count += 1
    if count % 10000 == 0:
        logger.info("%d games processed", count)

logger.info("%d games processed, %d players rated", count, len(ladder.all_players()))

for player_id, rating in ladder.standings():
    player = ladder.get(player_id)
    print("%10d %6d %5d%s" % (player_id, rating, player.games_played, " pro" if player.is_pro else ""))

if config.args.rating_history_db:
    storage.save_rating_history(config.args.rating_history_db, config.name)
