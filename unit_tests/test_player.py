from eloratings import Game, Player, PlayerView


def test_starter():
    player = Player()
    assert player.k_factor == 25
    assert player.is_starter
    assert not player.is_pro
    assert not player.is_pro_rating


def test_normal():
    player = Player(rating=2399, games_played=30)
    assert player.k_factor == 15
    assert not player.is_starter
    assert not player.is_pro
    assert not player.is_pro_rating


def test_pro_rating():
    player = Player(rating=2400)
    assert player.k_factor == 10
    assert player.is_starter
    assert player.is_pro_rating
    assert not player.is_pro


def test_historically_a_pro():
    player = Player(rating=2399, pro=True)
    assert player.k_factor == 10
    assert player.is_starter
    assert not player.is_pro_rating
    assert player.is_pro


def test_k_factor_override():
    player = Player(rating=2400, k_factor=32)
    assert player.k_factor == 32


def test_games_played_seeded_from_games():
    a = Player()
    b = Player()
    history = [Game(a, b), Game(a, b)]
    player = Player(games=history)
    assert player.games_played == 2
    assert player.games == history


def test_games_played_counted_after_seeding():
    a = Player(games_played=5)
    b = Player()
    a.wins_from(b)
    assert a.games_played == 6
    assert len(a.games) == 1
    assert b.games_played == 1


def test_view():
    assert Player(rating=2400, games_played=3).view() == PlayerView(
        rating=2400, games_played=3, pro=False, pro_rating=True, starter=True,
    )


def test_pro_status_is_sticky():
    a = Player(rating=2395, games_played=40)
    b = Player(rating=2395, games_played=40)

    a.wins_from(b)
    assert a.rating == 2402
    assert a.is_pro
    assert a.k_factor == 10

    a.loses_from(b)
    assert a.rating < 2400
    assert not a.is_pro_rating
    assert a.is_pro
    assert a.k_factor == 10


def test_versus_does_not_resolve():
    a = Player()
    b = Player()
    game = a.versus(b)
    assert game.one is a
    assert game.two is b
    assert game.result is None
    assert not game.is_resolved
    assert a.games == []
    assert a.rating == 1000


def test_convenience_results():
    a = Player()
    b = Player()
    assert a.wins_from(b).result == 1.0
    assert a.loses_from(b).result == 0.0
    assert a.plays_draw(b).result == 0.5
    assert a.games_played == 3
    assert b.games_played == 3


def test_save_called_after_every_game():
    saved = []

    class SavedPlayer(Player):
        def save(self) -> None:
            saved.append((self, self.rating, self.games_played))

    a = SavedPlayer(rating=2000, k_factor=10)
    b = SavedPlayer(rating=1900, k_factor=10)
    a.wins_from(b)
    assert saved == [(a, 2003, 1), (b, 1896, 1)]


def test_convenience_results_with_ended():
    a = Player()
    b = Player()
    assert a.wins_from(b, ended=100).ended == 100
    assert a.loses_from(b, ended=200).ended == 200
    assert a.plays_draw(b, ended=300).ended == 300
    assert a.wins_from(b).ended is None


def test_huge_rating_gap():
    a = Player(rating=0, k_factor=10)
    b = Player(rating=130000, k_factor=10)
    a.wins_from(b)
    assert a.rating == 10
    assert b.rating == 129990
