import pytest

from eloratings import (
    Configuration,
    NullStorage,
    Player,
    config,
    configure,
    reset_config,
)


def test_defaults():
    c = config()
    assert c.default_rating == 1000
    assert c.default_k_factor == 15
    assert c.pro_rating_boundary == 2400
    assert c.starter_boundary == 30
    assert c.use_builtin_policy is True
    assert isinstance(c.storage, NullStorage)
    assert c.registry is None


def test_singleton():
    assert config() is config()
    first = config()
    reset_config()
    assert config() is not first


def test_configure():
    def setup(c: Configuration) -> None:
        c.default_rating = 1337

    assert configure(setup) is config()
    assert config().default_rating == 1337


def test_default_rating():
    assert Player().rating == 1000
    config().default_rating = 1337
    assert Player().rating == 1337


def test_starter_boundary():
    assert Player(games_played=20).is_starter
    config().starter_boundary = 15
    assert not Player(games_played=20).is_starter


def test_default_k_factor_without_builtin_policy():
    config().default_k_factor = 20
    config().use_builtin_policy = False
    assert config().effective_rules() == ()
    assert Player().k_factor == 20


def test_pro_rating_boundary():
    config().pro_rating_boundary = 1337
    assert Player(rating=1337).is_pro_rating
    assert not Player(rating=1336).is_pro_rating


def test_builtin_rules_installed_once():
    c = config()
    assert len(c.effective_rules()) == 2
    c.use_builtin_policy = False
    c.use_builtin_policy = True
    assert len(c.effective_rules()) == 2
    assert [rule.k_factor for rule in c.effective_rules()] == [10, 25]


def test_builtin_rules_installed_lazily():
    c = config()
    c.use_builtin_policy = False
    assert c.effective_rules() == ()
    c.use_builtin_policy = True
    assert [rule.k_factor for rule in c.effective_rules()] == [10, 25]


def test_custom_rule_before_builtin_rules():
    config().add_rule(40, lambda p: p.rating < 1100)
    assert [rule.k_factor for rule in config().effective_rules()] == [40, 10, 25]
    assert Player().k_factor == 40
    assert Player(rating=1200).k_factor == 25


def test_custom_rule_after_builtin_rules():
    config().effective_rules()
    config().add_rule(40, lambda p: p.rating < 1100)
    assert Player().k_factor == 25
    assert Player(rating=1000, games_played=30).k_factor == 40


def test_first_matching_rule_wins():
    config().use_builtin_policy = False
    config().add_rule(30, lambda p: p.rating > 500)
    config().add_rule(20, lambda p: p.rating > 100)
    assert Player(rating=1000).k_factor == 30
    assert Player(rating=200).k_factor == 20
    assert Player(rating=50).k_factor == 15


def test_add_rule_returns_rule():
    predicate = lambda p: True
    rule = config().add_rule(12, predicate)
    assert rule.k_factor == 12
    assert rule.predicate is predicate


def test_failing_rule_propagates():
    config().add_rule(5, lambda p: p.no_such_attribute)
    with pytest.raises(AttributeError):
        Player().k_factor
