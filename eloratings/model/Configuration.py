import logging
import threading
from typing import Any, Callable, List, NamedTuple, Optional, Tuple

from ..interfaces import Registry, Storage
from ..storage import NullStorage

__all__ = ["Configuration", "KFactorRule", "config", "configure", "reset_config"]

logger = logging.getLogger(__name__)


class KFactorRule(NamedTuple):
    k_factor: int
    predicate: Callable[[Any], Any]


class Configuration:
    '''
    Rating policy shared by every Player and Game.

    K-factor rules are checked in the order they were added and the first
    rule whose predicate holds for the player decides the K-factor. When
    no rule applies, `default_k_factor` is used.

    With `use_builtin_policy` enabled (the default) the FIDE rules are
    appended the first time the rules are queried:

    * K-factor is 10 for pros (a rating of `pro_rating_boundary` or more,
      now or in the past)
    * K-factor is 25 for starters (less than `starter_boundary` games)
    * K-factor is `default_k_factor` (15) otherwise

    Rules added before that first query take precedence over the FIDE
    rules. To write the same policy yourself:

        def setup(config):
            config.use_builtin_policy = False
            config.add_rule(10, lambda p: p.pro or p.pro_rating)
            config.add_rule(25, lambda p: p.starter)

        eloratings.configure(setup)
    '''
    default_rating: int
    default_k_factor: int
    pro_rating_boundary: int
    starter_boundary: int
    use_builtin_policy: bool
    storage: Storage
    registry: Optional[Registry]

    def __init__(self) -> None:
        self.default_rating = 1000
        self.default_k_factor = 15
        self.pro_rating_boundary = 2400
        self.starter_boundary = 30
        self.use_builtin_policy = True
        self.storage = NullStorage()
        self.registry = None
        self._rules: List[KFactorRule] = []
        self._builtin_rules_installed = False
        self._lock = threading.RLock()

    def add_rule(self, k_factor: int, predicate: Callable[[Any], Any]) -> KFactorRule:
        rule = KFactorRule(k_factor, predicate)
        with self._lock:
            self._rules.append(rule)
        return rule

    def effective_rules(self) -> Tuple[KFactorRule, ...]:
        with self._lock:
            if self.use_builtin_policy and not self._builtin_rules_installed:
                self._install_builtin_rules()
            return tuple(self._rules)

    def _install_builtin_rules(self) -> None:
        logger.debug("Installing FIDE K-factor rules after %d custom rules", len(self._rules))
        self.add_rule(10, lambda p: p.pro or p.pro_rating)
        self.add_rule(25, lambda p: p.starter)
        self._builtin_rules_installed = True


_config: Optional[Configuration] = None
_config_lock = threading.Lock()


def config() -> Configuration:
    global _config
    with _config_lock:
        if _config is None:
            _config = Configuration()
        return _config


def configure(setup: Callable[[Configuration], Any]) -> Configuration:
    current = config()
    setup(current)
    return current


def reset_config() -> None:
    global _config
    with _config_lock:
        _config = None
