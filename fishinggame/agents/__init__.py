"""Built-in strategies."""

import random
from typing import TYPE_CHECKING

from fishinggame.agents.anti_finish import anti_finish
from fishinggame.agents.basic import FirstValidStrategy, FunctionStrategy, MinimizeScoreStrategy
from fishinggame.agents.human_agent import HumanStrategy
from fishinggame.errors import InvalidArgument

if TYPE_CHECKING:
    from fishinggame.agent.protocol import StrategyProtocol

ANTI_FINISH_SUFFIX = "+anti"


def build_strategy(spec: str) -> "StrategyProtocol":
    """Build a strategy from a short name.

    ``first``, ``minimize`` or ``human``, optionally followed by ``+anti``
    to add the anti-finish overlay (e.g. ``minimize+anti``).
    """
    kind = spec.strip().lower()
    wrap = kind.endswith(ANTI_FINISH_SUFFIX)
    if wrap:
        kind = kind[: -len(ANTI_FINISH_SUFFIX)]

    strategy: "StrategyProtocol"
    if kind == "first":
        strategy = FirstValidStrategy()
    elif kind == "minimize":
        strategy = MinimizeScoreStrategy()
    elif kind == "human":
        strategy = HumanStrategy()
    else:
        raise InvalidArgument(f"Unknown strategy: {spec!r}. Use 'first', 'minimize' or 'human'.")
    return anti_finish(strategy) if wrap else strategy


def default_lineup(rng: random.Random, num_players: int = 3) -> list[str]:
    """One random seat plays ``minimize+anti``, the others ``first+anti``."""
    lineup = ["first" + ANTI_FINISH_SUFFIX] * num_players
    lineup[rng.randrange(num_players)] = "minimize" + ANTI_FINISH_SUFFIX
    return lineup


__all__ = [
    "FirstValidStrategy",
    "FunctionStrategy",
    "HumanStrategy",
    "MinimizeScoreStrategy",
    "anti_finish",
    "build_strategy",
    "default_lineup",
]
