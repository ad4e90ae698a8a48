"""Tournament - run many games and aggregate results."""

import logging
import random
from collections import defaultdict
from typing import TYPE_CHECKING, Mapping, Optional

from fishinggame.orchestration.game_runner import GameRunner, Outcome

if TYPE_CHECKING:
    from fishinggame.agent.protocol import StrategyProtocol

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 2000


def run_tournament(
    strategies: Mapping[str, "StrategyProtocol"],
    num_games: int = 100,
    seed: Optional[int] = None,
    per_player_hand_size: Optional[int] = None,
    max_turns: Optional[int] = DEFAULT_MAX_TURNS,
) -> dict[str, int]:
    """Play ``num_games`` games between the same seats.

    Every other game the seating order is reversed. Aborted games and
    games that hit the turn limit count for nobody.

    Returns:
        Dict mapping player_id to number of wins (players without a win
        are included with 0).
    """
    player_ids = list(strategies.keys())
    wins: dict[str, int] = defaultdict(int)
    unfinished = 0

    rng = random.Random(seed)
    for g in range(num_games):
        order = player_ids if g % 2 == 0 else list(reversed(player_ids))
        ordered = {pid: strategies[pid] for pid in order}
        runner = GameRunner.new_game(ordered, seed=rng.randint(0, 2**31 - 1), max_turns=max_turns)
        result = runner.run(per_player_hand_size)
        if result is not None and result.outcome is Outcome.WON and result.winner:
            wins[result.winner] += 1
        else:
            unfinished += 1

    if unfinished:
        logger.info("%d of %d game(s) ended without a winner", unfinished, num_games)
    return {pid: wins[pid] for pid in player_ids}
