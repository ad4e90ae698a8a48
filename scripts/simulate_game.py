"""Simulate a game with random bots."""

import logging
import random

from fishinggame.agents import FunctionStrategy, MinimizeScoreStrategy, anti_finish
from fishinggame.orchestration.game_runner import GameRunner


def make_random_bot(name, rng):
    def choose_index(snapshot, hand):
        if not snapshot.legal_indexes:
            return None
        return rng.choice(snapshot.legal_indexes)

    return FunctionStrategy(name, choose_index)


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    rng = random.Random(7)
    strategies = {
        "p1": make_random_bot("Random1", rng),
        "p2": make_random_bot("Random2", rng),
        "p3": anti_finish(MinimizeScoreStrategy()),
    }

    runner = GameRunner.new_game(strategies, seed=42)
    result = runner.run()

    print(f"Game finished ({result.outcome.value})! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    for event in runner.drain_events():
        print(f"  {event}")


if __name__ == "__main__":
    main()
