"""Game orchestration."""

from fishinggame.orchestration.game_runner import (
    GameEvent,
    GameResult,
    GameRunner,
    Outcome,
    PlayerDownToOneCard,
    PlayerWon,
)
from fishinggame.orchestration.tournament import run_tournament

__all__ = [
    "GameEvent",
    "GameResult",
    "GameRunner",
    "Outcome",
    "PlayerDownToOneCard",
    "PlayerWon",
    "run_tournament",
]
