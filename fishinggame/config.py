"""Runtime settings read from the environment (and a .env file via the CLI)."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from fishinggame.errors import InvalidArgument

ENV_PREFIX = "FISHING_"


def _get_int(env: Mapping[str, str], key: str) -> Optional[int]:
    raw = env.get(ENV_PREFIX + key, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from None


def _get_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(ENV_PREFIX + key, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgument(f"{ENV_PREFIX}{key} must be a number, got {raw!r}") from None


@dataclass
class Settings:
    """Game settings.

    Attributes:
        seed: Seed for shuffling and engine choices; None for a random game.
        turn_delay: Seconds to pause between turns (0 disables pacing).
        hand_size: Cards dealt per player; None draws 5-8 at random.
        max_turns: Stop a game after this many turns; None for no limit.
        log_level: Level name for the root logger.
    """

    seed: Optional[int] = None
    turn_delay: float = 0.0
    hand_size: Optional[int] = None
    max_turns: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        if env is None:
            env = os.environ
        turn_delay = _get_float(env, "TURN_DELAY", 0.0)
        if turn_delay < 0:
            raise InvalidArgument(f"{ENV_PREFIX}TURN_DELAY must not be negative, got {turn_delay}")
        return cls(
            seed=_get_int(env, "SEED"),
            turn_delay=turn_delay,
            hand_size=_get_int(env, "HAND_SIZE"),
            max_turns=_get_int(env, "MAX_TURNS"),
            log_level=env.get(ENV_PREFIX + "LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )
