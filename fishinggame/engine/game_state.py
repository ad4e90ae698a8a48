"""Read-only views of the board handed to strategies."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Mapping, Optional

from fishinggame.engine.card import Card, Rank, Suit


class Direction(IntEnum):
    """Play direction. The value is the seat step per turn."""

    FORWARD = 1
    BACKWARD = -1

    def reversed(self) -> "Direction":
        return Direction.BACKWARD if self is Direction.FORWARD else Direction.FORWARD


@dataclass(frozen=True)
class Snapshot:
    """Immutable picture of the board at a decision point.

    ``current_color`` and ``current_rank`` fall back to clubs and Ace
    before the first deposit, when every card is legal anyway.
    """

    current_player: str
    next_player: str
    player_order: tuple[str, ...]
    num_cards_per_player: Mapping[str, int]
    top_discard: Optional[Card]
    current_color: Suit
    current_rank: Rank
    legal_indexes: tuple[int, ...]
    pending_penalty: int
    direction: Direction
    is_threat_next: bool  # next player holds exactly one card
