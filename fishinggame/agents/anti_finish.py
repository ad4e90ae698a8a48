"""Defensive overlay: slow down a player who is one card from winning."""

from typing import TYPE_CHECKING, Optional, Sequence

from fishinggame.agents.basic import FunctionStrategy
from fishinggame.engine import Card, Rank, Snapshot

if TYPE_CHECKING:
    from fishinggame.agent.protocol import StrategyProtocol

# Penalty first, then skip, then wild, then reverse
DEFENSIVE_PRIORITY = (Rank.TWO, Rank.ACE, Rank.JACK, Rank.TEN)


def anti_finish(inner: "StrategyProtocol") -> FunctionStrategy:
    """Wrap ``inner`` so it plays a disruptive card against a threat.

    When the next player holds a single card, the first legal card of the
    highest-priority disruptive rank is played. Otherwise, and for every
    color choice, ``inner`` decides.
    """

    def choose_index(snapshot: Snapshot, hand: Sequence[Card]) -> Optional[int]:
        if not snapshot.legal_indexes:
            return None
        if snapshot.is_threat_next:
            for rank in DEFENSIVE_PRIORITY:
                for i in snapshot.legal_indexes:
                    if hand[i].rank == rank:
                        return i
        return inner.choose_index(snapshot, hand)

    return FunctionStrategy(
        name=f"{inner.name}+AntiFinish",
        choose_index=choose_index,
        choose_color=inner.choose_color,
    )
