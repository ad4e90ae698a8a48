"""Simple bot strategies."""

from collections import Counter
from typing import Callable, Optional, Sequence

from fishinggame.engine import Card, Snapshot, Suit

IndexDecision = Callable[[Snapshot, Sequence[Card]], Optional[int]]
ColorDecision = Callable[[Snapshot, Sequence[Card]], Optional[Suit]]


def majority_suit(hand: Sequence[Card]) -> Optional[Suit]:
    """Most common suit in ``hand``; the first one seen wins ties."""
    if not hand:
        return None
    return Counter(card.suit for card in hand).most_common(1)[0][0]


class FirstValidStrategy:
    """Plays the first legal card. Baseline bot."""

    @property
    def name(self) -> str:
        return "FirstValid"

    def choose_index(self, snapshot: Snapshot, hand: Sequence[Card]) -> Optional[int]:
        return snapshot.legal_indexes[0] if snapshot.legal_indexes else None

    def choose_color(self, snapshot: Snapshot, hand: Sequence[Card]) -> Optional[Suit]:
        return None


class MinimizeScoreStrategy:
    """Plays the legal card that leaves the fewest points in hand.

    Ties go to the card that removes the most points, then to the
    lowest index. After a wild, picks the suit held most often.
    """

    @property
    def name(self) -> str:
        return "MinimizeScore"

    def choose_index(self, snapshot: Snapshot, hand: Sequence[Card]) -> Optional[int]:
        if not snapshot.legal_indexes:
            return None
        total = sum(card.points for card in hand)
        best_idx = None
        best_key = None
        for i in snapshot.legal_indexes:
            removed = hand[i].points
            key = (total - removed, -removed)
            if best_key is None or key < best_key:
                best_idx, best_key = i, key
        return best_idx

    def choose_color(self, snapshot: Snapshot, hand: Sequence[Card]) -> Optional[Suit]:
        return majority_suit(hand)


class FunctionStrategy:
    """Strategy assembled from plain functions or lambdas."""

    def __init__(
        self,
        name: str,
        choose_index: IndexDecision,
        choose_color: Optional[ColorDecision] = None,
    ):
        self._name = name
        self._choose_index = choose_index
        self._choose_color = choose_color

    @property
    def name(self) -> str:
        return self._name

    def choose_index(self, snapshot: Snapshot, hand: Sequence[Card]) -> Optional[int]:
        return self._choose_index(snapshot, hand)

    def choose_color(self, snapshot: Snapshot, hand: Sequence[Card]) -> Optional[Suit]:
        if self._choose_color is None:
            return None
        return self._choose_color(snapshot, hand)
