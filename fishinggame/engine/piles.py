"""Draw pile and discard pile. The top of each pile is its last element."""

from typing import Iterable, List, Optional

from fishinggame.engine.card import Card
from fishinggame.engine.deck import ShuffleFn
from fishinggame.errors import InvalidArgument, InvalidState, Underflow


class DrawPile:
    """Face-down pile players draw from."""

    def __init__(self) -> None:
        self._cards: List[Card] = []

    def load(self, cards: Iterable[Card], shuffle: ShuffleFn) -> None:
        """Fill an empty pile with ``shuffle(cards)``."""
        if self._cards:
            raise InvalidState("Draw pile must be empty before loading")
        self._cards.extend(shuffle(cards))

    def draw_one(self) -> Card:
        if not self._cards:
            raise Underflow("Cannot draw from an empty draw pile")
        return self._cards.pop()

    def draw_up_to(self, n: int) -> List[Card]:
        """Draw at most ``n`` cards, top card first."""
        if n <= 0:
            raise InvalidArgument(f"Draw count must be positive, got {n}")
        k = min(n, len(self._cards))
        drawn = self._cards[len(self._cards) - k:]
        del self._cards[len(self._cards) - k:]
        drawn.reverse()
        return drawn

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)


class DiscardPile:
    """Face-up pile; its top card is the reference for legal plays."""

    def __init__(self) -> None:
        self._cards: List[Card] = []

    def deposit(self, card: Card) -> None:
        self._cards.append(card)

    def peek_top(self) -> Optional[Card]:
        return self._cards[-1] if self._cards else None

    def take_all_but_top(self) -> List[Card]:
        """Remove every card except the top one, bottom to top.

        Returns an empty list and leaves the pile alone when it holds
        one card or none.
        """
        if len(self._cards) <= 1:
            return []
        taken = self._cards[:-1]
        del self._cards[:-1]
        return taken

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)
