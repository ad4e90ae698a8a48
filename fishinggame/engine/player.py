"""Player: a hand of cards and an identity."""

from typing import List, Optional

from fishinggame.engine.card import Card
from fishinggame.engine.piles import DrawPile
from fishinggame.errors import InvalidArgument, OutOfRange


class Player:
    """A seat at the table.

    Mutations return whether the "down to one card" signal fired. The
    signal fires once per transition into a one-card hand and stays
    quiet while the hand remains at one card.
    """

    def __init__(self, player_id: str, name: Optional[str] = None):
        if not player_id or not player_id.strip():
            raise InvalidArgument("player_id must not be empty")
        if player_id != player_id.strip():
            raise InvalidArgument(f"player_id must not have surrounding whitespace: {player_id!r}")
        self._player_id = player_id
        self._name = (name or "").strip() or self._player_id
        self._hand: List[Card] = []
        self._at_one_card = False

    @property
    def player_id(self) -> str:
        return self._player_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def hand(self) -> tuple[Card, ...]:
        return tuple(self._hand)

    @property
    def is_empty(self) -> bool:
        return not self._hand

    def hand_points(self) -> int:
        return sum(card.points for card in self._hand)

    def draw_from(self, draw_pile: DrawPile) -> bool:
        """Draw the top card of ``draw_pile`` into the hand."""
        self._hand.append(draw_pile.draw_one())
        return self.check_one_card_signal()

    def receive(self, card: Card) -> bool:
        """Add a card directly, e.g. while dealing."""
        self._hand.append(card)
        return self.check_one_card_signal()

    def remove_at(self, index: int, suppress_signal: bool = False) -> bool:
        if index < 0 or index >= len(self._hand):
            raise OutOfRange(f"Hand index {index} out of range (size {len(self._hand)})")
        self._hand.pop(index)
        if suppress_signal:
            # Caller re-checks later; only re-arm the latch here.
            if len(self._hand) != 1:
                self._at_one_card = False
            return False
        return self.check_one_card_signal()

    def check_one_card_signal(self) -> bool:
        if len(self._hand) != 1:
            self._at_one_card = False
            return False
        if self._at_one_card:
            return False
        self._at_one_card = True
        return True

    def __len__(self) -> int:
        return len(self._hand)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Player({self._player_id!r}, cards={len(self._hand)})"
