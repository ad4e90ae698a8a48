"""Strategy protocol - interface every decision capability implements."""

from typing import Optional, Protocol, Sequence

from fishinggame.engine import Card, Snapshot, Suit


class StrategyProtocol(Protocol):
    """Interface for card-playing strategies.

    Strategies only read the snapshot and hand they are given. Returning
    None from either method leaves the decision to the engine.
    """

    @property
    def name(self) -> str:
        """Display name for the strategy."""
        ...

    def choose_index(self, snapshot: Snapshot, hand: Sequence[Card]) -> Optional[int]:
        """Choose the index of the card to play.

        Args:
            snapshot: Read-only picture of the board.
            hand: The current player's hand, in hand order.

        Returns:
            An index into ``hand``, or None to let the engine pick.
        """
        ...

    def choose_color(self, snapshot: Snapshot, hand: Sequence[Card]) -> Optional[Suit]:
        """Choose the forced color after playing a wild card.

        Returns:
            A suit, or None to let the engine pick.
        """
        ...
