"""Card, Rank and Suit types."""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Suit(str, Enum):
    """Card suits, lowest first."""

    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"

    @property
    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(IntEnum):
    """Card ranks, Ace to King."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        return _RANK_LABELS.get(self, str(self.value))


_RANK_LABELS = {Rank.ACE: "A", Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K"}

# Ranks with a special effect when played.
SKIP_RANK = Rank.ACE
PENALTY_RANK = Rank.TWO
REVERSE_RANK = Rank.TEN
WILD_RANK = Rank.JACK

PENALTY_CARDS = 2


def card_points(rank: Rank) -> int:
    """Points a card of this rank is worth when left in hand."""
    if rank == Rank.ACE:
        return 11
    if rank in (Rank.TWO, Rank.JACK, Rank.QUEEN, Rank.KING):
        return 2
    return int(rank)


@dataclass(frozen=True)
class Card:
    """A playing card. Two cards are equal when rank and suit match."""

    rank: Rank
    suit: Suit

    @property
    def points(self) -> int:
        return card_points(self.rank)

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"
