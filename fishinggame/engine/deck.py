"""Deck creation and shuffling."""

import random
from typing import Callable, Iterable, List

from fishinggame.engine.card import Card, Rank, Suit

ShuffleFn = Callable[[Iterable[Card]], List[Card]]

DECK_SIZE = 52


def create_deck() -> List[Card]:
    """Create a standard 52-card deck, ordered by suit then rank.

    The deck is not shuffled; shuffling goes through a ShuffleFn so it
    can be seeded and reused when the draw pile is recycled.
    """
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


def make_shuffle(rng: random.Random) -> ShuffleFn:
    """Return a shuffle function bound to the given generator."""

    def shuffle(cards: Iterable[Card]) -> List[Card]:
        mixed = list(cards)
        rng.shuffle(mixed)
        return mixed

    return shuffle


def no_shuffle(cards: Iterable[Card]) -> List[Card]:
    """Keep the given order. Useful for arranged decks."""
    return list(cards)
