"""Game engine: cards, piles, players and the board."""

from fishinggame.engine.board import Board
from fishinggame.engine.card import Card, Rank, Suit, card_points
from fishinggame.engine.deck import create_deck, make_shuffle
from fishinggame.engine.game_state import Direction, Snapshot
from fishinggame.engine.piles import DiscardPile, DrawPile
from fishinggame.engine.player import Player
from fishinggame.engine.rules import can_play

__all__ = [
    "Board",
    "Card",
    "Rank",
    "Suit",
    "card_points",
    "create_deck",
    "make_shuffle",
    "Direction",
    "Snapshot",
    "DiscardPile",
    "DrawPile",
    "Player",
    "can_play",
]
