"""Board: piles, seats, turn order and the effects of special cards."""

import logging
from types import MappingProxyType
from typing import Callable, Iterable, List, Optional, Sequence

from fishinggame.engine.card import (
    PENALTY_CARDS,
    PENALTY_RANK,
    REVERSE_RANK,
    SKIP_RANK,
    WILD_RANK,
    Card,
    Rank,
    Suit,
)
from fishinggame.engine.deck import ShuffleFn
from fishinggame.engine.game_state import Direction, Snapshot
from fishinggame.engine.piles import DiscardPile, DrawPile
from fishinggame.engine.player import Player
from fishinggame.engine.rules import can_play
from fishinggame.errors import InvalidArgument

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 4

ColorChoice = Callable[[], Suit]


class Board:
    """Mutable table state for one game.

    The board holds the data the turn engine works on: both piles, the
    seats, whose turn it is, and the transient effect state left by
    special cards (pending penalty, skip flag, forced color).
    """

    def __init__(self, players: Sequence[Player], deck: Iterable[Card], shuffle: ShuffleFn):
        players = list(players)
        if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
            raise InvalidArgument(
                f"Between {MIN_PLAYERS} and {MAX_PLAYERS} players are required, got {len(players)}"
            )
        ids = [p.player_id for p in players]
        if len(set(ids)) != len(ids):
            raise InvalidArgument(f"Player ids must be unique: {ids}")

        self._players: List[Player] = players
        self._shuffle = shuffle
        self.draw_pile = DrawPile()
        self.discard_pile = DiscardPile()
        self.draw_pile.load(deck, shuffle)

        self._current_index = 0
        self.direction = Direction.FORWARD
        self.pending_penalty = 0
        self.skip_next_turn = False
        self.forced_color: Optional[Suit] = None
        self.last_deposited: Optional[Card] = None

    @property
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_player(self) -> Player:
        return self._players[self._current_index]

    def _next_index(self, from_index: int, steps: int = 1) -> int:
        return (from_index + int(self.direction) * steps) % len(self._players)

    def next_player(self) -> Player:
        return self._players[self._next_index(self._current_index)]

    def advance_turn(self) -> None:
        self._current_index = self._next_index(self._current_index)

    def seating_order(self) -> List[Player]:
        """Players in play order, starting with the current one."""
        return [
            self._players[self._next_index(self._current_index, step)]
            for step in range(len(self._players))
        ]

    def deal(self, per_player: int) -> None:
        """Deal ``per_player`` cards to each seat, round-robin.

        One-card signals raised while dealing are not reported.
        """
        if per_player < 1:
            raise InvalidArgument(f"Hand size must be positive, got {per_player}")
        if per_player * len(self._players) > len(self.draw_pile):
            raise InvalidArgument(
                f"Not enough cards to deal {per_player} to {len(self._players)} players"
            )
        for _ in range(per_player):
            for player in self._players:
                player.receive(self.draw_pile.draw_one())

    # Rules

    def can_play(self, candidate: Card) -> bool:
        return can_play(candidate, self.last_deposited, self.forced_color)

    def legal_indexes(self) -> List[int]:
        hand = self.current_player.hand
        return [i for i, card in enumerate(hand) if self.can_play(card)]

    def effective_color(self) -> Suit:
        if self.forced_color is not None:
            return self.forced_color
        if self.last_deposited is not None:
            return self.last_deposited.suit
        return Suit.CLUBS

    def effective_rank(self) -> Rank:
        if self.last_deposited is not None:
            return self.last_deposited.rank
        return SKIP_RANK

    # Mutations

    def deposit(self, card: Card) -> None:
        """Put ``card`` on the discard pile without applying its effect."""
        self.discard_pile.deposit(card)
        self.last_deposited = card

    def apply_special_effects(self, played: Card, choose_color: Optional[ColorChoice] = None) -> None:
        if played.rank == SKIP_RANK:
            self.skip_next_turn = True
        elif played.rank == REVERSE_RANK:
            self.direction = self.direction.reversed()
        elif played.rank == PENALTY_RANK:
            self.pending_penalty += PENALTY_CARDS
            self.skip_next_turn = True
        elif played.rank == WILD_RANK:
            if choose_color is None:
                raise InvalidArgument("A color choice is required when a wild card is played")
            self.forced_color = choose_color()
        else:
            self.forced_color = None

    def try_play_from_hand(self, index: int, choose_color_on_wild: Optional[ColorChoice]) -> bool:
        """Play the current player's card at ``index`` if it is legal.

        Returns False and changes nothing for a bad index or illegal card.
        The player's one-card signal is suppressed; the caller checks it.
        """
        player = self.current_player
        hand = player.hand
        if index < 0 or index >= len(hand):
            return False
        candidate = hand[index]
        if not self.can_play(candidate):
            return False
        if candidate.rank == WILD_RANK and choose_color_on_wild is None:
            raise InvalidArgument("A color choice is required when a wild card is played")

        player.remove_at(index, suppress_signal=True)
        self.deposit(candidate)
        self.apply_special_effects(candidate, choose_color_on_wild)
        return True

    def try_recycle_from_discard(self) -> bool:
        """Rebuild the draw pile from the discard pile, keeping its top card."""
        payload = self.discard_pile.take_all_but_top()
        if not payload:
            return False
        self.draw_pile.load(payload, self._shuffle)
        logger.info("Recycled %d card(s) from the discard pile", len(self.draw_pile))
        return True

    def build_snapshot(self) -> Snapshot:
        current = self.current_player
        nxt = self.next_player()
        return Snapshot(
            current_player=current.player_id,
            next_player=nxt.player_id,
            player_order=tuple(p.player_id for p in self._players),
            num_cards_per_player=MappingProxyType({p.player_id: len(p) for p in self._players}),
            top_discard=self.last_deposited,
            current_color=self.effective_color(),
            current_rank=self.effective_rank(),
            legal_indexes=tuple(self.legal_indexes()),
            pending_penalty=self.pending_penalty,
            direction=self.direction,
            is_threat_next=len(nxt) == 1,
        )
