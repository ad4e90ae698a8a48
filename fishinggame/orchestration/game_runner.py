"""Single game runner: the turn loop."""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Mapping, Optional, Union

from fishinggame.agents.basic import majority_suit
from fishinggame.engine import Board, Card, Player, Snapshot, Suit, create_deck, make_shuffle
from fishinggame.engine.board import MAX_PLAYERS, MIN_PLAYERS
from fishinggame.engine.card import PENALTY_RANK, REVERSE_RANK, SKIP_RANK, WILD_RANK
from fishinggame.errors import InvalidArgument, Unrecoverable

if TYPE_CHECKING:
    from fishinggame.agent.protocol import StrategyProtocol

logger = logging.getLogger(__name__)

MIN_HAND_SIZE = 5
MAX_HAND_SIZE = 8


class Outcome(str, Enum):
    """How a run ended."""

    WON = "won"
    ABORTED = "aborted"
    TURN_LIMIT = "turn_limit"


@dataclass(frozen=True)
class PlayerDownToOneCard:
    player_id: str


@dataclass(frozen=True)
class PlayerWon:
    player_id: str
    turns: int


GameEvent = Union[PlayerDownToOneCard, PlayerWon]


@dataclass
class GameResult:
    """Result of a finished game."""

    outcome: Outcome
    winner: Optional[str]
    num_turns: int
    player_ids: tuple[str, ...]
    hands: Dict[str, tuple[Card, ...]] = field(default_factory=dict)
    reason: Optional[str] = None  # set when aborted

    def scores(self) -> Dict[str, int]:
        """Points left in each player's hand."""
        return {pid: sum(card.points for card in hand) for pid, hand in self.hands.items()}


class GameRunner:
    """Runs a single game to completion.

    Turn states, checked in order at each loop head: pending penalty,
    pending skip, normal decision. A player whose hand is empty wins
    immediately. Cancellation is only honored between turns.
    """

    def __init__(
        self,
        board: Board,
        strategies: Optional[Mapping[str, "StrategyProtocol"]] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        pace: Optional[Callable[[], None]] = None,
        max_turns: Optional[int] = None,
    ):
        self._board = board
        self._strategies = dict(strategies or {})
        self._rng = rng if rng is not None else random.Random(seed)
        self._pace = pace
        self._max_turns = max_turns
        self._turns = 0
        self.events: List[GameEvent] = []

    @classmethod
    def new_game(
        cls,
        strategies: Mapping[str, "StrategyProtocol"],
        seed: Optional[int] = None,
        pace: Optional[Callable[[], None]] = None,
        max_turns: Optional[int] = None,
    ) -> "GameRunner":
        """Seat one player per strategy around a freshly shuffled deck."""
        rng = random.Random(seed)
        players = [Player(pid) for pid in strategies]
        board = Board(players, create_deck(), make_shuffle(rng))
        return cls(board, strategies, rng=rng, pace=pace, max_turns=max_turns)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def turns(self) -> int:
        return self._turns

    def drain_events(self) -> List[GameEvent]:
        events, self.events = self.events, []
        return events

    def run(
        self,
        per_player_hand_size: Optional[int] = None,
        cancel: Optional[threading.Event] = None,
    ) -> Optional[GameResult]:
        """Deal, pick a random first player, and play until someone wins.

        Returns None if ``cancel`` was set before the game finished.
        """
        players = self._board.players
        if not MIN_PLAYERS <= len(players) <= MAX_PLAYERS:
            raise InvalidArgument(f"Between {MIN_PLAYERS} and {MAX_PLAYERS} players are required")

        hand_size = per_player_hand_size
        if hand_size is None:
            hand_size = self._rng.randint(MIN_HAND_SIZE, MAX_HAND_SIZE)
        logger.info("Setup: %d players, %d cards each", len(players), hand_size)

        self._board.deal(hand_size)
        self._randomize_first_player()
        logger.info("Starting player: %s", self._board.current_player)
        logger.info("Play order: %s", " -> ".join(str(p) for p in self._board.seating_order()))

        return self.play(cancel)

    def play(self, cancel: Optional[threading.Event] = None) -> Optional[GameResult]:
        """Run the turn loop on the board as it stands."""
        try:
            return self._loop(cancel)
        except Unrecoverable as exc:
            logger.warning("Game aborted after %d turn(s): %s", self._turns, exc.message)
            return self._result(Outcome.ABORTED, None, reason=exc.message)

    def _loop(self, cancel: Optional[threading.Event]) -> Optional[GameResult]:
        board = self._board
        while True:
            if cancel is not None and cancel.is_set():
                logger.info("Game cancelled after %d turn(s)", self._turns)
                return None

            winner = self._find_winner()
            if winner is not None:
                return self._announce_win(winner)

            if self._max_turns is not None and self._turns >= self._max_turns:
                logger.info("Turn limit of %d reached", self._max_turns)
                return self._result(Outcome.TURN_LIMIT, None)

            current = board.current_player

            if self._handle_pending_penalty(current) or self._handle_skip(current):
                board.advance_turn()
                self._pause()
                continue

            snapshot = board.build_snapshot()
            pick = self._choose_index(current, snapshot)
            self._resolve_pick(current, pick, snapshot)

            self._turns += 1
            if current.is_empty:
                return self._announce_win(current)

            board.advance_turn()
            self._pause()

    # Setup

    def _randomize_first_player(self) -> None:
        shift = self._rng.randrange(len(self._board.players))
        for _ in range(shift):
            self._board.advance_turn()

    # Start-of-turn effects

    def _handle_pending_penalty(self, current: Player) -> bool:
        board = self._board
        need = board.pending_penalty
        if need <= 0:
            return False
        for _ in range(need):
            self._draw_one(current)
        logger.info("%s draws %d (penalty)", current, need)
        board.pending_penalty = 0
        board.skip_next_turn = False
        return True

    def _handle_skip(self, current: Player) -> bool:
        if not self._board.skip_next_turn:
            return False
        logger.info("Turn skipped: %s", current)
        self._board.skip_next_turn = False
        return True

    # Normal turn

    def _choose_index(self, current: Player, snapshot: Snapshot) -> Optional[int]:
        strategy = self._strategies.get(current.player_id)
        if strategy is not None:
            pick = strategy.choose_index(snapshot, current.hand)
            if pick is not None:
                return pick
        return snapshot.legal_indexes[0] if snapshot.legal_indexes else None

    def _resolve_pick(self, current: Player, pick: Optional[int], snapshot: Snapshot) -> None:
        board = self._board

        def choose_color() -> Suit:
            return self._choose_color(current, snapshot)

        played = False
        if pick is not None:
            played = board.try_play_from_hand(pick, choose_color)
            if not played and snapshot.legal_indexes:
                played = board.try_play_from_hand(snapshot.legal_indexes[0], choose_color)

        if played:
            logger.info("%s played %s", current, board.last_deposited)
            self._log_effect(board.last_deposited)
            if current.check_one_card_signal():
                self._emit(PlayerDownToOneCard(current.player_id))
            return

        logger.info("%s cannot play, draws 1", current)
        self._draw_one(current)

    def _choose_color(self, current: Player, snapshot: Snapshot) -> Suit:
        strategy = self._strategies.get(current.player_id)
        if strategy is not None:
            chosen = strategy.choose_color(snapshot, current.hand)
            if chosen is not None:
                return chosen
        suit = majority_suit(current.hand)
        if suit is None:
            suit = self._rng.choice(list(Suit))
        return suit

    def _log_effect(self, played: Optional[Card]) -> None:
        if played is None:
            return
        board = self._board
        if played.rank == SKIP_RANK:
            logger.info("Next player will be skipped")
        elif played.rank == REVERSE_RANK:
            logger.info("Direction reversed, now %s", board.direction.name)
        elif played.rank == PENALTY_RANK:
            logger.info("Penalty pending: %d card(s) for the next player", board.pending_penalty)
        elif played.rank == WILD_RANK and board.forced_color is not None:
            logger.info("Color forced to %s", board.forced_color.value)

    # Drawing

    def _draw_one(self, player: Player) -> None:
        board = self._board
        if board.draw_pile.is_empty and not board.try_recycle_from_discard():
            raise Unrecoverable("Draw pile is empty and the discard pile cannot be recycled")
        if player.draw_from(board.draw_pile):
            self._emit(PlayerDownToOneCard(player.player_id))

    # End of game

    def _find_winner(self) -> Optional[Player]:
        for player in self._board.seating_order():
            if player.is_empty:
                return player
        return None

    def _announce_win(self, winner: Player) -> GameResult:
        logger.info("%s wins after %d turn(s)", winner, self._turns)
        self._emit(PlayerWon(winner.player_id, self._turns))
        return self._result(Outcome.WON, winner.player_id)

    def _emit(self, event: GameEvent) -> None:
        logger.info("Event: %s", event)
        self.events.append(event)

    def _pause(self) -> None:
        if self._pace is not None:
            self._pace()

    def _result(self, outcome: Outcome, winner: Optional[str], reason: Optional[str] = None) -> GameResult:
        players = self._board.players
        return GameResult(
            outcome=outcome,
            winner=winner,
            num_turns=self._turns,
            player_ids=tuple(p.player_id for p in players),
            hands={p.player_id: p.hand for p in players},
            reason=reason,
        )
