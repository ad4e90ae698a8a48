"""Tests for the turn loop."""

import threading
from collections import Counter

import pytest
from fishinggame.agents import FirstValidStrategy, FunctionStrategy, MinimizeScoreStrategy
from fishinggame.engine import Board, Card, Player, Rank, Suit, create_deck
from fishinggame.engine.deck import no_shuffle
from fishinggame.errors import InvalidArgument
from fishinggame.orchestration import (
    GameRunner,
    Outcome,
    PlayerDownToOneCard,
    PlayerWon,
)


def c(rank: Rank, suit: Suit) -> Card:
    return Card(rank, suit)


def arranged_board(p1_hand, p2_hand, top=None, deck=()):
    p1, p2 = Player("p1"), Player("p2")
    board = Board([p1, p2], list(deck), no_shuffle)
    if top is not None:
        board.deposit(top)
    for card in p1_hand:
        p1.receive(card)
    for card in p2_hand:
        p2.receive(card)
    return board, p1, p2


def one_turn(board, strategies=None):
    """Runner that stops after the first resolved turn."""
    cancel = threading.Event()
    runner = GameRunner(board, strategies, seed=0, pace=cancel.set)
    result = runner.play(cancel)
    return runner, result


def all_cards(board):
    cards = list(board.draw_pile.cards) + list(board.discard_pile.cards)
    for player in board.players:
        cards.extend(player.hand)
    return cards


def test_full_game_has_winner() -> None:
    board, _, p2 = arranged_board(
        [c(Rank.FIVE, Suit.HEARTS), c(Rank.SIX, Suit.HEARTS)],
        [c(Rank.KING, Suit.CLUBS), c(Rank.QUEEN, Suit.CLUBS)],
        top=c(Rank.FOUR, Suit.HEARTS),
        deck=[c(Rank.NINE, Suit.SPADES), c(Rank.EIGHT, Suit.SPADES)],
    )
    runner = GameRunner(board, {"p1": FirstValidStrategy(), "p2": FirstValidStrategy()})
    result = runner.play()
    assert result.outcome is Outcome.WON
    assert result.winner == "p1"
    assert result.num_turns == 3
    assert result.player_ids == ("p1", "p2")
    assert result.hands["p1"] == ()
    assert p2.hand == (c(Rank.KING, Suit.CLUBS), c(Rank.QUEEN, Suit.CLUBS), c(Rank.EIGHT, Suit.SPADES))
    assert runner.events == [PlayerDownToOneCard("p1"), PlayerWon("p1", 3)]


def test_seeded_game_finishes() -> None:
    runner = GameRunner.new_game(
        {"p1": FirstValidStrategy(), "p2": MinimizeScoreStrategy(), "p3": FirstValidStrategy()},
        seed=11,
        max_turns=1000,
    )
    result = runner.run()
    assert result is not None
    assert result.player_ids == ("p1", "p2", "p3")
    assert result.outcome in (Outcome.WON, Outcome.ABORTED, Outcome.TURN_LIMIT)


@pytest.mark.parametrize("seed", range(10))
def test_cards_are_conserved(seed) -> None:
    deck = Counter(create_deck())
    checks = []

    def check():
        checks.append(Counter(all_cards(runner.board)) == deck)

    runner = GameRunner.new_game(
        {"a": FirstValidStrategy(), "b": MinimizeScoreStrategy()},
        seed=seed,
        pace=check,
        max_turns=500,
    )
    runner.run()
    check()
    assert checks and all(checks)


def test_same_seed_same_game() -> None:
    def play(seed):
        runner = GameRunner.new_game(
            {"a": FirstValidStrategy(), "b": FirstValidStrategy()}, seed=seed, max_turns=1000
        )
        return runner.run()

    first, second = play(5), play(5)
    assert first.winner == second.winner
    assert first.num_turns == second.num_turns
    assert first.hands == second.hands


def test_hand_size_override() -> None:
    runner = GameRunner.new_game({"a": FirstValidStrategy(), "b": FirstValidStrategy()}, seed=1, max_turns=0)
    result = runner.run(per_player_hand_size=6)
    assert result.outcome is Outcome.TURN_LIMIT
    assert all(len(hand) == 6 for hand in result.hands.values())


def test_hand_size_too_large() -> None:
    runner = GameRunner.new_game({"a": FirstValidStrategy(), "b": FirstValidStrategy()}, seed=1)
    with pytest.raises(InvalidArgument):
        runner.run(per_player_hand_size=27)


def test_cancel_before_start_yields_nothing() -> None:
    cancel = threading.Event()
    cancel.set()
    runner = GameRunner.new_game({"a": FirstValidStrategy(), "b": FirstValidStrategy()}, seed=1)
    assert runner.run(cancel=cancel) is None


def test_penalty_forces_next_player_to_draw() -> None:
    board, p1, p2 = arranged_board(
        [c(Rank.TWO, Suit.CLUBS), c(Rank.KING, Suit.SPADES)],
        [c(Rank.THREE, Suit.DIAMONDS)],
        top=c(Rank.TWO, Suit.HEARTS),
        deck=[c(Rank.FIVE, Suit.SPADES), c(Rank.SIX, Suit.SPADES), c(Rank.SEVEN, Suit.SPADES)],
    )
    assert board.try_play_from_hand(0, None)
    assert board.pending_penalty == 2
    assert board.skip_next_turn
    board.advance_turn()

    runner, result = one_turn(board)
    assert result is None
    assert p2.hand == (
        c(Rank.THREE, Suit.DIAMONDS),
        c(Rank.SEVEN, Suit.SPADES),
        c(Rank.SIX, Suit.SPADES),
    )
    assert board.pending_penalty == 0
    assert not board.skip_next_turn
    assert board.current_player is p1
    assert runner.turns == 0


def test_skip_consumes_turn() -> None:
    board, p1, p2 = arranged_board([c(Rank.FIVE, Suit.HEARTS)], [c(Rank.SIX, Suit.HEARTS)], top=c(Rank.FOUR, Suit.HEARTS))
    board.skip_next_turn = True
    runner, result = one_turn(board)
    assert result is None
    assert len(p1) == 1
    assert not board.skip_next_turn
    assert board.current_player is p2


def test_emptied_hand_wins_without_further_turns() -> None:
    board, p1, p2 = arranged_board(
        [c(Rank.FIVE, Suit.HEARTS), c(Rank.SIX, Suit.HEARTS)],
        [c(Rank.SEVEN, Suit.CLUBS)],
        top=c(Rank.FOUR, Suit.HEARTS),
    )
    board.advance_turn()
    p1.remove_at(0)
    p1.remove_at(0)
    runner = GameRunner(board)
    result = runner.play()
    assert result.outcome is Outcome.WON
    assert result.winner == "p1"
    assert result.num_turns == 0
    assert p2.hand == (c(Rank.SEVEN, Suit.CLUBS),)
    assert runner.drain_events() == [PlayerWon("p1", 0)]
    assert runner.events == []


def test_playing_last_card_wins() -> None:
    board, p1, _ = arranged_board([c(Rank.FIVE, Suit.HEARTS)], [c(Rank.SEVEN, Suit.CLUBS)], top=c(Rank.FOUR, Suit.HEARTS))
    result = GameRunner(board).play()
    assert result.winner == "p1"
    assert result.num_turns == 1
    assert board.discard_pile.peek_top() == c(Rank.FIVE, Suit.HEARTS)


def test_aborts_when_nothing_to_recycle() -> None:
    board, p1, _ = arranged_board([c(Rank.FOUR, Suit.CLUBS)], [c(Rank.FIVE, Suit.CLUBS)], top=c(Rank.KING, Suit.HEARTS))
    assert board.draw_pile.is_empty
    result = GameRunner(board).play()
    assert result.outcome is Outcome.ABORTED
    assert result.winner is None
    assert result.reason
    assert p1.hand == (c(Rank.FOUR, Suit.CLUBS),)


def test_draw_recycles_discard_pile() -> None:
    board, p1, _ = arranged_board([c(Rank.FOUR, Suit.CLUBS)], [c(Rank.FIVE, Suit.CLUBS)], top=c(Rank.NINE, Suit.SPADES))
    board.deposit(c(Rank.KING, Suit.HEARTS))
    runner, result = one_turn(board)
    assert result is None
    assert p1.hand == (c(Rank.FOUR, Suit.CLUBS), c(Rank.NINE, Suit.SPADES))
    assert board.discard_pile.cards == (c(Rank.KING, Suit.HEARTS),)
    assert board.draw_pile.is_empty


def test_penalty_recycles_then_aborts() -> None:
    board, p1, _ = arranged_board(
        [c(Rank.KING, Suit.CLUBS)],
        [c(Rank.SEVEN, Suit.DIAMONDS)],
        top=c(Rank.NINE, Suit.CLUBS),
        deck=[c(Rank.FIVE, Suit.SPADES)],
    )
    board.deposit(c(Rank.EIGHT, Suit.CLUBS))
    board.deposit(c(Rank.TWO, Suit.HEARTS))
    board.pending_penalty = 4
    board.skip_next_turn = True

    result = GameRunner(board).play()
    assert result.outcome is Outcome.ABORTED
    assert result.reason
    assert result.num_turns == 0
    assert p1.hand == (
        c(Rank.KING, Suit.CLUBS),
        c(Rank.FIVE, Suit.SPADES),
        c(Rank.EIGHT, Suit.CLUBS),
        c(Rank.NINE, Suit.CLUBS),
    )
    assert board.discard_pile.cards == (c(Rank.TWO, Suit.HEARTS),)
    assert board.draw_pile.is_empty


def test_no_legal_card_draws_one() -> None:
    board, p1, _ = arranged_board(
        [c(Rank.KING, Suit.CLUBS)],
        [c(Rank.FIVE, Suit.CLUBS)],
        top=c(Rank.FOUR, Suit.HEARTS),
        deck=[c(Rank.NINE, Suit.SPADES)],
    )
    runner, _ = one_turn(board)
    assert p1.hand == (c(Rank.KING, Suit.CLUBS), c(Rank.NINE, Suit.SPADES))
    assert runner.turns == 1


def test_one_card_event() -> None:
    board, p1, _ = arranged_board(
        [c(Rank.FIVE, Suit.HEARTS), c(Rank.SIX, Suit.HEARTS)],
        [c(Rank.SEVEN, Suit.CLUBS), c(Rank.EIGHT, Suit.CLUBS)],
        top=c(Rank.FOUR, Suit.HEARTS),
    )
    runner, _ = one_turn(board)
    assert p1.hand == (c(Rank.SIX, Suit.HEARTS),)
    assert runner.events == [PlayerDownToOneCard("p1")]


def test_out_of_range_pick_falls_back_to_first_legal() -> None:
    board, p1, _ = arranged_board(
        [c(Rank.KING, Suit.CLUBS), c(Rank.FIVE, Suit.HEARTS), c(Rank.SIX, Suit.HEARTS)],
        [c(Rank.SEVEN, Suit.CLUBS)],
        top=c(Rank.FOUR, Suit.HEARTS),
    )
    strategies = {"p1": FunctionStrategy("bad", lambda s, h: 99)}
    one_turn(board, strategies)
    assert p1.hand == (c(Rank.KING, Suit.CLUBS), c(Rank.SIX, Suit.HEARTS))


def test_illegal_pick_falls_back_to_first_legal() -> None:
    board, p1, _ = arranged_board(
        [c(Rank.KING, Suit.CLUBS), c(Rank.FIVE, Suit.HEARTS)],
        [c(Rank.SEVEN, Suit.CLUBS)],
        top=c(Rank.FOUR, Suit.HEARTS),
    )
    strategies = {"p1": FunctionStrategy("illegal", lambda s, h: 0)}
    one_turn(board, strategies)
    assert p1.hand == (c(Rank.KING, Suit.CLUBS),)


def test_wild_color_defaults_to_majority_suit() -> None:
    board, _, _ = arranged_board(
        [c(Rank.JACK, Suit.SPADES), c(Rank.THREE, Suit.HEARTS), c(Rank.FOUR, Suit.HEARTS), c(Rank.NINE, Suit.CLUBS)],
        [c(Rank.SEVEN, Suit.CLUBS)],
        top=c(Rank.FIVE, Suit.DIAMONDS),
    )
    one_turn(board)
    assert board.last_deposited == c(Rank.JACK, Suit.SPADES)
    assert board.forced_color is Suit.HEARTS


def test_wild_color_from_strategy() -> None:
    board, _, _ = arranged_board(
        [c(Rank.JACK, Suit.SPADES), c(Rank.THREE, Suit.HEARTS), c(Rank.FOUR, Suit.HEARTS)],
        [c(Rank.SEVEN, Suit.CLUBS)],
        top=c(Rank.FIVE, Suit.DIAMONDS),
    )
    strategies = {"p1": FunctionStrategy("spades", lambda s, h: None, lambda s, h: Suit.SPADES)}
    one_turn(board, strategies)
    assert board.forced_color is Suit.SPADES


def test_turn_limit() -> None:
    board, _, _ = arranged_board(
        [c(Rank.FIVE, Suit.HEARTS), c(Rank.SIX, Suit.HEARTS), c(Rank.SEVEN, Suit.HEARTS)],
        [c(Rank.EIGHT, Suit.HEARTS), c(Rank.NINE, Suit.HEARTS), c(Rank.THREE, Suit.HEARTS)],
        top=c(Rank.FOUR, Suit.HEARTS),
    )
    result = GameRunner(board, max_turns=2).play()
    assert result.outcome is Outcome.TURN_LIMIT
    assert result.num_turns == 2
    assert result.winner is None
    assert result.hands == {
        "p1": (c(Rank.SIX, Suit.HEARTS), c(Rank.SEVEN, Suit.HEARTS)),
        "p2": (c(Rank.NINE, Suit.HEARTS), c(Rank.THREE, Suit.HEARTS)),
    }


def test_new_game_rejects_padded_player_ids() -> None:
    with pytest.raises(InvalidArgument):
        GameRunner.new_game({" a": FirstValidStrategy(), "b": FirstValidStrategy()})
