"""CLI entry point."""

from __future__ import annotations

import logging
import random
import time
from typing import TYPE_CHECKING, Optional

import typer
from dotenv import load_dotenv

from fishinggame.config import Settings
from fishinggame.errors import GameError

if TYPE_CHECKING:
    from fishinggame.agent.protocol import StrategyProtocol
    from fishinggame.orchestration.game_runner import GameResult

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Fishing card game between bot and human players")


def _load_settings() -> Settings:
    try:
        settings = Settings.from_env()
    except GameError as exc:
        raise typer.BadParameter(exc.message)
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )
    return settings


def _parse_strategies(strategy_specs: str) -> dict[str, "StrategyProtocol"]:
    from fishinggame.agents import build_strategy

    parts = [s.strip() for s in strategy_specs.split(",") if s.strip()]
    strategies: dict[str, StrategyProtocol] = {}
    for i, part in enumerate(parts):
        try:
            strategies[f"player_{i + 1}"] = build_strategy(part)
        except GameError as exc:
            raise typer.BadParameter(exc.message)
    return strategies


def _print_scores(result: "GameResult") -> None:
    typer.echo("\n===== FINAL HANDS =====")
    scores = result.scores()
    for pid in sorted(result.player_ids, key=lambda p: scores[p]):
        hand = result.hands[pid]
        cards = " ".join(str(c) for c in hand) if hand else "(no cards)"
        typer.echo(f"- {pid:<10} score: {scores[pid]:>3} | left: {len(hand)} | {cards}")


@app.command()
def play(
    strategies: Optional[str] = typer.Option(
        None,
        "--strategies",
        "-s",
        help=(
            "Comma-separated: first, minimize or human, each optionally with +anti (2-4 players). "
            "Default: 3 players, one random seat minimize+anti, the others first+anti"
        ),
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    hand_size: Optional[int] = typer.Option(None, "--hand-size", "-n", help="Cards per player (default 5-8)"),
    delay: Optional[float] = typer.Option(None, "--delay", "-d", help="Seconds to pause between turns"),
) -> None:
    """Run a single game."""
    from fishinggame.agents import default_lineup
    from fishinggame.orchestration.game_runner import GameRunner, Outcome

    settings = _load_settings()
    game_seed = settings.seed if seed is None else seed
    if strategies is None:
        strategies = ",".join(default_lineup(random.Random(game_seed)))
    strategy_map = _parse_strategies(strategies)
    turn_delay = settings.turn_delay if delay is None else delay
    pace = (lambda: time.sleep(turn_delay)) if turn_delay > 0 else None

    for pid, strategy in strategy_map.items():
        typer.echo(f"{pid}: {strategy.name}")

    try:
        runner = GameRunner.new_game(
            strategy_map,
            seed=game_seed,
            pace=pace,
            max_turns=settings.max_turns,
        )
        result = runner.run(settings.hand_size if hand_size is None else hand_size)
    except GameError as exc:
        raise typer.BadParameter(exc.message)

    if result is None:
        typer.echo("Game cancelled.")
        raise typer.Exit(code=1)
    if result.outcome is Outcome.WON:
        typer.echo(f"Winner: {result.winner}")
    elif result.outcome is Outcome.ABORTED:
        typer.echo(f"Aborted: {result.reason}")
    else:
        typer.echo("No winner (turn limit reached)")
    typer.echo(f"Turns: {result.num_turns}")
    _print_scores(result)


@app.command()
def tournament(
    strategies: str = typer.Option(
        "minimize+anti,first+anti",
        "--strategies",
        "-s",
        help="Comma-separated bot strategies (first, minimize, each optionally with +anti)",
    ),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Run a tournament."""
    from fishinggame.orchestration.tournament import DEFAULT_MAX_TURNS, run_tournament

    settings = _load_settings()
    strategy_map = _parse_strategies(strategies)
    if any(s.name.startswith("human") for s in strategy_map.values()):
        raise typer.BadParameter("Tournaments are bot-only.")
    try:
        wins = run_tournament(
            strategy_map,
            num_games=games,
            seed=settings.seed if seed is None else seed,
            per_player_hand_size=settings.hand_size,
            max_turns=DEFAULT_MAX_TURNS if settings.max_turns is None else settings.max_turns,
        )
    except GameError as exc:
        raise typer.BadParameter(exc.message)
    typer.echo("Tournament results:")
    for pid, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {pid} ({strategy_map[pid].name}): {w} wins")


if __name__ == "__main__":
    app()
