"""
Console front end for the Hold'em simulator.

You play seat 0 against computer opponents. The console prompts for the
table size and starting chips, shows your cards and the community cards,
asks for your bets and prints the winner of every round.

Output goes through a rich Console: cards are drawn in panels, the
current bets and the chip counts in tables, with your seat in red and
the winner in yellow.

Usage:
    python run.py play
    python run.py serve --port 8000
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Sequence
import argparse
import logging
import random

from pydantic import ValidationError
from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from holdem.agents.base import BaseAgent
from holdem.agents.random_agent import RandomAgent
from holdem.config import GameSettings, setup_logging
from holdem.core.betting import BetView, InvalidBetError
from holdem.core.card import Card
from holdem.core.game import TexasHoldemGame, RoundResult
from holdem.core.hand import get_hand_description
from holdem.core.player import Player
from holdem.core.rules import (
    BetKind, BetState, FOLDED_SENTINEL, HUMAN_SEAT,
    DEFAULT_NUM_PLAYERS, DEFAULT_STARTING_CHIPS,
    MIN_PLAYERS, MAX_PLAYERS, MIN_STARTING_CHIPS,
)


logger = logging.getLogger(__name__)

HUMAN_STYLE = "bold red"
WINNER_STYLE = "bold yellow"


class ConsoleIO:
    """
    Console input and rich output.

    Both ends can be replaced, so tests pass a scripted input function and
    a Console writing to a buffer.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        console: Optional[Console] = None,
    ):
        self.console = console or Console(highlight=False)
        self._input = input_fn or self.console.input

    def say(self, text: str = "") -> None:
        """Print a line; rich markup is allowed."""
        self.console.print(text)

    def show(self, renderable: RenderableType) -> None:
        self.console.print(renderable)

    def rule(self) -> None:
        self.console.rule(style="bold white")

    def ask(self, prompt: str) -> str:
        return self._input(prompt)

    def pause(self, what: str) -> None:
        self.ask(f"Press Enter to {what}")


def seat_name(seat: int) -> str:
    return "You" if seat == HUMAN_SEAT else f"Player {seat + 1}"


def _card_lines(cards: Sequence[Card]) -> List[str]:
    return [f"[bold]{card.long_name}[/bold] ({card})" for card in cards]


def cards_panel(title: str, cards: Sequence[Card], style: str) -> Panel:
    return Panel("\n".join(_card_lines(cards)), title=title, border_style=style, expand=False)


def hand_panel(view: BetView) -> Panel:
    """Your cards, the community cards and your chips in one box."""
    lines = ["[bold]Your cards:[/bold]"] + _card_lines(view.cards)
    if view.community_cards:
        lines += ["", "[bold]Community cards:[/bold]"] + _card_lines(view.community_cards)
    lines += ["", f"Your chips: [bold]{view.chips}[/bold]"]
    return Panel("\n".join(lines), border_style=HUMAN_STYLE, expand=False)


def bets_table(view: BetView) -> Table:
    """The bet of every seat, as seen by the player whose turn it is."""
    table = Table(border_style="blue")
    table.add_column("Player")
    table.add_column("Bet", justify="right")
    for seat, bet in enumerate(view.bets):
        if bet.kind == BetKind.FOLDED:
            shown = "folded"
        elif bet.kind == BetKind.NOT_YET_ACTED:
            shown = "not bet yet"
        else:
            shown = str(bet.amount)
        table.add_row(
            seat_name(seat), shown,
            style=HUMAN_STYLE if seat == view.seat else None,
        )
    return table


def chips_table(players: Sequence[Player], winner: int) -> Table:
    """Chip counts at the end of a round."""
    table = Table(border_style="bold cyan")
    table.add_column("Player")
    table.add_column("Chips", justify="right")
    for player in players:
        if player.seat == HUMAN_SEAT:
            style = HUMAN_STYLE
        elif player.seat == winner:
            style = WINNER_STYLE
        else:
            style = None
        table.add_row(seat_name(player.seat), str(player.chips), style=style)
    return table


class HumanAgent(BaseAgent):
    """The console player. Asks for a bet until a valid one is entered."""

    def __init__(self, player_id: str, io: ConsoleIO, name: Optional[str] = None):
        super().__init__(player_id, name or "You")
        self.io = io

    def decide(self, view: BetView) -> BetState:
        self._show_table(view)
        while True:
            self.io.say(f"The current bet is: [bold]{view.current_bet}[/bold]")
            raw = self.io.ask("Enter your bet (-1 to fold): ").strip()
            try:
                amount = int(raw)
            except ValueError:
                self.io.say("Please enter a number")
                continue

            if amount == FOLDED_SENTINEL:
                self.io.say("You fold")
                return BetState.folded()
            if amount < FOLDED_SENTINEL:
                self.io.say("Please enter a valid bet")
                continue
            return BetState.bet(amount)

    def on_invalid_bet(self, error: InvalidBetError) -> None:
        self.io.say(f"{escape(str(error))}, please enter a valid bet")

    def _show_table(self, view: BetView) -> None:
        io = self.io
        io.say("")
        if view.players_visited > 0:
            io.say("Current bets:")
            io.show(bets_table(view))
            io.say("It's your turn to bet")
        else:
            io.say("You are betting first")
        io.show(hand_panel(view))
        io.rule()


class ConsoleRenderer:
    """Prints game events as they happen."""

    def __init__(self, io: ConsoleIO, pause: bool = True):
        self.io = io
        self.pause = pause
        self.game: Optional[TexasHoldemGame] = None

    def attach(self, game: TexasHoldemGame) -> None:
        self.game = game

    def on_event(self, name: str, details: Dict[str, Any]) -> None:
        handler = getattr(self, f"_on_{name}", None)
        if handler is not None:
            handler(details)

    def _on_deal(self, details: Dict[str, Any]) -> None:
        self.io.rule()
        self.io.show(cards_panel("Your cards", details["cards"], "red"))
        if self.pause:
            self.io.pause("begin betting")

    def _on_bet(self, details: Dict[str, Any]) -> None:
        if details["seat"] != HUMAN_SEAT:
            self.io.say(f"{seat_name(details['seat'])} bets [bold]{details['amount']}[/bold]")

    def _on_fold(self, details: Dict[str, Any]) -> None:
        if details["seat"] != HUMAN_SEAT:
            self.io.say(f"{seat_name(details['seat'])} folds")

    def _on_community(self, details: Dict[str, Any]) -> None:
        self.io.rule()
        self.io.show(cards_panel("Cards turned", details["cards"], "green"))
        if self.pause:
            self.io.pause("begin betting")

    _on_flop = _on_community
    _on_turn = _on_community
    _on_river = _on_community

    def _on_bets_in(self, details: Dict[str, Any]) -> None:
        self.io.say(f"All bets are in, the pot is now [bold]{details['pot']}[/bold]")

    def _on_showdown(self, details: Dict[str, Any]) -> None:
        result: RoundResult = details["result"]
        io = self.io
        io.rule()
        if result.showdown.is_tie:
            tied = ", ".join(seat_name(seat) for seat in result.showdown.tied)
            io.say(f"Tie between: {tied}")

        if result.winner == HUMAN_SEAT:
            io.say("[bold green]You have the best hand[/bold green]")
        else:
            io.say(f"Player [bold red on yellow]{result.winner + 1}[/] has the best hand")

        if self.game is not None:
            winner = self.game.players[result.winner]
            name = seat_name(result.winner)
            title = "Your hand" if result.winner == HUMAN_SEAT else f"{name}'s hand"
            io.show(cards_panel(title, winner.cards, WINNER_STYLE))
            if result.showdown.decided_by != "fold":
                io.say(get_hand_description(winner.cards + result.community_cards))

            io.say("")
            io.say("End of round, each player has the following chips:")
            io.show(chips_table(self.game.players, result.winner))
        io.rule()


def _ask_int(io: ConsoleIO, prompt: str, default: int, minimum: int,
             maximum: Optional[int], what: str) -> int:
    raw = io.ask(prompt).strip()
    if not raw:
        io.say(f"Setting the number of {what} to {default}")
        return default
    try:
        value = int(raw)
    except ValueError:
        io.say(f"Please enter a number, defaulting to {default} {what}")
        return default
    if value < minimum or (maximum is not None and value > maximum):
        io.say(f"Invalid number of {what}, defaulting to {default} {what}")
        return default
    return value


def prompt_settings(io: ConsoleIO, seed: Optional[int] = None) -> GameSettings:
    """Ask for the table size and starting chips."""
    num_players = _ask_int(
        io,
        f"How many players are playing? ({MIN_PLAYERS}-{MAX_PLAYERS}, "
        f"default is {DEFAULT_NUM_PLAYERS}) ",
        DEFAULT_NUM_PLAYERS, MIN_PLAYERS, MAX_PLAYERS, "players",
    )
    starting_chips = _ask_int(
        io,
        f"How many chips does each player start with? (at least {MIN_STARTING_CHIPS}, "
        f"default is {DEFAULT_STARTING_CHIPS}) ",
        DEFAULT_STARTING_CHIPS, MIN_STARTING_CHIPS, None, "chips",
    )
    return GameSettings(num_players=num_players, starting_chips=starting_chips, seed=seed)


def build_game(
    settings: GameSettings,
    io: ConsoleIO,
    pause: bool = True,
) -> TexasHoldemGame:
    """Create a game with the console player in seat 0."""
    rng = random.Random(settings.seed)
    agents: List[BaseAgent] = [HumanAgent(str(HUMAN_SEAT), io)]
    agents.extend(
        RandomAgent(str(seat), rng=random.Random(rng.random()))
        for seat in range(1, settings.num_players)
    )
    renderer = ConsoleRenderer(io, pause=pause)
    game = TexasHoldemGame(settings, agents=agents, rng=rng, on_event=renderer.on_event)
    renderer.attach(game)
    return game


def play(
    io: Optional[ConsoleIO] = None,
    settings: Optional[GameSettings] = None,
    seed: Optional[int] = None,
    pause: bool = True,
) -> TexasHoldemGame:
    """
    Run the console game until you run out of chips or stop.

    Returns:
        The finished game, for inspection
    """
    io = io or ConsoleIO()
    io.show(Panel("[bold]Welcome to Texas Hold'em Poker![/bold]", border_style="bold red", expand=False))

    if settings is None:
        settings = prompt_settings(io, seed=seed)
    logger.info(f"Starting game: {settings}")

    game = build_game(settings, io, pause=pause)
    while True:
        io.say(f"[bold]Round {game.round_number + 1}[/bold]")
        game.play_round()
        if game.is_over:
            io.say("[bold red]You have run out of chips, game over![/bold red]")
            break
        answer = io.ask("Do you want to play another round? (y/n) ").strip().lower()
        if answer == "n":
            break

    return game


def _settings_error(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return f"invalid {field}: {first['msg']}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Texas Hold'em against computer opponents")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    sub = parser.add_subparsers(dest="command")

    play_parser = sub.add_parser("play", help="Play in the console (default)")
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games")
    play_parser.add_argument("--players", type=int, default=None, help="Skip the prompt and use N players")
    play_parser.add_argument("--chips", type=int, default=None, help="Skip the prompt and start with N chips")

    serve_parser = sub.add_parser("serve", help="Run the HTTP scoring service")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Command line entry point: `play` (the default) or `serve`."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        import uvicorn
        setup_logging(args.log_level, default="INFO")
        uvicorn.run(
            "holdem.server.app:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
        return

    setup_logging(args.log_level)
    seed = getattr(args, "seed", None)
    players = getattr(args, "players", None)
    chips = getattr(args, "chips", None)

    settings = None
    if players is not None or chips is not None:
        try:
            env = GameSettings.from_env()
            settings = GameSettings(
                num_players=players if players is not None else env.num_players,
                starting_chips=chips if chips is not None else env.starting_chips,
                seed=seed if seed is not None else env.seed,
            )
        except ValidationError as e:
            parser.error(_settings_error(e))
    play(settings=settings, seed=seed)
