"""
Hold'em Game Orchestrator.

This module sequences one round of play against computer opponents:
- Fresh shuffled deck, two private cards per player
- Four betting rounds (preflop, flop, turn, river) with a burn card
  before each community deal
- Showdown: every hand is scored and the pot goes to the winner

All game state lives on the TexasHoldemGame instance, so several games
can run side by side without sharing anything.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass, field
import logging
import random

from holdem.config import GameSettings
from holdem.core.card import Card, Deck
from holdem.core.player import Player
from holdem.core.hand import HandScore, evaluate_hand
from holdem.core.betting import BettingRound, EventCallback
from holdem.core.showdown import ShowdownResult, find_winners
from holdem.core.rules import (
    BetState, GamePhase, PHASE_CARDS, HOLE_CARDS, HUMAN_SEAT,
)


logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Outcome of one round."""
    round_number: int
    winner: int
    pot: int
    showdown: ShowdownResult
    scores: List[HandScore] = field(default_factory=list)
    community_cards: List[Card] = field(default_factory=list)
    bets: List[BetState] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round": self.round_number,
            "winner": self.winner,
            "pot": self.pot,
            "showdown": self.showdown.to_dict(),
            "scores": [s.to_dict() for s in self.scores],
            "board": [c.to_dict() for c in self.community_cards],
        }


class TexasHoldemGame:
    """
    Hold'em game against computer opponents.

    Usage:
        game = TexasHoldemGame(GameSettings(num_players=4), agents=agents)
        while not game.is_over:
            result = game.play_round()
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        agents: Optional[Sequence[Any]] = None,
        rng: Optional[random.Random] = None,
        on_event: Optional[EventCallback] = None,
    ):
        """
        Initialize a new game.

        Args:
            settings: Table settings (defaults to GameSettings())
            agents: One agent per seat; seat 0 is the human seat. Defaults
                to RandomAgent for every seat.
            rng: Random source for shuffling, seeded from settings.seed
                when omitted
            on_event: Optional callback receiving (event name, details)
                for deals, bets, folds and the showdown
        """
        self.settings = settings or GameSettings()
        self.rng = rng or random.Random(self.settings.seed)
        self._on_event = on_event

        num_players = self.settings.num_players
        self.players: List[Player] = [
            Player(
                player_id=str(i),
                chips=self.settings.starting_chips,
                seat=i,
                is_human=(i == HUMAN_SEAT),
            )
            for i in range(num_players)
        ]

        if agents is None:
            from holdem.agents.random_agent import RandomAgent
            agents = [
                RandomAgent(str(i), rng=random.Random(self.rng.random()))
                for i in range(num_players)
            ]
        if len(agents) != num_players:
            raise ValueError(f"Need {num_players} agents, got {len(agents)}")
        self.agents = list(agents)

        self.round_number = 0
        self.phase = GamePhase.WAITING
        self.deck = Deck(rng=self.rng)
        self.community_cards: List[Card] = []
        self.bets: List[BetState] = []
        self.pot = 0
        self.history: List[RoundResult] = []

    @property
    def num_players(self) -> int:
        """Number of players at the table."""
        return len(self.players)

    @property
    def human(self) -> Player:
        return self.players[HUMAN_SEAT]

    @property
    def is_over(self) -> bool:
        """The game ends when the human has run out of chips."""
        return self.human.is_eliminated

    @property
    def active_seats(self) -> List[int]:
        return [i for i, bet in enumerate(self.bets) if not bet.is_folded]

    def play_round(self) -> RoundResult:
        """Play one full round and award the pot."""
        self.round_number += 1
        starting_better = (self.round_number - 1) % self.num_players
        logger.info(f"Starting round #{self.round_number}, seat {starting_better} bets first")

        self._start_round()

        for phase in (GamePhase.PREFLOP, GamePhase.FLOP, GamePhase.TURN, GamePhase.RIVER):
            if len(self.active_seats) <= 1:
                break
            self.phase = phase
            if phase in PHASE_CARDS:
                self._deal_community(phase)
            self._run_betting(starting_better)
            self._emit("bets_in", {"phase": phase.name, "pot": self.pot})

        return self._showdown()

    def _start_round(self) -> None:
        self.deck = Deck(rng=self.rng)
        self.deck.shuffle()
        self.community_cards = []
        self.bets = [BetState.not_yet_acted() for _ in self.players]
        self.pot = 0

        for player, agent in zip(self.players, self.agents):
            player.reset_cards()
            agent.reset()

        for _ in range(HOLE_CARDS):
            for player in self.players:
                player.add(self.deck.deal())

        logger.debug(f"Dealt private cards, {self.deck.remaining} cards left")
        self._emit("deal", {"round": self.round_number, "cards": list(self.human.cards)})

    def _deal_community(self, phase: GamePhase) -> None:
        self.deck.burn()
        for _ in range(PHASE_CARDS[phase]):
            self.community_cards.append(self.deck.deal())
        logger.debug(f"{phase.name}: {' '.join(str(c) for c in self.community_cards)}")
        self._emit(phase.name.lower(), {"cards": list(self.community_cards)})

    def _run_betting(self, starting_better: int) -> None:
        betting = BettingRound(
            self.players,
            self.agents,
            self.bets,
            pot=self.pot,
            community_cards=self.community_cards,
            on_event=self._on_event,
        )
        self.bets = betting.run(starting_better)
        self.pot = betting.pot

    def score_hands(self) -> List[HandScore]:
        """Score every player's private cards with the community cards."""
        return [
            evaluate_hand(player.cards, self.community_cards)
            for player in self.players
        ]

    def _showdown(self) -> RoundResult:
        self.phase = GamePhase.SHOWDOWN
        scores = self.score_hands()
        showdown = find_winners(scores, self.bets)

        winner = self.players[showdown.winner]
        winner.update_chips(self.pot)
        logger.info(
            f"Round #{self.round_number}: seat {showdown.winner} wins {self.pot} "
            f"({showdown.decided_by})"
        )

        result = RoundResult(
            round_number=self.round_number,
            winner=showdown.winner,
            pot=self.pot,
            showdown=showdown,
            scores=scores,
            community_cards=list(self.community_cards),
            bets=list(self.bets),
        )
        self.history.append(result)
        self.phase = GamePhase.ROUND_OVER
        self._emit("showdown", {"result": result})
        return result

    def get_state(self, for_seat: int = HUMAN_SEAT) -> Dict[str, Any]:
        """Game state as seen from a seat."""
        return {
            "round": self.round_number,
            "phase": self.phase.name,
            "pot": self.pot,
            "board": [c.to_dict() for c in self.community_cards],
            "bets": [bet.to_sentinel() for bet in self.bets],
            "players": [
                p.to_dict(hide_cards=(p.seat != for_seat)) for p in self.players
            ],
        }

    def _emit(self, name: str, details: Dict[str, Any]) -> None:
        if self._on_event is not None:
            self._on_event(name, details)
