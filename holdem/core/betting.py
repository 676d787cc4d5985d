"""
Betting round for the Hold'em simulator.

A betting round walks around the table from the starting better, asking
each player still in the hand for a decision, until:

- every player has had at least one turn, and
- every player who has not folded has bet exactly the current bet,

or until only one player is left in the hand.

The bet vector produced here is what the showdown consumes. Entries of
players who folded stay folded for the rest of the hand; every other
entry goes back to NOT_YET_ACTED when the round ends.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple
from dataclasses import dataclass
import logging

from holdem.core.card import Card
from holdem.core.player import Player
from holdem.core.rules import BetKind, BetState


logger = logging.getLogger(__name__)

EventCallback = Callable[[str, Dict[str, Any]], None]


class InvalidBetError(ValueError):
    """Raised when a player's decision breaks the betting rules."""


@dataclass(frozen=True)
class BetView:
    """What a player can see when it is their turn to bet."""
    seat: int
    current_bet: int
    my_bet: int
    chips: int
    pot: int
    cards: Tuple[Card, ...]
    community_cards: Tuple[Card, ...]
    bets: Tuple[BetState, ...]
    players_visited: int

    @property
    def chips_to_call(self) -> int:
        return max(0, self.current_bet - self.my_bet)

    @property
    def max_bet(self) -> int:
        """Largest total bet the player can make this round."""
        return self.chips + self.my_bet

    @property
    def can_call(self) -> bool:
        return self.chips_to_call <= self.chips


class BettingRound:
    """
    One betting round over the players still in the hand.

    Usage:
        betting = BettingRound(players, agents, bets, pot=0)
        bets = betting.run(starting_better=0)
        pot = betting.pot
    """

    def __init__(
        self,
        players: Sequence[Player],
        agents: Sequence[Any],
        bets: List[BetState],
        pot: int = 0,
        community_cards: Sequence[Card] = (),
        on_event: Optional[EventCallback] = None,
    ):
        """
        Args:
            players: Players by seat
            agents: One decision maker per seat (see holdem.agents.BaseAgent)
            bets: Bet vector from the previous round; updated in place
            pot: Chips already in the pot
            community_cards: Community cards visible this round
            on_event: Optional callback receiving ("bet" | "fold", details)
        """
        if not (len(players) == len(agents) == len(bets)):
            raise ValueError("players, agents and bets must have the same length")

        self.players = players
        self.agents = agents
        self.bets = bets
        self.pot = pot
        self.community_cards = tuple(community_cards)
        self.current_bet = 0
        self.players_visited = 0
        self._contributed = [0] * len(players)
        self._on_event = on_event

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def active_seats(self) -> List[int]:
        return [i for i, bet in enumerate(self.bets) if not bet.is_folded]

    def all_bets_in(self) -> bool:
        """True if every player still in the hand has matched the current bet."""
        return all(
            bet.matches(self.current_bet)
            for bet in self.bets
            if not bet.is_folded
        )

    def is_complete(self) -> bool:
        if len(self.active_seats) <= 1:
            return True
        return self.players_visited >= self.num_players and self.all_bets_in()

    def run(self, starting_better: int = 0) -> List[BetState]:
        """
        Collect bets until the round is complete.

        Returns:
            The bet vector, reset for the next round
        """
        seat = starting_better % self.num_players

        while not self.is_complete():
            if not self.bets[seat].is_folded:
                self._take_turn(seat)
            seat = (seat + 1) % self.num_players
            self.players_visited += 1

        logger.info(f"Betting round complete, pot is {self.pot}")
        self._reset_for_next_round()
        return self.bets

    def _take_turn(self, seat: int) -> None:
        agent = self.agents[seat]
        while True:
            decision = agent.decide(self.view_for(seat))
            try:
                self.apply(seat, decision)
                return
            except InvalidBetError as e:
                # Agents that cannot recover re-raise here
                agent.on_invalid_bet(e)

    def view_for(self, seat: int) -> BetView:
        player = self.players[seat]
        return BetView(
            seat=seat,
            current_bet=self.current_bet,
            my_bet=self._contributed[seat],
            chips=player.chips,
            pot=self.pot,
            cards=tuple(player.cards),
            community_cards=self.community_cards,
            bets=tuple(self.bets),
            players_visited=self.players_visited,
        )

    def apply(self, seat: int, decision: BetState) -> None:
        """
        Apply a player's decision to the round.

        Raises:
            InvalidBetError: If the decision is not allowed
        """
        decision = BetState.coerce(decision)
        player = self.players[seat]

        if decision.kind == BetKind.FOLDED:
            self.bets[seat] = decision
            logger.debug(f"Seat {seat} folds")
            self._emit("fold", {"seat": seat})
            return

        if decision.kind == BetKind.NOT_YET_ACTED:
            raise InvalidBetError("Please enter a valid bet")

        amount = decision.amount
        if amount < self.current_bet:
            raise InvalidBetError(
                f"You must bet at least the current bet {self.current_bet}"
            )

        to_pay = amount - self._contributed[seat]
        if to_pay > player.chips:
            raise InvalidBetError(
                f"Not enough chips to bet {amount} (you have {player.chips})"
            )

        player.update_chips(-to_pay)
        self.pot += to_pay
        self._contributed[seat] = amount
        self.bets[seat] = decision
        self.current_bet = amount

        logger.debug(f"Seat {seat} bets {amount}, pot is {self.pot}")
        self._emit("bet", {"seat": seat, "amount": amount, "pot": self.pot})

    def _reset_for_next_round(self) -> None:
        for i, bet in enumerate(self.bets):
            if not bet.is_folded:
                self.bets[i] = BetState.not_yet_acted()

    def _emit(self, name: str, details: Dict[str, Any]) -> None:
        if self._on_event is not None:
            self._on_event(name, details)
