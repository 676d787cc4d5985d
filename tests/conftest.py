"""
Pytest configuration and shared fixtures for Hold'em tests.
"""

from typing import List, Optional, Union

import pytest
from holdem.agents.base import BaseAgent
from holdem.config import GameSettings
from holdem.core.betting import BetView, InvalidBetError
from holdem.core.card import Card, Deck, Rank, Suit, parse_cards
from holdem.core.player import Player
from holdem.core.rules import BetState


class ScriptedAgent(BaseAgent):
    """
    Agent that plays back a list of decisions, then calls.

    Decisions are BetState values or their integer form (-1 to fold).
    With retry=True a rejected bet is recorded and the next scripted
    decision is tried, the way the console player is re-prompted.
    """

    def __init__(
        self,
        player_id: str,
        decisions: Optional[List[Union[BetState, int]]] = None,
        retry: bool = False,
    ):
        super().__init__(player_id)
        self.decisions = list(decisions or [])
        self.retry = retry
        self.views: List[BetView] = []
        self.errors: List[InvalidBetError] = []

    def decide(self, view: BetView) -> BetState:
        self.views.append(view)
        if self.decisions:
            return BetState.coerce(self.decisions.pop(0))
        return BetState.bet(view.current_bet)

    def on_invalid_bet(self, error: InvalidBetError) -> None:
        self.errors.append(error)
        if not self.retry:
            raise error


@pytest.fixture
def scripted():
    """The ScriptedAgent class."""
    return ScriptedAgent


@pytest.fixture
def cards():
    """Parse cards from a string like "As Kh 2c"."""
    return parse_cards


@pytest.fixture
def deck():
    """Create a fresh unshuffled deck."""
    return Deck()


@pytest.fixture
def shuffled_deck():
    """Create a fresh shuffled deck."""
    return Deck(shuffle=True)


@pytest.fixture
def sample_player():
    """Create a sample player with 1000 chips."""
    return Player(player_id="test_player", chips=1000, seat=0)


@pytest.fixture
def three_players():
    """Three players with 100 chips each."""
    return [Player(player_id=str(i), chips=100, seat=i) for i in range(3)]


@pytest.fixture
def three_player_settings():
    return GameSettings(num_players=3, starting_chips=1000, seed=7)


@pytest.fixture
def two_pair_hand():
    """Aces and Kings with a Two."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.KING, Suit.DIAMONDS),
        Card(Rank.KING, Suit.CLUBS),
        Card(Rank.TWO, Suit.SPADES),
    ]


@pytest.fixture
def straight_flush_board():
    """Two to Six of clubs."""
    return [
        Card(Rank.TWO, Suit.CLUBS),
        Card(Rank.THREE, Suit.CLUBS),
        Card(Rank.FOUR, Suit.CLUBS),
        Card(Rank.FIVE, Suit.CLUBS),
        Card(Rank.SIX, Suit.CLUBS),
    ]
