"""
Base Agent Interface for the Hold'em simulator.

Every seat at the table is driven by an agent: the console player and the
computer opponents alike. During a betting round the agent is shown a
BetView and answers with a BetState.

Usage:
    class MyAgent(BaseAgent):
        def decide(self, view):
            if view.chips_to_call > 100:
                return BetState.folded()
            return BetState.bet(view.current_bet)
"""

from abc import ABC, abstractmethod
from typing import Optional

from holdem.core.betting import BetView, InvalidBetError
from holdem.core.rules import BetState


class BaseAgent(ABC):
    """
    Abstract base class for betting agents.

    Attributes:
        player_id: Identifier of the seat this agent plays
        name: Human-readable name
    """

    def __init__(self, player_id: str, name: Optional[str] = None):
        """
        Initialize the agent.

        Args:
            player_id: Identifier of the seat this agent plays
            name: Optional human-readable name
        """
        self.player_id = player_id
        self.name = name or f"Agent-{player_id}"

    @abstractmethod
    def decide(self, view: BetView) -> BetState:
        """
        Choose a bet for the current turn.

        Args:
            view: The table as seen from this agent's seat, including the
                current bet, the agent's chips and its cards

        Returns:
            BetState.folded() to fold, or BetState.bet(total) where total
            is at least view.current_bet and at most view.max_bet
        """

    def on_invalid_bet(self, error: InvalidBetError) -> None:
        """
        Called when the last decision was rejected.

        Returning lets the agent decide again. The default re-raises, since
        an automated agent that produced an invalid bet would keep doing so.
        """
        raise error

    def reset(self) -> None:
        """
        Reset the agent's internal state for a new round.

        Override this method if your agent keeps state between rounds.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.player_id}, {self.name})"
