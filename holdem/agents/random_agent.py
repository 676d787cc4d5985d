"""
Random Agent Implementation.

The computer opponents' betting policy. Each turn the agent rolls a die
with four faces:

- 1: raise, favouring small raises
- 2 or 3: call the current bet
- 4: fold
"""

import random
from typing import Optional

from holdem.agents.base import BaseAgent
from holdem.core.betting import BetView
from holdem.core.rules import BetState


class RandomAgent(BaseAgent):
    """
    An agent that bets at random.

    Raises are computed as

        current_bet + (randint(0, 25) / 100) ** 2 * (max_bet - current_bet)

    so most raises stay close to the current bet.
    """

    def __init__(
        self,
        player_id: str,
        name: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the random agent.

        Args:
            player_id: Identifier of the seat
            name: Optional name
            rng: Random source, for reproducible games
        """
        super().__init__(player_id, name or f"Random-{player_id}")
        self.rng = rng or random.Random()

    def decide(self, view: BetView) -> BetState:
        # An agent that cannot cover the current bet has to fold
        if not view.can_call:
            return BetState.folded()

        roll = self.rng.randint(1, 4)

        if roll == 1:
            fraction = (self.rng.randint(0, 25) / 100) ** 2
            amount = int(fraction * (view.max_bet - view.current_bet) + view.current_bet)
            return BetState.bet(amount)

        if roll <= 3:
            return BetState.bet(view.current_bet)

        return BetState.folded()


class CallAgent(BaseAgent):
    """
    An agent that always calls, folding only when it cannot.

    Useful for testing and as a simple baseline.
    """

    def __init__(self, player_id: str, name: Optional[str] = None):
        super().__init__(player_id, name or f"Caller-{player_id}")

    def decide(self, view: BetView) -> BetState:
        """Always call the current bet."""
        if not view.can_call:
            return BetState.folded()
        return BetState.bet(view.current_bet)
