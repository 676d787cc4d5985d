"""
Hold'em Rules and Constants.

The bet vector exchanged between the betting round and the showdown holds
one BetState per player. Each entry is one of:

1. FOLDED: the player left the hand and is excluded until it ends.
2. NOT_YET_ACTED: the player has not acted in the current betting round.
3. BET: the amount the player has wagered in the current betting round.

The integer form used by older callers maps these to -1, -2 and the
amount itself.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Union


class BetKind(Enum):
    """Kinds of entry in the bet vector."""
    FOLDED = auto()
    NOT_YET_ACTED = auto()
    BET = auto()


FOLDED_SENTINEL = -1
NOT_YET_ACTED_SENTINEL = -2


@dataclass(frozen=True)
class BetState:
    """One player's entry in the bet vector."""
    kind: BetKind
    amount: int = 0

    def __post_init__(self) -> None:
        if self.kind == BetKind.BET and self.amount < 0:
            raise ValueError(f"Bet amount must be non-negative, got {self.amount}")
        if self.kind != BetKind.BET and self.amount != 0:
            raise ValueError(f"{self.kind.name} carries no amount")

    @classmethod
    def folded(cls) -> BetState:
        return cls(BetKind.FOLDED)

    @classmethod
    def not_yet_acted(cls) -> BetState:
        return cls(BetKind.NOT_YET_ACTED)

    @classmethod
    def bet(cls, amount: int) -> BetState:
        return cls(BetKind.BET, amount)

    @classmethod
    def from_sentinel(cls, value: int) -> BetState:
        """Convert the integer form (-1 folded, -2 not acted, n >= 0 bet)."""
        if value == FOLDED_SENTINEL:
            return cls.folded()
        if value == NOT_YET_ACTED_SENTINEL:
            return cls.not_yet_acted()
        if value < 0:
            raise ValueError(f"Invalid bet sentinel: {value}")
        return cls.bet(value)

    @classmethod
    def coerce(cls, value: Union[BetState, int]) -> BetState:
        """Accept either a BetState or its integer form."""
        if isinstance(value, BetState):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Cannot interpret {value!r} as a bet")
        return cls.from_sentinel(value)

    def to_sentinel(self) -> int:
        """Convert to the integer form."""
        if self.kind == BetKind.FOLDED:
            return FOLDED_SENTINEL
        if self.kind == BetKind.NOT_YET_ACTED:
            return NOT_YET_ACTED_SENTINEL
        return self.amount

    @property
    def is_folded(self) -> bool:
        return self.kind == BetKind.FOLDED

    @property
    def has_acted(self) -> bool:
        return self.kind != BetKind.NOT_YET_ACTED

    def matches(self, current_bet: int) -> bool:
        """True if this entry is a bet equal to the table's current bet."""
        return self.kind == BetKind.BET and self.amount == current_bet

    def __str__(self) -> str:
        if self.kind == BetKind.FOLDED:
            return "folded"
        if self.kind == BetKind.NOT_YET_ACTED:
            return "not yet acted"
        return str(self.amount)


# Default game settings
DEFAULT_NUM_PLAYERS = 5
DEFAULT_STARTING_CHIPS = 1000
MIN_PLAYERS = 2
MAX_PLAYERS = 10
MIN_STARTING_CHIPS = 10

# The human always sits in seat 0
HUMAN_SEAT = 0

# Cards per phase
HOLE_CARDS = 2
FLOP_CARDS = 3
TURN_CARDS = 1
RIVER_CARDS = 1
TOTAL_COMMUNITY_CARDS = 5

# Hand evaluation
HAND_SIZE = 5
MAX_EVALUATED_CARDS = HOLE_CARDS + TOTAL_COMMUNITY_CARDS
NUM_RANKS = 13
NUM_SUITS = 4


class GamePhase(Enum):
    """Stages of a round."""
    WAITING = auto()      # Waiting for a round to start
    PREFLOP = auto()      # After private cards dealt, before flop
    FLOP = auto()         # After 3 community cards
    TURN = auto()         # After 4th community card
    RIVER = auto()        # After 5th community card
    SHOWDOWN = auto()     # Determine winner
    ROUND_OVER = auto()   # Pot awarded


# Community cards dealt when entering each phase
PHASE_CARDS = {
    GamePhase.FLOP: FLOP_CARDS,
    GamePhase.TURN: TURN_CARDS,
    GamePhase.RIVER: RIVER_CARDS,
}
