"""
Showdown resolution.

Players still in the hand are compared on three tiers, each one only
consulted when the previous tier leaves more than one player tied:

1. hand category
2. rank score
3. suit score

If players are still tied after the suit score, the tie is reported and
the first tied player (lowest seat index) takes the pot. The pot is never
split.
"""

from __future__ import annotations
from typing import List, Optional, Sequence, Union
from dataclasses import dataclass, field
import logging

from holdem.core.hand import HandScore
from holdem.core.rules import BetState


logger = logging.getLogger(__name__)


class NoActivePlayersError(ValueError):
    """Raised when every player has folded before the showdown."""


# Tiers in the order they are consulted
TIERS = ("hand", "rank_score", "suit_score")


@dataclass
class ShowdownResult:
    """Outcome of a showdown."""
    winner: int
    decided_by: str  # "fold", "hand", "rank_score", "suit_score" or "tie"
    active: List[int] = field(default_factory=list)
    tied: List[int] = field(default_factory=list)

    @property
    def is_tie(self) -> bool:
        return self.decided_by == "tie"

    def to_dict(self) -> dict:
        return {
            "winner": self.winner,
            "decided_by": self.decided_by,
            "active": list(self.active),
            "tied": list(self.tied),
        }


def _tier_value(score: HandScore, tier: str) -> int:
    if tier == "hand":
        return int(score.hand)
    return getattr(score, tier)


def find_winners(
    hand_scores: Sequence[Optional[HandScore]],
    bets: Sequence[Union[BetState, int]],
) -> ShowdownResult:
    """
    Determine the winner of a showdown.

    Args:
        hand_scores: One score per player, indexed by seat. Entries for
            folded players are ignored and may be None.
        bets: One bet entry per player, as BetState or in the integer form
            (-1 folded, -2 not yet acted, n >= 0 amount)

    Returns:
        ShowdownResult with the winning seat and how it was decided

    Raises:
        ValueError: If the two sequences differ in length
        NoActivePlayersError: If every player has folded
    """
    if len(hand_scores) != len(bets):
        raise ValueError(
            f"Got {len(hand_scores)} hand scores for {len(bets)} bets"
        )

    states = [BetState.coerce(bet) for bet in bets]
    active = [i for i, state in enumerate(states) if not state.is_folded]

    if not active:
        raise NoActivePlayersError("No active players at showdown")

    if len(active) == 1:
        logger.debug(f"Player {active[0]} wins, everyone else folded")
        return ShowdownResult(winner=active[0], decided_by="fold", active=active)

    missing = [i for i in active if hand_scores[i] is None]
    if missing:
        raise ValueError(f"Missing hand scores for active players: {missing}")

    contenders = active
    for tier in TIERS:
        best = max(_tier_value(hand_scores[i], tier) for i in contenders)
        contenders = [i for i in contenders if _tier_value(hand_scores[i], tier) == best]
        if len(contenders) == 1:
            logger.debug(f"Player {contenders[0]} wins on {tier}")
            return ShowdownResult(
                winner=contenders[0], decided_by=tier, active=active
            )

    logger.warning(
        f"Unresolved tie between players {contenders}, "
        f"awarding the pot to player {contenders[0]}"
    )
    return ShowdownResult(
        winner=contenders[0], decided_by="tie", active=active, tied=contenders
    )


def resolve_showdown(
    hand_scores: Sequence[Optional[HandScore]],
    bets: Sequence[Union[BetState, int]],
) -> int:
    """Return the index of the player who wins the showdown."""
    return find_winners(hand_scores, bets).winner
