"""
Hand Evaluation for the Hold'em simulator.

This module scores any set of up to 7 cards (private cards plus the
community cards revealed so far) as a HandScore:

- hand: the best hand category found in the cards
- rank_score: sum of rank index * occurrences over all 13 ranks
- suit_score: sum of suit index * occurrences over all 4 suits

Scores compare as (hand, rank_score, suit_score), which is the order the
showdown uses to break ties.

Hand Rankings (best to worst):
1. Straight Flush: a flush and a straight in the same cards
2. Four of a Kind: 4 cards of same rank
3. Full House: 3 of a kind + a pair (or a second 3 of a kind)
4. Flush: 5 cards of same suit
5. Straight: 5 consecutive ranks
6. Three of a Kind: 3 cards of same rank
7. Two Pair: exactly 2 ranks paired
8. One Pair: 2 cards of same rank
9. High Card: No made hand

Note: the Ace is only high. A-2-3-4-5 is not a straight.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
from dataclasses import dataclass
from enum import IntEnum

from holdem.core.card import Card, Rank, Suit
from holdem.core.rules import HAND_SIZE, MAX_EVALUATED_CARDS, NUM_RANKS, NUM_SUITS


class InvalidHandError(ValueError):
    """Raised when cards passed for evaluation break the caller contract."""


class HandRank(IntEnum):
    """Hand categories from worst (lowest value) to best (highest value)."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


HAND_RANK_NAMES = {
    HandRank.STRAIGHT_FLUSH: "Straight Flush",
    HandRank.FOUR_OF_A_KIND: "Four of a Kind",
    HandRank.FULL_HOUSE: "Full House",
    HandRank.FLUSH: "Flush",
    HandRank.STRAIGHT: "Straight",
    HandRank.THREE_OF_A_KIND: "Three of a Kind",
    HandRank.TWO_PAIR: "Two Pair",
    HandRank.ONE_PAIR: "One Pair",
    HandRank.HIGH_CARD: "High Card",
}


@dataclass(frozen=True)
class HandScore:
    """Score of one player's cards at a showdown."""
    hand: HandRank
    rank_score: int
    suit_score: int

    @property
    def key(self) -> Tuple[int, int, int]:
        """Comparison key, most significant first."""
        return (int(self.hand), self.rank_score, self.suit_score)

    @property
    def name(self) -> str:
        return HAND_RANK_NAMES[self.hand]

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {
            "hand": self.hand.name,
            "description": self.name,
            "rank_score": self.rank_score,
            "suit_score": self.suit_score,
        }


def evaluate(cards: Sequence[Card]) -> HandScore:
    """
    Score a set of cards.

    Args:
        cards: 1-7 distinct Card objects, in any order

    Returns:
        HandScore for the cards

    Raises:
        InvalidHandError: If no cards, more than 7 cards or duplicate
            cards are given
    """
    _check_cards(cards)

    rank_counts, suit_counts = _count(cards)
    hand = _classify(rank_counts, suit_counts)

    rank_score = sum(index * count for index, count in enumerate(rank_counts))
    suit_score = sum(index * count for index, count in enumerate(suit_counts))

    return HandScore(hand, rank_score, suit_score)


def evaluate_hand(
    private_cards: Sequence[Card],
    community_cards: Sequence[Card],
) -> HandScore:
    """Score a player's private cards together with the community cards."""
    return evaluate(list(private_cards) + list(community_cards))


def _check_cards(cards: Sequence[Card]) -> None:
    if not cards:
        raise InvalidHandError("Cannot evaluate an empty hand")
    if len(cards) > MAX_EVALUATED_CARDS:
        raise InvalidHandError(
            f"Need at most {MAX_EVALUATED_CARDS} cards, got {len(cards)}"
        )
    if len(set(cards)) != len(cards):
        seen = set()
        duplicates = []
        for card in cards:
            if card in seen:
                duplicates.append(str(card))
            seen.add(card)
        raise InvalidHandError(f"Duplicate cards: {' '.join(duplicates)}")


def _count(cards: Iterable[Card]) -> Tuple[List[int], List[int]]:
    """Build the rank and suit frequency tables."""
    rank_counts = [0] * NUM_RANKS
    suit_counts = [0] * NUM_SUITS
    for card in cards:
        rank_counts[card.rank] += 1
        suit_counts[card.suit] += 1
    return rank_counts, suit_counts


def _is_flush(suit_counts: Sequence[int]) -> bool:
    return any(count >= HAND_SIZE for count in suit_counts)


def _straight_high(rank_counts: Sequence[int]) -> Optional[int]:
    """Highest rank index ending a run of 5 present ranks, or None."""
    best = None
    for start in range(NUM_RANKS - HAND_SIZE + 1):
        window = rank_counts[start:start + HAND_SIZE]
        if all(count > 0 for count in window):
            best = start + HAND_SIZE - 1
    return best


def _full_house_ranks(rank_counts: Sequence[int]) -> Optional[Tuple[int, int]]:
    """
    Find the (triple, pair) rank indices of a full house.

    The triple is the lowest rank seen three times. The pair is any other
    rank seen two or three times; the highest such rank is returned.
    """
    triples = [r for r, count in enumerate(rank_counts) if count == 3]
    if not triples:
        return None
    triple = triples[0]
    candidates = [
        r for r, count in enumerate(rank_counts)
        if count in (2, 3) and r != triple
    ]
    if not candidates:
        return None
    return triple, candidates[-1]


def _classify(rank_counts: Sequence[int], suit_counts: Sequence[int]) -> HandRank:
    """Pick the best category that the frequency tables satisfy."""
    is_flush = _is_flush(suit_counts)
    is_straight = _straight_high(rank_counts) is not None
    pairs = sum(1 for count in rank_counts if count == 2)

    if is_flush and is_straight:
        return HandRank.STRAIGHT_FLUSH
    if 4 in rank_counts:
        return HandRank.FOUR_OF_A_KIND
    if _full_house_ranks(rank_counts) is not None:
        return HandRank.FULL_HOUSE
    if is_flush:
        return HandRank.FLUSH
    if is_straight:
        return HandRank.STRAIGHT
    if 3 in rank_counts:
        return HandRank.THREE_OF_A_KIND
    if pairs == 2:
        return HandRank.TWO_PAIR
    if pairs:
        return HandRank.ONE_PAIR
    return HandRank.HIGH_CARD


def compare_scores(score1: HandScore, score2: HandScore) -> int:
    """
    Compare two scores.

    Returns:
        1 if score1 wins, -1 if score2 wins, 0 if tie
    """
    if score1.key > score2.key:
        return 1
    if score1.key < score2.key:
        return -1
    return 0


def get_hand_description(cards: Sequence[Card]) -> str:
    """Get a human-readable description of the best hand in the cards."""
    score = evaluate(cards)
    rank_counts, suit_counts = _count(cards)
    base_name = HAND_RANK_NAMES[score.hand]

    if score.hand in (HandRank.STRAIGHT_FLUSH, HandRank.STRAIGHT):
        high = _straight_high(rank_counts)
        if high is not None:
            return f"{base_name}, {_rank_name(high)} high"
        return base_name
    elif score.hand == HandRank.FOUR_OF_A_KIND:
        return f"{base_name}, {_plural(rank_counts.index(4))}"
    elif score.hand == HandRank.FULL_HOUSE:
        triple, pair = _full_house_ranks(rank_counts)
        return f"{base_name}, {_plural(triple)} full of {_plural(pair)}"
    elif score.hand == HandRank.FLUSH:
        suit = Suit(next(s for s, count in enumerate(suit_counts) if count >= HAND_SIZE))
        high = max(c.rank for c in cards if c.suit == suit)
        return f"{base_name}, {_rank_name(high)} high"
    elif score.hand == HandRank.THREE_OF_A_KIND:
        return f"{base_name}, {_plural(rank_counts.index(3))}"
    elif score.hand == HandRank.TWO_PAIR:
        pairs = sorted((r for r, c in enumerate(rank_counts) if c == 2), reverse=True)
        return f"{base_name}, {_plural(pairs[0])} and {_plural(pairs[1])}"
    elif score.hand == HandRank.ONE_PAIR:
        pair = max(r for r, c in enumerate(rank_counts) if c == 2)
        return f"Pair of {_plural(pair)}"
    else:
        high = max(c.rank for c in cards)
        return f"{base_name}, {_rank_name(high)}"


def _rank_name(rank: int) -> str:
    """Get the name of a rank."""
    return Rank(rank).name.capitalize()


def _plural(rank: int) -> str:
    name = _rank_name(rank)
    return f"{name}es" if name.endswith("x") else f"{name}s"
