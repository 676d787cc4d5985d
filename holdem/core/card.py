"""
Card and Deck classes for the Hold'em simulator.

Suit and Rank ordinals double as table indices for hand evaluation:
Rank.TWO is 0 and carries the least weight, Rank.ACE is 12 and carries
the most. Suit ordinals run Clubs=0 to Spades=3.
"""

from __future__ import annotations
import logging
import random
from typing import List, Optional
from enum import IntEnum


logger = logging.getLogger(__name__)


class DeckExhaustedError(ValueError):
    """Raised when dealing from an empty deck."""


class Suit(IntEnum):
    """Card suits. The value is the suit index used for suit scoring."""
    CLUBS = 0     # ♣
    DIAMONDS = 1  # ♦
    HEARTS = 2    # ♥
    SPADES = 3    # ♠


class Rank(IntEnum):
    """Card ranks from 2 (lowest) to Ace (highest)."""
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

SUIT_CHARS = {
    Suit.CLUBS: "c",
    Suit.DIAMONDS: "d",
    Suit.HEARTS: "h",
    Suit.SPADES: "s",
}

RANK_CHARS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

CHAR_TO_RANK = {v: k for k, v in RANK_CHARS.items()}
CHAR_TO_SUIT = {v: k for k, v in SUIT_CHARS.items()}
SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}

# Order the deck is built in: every rank of Spades first, Clubs last
DECK_SUIT_ORDER = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)


class Card:
    """
    An immutable playing card, a (rank, suit) pair.

    Cards can be created from:
    - Rank and Suit enums: Card(Rank.ACE, Suit.SPADES)
    - String notation: Card.from_string("As") or Card.from_string("A♠")

    Cards are values: two cards with the same rank and suit compare equal
    and hash the same, so copying a card is never needed.
    """

    __slots__ = ("_rank", "_suit")

    def __init__(self, rank: Rank, suit: Suit):
        object.__setattr__(self, "_rank", Rank(rank))
        object.__setattr__(self, "_suit", Suit(suit))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Card is immutable, cannot set {name}")

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @classmethod
    def from_string(cls, s: str) -> Card:
        """
        Create a card from string notation.

        Accepts formats:
        - "As", "Kh", "Td", "2c" (rank + suit char)
        - "A♠", "K♥", "T♦", "2♣" (rank + suit symbol)
        - "10h" for the ten
        """
        s = s.strip()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        if s.startswith("10"):
            rank_char, suit_part = "T", s[2:]
        else:
            rank_char, suit_part = s[0].upper(), s[1:]

        if rank_char not in CHAR_TO_RANK:
            raise ValueError(f"Invalid rank: {rank_char}")

        if suit_part.lower() in CHAR_TO_SUIT:
            suit = CHAR_TO_SUIT[suit_part.lower()]
        elif suit_part in SYMBOL_TO_SUIT:
            suit = SYMBOL_TO_SUIT[suit_part]
        else:
            raise ValueError(f"Invalid suit: {suit_part}")

        return cls(CHAR_TO_RANK[rank_char], suit)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return NotImplemented

    def __hash__(self) -> int:
        return int(self._rank) * 4 + int(self._suit)

    def __lt__(self, other: Card) -> bool:
        """Compare by rank only (for sorting)."""
        return self._rank < other._rank

    def __repr__(self) -> str:
        return f"Card({RANK_CHARS[self._rank]}{SUIT_CHARS[self._suit]})"

    def __str__(self) -> str:
        return f"{RANK_CHARS[self._rank]}{SUIT_SYMBOLS[self._suit]}"

    @property
    def short_str(self) -> str:
        """Short string like 'As', 'Kh'."""
        return f"{RANK_CHARS[self._rank]}{SUIT_CHARS[self._suit]}"

    @property
    def long_name(self) -> str:
        """Display name like 'Ace of Spades'."""
        return f"{self._rank.name.capitalize()} of {self._suit.name.capitalize()}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rank": RANK_CHARS[self._rank],
            "suit": SUIT_SYMBOLS[self._suit],
            "text": str(self),
            "name": self.long_name,
        }


class Deck:
    """
    A standard 52-card deck, dealt from the end of the sequence.

    Usage:
        deck = Deck()
        deck.shuffle()
        card = deck.deal()
        deck.burn()
    """

    def __init__(self, shuffle: bool = False, rng: Optional[random.Random] = None):
        """
        Initialize a new deck.

        Args:
            shuffle: Shuffle right after construction
            rng: Random source for shuffling; the module-level generator
                 is used when omitted
        """
        self._rng = rng
        self.reset()
        if shuffle:
            self.shuffle()

    def reset(self) -> None:
        """Reset the deck to a full 52 cards in construction order."""
        self._cards: List[Card] = [
            Card(rank, suit)
            for suit in DECK_SUIT_ORDER
            for rank in Rank
        ]
        self._dealt: List[Card] = []

    def shuffle(self) -> None:
        """Shuffle the remaining cards in the deck."""
        if self._rng is not None:
            self._rng.shuffle(self._cards)
        else:
            random.shuffle(self._cards)

    def deal(self) -> Card:
        """
        Remove and return the last card of the deck.

        Raises:
            DeckExhaustedError: If the deck is empty.
        """
        if not self._cards:
            raise DeckExhaustedError("Cannot deal from an empty deck")
        card = self._cards.pop()
        self._dealt.append(card)
        return card

    def burn(self) -> Card:
        """Burn (discard) the next card."""
        card = self.deal()
        logger.debug(f"Burned {card}")
        return card

    @property
    def remaining(self) -> int:
        """Number of cards remaining in the deck."""
        return len(self._cards)

    @property
    def cards(self) -> List[Card]:
        """Copy of the remaining cards, next card to deal last."""
        return self._cards.copy()

    @property
    def dealt_cards(self) -> List[Card]:
        """List of cards that have been dealt, in dealing order."""
        return self._dealt.copy()

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self.remaining} cards remaining)"


def parse_cards(cards_str: str) -> List[Card]:
    """
    Parse multiple cards from a string.

    Accepts formats:
    - "As Kh Td" (space-separated)
    - "AsKhTd" (no separator, 2 chars each)
    - "A♠ K♥ T♦" (with symbols)

    Returns:
        List of Card objects
    """
    cards_str = cards_str.strip()
    if not cards_str:
        return []

    if " " in cards_str:
        return [Card.from_string(s) for s in cards_str.split()]

    result = []
    i = 0
    while i < len(cards_str):
        if i + 1 < len(cards_str) and (
            cards_str[i + 1] in SYMBOL_TO_SUIT
            or cards_str[i + 1].lower() in CHAR_TO_SUIT
        ):
            result.append(Card.from_string(cards_str[i:i + 2]))
            i += 2
        else:
            raise ValueError(f"Cannot parse card at position {i}: {cards_str[i:]}")

    return result
