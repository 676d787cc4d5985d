"""
Player class for the Hold'em simulator.

A player holds the cards dealt to them this round and a chip balance.
The balance is allowed to reach zero or below; that marks the player as
eliminated.
"""

from __future__ import annotations
from typing import List, Dict, Any
from dataclasses import dataclass, field

from holdem.core.card import Card


@dataclass
class Player:
    """
    A player at the table.

    Attributes:
        player_id: Unique identifier for the player
        chips: Current chip count
        seat: Seat position at the table (0-indexed)
        cards: The player's private cards (2 after the deal)
        is_human: True for the seat driven from the console
    """
    player_id: str
    chips: int
    seat: int = 0
    cards: List[Card] = field(default_factory=list)
    is_human: bool = False

    def add(self, card: Card) -> None:
        """Give the player one more private card."""
        self.cards.append(card)

    def update_chips(self, amount: int) -> None:
        """Add a signed amount to the chip balance."""
        self.chips += amount

    def reset_cards(self) -> None:
        """Drop all private cards before a new round."""
        self.cards = []

    @property
    def is_eliminated(self) -> bool:
        """True once the player has no chips left."""
        return self.chips <= 0

    @property
    def display_name(self) -> str:
        return "You" if self.is_human else f"Player {self.seat + 1}"

    def to_dict(self, hide_cards: bool = True) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Args:
            hide_cards: If True, don't include private cards
        """
        result: Dict[str, Any] = {
            "id": self.player_id,
            "seat": self.seat,
            "chips": self.chips,
            "human": self.is_human,
        }
        if not hide_cards and self.cards:
            result["cards"] = [card.to_dict() for card in self.cards]
        return result

    def __repr__(self) -> str:
        return f"Player({self.player_id}, chips={self.chips}, seat={self.seat})"

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards) if self.cards else "??"
        return f"{self.display_name} [{cards_str}] ${self.chips}"
