"""
Hold'em - Texas Hold'em against computer opponents

A console Texas Hold'em game with:
- Pure Python game core (cards, hand scoring, showdown, betting rounds)
- Randomized computer opponents
- A small FastAPI service exposing hand scoring and showdown resolution

Usage:
    from holdem.core import Card, evaluate_hand, resolve_showdown
    from holdem.agents import BaseAgent, RandomAgent
"""

__version__ = "0.1.0"

from holdem.core.card import Card, Deck
from holdem.core.player import Player
from holdem.core.game import TexasHoldemGame
from holdem.core.hand import HandRank, HandScore, evaluate, evaluate_hand
from holdem.core.showdown import resolve_showdown

__all__ = [
    "Card",
    "Deck",
    "Player",
    "TexasHoldemGame",
    "HandRank",
    "HandScore",
    "evaluate",
    "evaluate_hand",
    "resolve_showdown",
    "__version__",
]
