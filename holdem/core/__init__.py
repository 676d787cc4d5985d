"""
Hold'em Core - card model, hand evaluation, showdown and game flow

This module contains all game logic without any console or network code.
"""

from holdem.core.card import Card, Deck, Rank, Suit, DeckExhaustedError
from holdem.core.player import Player
from holdem.core.rules import BetState, BetKind, GamePhase
from holdem.core.hand import HandRank, HandScore, InvalidHandError, evaluate, evaluate_hand
from holdem.core.showdown import ShowdownResult, NoActivePlayersError, find_winners, resolve_showdown
from holdem.core.betting import BettingRound, BetView, InvalidBetError
from holdem.core.game import TexasHoldemGame, RoundResult

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "DeckExhaustedError",
    "Player",
    "BetState",
    "BetKind",
    "GamePhase",
    "HandRank",
    "HandScore",
    "InvalidHandError",
    "evaluate",
    "evaluate_hand",
    "ShowdownResult",
    "NoActivePlayersError",
    "find_winners",
    "resolve_showdown",
    "BettingRound",
    "BetView",
    "InvalidBetError",
    "TexasHoldemGame",
    "RoundResult",
]
