"""
Hold'em Agents - betting decision makers

This module provides the base agent interface and the computer opponents.
"""

from holdem.agents.base import BaseAgent
from holdem.agents.random_agent import RandomAgent, CallAgent

__all__ = ["BaseAgent", "RandomAgent", "CallAgent"]
