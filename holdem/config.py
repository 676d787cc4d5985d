"""
Game settings and logging setup.

Settings can come from the console prompts, from command-line flags or
from the environment:

    HOLDEM_NUM_PLAYERS=6 HOLDEM_STARTING_CHIPS=500 python run.py play

HOLDEM_LOG_LEVEL=DEBUG / INFO / WARNING / ERROR sets the log level.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field

from holdem.core.rules import (
    DEFAULT_NUM_PLAYERS, DEFAULT_STARTING_CHIPS,
    MIN_PLAYERS, MAX_PLAYERS, MIN_STARTING_CHIPS,
)


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class GameSettings(BaseModel):
    """Settings for one table."""
    num_players: int = Field(
        default=DEFAULT_NUM_PLAYERS, ge=MIN_PLAYERS, le=MAX_PLAYERS,
        description="Players at the table, including you",
    )
    starting_chips: int = Field(
        default=DEFAULT_STARTING_CHIPS, ge=MIN_STARTING_CHIPS,
        description="Chips each player starts with",
    )
    seed: Optional[int] = Field(
        default=None, description="Seed for shuffling and AI decisions",
    )

    @classmethod
    def from_env(cls) -> "GameSettings":
        """Build settings from HOLDEM_* environment variables."""
        values = {}
        for name, var in (
            ("num_players", "HOLDEM_NUM_PLAYERS"),
            ("starting_chips", "HOLDEM_STARTING_CHIPS"),
            ("seed", "HOLDEM_SEED"),
        ):
            raw = os.getenv(var)
            if raw:
                values[name] = raw
        return cls(**values)


def setup_logging(level: Optional[str] = None, default: str = "WARNING") -> None:
    """Call once at program start."""
    name = (level or os.getenv("HOLDEM_LOG_LEVEL") or default).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format=LOG_FORMAT,
    )
