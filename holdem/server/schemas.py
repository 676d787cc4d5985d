"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


# ============= Request Schemas =============

class EvaluateRequest(BaseModel):
    """Request to score one player's cards."""
    private_cards: List[str] = Field(default_factory=list, description='Cards like "As", "K♥"')
    community_cards: List[str] = Field(default_factory=list)


class ShowdownPlayerSchema(BaseModel):
    """One seat at the showdown."""
    cards: List[str] = Field(default_factory=list)
    bet: int = Field(
        default=-2, ge=-2,
        description="-1 folded, -2 not yet acted, otherwise the amount bet",
    )


class ShowdownRequest(BaseModel):
    """Request to resolve a showdown."""
    community_cards: List[str] = Field(default_factory=list)
    players: List[ShowdownPlayerSchema] = Field(..., min_length=1)


# ============= Response Schemas =============

class HandScoreSchema(BaseModel):
    """Score of a hand."""
    hand: str
    description: str
    rank_score: int
    suit_score: int


class ShowdownResultSchema(BaseModel):
    """Outcome of a showdown."""
    winner: int
    decided_by: str
    active: List[int]
    tied: List[int] = []
    scores: List[Optional[HandScoreSchema]]


class HealthSchema(BaseModel):
    status: str
    version: str


class ErrorSchema(BaseModel):
    """Body of a 400 response."""
    detail: str
