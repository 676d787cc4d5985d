"""
HTTP API Routes for the Hold'em simulator.

The routes are stateless: every request carries the cards it needs and
nothing is kept between requests.
"""

from typing import List, Optional
import logging

from fastapi import APIRouter, HTTPException

from holdem import __version__
from holdem.core.card import Card
from holdem.core.hand import HandScore, evaluate_hand, get_hand_description
from holdem.core.rules import FOLDED_SENTINEL
from holdem.core.showdown import find_winners
from holdem.server.schemas import (
    ErrorSchema, EvaluateRequest, HandScoreSchema, HealthSchema,
    ShowdownRequest, ShowdownResultSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter()

BAD_REQUEST = {400: {"model": ErrorSchema, "description": "Unreadable cards, an invalid hand or no active player"}}


def _parse(cards: List[str]) -> List[Card]:
    try:
        return [Card.from_string(s) for s in cards]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _score_schema(score: HandScore, cards: List[Card]) -> HandScoreSchema:
    return HandScoreSchema(
        hand=score.hand.name,
        description=get_hand_description(cards),
        rank_score=score.rank_score,
        suit_score=score.suit_score,
    )


@router.get("/health", response_model=HealthSchema)
async def health() -> HealthSchema:
    return HealthSchema(status="ok", version=__version__)


@router.post("/evaluate", response_model=HandScoreSchema, responses=BAD_REQUEST)
async def evaluate(req: EvaluateRequest) -> HandScoreSchema:
    """
    Score one player's private cards with the community cards.
    """
    private_cards = _parse(req.private_cards)
    community_cards = _parse(req.community_cards)

    try:
        score = evaluate_hand(private_cards, community_cards)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _score_schema(score, private_cards + community_cards)


@router.post("/showdown", response_model=ShowdownResultSchema, responses=BAD_REQUEST)
async def showdown(req: ShowdownRequest) -> ShowdownResultSchema:
    """
    Resolve a showdown.

    Folded players (bet -1) are not scored; their cards may be omitted.
    """
    community_cards = _parse(req.community_cards)

    scores: List[Optional[HandScore]] = []
    schemas: List[Optional[HandScoreSchema]] = []
    for seat in req.players:
        if seat.bet == FOLDED_SENTINEL:
            scores.append(None)
            schemas.append(None)
            continue
        cards = _parse(seat.cards) + community_cards
        try:
            score = evaluate_hand(cards, [])
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        scores.append(score)
        schemas.append(_score_schema(score, cards))

    try:
        result = find_winners(scores, [seat.bet for seat in req.players])
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Showdown resolved: seat {result.winner} by {result.decided_by}")
    return ShowdownResultSchema(
        winner=result.winner,
        decided_by=result.decided_by,
        active=result.active,
        tied=result.tied,
        scores=schemas,
    )
