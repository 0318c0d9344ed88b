import logging

from fastapi import APIRouter, Depends, HTTPException

from cardpick.agents.orchestrator import RewardsOrchestrator
from cardpick.api.deps import get_orchestrator
from cardpick.domain.errors import InsufficientCardsError, InvalidInputError
from cardpick.domain.models import RecommendationResult
from cardpick.schemas.requests import RecommendRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recommend"])


@router.post("/recommend", response_model=RecommendationResult)
def recommend(
    request: RecommendRequest,
    orchestrator: RewardsOrchestrator = Depends(get_orchestrator),
) -> RecommendationResult:
    try:
        return orchestrator.recommend(request)
    except InsufficientCardsError as exc:
        logger.warning("Recommendation unavailable: %s", exc)
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except InvalidInputError as exc:
        logger.warning("Rejected recommendation request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
