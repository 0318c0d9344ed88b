from fastapi import APIRouter, Depends

from cardpick.agents.orchestrator import RewardsOrchestrator
from cardpick.api.deps import get_orchestrator
from cardpick.domain.models import SpendingAnalysis
from cardpick.schemas.requests import AnalyzeRequest

router = APIRouter(tags=["analytics"])


@router.post("/analytics", response_model=SpendingAnalysis)
def analytics(
    request: AnalyzeRequest,
    orchestrator: RewardsOrchestrator = Depends(get_orchestrator),
) -> SpendingAnalysis:
    return orchestrator.analyze(request)
