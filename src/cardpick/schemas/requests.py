from pydantic import BaseModel

from cardpick.domain.models import Card, PrimaryGoal, Transaction


class RecommendRequest(BaseModel):
    category_code: str
    amount: float
    primary_goal: PrimaryGoal | None = None
    user_id: str | None = None
    cards: list[Card] | None = None


class AnalyzeRequest(BaseModel):
    user_id: str | None = None
    cards: list[Card] | None = None
    transactions: list[Transaction] | None = None
