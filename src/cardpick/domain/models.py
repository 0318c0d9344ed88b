from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class RewardType(str, Enum):
    CASHBACK = "cashback"
    POINTS = "points"


class PrimaryGoal(str, Enum):
    CASHBACK = "cashback"
    TRAVEL = "travel"
    DEBT_PAYOFF = "debt_payoff"


class RateSource(str, Enum):
    CATEGORY = "category"
    DEFAULT = "default"


class _Model(BaseModel):
    # Stored data uses camelCase keys; the engine speaks snake_case.
    model_config = ConfigDict(populate_by_name=True)


class RewardProgram(_Model):
    default_rate: float | None = Field(default=None, ge=0, alias="defaultRate")
    category_rates: dict[str, Annotated[float, Field(ge=0)] | None] = Field(default_factory=dict, alias="categories")
    type: RewardType = RewardType.CASHBACK
    point_value: float | None = Field(default=None, ge=0, alias="pointValue")


class Card(_Model):
    id: str
    name: str
    network: str = ""
    last_four: str = Field(default="", alias="lastFour")
    active: bool = Field(default=True, alias="isActive")
    balance: float = Field(default=0, ge=0)
    credit_limit: float = Field(default=0, ge=0, alias="creditLimit")
    annual_fee: float = Field(default=0, ge=0, alias="annualFee")
    reward_program: RewardProgram = Field(default_factory=RewardProgram, alias="rewards")
    user_id: str | None = Field(default=None, alias="userId")
    color: str | None = None


class Transaction(_Model):
    amount: float = Field(gt=0)
    category_code: str = Field(alias="mcc")
    reward_earned: float = Field(default=0, alias="rewardEarned")
    potential_reward: float = Field(default=0, alias="potentialReward")
    timestamp: datetime | None = None
    id: str | None = None
    user_id: str | None = Field(default=None, alias="userId")
    merchant_name: str | None = Field(default=None, alias="merchantName")
    card_used: str | None = Field(default=None, alias="cardUsed")
    recommended_card: str | None = Field(default=None, alias="recommendedCard")
    status: str | None = None


class UserPreferences(_Model):
    primary_goal: PrimaryGoal | None = Field(default=None, alias="primaryGoal")


class CategoryInfo(BaseModel):
    category: str
    description: str = ""


class ScoredCard(BaseModel):
    card: Card
    reward_amount: float
    effective_rate: float
    score: float


class ReasoningComponents(BaseModel):
    """Structured explanation of why a card was recommended.

    Rendering to display text is left to ``cardpick.presentation``.
    """

    rate_source: RateSource
    rate: float
    category_name: str
    no_annual_fee: bool = False
    low_utilization: bool = False
    aligned_goal: PrimaryGoal | None = None


class AlternativeCard(BaseModel):
    card: Card
    reward: float
    rate: float


class RecommendationResult(BaseModel):
    recommended_card: Card
    expected_reward: float
    reward_rate: float
    alternative: AlternativeCard | None = None
    reasons: ReasoningComponents
    reasoning: str
    merchant_category: str
    potential_savings: float
    ranked_cards: list[ScoredCard] = Field(default_factory=list)


class CategoryStats(BaseModel):
    spent: float = 0
    rewards: float = 0
    transactions: int = 0
    percentage: float = 0


class CardUsage(BaseModel):
    card_id: str
    spent: float = 0
    rewards: float = 0
    transactions: int = 0
    usage: float = 0


class OptimizationTip(BaseModel):
    category: str
    monthly_spending: float
    suggested_card: str
    suggested_card_id: str
    best_rate: float
    potential_extra_rewards: float


class SpendingAnalysis(BaseModel):
    total_spent: float = 0
    total_rewards: float = 0
    potential_rewards: float = 0
    missed_savings: float = 0
    optimization_rate: float = 100.0
    transaction_count: int = 0
    category_breakdown: dict[str, CategoryStats] = Field(default_factory=dict)
    card_usage: list[CardUsage] = Field(default_factory=list)
    optimization_opportunities: list[OptimizationTip] = Field(default_factory=list)
