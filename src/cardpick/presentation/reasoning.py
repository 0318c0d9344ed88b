from typing import Callable

from cardpick.domain.models import PrimaryGoal, RateSource, ReasoningComponents, RecommendationResult

SEPARATOR = " • "

ReasoningRenderer = Callable[[ReasoningComponents], str]

_GOAL_LABELS = {
    PrimaryGoal.CASHBACK: "cashback",
    PrimaryGoal.TRAVEL: "travel",
    PrimaryGoal.DEBT_PAYOFF: "debt payoff",
}


def format_rate(rate: float) -> str:
    return f"{rate:g}%"


def format_money(value: float, symbol: str = "$") -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def reasoning_phrases(reasons: ReasoningComponents) -> list[str]:
    phrases: list[str] = []
    if reasons.rate_source == RateSource.CATEGORY:
        phrases.append(f"Earns {format_rate(reasons.rate)} rewards on {reasons.category_name.lower()}")
    else:
        phrases.append(f"Best available rate of {format_rate(reasons.rate)} for this purchase")

    if reasons.no_annual_fee:
        phrases.append("No annual fee")
    if reasons.low_utilization:
        phrases.append("Good credit utilization")
    if reasons.aligned_goal is not None:
        phrases.append(f"Aligns with your {_GOAL_LABELS[reasons.aligned_goal]} goal")
    return phrases


def render_reasoning(reasons: ReasoningComponents) -> str:
    return SEPARATOR.join(reasoning_phrases(reasons))


def render_recommendation(result: RecommendationResult) -> str:
    card = result.recommended_card
    lines = [
        f"Best card: {card.name} ({format_rate(result.reward_rate)})",
        f"Expected reward: {format_money(result.expected_reward)} on {result.merchant_category}",
        f"Why: {result.reasoning}",
    ]
    if result.alternative is not None:
        alt = result.alternative
        lines.append(
            f"Alternative: {alt.card.name} ({format_rate(alt.rate)}, {format_money(alt.reward)}), "
            f"you save {format_money(result.potential_savings)}"
        )
    return "\n".join(lines)
