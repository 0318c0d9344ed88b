import logging
from typing import Iterable

from cardpick.domain.catalog import CategoryCatalog, category_name
from cardpick.domain.errors import InsufficientCardsError
from cardpick.domain.models import (
    AlternativeCard,
    Card,
    ReasoningComponents,
    RecommendationResult,
    ScoredCard,
    UserPreferences,
)
from cardpick.engine.rates import calculate_reward_value, rate_source, resolve_effective_rate, round_half_up
from cardpick.engine.scorer import UTILIZATION_WARN, preference_bonus, score_card, utilization
from cardpick.presentation.reasoning import ReasoningRenderer, render_reasoning

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "Unknown"


def rank_cards(
    cards: Iterable[Card],
    category_code: str,
    amount: float,
    preferences: UserPreferences | None = None,
) -> list[ScoredCard]:
    """Score every active card and order them best first.

    ``list.sort`` is stable, so cards with equal scores keep their input order
    and the first-listed one wins.
    """
    scored: list[ScoredCard] = []
    for card in cards:
        if not card.active:
            continue
        reward = calculate_reward_value(card, category_code, amount)
        scored.append(
            ScoredCard(
                card=card,
                reward_amount=reward,
                effective_rate=resolve_effective_rate(card, category_code),
                score=score_card(card, category_code, amount, preferences, reward_amount=reward),
            )
        )

    scored.sort(key=lambda item: item.score, reverse=True)
    return scored


def explain_choice(
    card: Card,
    category_code: str,
    preferences: UserPreferences | None,
    category: str,
) -> ReasoningComponents:
    goal = preferences.primary_goal if preferences else None
    return ReasoningComponents(
        rate_source=rate_source(card, category_code),
        rate=resolve_effective_rate(card, category_code),
        category_name=category,
        no_annual_fee=card.annual_fee == 0,
        low_utilization=utilization(card) < UTILIZATION_WARN,
        aligned_goal=goal if preference_bonus(card, preferences) > 0 else None,
    )


def select_optimal_card(
    cards: Iterable[Card],
    category_code: str,
    amount: float,
    preferences: UserPreferences | None = None,
    catalog: CategoryCatalog | None = None,
    renderer: ReasoningRenderer = render_reasoning,
) -> RecommendationResult:
    ranked = rank_cards(cards, category_code, amount, preferences)
    if not ranked:
        raise InsufficientCardsError()

    best = ranked[0]
    runner_up = ranked[1] if len(ranked) > 1 else None
    category = category_name(catalog, category_code, UNKNOWN_CATEGORY)
    reasons = explain_choice(best.card, category_code, preferences, category)

    alternative = None
    savings = 0.0
    if runner_up is not None:
        alternative = AlternativeCard(
            card=runner_up.card,
            reward=runner_up.reward_amount,
            rate=runner_up.effective_rate,
        )
        savings = round_half_up(best.reward_amount - runner_up.reward_amount)

    logger.debug(
        "Selected %s for category=%s amount=%.2f (score=%.2f, %d candidates)",
        best.card.id,
        category_code,
        amount,
        best.score,
        len(ranked),
    )

    return RecommendationResult(
        recommended_card=best.card,
        expected_reward=best.reward_amount,
        reward_rate=best.effective_rate,
        alternative=alternative,
        reasons=reasons,
        reasoning=renderer(reasons),
        merchant_category=category,
        potential_savings=savings,
        ranked_cards=ranked,
    )
