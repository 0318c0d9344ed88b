"""Retrospective analysis of how well past purchases were routed to cards."""

import logging
from typing import Iterable, Iterator, Mapping

from cardpick.domain.catalog import CategoryCatalog, category_name
from cardpick.domain.models import (
    Card,
    CardUsage,
    CategoryStats,
    OptimizationTip,
    SpendingAnalysis,
    Transaction,
)
from cardpick.engine.rates import resolve_effective_rate, round_half_up

logger = logging.getLogger(__name__)

OTHER_CATEGORY = "Other"

DEFAULT_BASELINE_RATE = 1.5
DEFAULT_MIN_MONTHLY_SPEND = 100
DEFAULT_MAX_TIP_CATEGORIES = 3

# Representative merchant category code for each category a tip can target.
CATEGORY_CODES: dict[str, str] = {
    "Restaurants": "5812",
    "Grocery Stores": "5411",
    "Gas Stations": "5541",
    "Electronics": "5732",
    "Department Stores": "5311",
}


def _percentage(part: float, whole: float) -> float:
    return part / whole * 100 if whole > 0 else 0.0


def find_best_card_for_code(cards: Iterable[Card], category_code: str) -> tuple[Card, float] | None:
    """Return the card with the highest effective rate, first one winning ties."""
    best: tuple[Card, float] | None = None
    for card in cards:
        rate = resolve_effective_rate(card, category_code)
        if best is None or rate > best[1]:
            best = (card, rate)
    return best


def iter_optimization_tips(
    category_breakdown: Mapping[str, CategoryStats],
    cards: Iterable[Card],
    baseline_rate: float = DEFAULT_BASELINE_RATE,
    min_monthly_spend: float = DEFAULT_MIN_MONTHLY_SPEND,
    max_categories: int = DEFAULT_MAX_TIP_CATEGORIES,
) -> Iterator[OptimizationTip]:
    cards = list(cards)
    top_categories = sorted(category_breakdown.items(), key=lambda item: item[1].spent, reverse=True)

    for category, stats in top_categories[:max_categories]:
        if stats.spent <= min_monthly_spend:
            continue
        category_code = CATEGORY_CODES.get(category)
        if category_code is None:
            continue
        best = find_best_card_for_code(cards, category_code)
        if best is None:
            continue

        card, rate = best
        extra = stats.spent * (rate - baseline_rate) / 100
        yield OptimizationTip(
            category=category,
            monthly_spending=round_half_up(stats.spent),
            suggested_card=card.name,
            suggested_card_id=card.id,
            best_rate=rate,
            potential_extra_rewards=max(0.0, round_half_up(extra)),
        )


def generate_optimization_tips(
    category_breakdown: Mapping[str, CategoryStats],
    cards: Iterable[Card],
    baseline_rate: float = DEFAULT_BASELINE_RATE,
    min_monthly_spend: float = DEFAULT_MIN_MONTHLY_SPEND,
    max_categories: int = DEFAULT_MAX_TIP_CATEGORIES,
) -> list[OptimizationTip]:
    return list(
        iter_optimization_tips(
            category_breakdown,
            cards,
            baseline_rate=baseline_rate,
            min_monthly_spend=min_monthly_spend,
            max_categories=max_categories,
        )
    )


def _card_usage(transactions: list[Transaction], total_spent: float) -> list[CardUsage]:
    usage: dict[str, CardUsage] = {}
    for txn in transactions:
        if not txn.card_used:
            continue
        entry = usage.setdefault(txn.card_used, CardUsage(card_id=txn.card_used))
        entry.spent += txn.amount
        entry.rewards += txn.reward_earned
        entry.transactions += 1

    for entry in usage.values():
        entry.usage = round_half_up(_percentage(entry.spent, total_spent))
    return sorted(usage.values(), key=lambda item: item.spent, reverse=True)


def analyze_spending_patterns(
    transactions: Iterable[Transaction],
    cards: Iterable[Card],
    catalog: CategoryCatalog | None = None,
    baseline_rate: float = DEFAULT_BASELINE_RATE,
    min_monthly_spend: float = DEFAULT_MIN_MONTHLY_SPEND,
    max_tip_categories: int = DEFAULT_MAX_TIP_CATEGORIES,
) -> SpendingAnalysis:
    transactions = list(transactions)
    analysis = SpendingAnalysis(transaction_count=len(transactions))

    for txn in transactions:
        analysis.total_spent += txn.amount
        analysis.total_rewards += txn.reward_earned
        analysis.potential_rewards += txn.potential_reward
        analysis.missed_savings += max(0.0, txn.potential_reward - txn.reward_earned)

        category = category_name(catalog, txn.category_code, OTHER_CATEGORY)
        stats = analysis.category_breakdown.setdefault(category, CategoryStats())
        stats.spent += txn.amount
        stats.rewards += txn.reward_earned
        stats.transactions += 1

    if analysis.potential_rewards > 0:
        analysis.optimization_rate = analysis.total_rewards / analysis.potential_rewards * 100
    else:
        analysis.optimization_rate = 100.0

    for stats in analysis.category_breakdown.values():
        stats.percentage = _percentage(stats.spent, analysis.total_spent)

    analysis.card_usage = _card_usage(transactions, analysis.total_spent)
    analysis.optimization_opportunities = generate_optimization_tips(
        analysis.category_breakdown,
        cards,
        baseline_rate=baseline_rate,
        min_monthly_spend=min_monthly_spend,
        max_categories=max_tip_categories,
    )

    logger.debug(
        "Analyzed %d transactions: optimization_rate=%.1f, %d tips",
        analysis.transaction_count,
        analysis.optimization_rate,
        len(analysis.optimization_opportunities),
    )
    return analysis
