"""Composite card scoring.

A card's score is dominated by the cash value of the reward it earns on the
purchase, then adjusted for annual-fee drag, credit utilization risk, how well
the card fits the user's primary goal, and network acceptance.
"""

from cardpick.domain.models import Card, PrimaryGoal, RewardType, UserPreferences
from cardpick.engine.rates import calculate_reward_value, round_half_up

REWARD_WEIGHT = 10
FEE_WEIGHT = 0.5

UTILIZATION_WARN = 0.3
UTILIZATION_HIGH = 0.8
UTILIZATION_WARN_PENALTY = 5
UTILIZATION_HIGH_PENALTY = 15

GOAL_MATCH_BONUS = 5
DEBT_PAYOFF_BONUS = 3
DEBT_PAYOFF_PENALTY = -2

PREFERRED_NETWORKS = frozenset({"visa", "mastercard"})
NETWORK_BONUS = 1


def utilization(card: Card) -> float:
    if card.credit_limit == 0:
        return 1.0
    return card.balance / card.credit_limit


def utilization_penalty(card: Card) -> float:
    ratio = utilization(card)
    penalty = 0
    if ratio > UTILIZATION_WARN:
        penalty -= UTILIZATION_WARN_PENALTY
    if ratio > UTILIZATION_HIGH:
        penalty -= UTILIZATION_HIGH_PENALTY
    return penalty


def preference_bonus(card: Card, preferences: UserPreferences | None) -> float:
    goal = preferences.primary_goal if preferences else None
    reward_type = card.reward_program.type

    if goal == PrimaryGoal.CASHBACK:
        return GOAL_MATCH_BONUS if reward_type == RewardType.CASHBACK else 0
    if goal == PrimaryGoal.TRAVEL:
        return GOAL_MATCH_BONUS if reward_type == RewardType.POINTS else 0
    if goal == PrimaryGoal.DEBT_PAYOFF:
        return DEBT_PAYOFF_BONUS if utilization(card) < UTILIZATION_WARN else DEBT_PAYOFF_PENALTY
    return 0


def network_bonus(card: Card) -> float:
    return NETWORK_BONUS if card.network.strip().lower() in PREFERRED_NETWORKS else 0


def score_card(
    card: Card,
    category_code: str,
    amount: float,
    preferences: UserPreferences | None = None,
    reward_amount: float | None = None,
) -> float:
    if reward_amount is None:
        reward_amount = calculate_reward_value(card, category_code, amount)

    score = REWARD_WEIGHT * reward_amount
    score -= FEE_WEIGHT * (card.annual_fee / 12)
    score += utilization_penalty(card)
    score += preference_bonus(card, preferences)
    score += network_bonus(card)

    return round_half_up(score)
