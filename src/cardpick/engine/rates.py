import math
from decimal import ROUND_HALF_UP, Context, Decimal

from cardpick.domain.errors import InvalidInputError
from cardpick.domain.models import Card, RateSource, RewardType

FALLBACK_RATE = 1.0
_CENT = Decimal("0.01")
# Wide enough to quantize the product of any three finite floats to cents.
_MONEY_CONTEXT = Context(prec=1000)


def _quantize(value: Decimal) -> float:
    return float(value.quantize(_CENT, rounding=ROUND_HALF_UP, context=_MONEY_CONTEXT))


def round_half_up(value: float) -> float:
    """Round to the minor currency unit, halves away from zero.

    Infinities and NaN are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return _quantize(Decimal(str(value)))


def _category_rate(card: Card, category_code: str) -> tuple[float, RateSource]:
    program = card.reward_program
    rate = program.category_rates.get(str(category_code))
    if rate is not None:
        return rate, RateSource.CATEGORY
    if program.default_rate is not None:
        return program.default_rate, RateSource.DEFAULT
    return FALLBACK_RATE, RateSource.DEFAULT


def resolve_effective_rate(card: Card, category_code: str) -> float:
    rate, _ = _category_rate(card, category_code)
    return rate


def rate_source(card: Card, category_code: str) -> RateSource:
    _, source = _category_rate(card, category_code)
    return source


def calculate_reward_value(card: Card, category_code: str, amount: float) -> float:
    if not math.isfinite(amount):
        raise InvalidInputError(f"amount must be a finite number, got {amount}")
    if amount < 0:
        raise InvalidInputError(f"amount must be non-negative, got {amount}")

    reward = _MONEY_CONTEXT.multiply(Decimal(str(amount)), Decimal(str(resolve_effective_rate(card, category_code))))
    reward = _MONEY_CONTEXT.divide(reward, Decimal(100))
    program = card.reward_program
    if program.type == RewardType.POINTS:
        # No point value means the points are worth nothing in cash terms.
        reward = _MONEY_CONTEXT.multiply(reward, Decimal(str(program.point_value or 0)))

    return _quantize(reward)
