import pytest

from cardpick.domain.catalog import MappingCategoryCatalog
from cardpick.domain.models import Card, CategoryInfo, RewardProgram, RewardType

GROCERY = "5411"
RESTAURANT = "5812"
GAS = "5541"
ELECTRONICS = "5732"


def make_card(
    card_id: str,
    default_rate: float | None = 1.0,
    category_rates: dict[str, float] | None = None,
    reward_type: RewardType = RewardType.CASHBACK,
    point_value: float | None = None,
    annual_fee: float = 0,
    balance: float = 0,
    credit_limit: float = 1000,
    network: str = "Discover",
    active: bool = True,
) -> Card:
    return Card(
        id=card_id,
        name=card_id.replace("_", " ").title(),
        network=network,
        last_four="0000",
        active=active,
        balance=balance,
        credit_limit=credit_limit,
        annual_fee=annual_fee,
        reward_program=RewardProgram(
            default_rate=default_rate,
            category_rates=category_rates or {},
            type=reward_type,
            point_value=point_value,
        ),
    )


@pytest.fixture
def cashback_card() -> Card:
    return make_card(
        "cashback_card",
        default_rate=1.5,
        category_rates={GROCERY: 3.0},
        balance=100,
        credit_limit=1000,
        network="Visa",
    )


@pytest.fixture
def points_card() -> Card:
    return make_card(
        "points_card",
        default_rate=1.0,
        category_rates={RESTAURANT: 4.0},
        reward_type=RewardType.POINTS,
        point_value=0.02,
        annual_fee=250,
        balance=200,
        credit_limit=1000,
        network="American Express",
    )


@pytest.fixture
def catalog() -> MappingCategoryCatalog:
    return MappingCategoryCatalog(
        {
            GROCERY: CategoryInfo(category="Grocery Stores", description="Supermarkets"),
            RESTAURANT: CategoryInfo(category="Restaurants", description="Eating Places"),
            GAS: CategoryInfo(category="Gas Stations", description="Service Stations"),
            ELECTRONICS: CategoryInfo(category="Electronics", description="Electronics Stores"),
        }
    )
