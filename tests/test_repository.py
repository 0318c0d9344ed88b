import json

import pytest

from cardpick.domain.models import RewardType
from cardpick.repository.card_store import CardStore
from cardpick.repository.category_catalog import JsonCategoryCatalog
from cardpick.repository.transaction_store import TransactionStore

CARDS = [
    {
        "id": "card_001",
        "userId": "user_001",
        "name": "Chase Freedom Unlimited",
        "lastFour": "4532",
        "network": "Visa",
        "isActive": True,
        "rewards": {"defaultRate": 1.5, "categories": {"5411": 3.0}, "type": "cashback"},
        "balance": 1247.32,
        "creditLimit": 8000,
        "annualFee": 0,
    },
    {
        "id": "card_002",
        "userId": "user_002",
        "name": "American Express Gold",
        "network": "American Express",
        "rewards": {"defaultRate": 1.0, "type": "points", "pointValue": 0.02},
        "creditLimit": 15000,
        "annualFee": 250,
    },
]

TRANSACTIONS = [
    {"id": "t1", "userId": "user_001", "amount": 10.0, "mcc": "5411", "rewardEarned": 0.3,
     "potentialReward": 0.4, "timestamp": "2024-01-18T08:45:00Z"},
    {"id": "t2", "userId": "user_001", "amount": 20.0, "mcc": "5812", "rewardEarned": 0.4,
     "potentialReward": 0.8, "timestamp": "2024-01-20T14:30:00Z"},
    {"id": "t3", "userId": "user_002", "amount": 30.0, "mcc": "5541", "timestamp": "2024-01-19T10:00:00Z"},
]


def _write(path, payload) -> str:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_card_store_reads_camel_case_records(tmp_path) -> None:
    store = CardStore(_write(tmp_path / "cards.json", CARDS))

    cards = store.load_cards()

    assert [card.id for card in cards] == ["card_001", "card_002"]
    assert cards[0].reward_program.category_rates == {"5411": 3.0}
    assert cards[0].credit_limit == 8000
    assert cards[1].reward_program.type == RewardType.POINTS
    assert cards[1].reward_program.point_value == 0.02
    assert cards[1].active is True


def test_card_store_filters_by_user(tmp_path) -> None:
    store = CardStore(_write(tmp_path / "cards.json", CARDS))

    assert [card.id for card in store.load_cards(user_id="user_002")] == ["card_002"]


def test_missing_card_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        CardStore(str(tmp_path / "missing.json")).load_cards()


def test_transactions_are_returned_newest_first(tmp_path) -> None:
    store = TransactionStore(_write(tmp_path / "transactions.json", TRANSACTIONS))

    transactions = store.load_transactions()

    assert [txn.id for txn in transactions] == ["t2", "t3", "t1"]
    assert transactions[0].category_code == "5812"
    assert transactions[0].potential_reward == 0.8


def test_transactions_filter_by_user(tmp_path) -> None:
    store = TransactionStore(_write(tmp_path / "transactions.json", TRANSACTIONS))

    assert [txn.id for txn in store.load_transactions(user_id="user_001")] == ["t2", "t1"]


def test_non_array_payload_is_rejected(tmp_path) -> None:
    with pytest.raises(ValueError):
        CardStore(_write(tmp_path / "cards.json", {"id": "x"})).load_cards()


def test_json_catalog_lookup(tmp_path) -> None:
    path = _write(tmp_path / "categories.json", {"5411": {"category": "Grocery Stores", "description": "Supermarkets"}})

    catalog = JsonCategoryCatalog(path)

    assert catalog.lookup("5411").category == "Grocery Stores"
    assert catalog.lookup("9999") is None
    assert len(catalog) == 1
