import json

import pytest
from fastapi.testclient import TestClient

from conftest import GROCERY, RESTAURANT

from cardpick.agents.orchestrator import RewardsOrchestrator
from cardpick.api.app import app
from cardpick.api.deps import get_catalog, get_orchestrator
from cardpick.config import Settings
from cardpick.repository.card_store import CardStore
from cardpick.repository.transaction_store import TransactionStore


@pytest.fixture
def client(tmp_path, cashback_card, points_card, catalog):
    card_file = tmp_path / "cards.json"
    card_file.write_text(
        json.dumps([cashback_card.model_dump(mode="json"), points_card.model_dump(mode="json")]),
        encoding="utf-8",
    )
    transaction_file = tmp_path / "transactions.json"
    transaction_file.write_text(
        json.dumps(
            [
                {"amount": 250.0, "mcc": GROCERY, "rewardEarned": 3.75, "potentialReward": 7.5, "cardUsed": "points_card"},
                {"amount": 40.0, "mcc": RESTAURANT, "rewardEarned": 0.6, "potentialReward": 0.6, "cardUsed": "cashback_card"},
            ]
        ),
        encoding="utf-8",
    )

    orchestrator = RewardsOrchestrator(
        CardStore(str(card_file)),
        TransactionStore(str(transaction_file)),
        catalog,
        Settings(),
    )
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_recommend_uses_stored_cards(client) -> None:
    response = client.post("/recommend", json={"category_code": GROCERY, "amount": 100, "primary_goal": "cashback"})

    assert response.status_code == 200
    body = response.json()
    assert body["recommended_card"]["id"] == "cashback_card"
    assert body["expected_reward"] == 3.0
    assert body["merchant_category"] == "Grocery Stores"
    assert body["alternative"]["card"]["id"] == "points_card"
    assert "No annual fee" in body["reasoning"]


def test_recommend_accepts_inline_cards(client) -> None:
    payload = {
        "category_code": RESTAURANT,
        "amount": 50,
        "cards": [
            {"id": "only", "name": "Only Card", "isActive": True, "creditLimit": 500,
             "rewards": {"defaultRate": 2.0, "type": "cashback"}},
        ],
    }

    response = client.post("/recommend", json=payload)

    assert response.status_code == 200
    assert response.json()["recommended_card"]["id"] == "only"
    assert response.json()["alternative"] is None


def test_recommend_without_active_cards_is_conflict(client) -> None:
    payload = {"category_code": GROCERY, "amount": 10, "cards": []}

    response = client.post("/recommend", json=payload)

    assert response.status_code == 409
    assert response.json()["detail"] == "no active cards available"


def test_recommend_negative_amount_is_bad_request(client) -> None:
    response = client.post("/recommend", json={"category_code": GROCERY, "amount": -1})

    assert response.status_code == 400


def test_analytics_from_stored_history(client) -> None:
    response = client.post("/analytics", json={})

    assert response.status_code == 200
    body = response.json()
    assert body["total_spent"] == 290.0
    assert body["missed_savings"] == 3.75
    assert body["optimization_rate"] == pytest.approx(4.35 / 8.1 * 100)
    assert body["category_breakdown"]["Grocery Stores"]["transactions"] == 1
    assert body["optimization_opportunities"][0]["category"] == "Grocery Stores"


def test_analytics_with_inline_empty_history(client) -> None:
    response = client.post("/analytics", json={"transactions": []})

    assert response.status_code == 200
    assert response.json()["optimization_rate"] == 100


def test_category_lookup(client) -> None:
    response = client.get(f"/api/categories/{GROCERY}")

    assert response.status_code == 200
    assert response.json() == {"category": "Grocery Stores", "description": "Supermarkets", "code": GROCERY}


def test_unknown_category_lookup_is_not_found(client) -> None:
    assert client.get("/api/categories/0000").status_code == 404


def test_recommend_infinite_amount_is_bad_request(client) -> None:
    response = client.post(
        "/recommend",
        content='{"category_code": "5411", "amount": Infinity}',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
