import logging
from pathlib import Path

from cardpick.domain.models import Card
from cardpick.repository._json import read_json_list

logger = logging.getLogger(__name__)


class CardStore:
    def __init__(self, card_file: str):
        self.card_file = Path(card_file)

    def load_cards(self, user_id: str | None = None) -> list[Card]:
        cards = [Card.model_validate(item) for item in read_json_list(self.card_file)]
        if user_id is not None:
            cards = [card for card in cards if card.user_id == user_id]

        logger.info("Loaded %d card(s) from %s", len(cards), self.card_file)
        return cards
