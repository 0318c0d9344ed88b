import logging
from datetime import datetime, timezone
from pathlib import Path

from cardpick.domain.models import Transaction
from cardpick.repository._json import read_json_list

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _sort_key(txn: Transaction) -> datetime:
    if txn.timestamp is None:
        return _EPOCH
    if txn.timestamp.tzinfo is None:
        return txn.timestamp.replace(tzinfo=timezone.utc)
    return txn.timestamp


class TransactionStore:
    def __init__(self, transaction_file: str):
        self.transaction_file = Path(transaction_file)

    def load_transactions(self, user_id: str | None = None) -> list[Transaction]:
        """Load transaction history, newest first."""
        transactions = [Transaction.model_validate(item) for item in read_json_list(self.transaction_file)]
        if user_id is not None:
            transactions = [txn for txn in transactions if txn.user_id == user_id]

        transactions.sort(key=_sort_key, reverse=True)
        logger.info("Loaded %d transaction(s) from %s", len(transactions), self.transaction_file)
        return transactions
