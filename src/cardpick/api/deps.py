from functools import lru_cache

from cardpick.agents.orchestrator import RewardsOrchestrator
from cardpick.config import settings
from cardpick.domain.catalog import CategoryCatalog
from cardpick.repository.card_store import CardStore
from cardpick.repository.category_catalog import JsonCategoryCatalog
from cardpick.repository.transaction_store import TransactionStore


@lru_cache
def get_catalog() -> CategoryCatalog:
    return JsonCategoryCatalog(settings.catalog_file)


@lru_cache
def get_orchestrator() -> RewardsOrchestrator:
    return RewardsOrchestrator(
        CardStore(settings.card_file),
        TransactionStore(settings.transaction_file),
        get_catalog(),
        settings,
    )
