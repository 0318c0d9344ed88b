from cardpick.config import Settings
from cardpick.domain.catalog import CategoryCatalog
from cardpick.domain.models import Card, RecommendationResult, SpendingAnalysis, UserPreferences
from cardpick.engine.analyzer import analyze_spending_patterns
from cardpick.engine.selectors import select_optimal_card
from cardpick.repository.card_store import CardStore
from cardpick.repository.transaction_store import TransactionStore
from cardpick.schemas.requests import AnalyzeRequest, RecommendRequest


class RewardsOrchestrator:
    def __init__(
        self,
        card_store: CardStore,
        transaction_store: TransactionStore,
        catalog: CategoryCatalog,
        settings: Settings,
    ):
        self.card_store = card_store
        self.transaction_store = transaction_store
        self.catalog = catalog
        self.settings = settings

    def _cards(self, inline: list[Card] | None, user_id: str | None) -> list[Card]:
        if inline is not None:
            return inline
        return self.card_store.load_cards(user_id=user_id)

    def recommend(self, request: RecommendRequest) -> RecommendationResult:
        cards = self._cards(request.cards, request.user_id)
        return select_optimal_card(
            cards,
            request.category_code,
            request.amount,
            preferences=UserPreferences(primary_goal=request.primary_goal),
            catalog=self.catalog,
        )

    def analyze(self, request: AnalyzeRequest) -> SpendingAnalysis:
        cards = self._cards(request.cards, request.user_id)
        transactions = request.transactions
        if transactions is None:
            transactions = self.transaction_store.load_transactions(user_id=request.user_id)

        return analyze_spending_patterns(
            transactions,
            cards,
            catalog=self.catalog,
            baseline_rate=self.settings.assumed_baseline_rate,
            min_monthly_spend=self.settings.tip_min_monthly_spend,
            max_tip_categories=self.settings.tip_max_categories,
        )
