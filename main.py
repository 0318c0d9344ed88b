import argparse

from cardpick.api.app import run as run_api
from cardpick.api.deps import get_orchestrator
from cardpick.config import settings
from cardpick.domain.errors import CardPickError
from cardpick.domain.models import PrimaryGoal
from cardpick.logconfig import configure_logging
from cardpick.presentation.reasoning import render_recommendation
from cardpick.schemas.requests import AnalyzeRequest, RecommendRequest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CardPick unified entrypoint")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["api", "recommend", "analyze"],
        default="api",
        help="Run mode: api (default), recommend, analyze",
    )
    parser.add_argument("--category", help="Merchant category code of the purchase")
    parser.add_argument("--amount", type=float, help="Purchase amount")
    parser.add_argument("--goal", choices=[goal.value for goal in PrimaryGoal], help="Primary reward goal")
    parser.add_argument("--user-id", help="Restrict cards and transactions to one user")
    parser.add_argument("--json", action="store_true", help="Print the recommendation as JSON")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.mode == "api":
        run_api()
        return

    configure_logging(settings.log_level)
    orchestrator = get_orchestrator()

    if args.mode == "recommend":
        if args.category is None or args.amount is None:
            parser.error("recommend requires --category and --amount")
        request = RecommendRequest(
            category_code=args.category,
            amount=args.amount,
            primary_goal=args.goal,
            user_id=args.user_id,
        )
        try:
            result = orchestrator.recommend(request)
        except CardPickError as exc:
            parser.exit(1, f"error: {exc}\n")
        if args.json:
            print(result.model_dump_json(indent=2, exclude={"ranked_cards"}))
        else:
            print(render_recommendation(result))
        return

    analysis = orchestrator.analyze(AnalyzeRequest(user_id=args.user_id))
    print(analysis.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
