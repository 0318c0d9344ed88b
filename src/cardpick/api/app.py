import uvicorn
from fastapi import FastAPI

from cardpick.api.routes.analytics import router as analytics_router
from cardpick.api.routes.categories import router as categories_router
from cardpick.api.routes.health import VERSION
from cardpick.api.routes.health import router as health_router
from cardpick.api.routes.recommend import router as recommend_router
from cardpick.config import settings
from cardpick.logconfig import configure_logging

app = FastAPI(title="CardPick API", version=VERSION)
app.include_router(health_router)
app.include_router(recommend_router)
app.include_router(analytics_router)
app.include_router(categories_router)


def run() -> None:
    configure_logging(settings.log_level)
    uvicorn.run("cardpick.api.app:app", host=settings.app_host, port=settings.app_port, reload=False)
