from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .ledger import LedgerStore
from .logger import get_logger
from .routers import categories as categories_router
from .routers import expenses as expenses_router
from .routers import summary as summary_router


logger = get_logger(__name__)


def create_app(ledger: Optional[LedgerStore] = None) -> FastAPI:
    app = FastAPI(title="Budget Ledger – Backend", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ledger is None:
        ledger = LedgerStore.with_mock_data() if settings.seed_mock_data else LedgerStore()
    app.state.ledger = ledger
    logger.info(
        "Ledger ready (%s): %d categories, %d expenses",
        settings.environment,
        len(ledger.fetch_categories()),
        len(ledger.fetch_expenses()),
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(categories_router.router, prefix=settings.api_prefix)
    app.include_router(expenses_router.router, prefix=settings.api_prefix)
    app.include_router(summary_router.router, prefix=settings.api_prefix)

    return app


app = create_app()
