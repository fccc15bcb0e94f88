from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from vibe30.core.config import settings
from vibe30.core.errors import register_error_handlers
from vibe30.core.logging import configure_logging, logger
from vibe30.api.router import api_router
from vibe30.db.session import engine
from vibe30.db.base import Base
from vibe30.db.items import init_items_db
from vibe30.services.seed import seed_demo
from vibe30.services.timer import TimerRegistry
import vibe30.db.models  # noqa: F401

def create_app() -> FastAPI:
    configure_logging(settings.ENV)
    app = FastAPI(title="Vibe-30", version="0.1.0")

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.state.timers = TimerRegistry()

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.on_event("startup")
    def _startup():
        # Ensure tables exist for dev-only convenience; in prod rely on alembic
        if settings.ENV == "dev":
            Base.metadata.create_all(bind=engine)
        if settings.ENV != "test":
            init_items_db()
        if settings.SEED_DEMO and settings.ENV == "dev":
            seed_demo()

    app.include_router(api_router)
    logger.info("app_started", env=settings.ENV)
    return app

app = create_app()
