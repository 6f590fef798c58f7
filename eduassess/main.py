# eduassess/main.py
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eduassess import models  # noqa
from eduassess.api.endpoints import auth, dashboard, health, student
from eduassess.core.config import Settings, get_settings
from eduassess.core.errors import register_exception_handlers
from eduassess.core.logging_config import configure_logging
from eduassess.db.base import Base
from eduassess.db.seed import seed_categories
from eduassess.db.session import create_db_engine, create_session_factory

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.PROJECT_NAME)

    # database handle shared by request-scoped sessions (see db/deps.py)
    engine = create_db_engine(settings.DATABASE_URL)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.on_event("startup")
    def on_startup():
        Base.metadata.create_all(bind=engine)
        if settings.SEED_CATEGORIES:
            db = app.state.session_factory()
            try:
                seed_categories(db)
            finally:
                db.close()
        logger.info(f"{settings.PROJECT_NAME} started")

    @app.on_event("shutdown")
    def on_shutdown():
        engine.dispose()

    @app.get("/")
    def root():
        return {"status": f"{settings.PROJECT_NAME} API running"}

    app.include_router(auth.router, prefix="/api/auth")
    app.include_router(student.router, prefix="/api/student")
    app.include_router(dashboard.router, prefix="/api/dashboard")
    app.include_router(health.router, prefix="/health")

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
