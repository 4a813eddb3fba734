"""
FastAPI application for the disaster alert hub.

Run with:
    uvicorn alerthub.app.main:app --reload --port 5000

Or through the installed console script, which reads HOST/PORT/WORKERS:
    alerthub
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from alerthub.app.api.v1 import (
    alerts,
    emergency,
    emergency_contacts,
    health,
    reference,
    safety_guides,
    settings as settings_routes,
)
from alerthub.app.core import database
from alerthub.app.core.config import settings
from alerthub.app.core.errors import register_error_handlers
from alerthub.app.core.logging_config import get_logger, setup_logging
from alerthub.app.core.middleware import RequestLoggingMiddleware
from alerthub.app.seed import seed_default_data

setup_logging()
logger = get_logger(__name__)

ROUTERS = (
    health.router,
    alerts.router,
    safety_guides.router,
    emergency_contacts.router,
    settings_routes.router,
    emergency.router,
    reference.router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the schema and default data, then release the pool on exit."""
    logger.info(
        "Starting %s v%s (%s)", settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT,
    )
    if settings.CREATE_TABLES_ON_STARTUP:
        await database.init_db(database.engine)
    if settings.SEED_DEFAULT_DATA:
        async with database.async_session_factory() as session:
            await seed_default_data(session)
    try:
        yield
    finally:
        await database.close_db(database.engine)
        logger.info("%s stopped", settings.APP_NAME)


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=(
            "Active hazard alerts ranked by severity, safety guides, emergency "
            "contacts and user preferences for a single region."
        ),
        lifespan=lifespan,
    )

    # Added last runs outermost: request logging wraps CORS.
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.CORS_ALLOW_ALL else settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestLoggingMiddleware)

    register_error_handlers(application)
    for router in ROUTERS:
        application.include_router(router)
    return application


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn using the configured host/port."""
    import uvicorn

    uvicorn.run(
        "alerthub.app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        workers=settings.WORKERS,
        reload=settings.RELOAD,
        log_config=None,
    )


if __name__ == "__main__":
    run()
