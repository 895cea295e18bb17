import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.endpoints import router
from app.core.config import settings
from app.core.tracing import instrument_app, setup_tracing, shutdown_tracing
from app.shared.correlation import CorrelationMiddleware
from app.shared.errors import register_exception_handlers
from app.shared.logging_config import setup_logging

logger = logging.getLogger("MindJournal.Startup")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_tracing(settings.SERVICE_NAME)
    logger.info("MindJournal service started")
    yield
    shutdown_tracing()


def create_app() -> FastAPI:
    app = FastAPI(
        title="MindJournal Service",
        description="Journaling API with sentiment, themes, prompts and insights",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)
    app.include_router(router)
    instrument_app(app)
    return app


setup_logging(service_name=settings.SERVICE_NAME)
app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
