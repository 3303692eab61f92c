"""Q&A API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly
    - Global error handlers map QAError → structured JSON responses
    - CORS configured from settings
    - Database initialized on startup and disposed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qa_api.api.error_handlers import register_error_handlers
from qa_api.api.routes import answer, health, question
from qa_api.config import get_settings
from qa_api.infrastructure.database import close_db, init_db
from qa_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Q&A API started")
    yield
    await close_db()
    logger.info("Q&A API shutting down")


app = FastAPI(title="Q&A API", version="0.1.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["POST", "GET", "PATCH", "OPTIONS", "DELETE"],
    allow_headers=["*"],
    allow_credentials=True,
)

app.include_router(health.router)
app.include_router(question.router)
app.include_router(answer.router)

register_error_handlers(app)
