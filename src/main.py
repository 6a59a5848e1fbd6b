import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError

from src.common.cors import permissive_cors_middleware
from src.common.exceptions import (
    KnownException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    database_exception_handler,
    known_exception_handler,
    resource_already_exists_handler,
    resource_not_found_handler,
    unexpected_exception_handler,
    validation_exception_handler,
    internal_error_response,
)
from src.common.opentelemetry import instrument_database, setup_opentelemetry
from src.config import get_settings
from src.healthcheck.router import router as health_router
from src.tasks.router import router as tasks_router
from src.tasks.store.backend import get_task_store_backend
from src.tasks.store.postgres.store import PostgresTaskStore

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.task_store = get_task_store_backend(settings)
    if settings.OTEL_ENABLED and isinstance(app.state.task_store, PostgresTaskStore):
        instrument_database(app.state.task_store.engine)
    logger.info("Task store ready")
    yield
    app.state.task_store.close()


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **internal_error_response,
    },
    version=settings.API_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings.OTEL_SERVICE_NAME, app)

app.middleware("http")(permissive_cors_middleware)

app.exception_handler(RequestValidationError)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(ResourceAlreadyExistsException)(resource_already_exists_handler)
app.exception_handler(KnownException)(known_exception_handler)
app.exception_handler(SQLAlchemyError)(database_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router)
