"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lexicard.config import configure_logging, get_settings
from lexicard.core import container
from lexicard.domain.common.exceptions import DomainError
from lexicard.exceptions import LexicardError
from lexicard.infrastructure.learning.routers import answers, translations, words

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        redis_enabled=settings.redis_enabled,
        thesaurus_enabled=settings.thesaurus_enabled,
    )
    yield

    await container.translation_http_client().aclose()
    await container.thesaurus_http_client().aclose()
    durable_cache = container.durable_cache()
    if durable_cache is not None:
        await durable_cache.close()
    container.reset_singletons()
    logger.info("application_stopped")


async def lexicard_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, LexicardError)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, DomainError)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LexicardError, lexicard_error_handler)
    app.add_exception_handler(DomainError, domain_error_handler)

    api_router = APIRouter(prefix=settings.API_V1_PREFIX)

    @api_router.get("/")
    async def api_root() -> dict[str, str]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    api_router.include_router(words.router)
    api_router.include_router(answers.router)
    api_router.include_router(translations.router)
    app.include_router(api_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
