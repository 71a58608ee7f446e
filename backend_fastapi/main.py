import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from backend_fastapi.api.routes.tasks import router as tasks_router
from core.domain.errors import NotFoundError, RepositoryError, ValidationError
from infrastructure.config import Settings
from infrastructure.container import Container

logger = logging.getLogger(__name__)


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def register_error_handlers(app: FastAPI) -> None:
    """Traduce los errores de dominio a códigos HTTP por tipo."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Body o path mal formados: 400 en lugar del 422 por defecto.
        errors = exc.errors()
        detail = errors[0].get("msg", "invalid request") if errors else "invalid request"
        return _error(status.HTTP_400_BAD_REQUEST, f"invalid request: {detail}")

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(RepositoryError)
    async def repository_handler(request: Request, exc: RepositoryError) -> JSONResponse:
        logger.error(f"{request.method} {request.url.path} -> 500: {exc}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


def create_app(
    container: Container | None = None, settings: Settings | None = None
) -> FastAPI:
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if getattr(app.state, "container", None) is None:
            app.state.container = Container.from_settings(settings)
        logger.info("Tasks API lista")
        yield

    app = FastAPI(title="Tasks API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=list(settings.cors_allow_methods),
        allow_headers=list(settings.cors_allow_headers),
    )

    register_error_handlers(app)
    app.include_router(tasks_router)

    @app.get("/health", response_class=PlainTextResponse, tags=["health"])
    def health() -> str:
        return "OK"

    return app


app = create_app()
