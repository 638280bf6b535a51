"""
Liberation War Digital Archive

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from museum_archive.api.deps import get_request_id
from museum_archive.api.middleware.request_id import RequestIdMiddleware
from museum_archive.api.v1 import router as api_v1_router
from museum_archive.config import Settings, get_settings
from museum_archive.database import build_session_maker, close_db, engine_from_settings, init_db
from museum_archive.kernel.identity.auth_service import AuthService
from museum_archive.kernel.identity.jwt import JWTManager
from museum_archive.kernel.identity.password import PasswordHasher
from museum_archive.kernel.identity.registry import IdentityRegistry
from museum_archive.kernel.identity.storage import SqlSessionStorage
from museum_archive.kernel.store.archive_store import ArchiveStore
from museum_archive.kernel.store.errors import (
    ArchiveError,
    CompetitionClosedError,
    CompetitionFullError,
    CompetitionNotFoundError,
    DuplicateSubmissionError,
)
from museum_archive.kernel.store.seed import build_seeded_store
from museum_archive.logging_config import configure_logging, get_logger
from museum_archive.schemas.common import ErrorResponse, HealthResponse

logger = get_logger(__name__)

# Store constraint errors and the status each maps to
ARCHIVE_ERROR_STATUS = {
    CompetitionNotFoundError: status.HTTP_404_NOT_FOUND,
    CompetitionClosedError: status.HTTP_400_BAD_REQUEST,
    CompetitionFullError: status.HTTP_409_CONFLICT,
    DuplicateSubmissionError: status.HTTP_409_CONFLICT,
}


def _validation_errors(errors) -> list:
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ArchiveStore] = None,
    auth: Optional[AuthService] = None,
) -> FastAPI:
    """
    Build the application.

    The archive store and auth service are created at startup unless
    passed in; whatever is used is shared by every request through
    app.state.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator:
        configure_logging(
            log_level=settings.log_level,
            environment=settings.environment,
            debug=settings.debug,
        )
        logger.info("Starting %s v%s", settings.project_name, settings.version)

        if app.state.store is None:
            app.state.store = build_seeded_store() if settings.seed_data else ArchiveStore()

        engine = None
        if app.state.auth is None:
            engine = engine_from_settings(settings)
            await init_db(engine)
            logger.info("Session database initialized")

            registry = IdentityRegistry.from_seed(
                settings.demo_password,
                PasswordHasher(rounds=settings.bcrypt_rounds),
            )
            app.state.auth = AuthService(
                registry,
                SqlSessionStorage(build_session_maker(engine)),
                jwt_manager=JWTManager(
                    settings.secret_key,
                    settings.algorithm,
                    settings.access_token_expire_minutes,
                ),
                storage_key=settings.session_storage_key,
                login_delay=settings.login_delay_seconds,
            )
            await app.state.auth.restore()

        yield

        logger.info("Shutting down...")
        if engine is not None:
            await close_db(engine)
            logger.info("Database connections closed")

    app = FastAPI(
        title=settings.project_name,
        description="""
    Liberation War Digital Archive

    Catalog of artifacts, exhibitions, competitions, news and events of the
    1971 Liberation War, with a role-gated back office.

    ## Roles

    public < researcher < curator < archivist < super_admin. The back
    office requires archivist; the staff directory requires super_admin.
    """,
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.store = store
    app.state.auth = auth

    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",  # Vite default
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _request_headers(request: Request) -> dict:
        req_id = get_request_id(request)
        return {"X-Request-ID": req_id} if req_id else {}

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        headers = {**_request_headers(request), **(exc.headers or {})}
        content = {"detail": exc.detail}
        if exc.status_code >= 500:
            content["request_id"] = get_request_id(request)
        return JSONResponse(status_code=exc.status_code, content=content, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": "Validation error", "errors": _validation_errors(exc.errors())},
            headers=_request_headers(request),
        )

    @app.exception_handler(ValidationError)
    async def model_validation_handler(request: Request, exc: ValidationError):
        """A patch that would leave an entity invalid (e.g. end before start)."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": "Validation error", "errors": _validation_errors(exc.errors())},
            headers=_request_headers(request),
        )

    @app.exception_handler(ArchiveError)
    async def archive_error_handler(request: Request, exc: ArchiveError):
        status_code = ARCHIVE_ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        logger.info(
            "Archive constraint rejected request",
            extra={"error": type(exc).__name__, "path": request.url.path},
        )
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(detail=str(exc), code=type(exc).__name__).model_dump(exclude_none=True),
            headers=_request_headers(request),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception("Unhandled exception: %s", exc)
        req_id = get_request_id(request)
        if settings.debug:
            content = {"detail": str(exc), "type": type(exc).__name__, "request_id": req_id}
        else:
            content = {"detail": "Internal server error", "request_id": req_id}
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=content,
            headers=_request_headers(request),
        )

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check(request: Request):
        """Check application health."""
        auth_service = request.app.state.auth
        if auth_service is None or auth_service.is_loading:
            session = "loading"
        elif auth_service.current_user is not None:
            session = "authenticated"
        else:
            session = "anonymous"
        return HealthResponse(status="ok", version=settings.version, session=session)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.project_name,
            "version": settings.version,
            "docs": "/docs" if settings.debug else "disabled",
            "api": {
                "v1": settings.api_v1_prefix,
            },
        }

    app.include_router(api_v1_router, prefix=settings.api_v1_prefix)
    return app


app = create_app()


# Main entry point for development
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "museum_archive.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
