"""FastAPI application for the shelter management API."""

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path

import fastapi
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from core.config import get_settings
from core.database import (
    create_all_tables,
    create_engine,
    create_session_maker,
    dispose_engine,
    init_db,
)
from core.logger import configure_logging
from core.middleware import RequestContextMiddleware, SecurityHeadersMiddleware
from core.ratelimit import limiter, rate_limit_exceeded_handler
from routes import (
    abrigos_router,
    admins_router,
    adotantes_router,
    enderecos_router,
    health_router,
    pets_router,
)
from schemas import ErrorEnvelope
from services.admin_service import InvalidCredentialsError
from services.crud_service import (
    PersistenceError,
    RecordConflictError,
    RecordNotFoundError,
)
from services.validation import FieldValidationError

configure_logging()
logger = logging.getLogger(__name__)


def _error_response(
    status_code: int,
    message: str,
    *,
    errors: list[str] | None = None,
    include_data: bool = False,
) -> JSONResponse:
    body = ErrorEnvelope(status_code=status_code, message=message, errors=errors)
    content = body.model_dump(by_alias=True, exclude_none=True)
    if include_data:
        content["data"] = None
    return JSONResponse(status_code=status_code, content=content)


async def field_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, FieldValidationError):
        return _error_response(500, "Erro inesperado.")

    logger.info(
        "request.field_validation_failed",
        extra={"path": request.url.path, "error_count": len(exc.errors)},
    )
    return _error_response(400, exc.message, errors=exc.errors)


async def persistence_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, PersistenceError):
        return _error_response(500, "Erro inesperado.")

    return _error_response(400, exc.message, errors=exc.errors)


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(404, str(exc), include_data=True)


async def conflict_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(409, str(exc))


async def invalid_credentials_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error_response(401, str(exc))


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handler for request body/parameter parsing errors."""
    if not isinstance(exc, RequestValidationError):
        return _error_response(500, "Erro inesperado.")

    logger.warning(
        "request.validation_error",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_count": len(exc.errors()),
        },
    )
    messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return _error_response(422, "Requisição inválida.", errors=messages)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unhandled exceptions."""
    logger.exception(
        "unhandled.exception",
        extra={
            "exc_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return _error_response(500, "Ocorreu um erro inesperado. Tente novamente.")


async def _run_alembic_migrations() -> None:
    """Run Alembic migrations in a subprocess so the sync driver stays off the loop."""
    import subprocess
    import sys

    cmd = [
        sys.executable,
        "-c",
        (
            "from alembic import command; "
            "from alembic.config import Config; "
            "command.upgrade(Config('alembic.ini'), 'head')"
        ),
    ]
    cwd = Path(__file__).parent

    result = await asyncio.to_thread(
        lambda: subprocess.run(
            cmd, cwd=cwd, capture_output=True, text=True, timeout=120
        )
    )

    if result.returncode != 0:
        stderr = result.stderr.strip()
        logger.error("migrations.failed", extra={"stderr": stderr})
        raise RuntimeError(f"Alembic migration failed:\n{stderr}")

    logger.info("migrations.complete")


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """Create DB engine at startup, dispose on shutdown."""
    settings = get_settings()
    app.state.engine = create_engine()
    app.state.session_maker = create_session_maker(app.state.engine)

    app.state.init_done = False
    app.state.init_error = None

    try:
        async with asyncio.timeout(60):
            await init_db(app.state.engine)
            # A SQLite file (or :memory:) is created in-process; a migration
            # subprocess would not see an in-memory database.
            if settings.is_sqlite:
                await create_all_tables(app.state.engine)
            elif settings.run_migrations_on_startup:
                await _run_alembic_migrations()
        app.state.init_done = True
        logger.info("init.complete")
    except TimeoutError:
        logger.error("init.timeout", extra={"hint": "Check DB connectivity"})
        raise RuntimeError("Application startup timed out")
    except Exception as e:
        app.state.init_error = str(e)
        logger.error("init.failed", extra={"error": str(e)}, exc_info=True)
        raise

    try:
        yield
    finally:
        await dispose_engine(app.state.engine)


_settings = get_settings()

app = fastapi.FastAPI(
    title="Abrigos API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if _settings.enable_docs or _settings.debug else None,
    redoc_url="/redoc" if _settings.enable_docs or _settings.debug else None,
    openapi_url=("/openapi.json" if _settings.enable_docs or _settings.debug else None),
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(FieldValidationError, field_validation_handler)
app.add_exception_handler(PersistenceError, persistence_error_handler)
app.add_exception_handler(RecordNotFoundError, not_found_handler)
app.add_exception_handler(RecordConflictError, conflict_handler)
app.add_exception_handler(InvalidCredentialsError, invalid_credentials_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# Middleware order: last added = outermost
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestContextMiddleware)

app.include_router(health_router)
app.include_router(abrigos_router)
app.include_router(enderecos_router)
app.include_router(adotantes_router)
app.include_router(pets_router)
app.include_router(admins_router)
