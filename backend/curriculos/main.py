"""FastAPI application factory with middleware, routers, and lifespan."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import build_api_router
from .config import settings, setup_logging
from .database.base import get_db, init_db
from .errors import CurriculoError
from .security.csrf import CsrfGuard

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'self'; script-src 'self'",
}

_startup_time: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown lifecycle."""
    global _startup_time
    _startup_time = time.time()

    init_db()

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Currículos API",
        version=VERSION,
        lifespan=lifespan,
    )

    app.state.csrf = CsrfGuard(
        settings.csrf_secret,
        enabled=settings.csrf_enabled,
        max_age=settings.csrf_token_max_age,
    )
    if not settings.csrf_enabled:
        logger.warning("Anti-forgery guard disabled: writes are accepted without a token")

    # --- Exception handlers ---
    @app.exception_handler(CurriculoError)
    async def curriculo_error_handler(request: Request, exc: CurriculoError):
        return JSONResponse(exc.to_dict(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            {"message": "Corpo da requisição inválido", "detail": jsonable_errors(exc)},
            status_code=400,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"message": exc.detail}, status_code=exc.status_code, headers=exc.headers)

    # Only reached when the security_headers middleware is disabled; otherwise
    # that middleware answers unhandled errors so they carry the headers too.
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        return _internal_error(request)

    # --- Middleware stack (LIFO: last added = outermost) ---

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    if settings.trusted_hosts_list != ["*"]:
        app.add_middleware(
            TrustedHostMiddleware,
            allowed_hosts=settings.trusted_hosts_list,
        )

    if settings.security_headers_enabled:

        @app.middleware("http")
        async def security_headers(request: Request, call_next):
            try:
                response = await call_next(request)
            except Exception:
                response = _internal_error(request)
            for name, value in SECURITY_HEADERS.items():
                response.headers[name] = value
            if request.url.scheme == "https":
                response.headers["Strict-Transport-Security"] = "max-age=63072000; includeSubDomains"
            return response

    # --- Routers ---
    app.include_router(build_api_router(settings.api_prefix))

    # --- Health check ---
    @app.get("/health")
    def health(db: Session = Depends(get_db)):
        db_status = "ok"
        try:
            db.execute(text("SELECT 1"))
        except Exception:
            logger.warning("Health check: database unreachable", exc_info=True)
            db_status = "unreachable"

        status = "ok" if db_status == "ok" else "degraded"
        uptime = round(time.time() - _startup_time, 1) if _startup_time else 0.0

        return {
            "status": status,
            "db": db_status,
            "version": VERSION,
            "uptime_seconds": uptime,
        }

    return app


def _internal_error(request: Request) -> JSONResponse:
    """Log the exception being handled and answer with a generic 500."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse({"message": "Erro interno do servidor"}, status_code=500)


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Validation errors reduced to JSON-safe location/message pairs."""
    return [{"loc": list(err.get("loc", ())), "msg": str(err.get("msg", ""))} for err in exc.errors()]


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    import uvicorn

    setup_logging()
    logger.info("Server listening on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
