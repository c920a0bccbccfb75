"""
Voice Notes API.

Entry point for the audio summarize service.

Run with:
    voice-notes-api
    uvicorn voice_notes.main:create_app --factory  # dev server
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from voice_notes import __version__
from voice_notes.config import AppConfig, load_config
from voice_notes.dependencies import Services, build_services
from voice_notes.exceptions import AuthError, UploadError
from voice_notes.handlers.summarize_handler import PROCESSING_ERROR_MESSAGE
from voice_notes.logging import setup_logging
from voice_notes.routes import health_router, summarize_router

logger = setup_logging()


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
        return JSONResponse(status_code=401, content={"error": exc.message})

    @app.exception_handler(UploadError)
    async def upload_error_handler(request: Request, exc: UploadError) -> JSONResponse:
        logger.info("Upload rejected", extra={"error": exc.message})
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        messages = [str(error.get("msg", "")) for error in exc.errors()]
        return JSONResponse(
            status_code=400,
            content={"error": "; ".join(messages) or "Malformed request"},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        # Log full exception server-side, return generic message to client
        logger.exception("Unexpected error while handling request")
        return JSONResponse(
            status_code=500,
            content={"error": PROCESSING_ERROR_MESSAGE, "details": "Internal server error"},
        )


def create_app(config: AppConfig | None = None, services: Services | None = None) -> FastAPI:
    """
    Builds the FastAPI application.

    Args:
        config: Application configuration; loaded from the environment if omitted.
        services: Pre-built services; production clients are built if omitted.

    Returns:
        The configured application.
    """
    config = config or load_config()
    services = services or build_services(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        services.store.ensure_directory_exists()
        yield

    app = FastAPI(title="Voice Notes API", version=__version__, lifespan=lifespan)
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.allowed_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Authorization"],
        allow_credentials=True,
    )

    _register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(summarize_router)

    return app


def run():
    """Starts the HTTP server with tracing enabled."""
    import uvicorn
    from ddtrace import patch_all

    patch_all()

    config = load_config()
    logger.info(
        "Server starting",
        extra={"host": config.server.host, "port": config.server.port},
    )
    uvicorn.run(
        "voice_notes.main:create_app",
        factory=True,
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
