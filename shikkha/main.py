import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import models  # noqa: F401 - registers tables on Base
from .config import APP_NAME, LOG_LEVEL, MailSettings
from .database import Base, engine
from .domain.about_us import router as about_us_router
from .email_service import EmailService
from .email_transport import EmailTransport, SMTPTransport
from .logger import configure_logging, error_logger
from .routes.support import router as support_router
from .shared.responses import send_response

logger = logging.getLogger(__name__)


async def check_email_server(transport: EmailTransport) -> None:
    """Run the advisory SMTP check off the event loop; transports without one are skipped"""
    verify = getattr(transport, "verify", None)
    if verify is None:
        return
    await asyncio.to_thread(verify)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Failed to create database tables: {e}")

    # Startup does not wait for the SMTP server
    app.state.email_check = None
    email_service = app.state.email_service
    if not email_service.settings.is_test:
        app.state.email_check = asyncio.create_task(check_email_server(email_service.transport))

    yield

    if app.state.email_check is not None and not app.state.email_check.done():
        app.state.email_check.cancel()
    logger.info("Application shutting down...")


def create_app(
    settings: Optional[MailSettings] = None,
    transport: Optional[EmailTransport] = None,
) -> FastAPI:
    """Wire the transport, email service and routers into a FastAPI app"""
    configure_logging(LOG_LEVEL)

    settings = settings or MailSettings.from_env()
    transport = transport or SMTPTransport(settings, verify_on_start=False)

    app = FastAPI(title=f"{APP_NAME} API", version="1.0.0", lifespan=lifespan)
    app.state.email_service = EmailService(transport, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return send_response(message=str(exc.detail), code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
        return send_response(message="Validation error", data=exc.errors(), code=422)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        error_logger.error(f"❌ Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return send_response(message="Internal server error", code=500)

    app.include_router(about_us_router)
    app.include_router(support_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
