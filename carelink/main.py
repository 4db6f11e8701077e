import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from prometheus_client import make_asgi_app
from starlette.middleware.base import BaseHTTPMiddleware

from carelink.api.responses import register_exception_handlers
from carelink.application.dispatch import BestEffortDispatcher
from carelink.core.config import settings
from carelink.core.observability import (
    get_logger,
    set_correlation_id,
    set_user_id,
    setup_structured_logging,
)
from carelink.infrastructure.database.engine import create_db_engine, init_db
from carelink.infrastructure.external import (
    HttpNotificationGateway,
    LogOnlyNotificationGateway,
)
from carelink.infrastructure.security import PasslibPasswordHasher

logger = get_logger(__name__)


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Binds the caller's correlation and user IDs to the request context."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(
            request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        )

        # Set by the upstream auth gateway
        user_id = request.headers.get("X-User-ID", "")
        if user_id:
            set_user_id(user_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


def create_app(database_url: str | None = None) -> FastAPI:
    """
    Build the application with its shared services.

    The engine, password hasher, notification gateway and best-effort
    dispatcher are created at startup and kept on ``app.state`` for the
    route layer to hand to use cases.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Starting application", environment=settings.ENVIRONMENT)

        engine = create_db_engine(database_url)
        init_db(engine)
        app.state.engine = engine
        app.state.password_hasher = PasslibPasswordHasher()
        app.state.dispatcher = BestEffortDispatcher()
        if settings.notifications_enabled:
            app.state.notifications = HttpNotificationGateway.from_settings()
        else:
            logger.warning("NOTIFICATION_BASE_URL not set, notifications are logged only")
            app.state.notifications = LogOnlyNotificationGateway()

        try:
            yield
        finally:
            logger.info("Shutting down application")
            await app.state.dispatcher.drain()
            if isinstance(app.state.notifications, HttpNotificationGateway):
                await app.state.notifications.close()
            engine.dispose()

    setup_structured_logging()

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)
    app.add_middleware(CorrelationMiddleware)
    register_exception_handlers(app)
    app.mount("/metrics", make_asgi_app())
    return app
