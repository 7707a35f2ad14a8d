import socket
from contextlib import asynccontextmanager
from typing import Final

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError

from .config import settings
from .domain.exceptions import DomainError
from .logging_config import get_logger, setup_logging
from .logging_utils import log_server_listening, log_system_info
from .middleware import log_requests_middleware, parse_json_body_middleware
from .presentation.error_handlers import (
    handle_domain_error,
    handle_request_validation_error,
    handle_unexpected_error,
)
from .presentation.routes import (
    CATCH_ALL_PATH,
    health_router,
    no_such_route,
    page_router,
)
from .presentation.user_routes import user_router as default_user_router
from .telemetry import setup_telemetry

USER_PREFIX: Final = "/user"


@asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging()
    logger = get_logger(__name__)

    hostname = socket.gethostname()
    try:
        ip_addr = socket.gethostbyname(hostname)
    except OSError:
        ip_addr = "unknown"
    log_system_info(hostname, ip_addr, settings.debug)

    yield

    logger.info("Application shutdown completed")


def create_app(user_router: APIRouter | None = None) -> FastAPI:
    """Build the application and its routing table.

    Routes are matched in registration order and the first full match wins:
    greeting page, the /user sub-router, health check, then the catch-all.

    Args:
        user_router: Router mounted under /user. Defaults to the in-memory
            user directory.
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
        # The catch-all owns every path, including the ones FastAPI would
        # otherwise use for its generated docs
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    setup_telemetry(app)

    # Last added runs first: requests are logged even when the body parser
    # rejects them
    app.middleware("http")(parse_json_body_middleware)
    app.middleware("http")(log_requests_middleware)

    app.add_exception_handler(
        DomainError,
        handle_domain_error,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        RequestValidationError,
        handle_request_validation_error,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, handle_unexpected_error)

    if user_router is None:
        user_router = default_user_router

    app.include_router(page_router)
    app.include_router(user_router, prefix=USER_PREFIX)
    app.include_router(health_router)
    app.add_route(CATCH_ALL_PATH, no_such_route, include_in_schema=False)

    return app


app: Final = create_app()


class ListeningServer(uvicorn.Server):
    """uvicorn server that reports the address it actually bound."""

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        for server in self.servers:
            for sock in server.sockets:
                address = sock.getsockname()
                # Unix domain sockets report a path, not (host, port)
                if isinstance(address, tuple):
                    log_server_listening(address[1])


def serve() -> None:
    """Run the service with uvicorn on the configured host and port."""
    config = uvicorn.Config(app, host=settings.host, port=settings.port)
    ListeningServer(config).run()
