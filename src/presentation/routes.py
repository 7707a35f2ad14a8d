"""Routes owned by the service itself: greeting page, health check, catch-all.

The page and the health check live on their own routers so the application
can register them around the /user sub-router in a fixed order. The
catch-all must always be registered last.
"""

from typing import Final

from fastapi import APIRouter
from fastapi.responses import HTMLResponse, PlainTextResponse

from ..constants import GREETING_PAGE, HEALTHY_MESSAGE, NO_SUCH_ROUTE_MESSAGE

CATCH_ALL_PATH: Final = "/{path:path}"

page_router: Final = APIRouter(tags=["pages"])
health_router: Final = APIRouter(tags=["health"])


@page_router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def read_root() -> str:
    return GREETING_PAGE


@health_router.api_route(
    "/health", methods=["GET", "HEAD"], response_class=PlainTextResponse
)
async def health() -> str:
    """Liveness probe for the load balancer. Never checks dependencies."""
    return HEALTHY_MESSAGE


# A bare ASGI app rather than a function endpoint, so Starlette applies no
# method filter and every method (TRACE, PROPFIND, ...) matches. Unmatched
# routes answer 200 so that probes treating any 200 as "server up" keep
# working against arbitrary paths.
no_such_route: Final = PlainTextResponse(NO_SUCH_ROUTE_MESSAGE)
