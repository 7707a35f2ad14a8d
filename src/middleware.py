import json
import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from .logging_config import get_logger
from .logging_utils import log_api_request
from .metrics import record_http_request
from .request_utils import is_json_request

logger = get_logger(__name__)

UNMATCHED_ROUTE_LABEL = "unmatched"


def route_label(request: Request) -> str:
    """Route template for metric labels, so each route is one series.

    The raw path is never used: the catch-all accepts any path and would
    create a new series per request.
    """
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE_LABEL


async def log_requests_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Middleware to log all HTTP requests with timing information.

    Args:
        request: FastAPI request object
        call_next: Next middleware/route handler in the chain

    Returns:
        Response from the route handler
    """
    start_time = time.perf_counter()

    response = await call_next(request)

    duration = time.perf_counter() - start_time

    log_api_request(
        request=request,
        response_status=response.status_code,
        process_time_ms=duration * 1000,
    )
    record_http_request(
        request.method, route_label(request), response.status_code, duration
    )

    return response


async def parse_json_body_middleware(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Parse JSON request bodies once and attach them to ``request.state``.

    Only objects and arrays are accepted at the top level. Anything that is
    not valid JSON short-circuits with a 400 response; every other request
    continues down the chain with ``request.state.json_body`` set (None when
    there is no JSON body).
    """
    request.state.json_body = None

    if is_json_request(request):
        raw_body = await request.body()
        if raw_body:
            try:
                parsed = json.loads(raw_body)
            except ValueError as e:
                return _malformed_body_response(request, str(e))

            if not isinstance(parsed, dict | list):
                return _malformed_body_response(
                    request, "Top-level JSON value must be an object or an array"
                )

            request.state.json_body = parsed

    return await call_next(request)


def _malformed_body_response(request: Request, detail: str) -> JSONResponse:
    logger.warning(
        "Malformed JSON body",
        error_message=detail,
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Malformed JSON body", "detail": detail},
    )
