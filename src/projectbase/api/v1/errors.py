"""Error rendering for the external REST API.

Third-party callers get ``{"error": message}`` bodies instead of the
``detail``/``code`` shape used by the dashboard procedures.
"""

from collections.abc import Callable, Coroutine
from typing import Any

from fastapi import HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from src.projectbase.core.exceptions import AppError
from src.projectbase.core.logging import get_logger

logger = get_logger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return f"{location}: {message}" if location else message


class RestErrorRoute(APIRoute):
    """Route class that renders every failure as ``{"error": message}``.

    Explicit HTTP statuses are kept, body validation failures become 400
    and anything unexpected becomes 500 carrying the exception message.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def rest_route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except HTTPException as exc:
                return JSONResponse(
                    status_code=exc.status_code,
                    content={"error": exc.detail},
                    headers=exc.headers,
                )
            except RequestValidationError as exc:
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content={"error": _validation_message(exc)},
                )
            except AppError as exc:
                return JSONResponse(
                    status_code=exc.status_code,
                    content={"error": exc.message},
                )
            except Exception as exc:
                logger.exception("REST request failed", path=request.url.path, exc_info=exc)
                return JSONResponse(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    content={"error": str(exc) or "Internal server error"},
                )

        return rest_route_handler
