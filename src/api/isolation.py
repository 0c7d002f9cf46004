"""Isolamento de falhas por requisição.

`IsolatedRoute` envolve cada handler: qualquer exceção inesperada vira
`500 Internal server error` para aquela requisição apenas, e o
processo continua servindo as demais.

Uso:
    router = APIRouter(route_class=IsolatedRoute)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute
from starlette.exceptions import HTTPException

from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Request, Response

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = "Internal server error"


class IsolatedRoute(APIRoute):
    """APIRoute com correlation_id e contenção de falhas do handler."""

    def get_route_handler(self) -> Callable[[Request], Awaitable[Response]]:
        original_handler = super().get_route_handler()

        async def isolated_handler(request: Request) -> Response:
            token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
            try:
                response = await original_handler(request)
            except (HTTPException, RequestValidationError):
                raise
            except Exception as exc:
                logger.exception(
                    "handler_fault",
                    extra={
                        "path": request.url.path,
                        "method": request.method,
                        "error_type": type(exc).__name__,
                    },
                )
                response = PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)
            finally:
                correlation_id = get_correlation_id()
                reset_correlation_id(token)

            response.headers[CORRELATION_HEADER] = correlation_id
            return response

        return isolated_handler
