"""Endpoints de health check e readiness."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from api.dependencies import SessionDep
from api.isolation import IsolatedRoute

router = APIRouter(route_class=IsolatedRoute)


class ReadinessResponse(BaseModel):
    """Resposta do readiness probe."""

    status: str
    connection_state: str
    connected: bool
    timestamp: str


@router.get("/health", response_class=PlainTextResponse)
async def health_check(session: SessionDep) -> PlainTextResponse:
    """Reflete o estado vivo do socket de mensageria."""
    if session.is_connected():
        return PlainTextResponse("Connected")
    return PlainTextResponse("Not connected", status_code=503)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(session: SessionDep) -> JSONResponse:
    """Readiness probe em JSON para orquestradores."""
    connected = session.is_connected()
    payload = ReadinessResponse(
        status="ready" if connected else "not_ready",
        connection_state=str(session.state),
        connected=connected,
        timestamp=datetime.now(UTC).isoformat(),
    )
    return JSONResponse(content=payload.model_dump(), status_code=200 if connected else 503)
