"""Endpoints de controle do grupo.

Todos GET com parâmetros na query string. Respostas em texto puro,
exceto a listagem de membros (array JSON).
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from api.dependencies import ListMembersDep, SendContactCardDep, UpdateParticipantsDep
from api.isolation import IsolatedRoute
from app.domain.group import ParticipantAction, ParticipantChangeRequest
from app.use_cases.group import VALIDATION_ERROR, GroupOperationResult

router = APIRouter(route_class=IsolatedRoute)

MISSING_PHONE = "Missing phone parameter"
MISSING_NAME_OR_PHONE = "Missing name or phone parameter"


@router.get("/members")
async def list_members(
    use_case: ListMembersDep,
) -> Response:
    """Lista a parte `user` de cada participante, na ordem do colaborador."""
    result = await use_case.execute()
    if not result.success:
        return _failure(result, "Failed to get group info: ")
    return JSONResponse(content=result.members)


@router.get("/add")
async def add_member(
    use_case: UpdateParticipantsDep,
    phone: str = "",
) -> Response:
    result = await use_case.execute(ParticipantChangeRequest(phone, ParticipantAction.ADD))
    if not result.success:
        return _failure(result, "Failed to add member: ", MISSING_PHONE)
    return PlainTextResponse("Member added")


@router.get("/remove")
async def remove_member(
    use_case: UpdateParticipantsDep,
    phone: str = "",
) -> Response:
    result = await use_case.execute(ParticipantChangeRequest(phone, ParticipantAction.REMOVE))
    if not result.success:
        return _failure(result, "Failed to remove member: ", MISSING_PHONE)
    return PlainTextResponse("Member removed")


@router.get("/send_contact")
async def send_contact(
    use_case: SendContactCardDep,
    name: str = "",
    phone: str = "",
) -> Response:
    """Envia um cartão de contato (vCard) ao grupo."""
    result = await use_case.execute(name, phone)
    if not result.success:
        return _failure(result, "Failed to send contact: ", MISSING_NAME_OR_PHONE)
    return PlainTextResponse("Contact sent")


def _failure(
    result: GroupOperationResult,
    provider_prefix: str,
    validation_body: str = "",
) -> PlainTextResponse:
    if result.error_code == VALIDATION_ERROR:
        return PlainTextResponse(validation_body, status_code=400)
    return PlainTextResponse(f"{provider_prefix}{result.error_message}", status_code=500)
