"""Dependências FastAPI resolvidas a partir de `app.state`.

`create_app()` publica a sessão e o grupo em `app.state`; as rotas
recebem use cases montados por requisição sobre o handle compartilhado.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.domain.jid import Jid
from app.sessions import SessionManager
from app.use_cases.group import (
    ListGroupMembersUseCase,
    SendContactCardUseCase,
    UpdateGroupParticipantsUseCase,
)


def get_session(request: Request) -> SessionManager:
    return request.app.state.session


def get_group_jid(request: Request) -> Jid:
    return request.app.state.group_jid


SessionDep = Annotated[SessionManager, Depends(get_session)]
GroupJidDep = Annotated[Jid, Depends(get_group_jid)]


def get_list_members_use_case(
    session: SessionDep,
    group_jid: GroupJidDep,
) -> ListGroupMembersUseCase:
    return ListGroupMembersUseCase(session.client, group_jid)


def get_update_participants_use_case(
    session: SessionDep,
    group_jid: GroupJidDep,
) -> UpdateGroupParticipantsUseCase:
    return UpdateGroupParticipantsUseCase(session.client, group_jid)


def get_send_contact_card_use_case(
    session: SessionDep,
    group_jid: GroupJidDep,
) -> SendContactCardUseCase:
    return SendContactCardUseCase(session.client, group_jid)


ListMembersDep = Annotated[ListGroupMembersUseCase, Depends(get_list_members_use_case)]
UpdateParticipantsDep = Annotated[
    UpdateGroupParticipantsUseCase,
    Depends(get_update_participants_use_case),
]
SendContactCardDep = Annotated[SendContactCardUseCase, Depends(get_send_contact_card_use_case)]
