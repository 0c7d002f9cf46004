"""Use case de listagem dos membros do grupo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import measure_latency
from app.use_cases.group.result import GroupOperationResult
from utils.errors import MessagingProviderError

if TYPE_CHECKING:
    from app.domain.jid import Jid
    from app.protocols.messaging_client import MessagingClientProtocol

logger = logging.getLogger(__name__)


class ListGroupMembersUseCase:
    """Retorna a parte `user` de cada participante, na ordem do colaborador."""

    def __init__(self, client: MessagingClientProtocol, group_jid: Jid) -> None:
        self._client = client
        self._group_jid = group_jid

    async def execute(self) -> GroupOperationResult:
        try:
            with measure_latency("group_members", "get_group_info"):
                info = await self._client.get_group_info(self._group_jid)
        except MessagingProviderError as exc:
            logger.warning("group_info_failed", extra={"error": str(exc)})
            return GroupOperationResult.provider_error(str(exc))

        members = info.member_users
        logger.debug("group_members_listed", extra={"member_count": len(members)})
        return GroupOperationResult.ok(members=members)
