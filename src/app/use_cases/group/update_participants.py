"""Use case para inclusão/remoção de participantes do grupo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.jid import participant_jid
from app.observability import hash_phone, measure_latency
from app.protocols.validator import ValidationError, require_non_empty
from app.use_cases.group.result import GroupOperationResult
from utils.errors import MessagingProviderError

if TYPE_CHECKING:
    from app.domain.group import ParticipantChangeRequest
    from app.domain.jid import Jid
    from app.protocols.messaging_client import MessagingClientProtocol

logger = logging.getLogger(__name__)


class UpdateGroupParticipantsUseCase:
    """Valida o telefone e repassa add/remove ao colaborador.

    Nenhuma pré-checagem de pertencimento: adicionar quem já está no
    grupo (ou remover quem não está) é resolvido pelo colaborador.
    """

    def __init__(self, client: MessagingClientProtocol, group_jid: Jid) -> None:
        self._client = client
        self._group_jid = group_jid

    async def execute(self, request: ParticipantChangeRequest) -> GroupOperationResult:
        try:
            phone_number = require_non_empty(request.phone_number, "phone")
        except ValidationError as exc:
            return GroupOperationResult.validation_error(str(exc))

        participant = participant_jid(phone_number)
        log_extra = {"action": str(request.action), "phone_hash": hash_phone(phone_number)}

        try:
            with measure_latency("group_participants", "update_group_participants"):
                await self._client.update_group_participants(
                    self._group_jid,
                    [participant],
                    request.action,
                )
        except MessagingProviderError as exc:
            logger.warning(
                "group_participants_update_failed",
                extra={**log_extra, "error": str(exc)},
            )
            return GroupOperationResult.provider_error(str(exc))

        logger.info("group_participants_updated", extra=log_extra)
        return GroupOperationResult.ok()
