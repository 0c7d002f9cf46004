"""Use case de envio de cartão de contato (vCard) ao grupo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.contact_card import ContactCard
from app.observability import hash_phone, measure_latency
from app.protocols.models import ContactMessage
from app.protocols.validator import ValidationError, require_non_empty
from app.use_cases.group.result import GroupOperationResult
from utils.errors import MessagingProviderError

if TYPE_CHECKING:
    from app.domain.jid import Jid
    from app.protocols.messaging_client import MessagingClientProtocol

logger = logging.getLogger(__name__)


class SendContactCardUseCase:
    """Monta o vCard e envia ao grupo configurado.

    Responde só depois que o colaborador confirmou o envio.
    """

    def __init__(self, client: MessagingClientProtocol, group_jid: Jid) -> None:
        self._client = client
        self._group_jid = group_jid

    async def execute(self, name: str | None, phone_number: str | None) -> GroupOperationResult:
        try:
            display_name = require_non_empty(name, "name")
            phone = require_non_empty(phone_number, "phone")
        except ValidationError as exc:
            return GroupOperationResult.validation_error(str(exc))

        card = ContactCard(display_name=display_name, phone_number=phone)
        message = ContactMessage(display_name=card.display_name, vcard=card.to_vcard())

        try:
            with measure_latency("contact_card", "send_message"):
                message_id = await self._client.send_message(self._group_jid, message)
        except MessagingProviderError as exc:
            logger.warning(
                "contact_card_send_failed",
                extra={"phone_hash": hash_phone(phone), "error": str(exc)},
            )
            return GroupOperationResult.provider_error(str(exc))

        logger.info(
            "contact_card_sent",
            extra={"phone_hash": hash_phone(phone), "message_id": message_id},
        )
        return GroupOperationResult.ok(message_id=message_id)
