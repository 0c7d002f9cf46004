"""Use cases de controle do grupo."""

from .list_members import ListGroupMembersUseCase
from .result import PROVIDER_ERROR, VALIDATION_ERROR, GroupOperationResult
from .send_contact_card import SendContactCardUseCase
from .update_participants import UpdateGroupParticipantsUseCase

__all__ = [
    "PROVIDER_ERROR",
    "VALIDATION_ERROR",
    "GroupOperationResult",
    "ListGroupMembersUseCase",
    "SendContactCardUseCase",
    "UpdateGroupParticipantsUseCase",
]
