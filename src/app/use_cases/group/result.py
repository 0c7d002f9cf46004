"""Resultado das operações de grupo."""

from __future__ import annotations

from dataclasses import dataclass, field

VALIDATION_ERROR = "VALIDATION_ERROR"
PROVIDER_ERROR = "PROVIDER_ERROR"


@dataclass(frozen=True, slots=True)
class GroupOperationResult:
    """Resultado de uma operação de grupo.

    Falhas esperadas (validação, colaborador) viram `error_code`; nunca
    exceção. `members` só é preenchido pela listagem.
    """

    success: bool
    error_code: str | None = None
    error_message: str | None = None
    members: list[str] = field(default_factory=list)
    message_id: str | None = None

    @classmethod
    def ok(
        cls,
        *,
        members: list[str] | None = None,
        message_id: str | None = None,
    ) -> GroupOperationResult:
        return cls(success=True, members=list(members or []), message_id=message_id)

    @classmethod
    def validation_error(cls, message: str) -> GroupOperationResult:
        return cls(success=False, error_code=VALIDATION_ERROR, error_message=message)

    @classmethod
    def provider_error(cls, message: str) -> GroupOperationResult:
        return cls(success=False, error_code=PROVIDER_ERROR, error_message=message)
