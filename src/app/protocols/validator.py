"""Erro de validação de entrada das operações de grupo."""

from __future__ import annotations


class ValidationError(Exception):
    """Parâmetro obrigatório ausente ou vazio."""


def require_non_empty(value: str | None, field_name: str) -> str:
    """Retorna o valor como recebido ou levanta ValidationError.

    Valor só com espaços conta como vazio; o valor aceito não é aparado.
    """
    if value is None or not value.strip():
        raise ValidationError(f"{field_name} é obrigatório")
    return value
