"""
Estados do fluxo de pareamento (QR code).

Uma tentativa de pareamento termina em exatamente um estado terminal.
"""

from enum import StrEnum


class PairingState(StrEnum):
    """
    Estados de uma tentativa de pareamento.

    Estados não-terminais:
        - IDLE: Fluxo criado, nenhum evento consumido
        - WAITING_FOR_SCAN: Código exibido, aguardando leitura no aparelho

    Estados terminais:
        - SUCCESS: Aparelho pareado; identidade persistida pelo colaborador
        - TIMEOUT: Códigos expiraram sem leitura
        - ERROR: Falha do colaborador, stream encerrado ou cancelamento
    """

    IDLE = "IDLE"
    WAITING_FOR_SCAN = "WAITING_FOR_SCAN"

    SUCCESS = "SUCCESS"
    TIMEOUT = "TIMEOUT"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


TERMINAL_PAIRING_STATES: frozenset[PairingState] = frozenset({
    PairingState.SUCCESS,
    PairingState.TIMEOUT,
    PairingState.ERROR,
})

INITIAL_PAIRING_STATE: PairingState = PairingState.IDLE


def is_terminal(state: PairingState) -> bool:
    """Verifica se a tentativa de pareamento já foi resolvida."""
    return state in TERMINAL_PAIRING_STATES
