"""
Estados de conexão da sessão de mensageria.

Existe exatamente um estado ativo por processo; o SessionManager é o
único escritor.
"""

from enum import StrEnum


class ConnectionState(StrEnum):
    """
    Estados da conexão com a biblioteca de mensageria.

        - DISCONNECTED: Sem socket ativo (inicial e após shutdown)
        - CONNECTING: Reconectando com identidade persistida
        - AWAITING_PAIRING: Sem identidade; aguardando leitura do QR code
        - CONNECTED: Sessão autenticada e pronta para requisições
    """

    DISCONNECTED = "DISCONNECTED"
    CONNECTING = "CONNECTING"
    AWAITING_PAIRING = "AWAITING_PAIRING"
    CONNECTED = "CONNECTED"

    def __str__(self) -> str:
        return self.value


INITIAL_CONNECTION_STATE: ConnectionState = ConnectionState.DISCONNECTED
