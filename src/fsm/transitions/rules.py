"""
Regras de transição válidas para as máquinas de conexão e pareamento.

Cada mapa define o grafo completo: chave = estado de origem, valor =
destinos permitidos. Estados terminais mapeiam para conjunto vazio.
"""

from enum import StrEnum

from fsm.states.connection import ConnectionState
from fsm.states.pairing import TERMINAL_PAIRING_STATES, PairingState

TransitionMap = dict[StrEnum, frozenset[StrEnum]]

CONNECTION_TRANSITIONS: TransitionMap = {
    # Startup: reconexão direta ou pareamento
    ConnectionState.DISCONNECTED: frozenset({
        ConnectionState.CONNECTING,
        ConnectionState.AWAITING_PAIRING,
    }),
    ConnectionState.CONNECTING: frozenset({
        ConnectionState.CONNECTED,
        ConnectionState.DISCONNECTED,
    }),
    ConnectionState.AWAITING_PAIRING: frozenset({
        ConnectionState.CONNECTED,
        ConnectionState.DISCONNECTED,
    }),
    ConnectionState.CONNECTED: frozenset({
        ConnectionState.DISCONNECTED,
    }),
}

PAIRING_TRANSITIONS: TransitionMap = {
    # SUCCESS exige ao menos um código exibido antes
    PairingState.IDLE: frozenset({
        PairingState.WAITING_FOR_SCAN,
        PairingState.TIMEOUT,
        PairingState.ERROR,
    }),
    # Códigos rotativos não mudam o estado; só eventos terminais saem daqui
    PairingState.WAITING_FOR_SCAN: frozenset({
        PairingState.SUCCESS,
        PairingState.TIMEOUT,
        PairingState.ERROR,
    }),
    PairingState.SUCCESS: frozenset(),
    PairingState.TIMEOUT: frozenset(),
    PairingState.ERROR: frozenset(),
}


def get_valid_targets(transitions: TransitionMap, state: StrEnum) -> frozenset[StrEnum]:
    """
    Retorna os estados de destino válidos para um estado de origem.

    Args:
        transitions: Mapa de transições da máquina
        state: Estado de origem

    Returns:
        Conjunto de destinos permitidos (vazio se terminal ou desconhecido)
    """
    return transitions.get(state, frozenset())


def is_transition_valid(
    transitions: TransitionMap,
    from_state: StrEnum,
    to_state: StrEnum,
) -> bool:
    """Verifica se uma transição pertence ao grafo."""
    return to_state in get_valid_targets(transitions, from_state)


def validate_transition_map(
    transitions: TransitionMap,
    states: type[StrEnum],
    terminal_states: frozenset[StrEnum] = frozenset(),
) -> list[str]:
    """
    Valida a integridade de um mapa de transições.

    Verifica:
    - Todos os estados do enum estão no mapa
    - Estados terminais têm conjunto vazio
    - Nenhuma transição aponta para estado de outro enum

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []

    for state in states:
        if state not in transitions:
            errors.append(f"Estado {state.name} ausente no mapa de transições")

    for state in terminal_states:
        targets = transitions.get(state, frozenset())
        if targets:
            errors.append(
                f"Estado terminal {state.name} não deveria ter transições: {targets}"
            )

    for from_state, targets in transitions.items():
        for target in targets:
            if not isinstance(target, states):
                errors.append(f"Transição {from_state.name} → {target}: destino inválido")

    return errors


def validate_all_maps() -> list[str]:
    """Valida os dois mapas do serviço (usado nos testes e no bootstrap)."""
    return [
        *validate_transition_map(CONNECTION_TRANSITIONS, ConnectionState),
        *validate_transition_map(
            PAIRING_TRANSITIONS, PairingState, frozenset(TERMINAL_PAIRING_STATES)
        ),
    ]
