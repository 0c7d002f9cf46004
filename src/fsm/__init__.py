"""
Módulo FSM: máquinas de estado da sessão de mensageria.

Estrutura:
    - states/: ConnectionState e PairingState
    - transitions/: grafos de transição (CONNECTION_TRANSITIONS, PAIRING_TRANSITIONS)
    - manager/: FSMStateMachine e factories
    - types/: StateTransition, TransitionResult
"""

from fsm.manager import (
    FSMStateMachine,
    create_connection_fsm,
    create_pairing_fsm,
)
from fsm.states import (
    INITIAL_CONNECTION_STATE,
    INITIAL_PAIRING_STATE,
    TERMINAL_PAIRING_STATES,
    ConnectionState,
    PairingState,
    is_terminal,
)
from fsm.transitions import (
    CONNECTION_TRANSITIONS,
    PAIRING_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_all_maps,
    validate_transition_map,
)
from fsm.types import StateTransition, TransitionResult

__all__ = [
    "CONNECTION_TRANSITIONS",
    "INITIAL_CONNECTION_STATE",
    "INITIAL_PAIRING_STATE",
    "PAIRING_TRANSITIONS",
    "TERMINAL_PAIRING_STATES",
    "ConnectionState",
    "FSMStateMachine",
    "PairingState",
    "StateTransition",
    "TransitionResult",
    "create_connection_fsm",
    "create_pairing_fsm",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "validate_all_maps",
    "validate_transition_map",
]
