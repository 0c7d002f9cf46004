"""
Exports públicos do módulo fsm/states.
"""

from fsm.states.connection import INITIAL_CONNECTION_STATE, ConnectionState
from fsm.states.pairing import (
    INITIAL_PAIRING_STATE,
    TERMINAL_PAIRING_STATES,
    PairingState,
    is_terminal,
)

__all__ = [
    "INITIAL_CONNECTION_STATE",
    "INITIAL_PAIRING_STATE",
    "TERMINAL_PAIRING_STATES",
    "ConnectionState",
    "PairingState",
    "is_terminal",
]
