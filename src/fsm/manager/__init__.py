"""
Exports públicos do módulo fsm/manager.
"""

from fsm.manager.machine import (
    FSMStateMachine,
    create_connection_fsm,
    create_pairing_fsm,
)

__all__ = [
    "FSMStateMachine",
    "create_connection_fsm",
    "create_pairing_fsm",
]
