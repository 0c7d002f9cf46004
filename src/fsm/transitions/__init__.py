"""
Exports públicos do módulo fsm/transitions.
"""

from fsm.transitions.rules import (
    CONNECTION_TRANSITIONS,
    PAIRING_TRANSITIONS,
    TransitionMap,
    get_valid_targets,
    is_transition_valid,
    validate_all_maps,
    validate_transition_map,
)

__all__ = [
    "CONNECTION_TRANSITIONS",
    "PAIRING_TRANSITIONS",
    "TransitionMap",
    "get_valid_targets",
    "is_transition_valid",
    "validate_all_maps",
    "validate_transition_map",
]
