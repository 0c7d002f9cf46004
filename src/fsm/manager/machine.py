"""
Máquina de estados genérica com histórico auditável.

Uma instância governa um único grafo (conexão ou pareamento). A
máquina não é thread-safe: cada instância tem um único escritor.
"""

from enum import StrEnum
from typing import Any

from fsm.states.connection import INITIAL_CONNECTION_STATE
from fsm.states.pairing import INITIAL_PAIRING_STATE
from fsm.transitions.rules import (
    CONNECTION_TRANSITIONS,
    PAIRING_TRANSITIONS,
    TransitionMap,
    get_valid_targets,
    is_transition_valid,
)
from fsm.types.transition import StateTransition, TransitionResult


class FSMStateMachine:
    """
    Máquina de estados sobre um mapa de transições explícito.

    Attributes:
        current_state: Estado atual da máquina
        history: Histórico de transições realizadas
    """

    __slots__ = ("_current_state", "_history", "_name", "_transitions")

    def __init__(
        self,
        initial_state: StrEnum,
        transitions: TransitionMap,
        name: str = "",
    ) -> None:
        """
        Args:
            initial_state: Estado inicial
            transitions: Grafo de transições permitidas
            name: Nome da máquina para logs (ex: 'connection')
        """
        if initial_state not in transitions:
            raise ValueError(f"Estado inicial fora do mapa: {initial_state}")
        self._current_state = initial_state
        self._transitions = transitions
        self._history: list[StateTransition] = []
        self._name = name

    @property
    def current_state(self) -> StrEnum:
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_terminal(self) -> bool:
        """Sem destinos válidos a partir do estado atual."""
        return not self.get_valid_targets()

    def can_transition_to(self, target: StrEnum) -> bool:
        return is_transition_valid(self._transitions, self._current_state, target)

    def get_valid_targets(self) -> frozenset[StrEnum]:
        return get_valid_targets(self._transitions, self._current_state)

    def transition(
        self,
        target: StrEnum,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Identificador do gatilho
            metadata: Dados adicionais para auditoria (nunca PII)

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not self.can_transition_to(target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )
        self._current_state = target
        self._history.append(transition)
        return TransitionResult(success=True, transition=transition)

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo do estado atual para observability."""
        return {
            "machine": self._name,
            "current_state": self._current_state.name,
            "is_terminal": self.is_terminal,
            "transition_count": len(self._history),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        return [t.to_log_dict() for t in self._history]


def create_connection_fsm() -> FSMStateMachine:
    """Cria a máquina de estados de conexão (inicia em DISCONNECTED)."""
    return FSMStateMachine(
        initial_state=INITIAL_CONNECTION_STATE,
        transitions=CONNECTION_TRANSITIONS,
        name="connection",
    )


def create_pairing_fsm() -> FSMStateMachine:
    """Cria a máquina de uma tentativa de pareamento (inicia em IDLE)."""
    return FSMStateMachine(
        initial_state=INITIAL_PAIRING_STATE,
        transitions=PAIRING_TRANSITIONS,
        name="pairing",
    )
