"""
Máquina de estados (SmtpStateMachine) da conversa SMTP.

Mantém o estado atual e o histórico de transições. O cliente SMTP
executa o IO de cada passo e entrega o código de resposta para
`advance`, que decide entre o próximo estado e FAILED.
"""

from typing import Any

from fsm.rules.guards import GuardResult, evaluate_reply
from fsm.states.smtp import (
    DEFAULT_INITIAL_STATE,
    SmtpState,
    is_terminal,
)
from fsm.transitions.rules import get_valid_targets, is_transition_valid, next_state
from fsm.types.transition import StateTransition, TransitionResult


class SmtpStateMachine:
    """
    Máquina de estados de uma sessão SMTP (uma mensagem).

    Attributes:
        current_state: Estado atual da máquina
        history: Histórico de transições realizadas
        use_starttls: Se a sequência inclui STARTTLS + EHLO_TLS
    """

    __slots__ = ("_current_state", "_failure_reason", "_history", "_use_starttls")

    def __init__(self, use_starttls: bool = False) -> None:
        self._current_state = DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._use_starttls = use_starttls
        self._failure_reason: str | None = None

    @property
    def current_state(self) -> SmtpState:
        """Estado atual da máquina."""
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia)."""
        return list(self._history)

    @property
    def use_starttls(self) -> bool:
        return self._use_starttls

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self._current_state)

    @property
    def succeeded(self) -> bool:
        """True somente quando a sequência terminou em DONE."""
        return self._current_state is SmtpState.DONE

    @property
    def failure_reason(self) -> str | None:
        return self._failure_reason

    def get_valid_targets(self) -> frozenset[SmtpState]:
        """Retorna estados de destino válidos a partir do estado atual."""
        return get_valid_targets(self._current_state)

    def transition(
        self,
        target: SmtpState,
        trigger: str,
        reply_code: int | None = None,
        reason: str | None = None,
    ) -> TransitionResult:
        """
        Efetua uma transição explícita validada pelo grafo.

        Args:
            target: Estado de destino
            trigger: Comando/evento que causou a transição
            reply_code: Código SMTP associado (opcional)
            reason: Motivo (usado em transições para FAILED)

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_state, target):
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
            reply_code=reply_code,
            reason=reason,
        )
        self._current_state = target
        self._history.append(transition)
        if target is SmtpState.FAILED:
            self._failure_reason = reason
        return TransitionResult(success=True, transition=transition)

    def advance(self, trigger: str, reply_code: int | None = None) -> TransitionResult:
        """
        Avalia a resposta do passo atual e avança ou falha.

        Args:
            trigger: Comando que gerou a resposta (ex: "MAIL FROM")
            reply_code: Código SMTP recebido

        Returns:
            TransitionResult com success=True se avançou no caminho feliz;
            success=False (com a transição para FAILED) caso contrário.
        """
        if self.is_terminal:
            return TransitionResult(
                success=False,
                error_reason=f"Estado {self._current_state.name} é terminal",
            )

        guard: GuardResult = evaluate_reply(self._current_state, reply_code)
        if not guard.allowed:
            failed = self.fail(trigger, guard.reason or "resposta rejeitada", reply_code)
            return TransitionResult(
                success=False,
                transition=failed.transition,
                error_reason=guard.reason or "resposta rejeitada",
            )

        target = next_state(self._current_state, self._use_starttls)
        return self.transition(target, trigger, reply_code)

    def fail(
        self,
        trigger: str,
        reason: str,
        reply_code: int | None = None,
    ) -> TransitionResult:
        """Leva a máquina para FAILED (no-op se já terminal)."""
        if self.is_terminal:
            return TransitionResult(
                success=False,
                error_reason=f"Estado {self._current_state.name} é terminal",
            )
        return self.transition(SmtpState.FAILED, trigger, reply_code, reason)

    def get_state_summary(self) -> dict[str, Any]:
        """Resumo do estado atual (seguro para logs)."""
        return {
            "current_state": self._current_state.name,
            "is_terminal": self.is_terminal,
            "use_starttls": self._use_starttls,
            "transition_count": len(self._history),
            "failure_reason": self._failure_reason,
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        """Histórico em formato seguro para logs."""
        return [t.to_log_dict() for t in self._history]


def create_fsm(use_starttls: bool = False) -> SmtpStateMachine:
    """Factory de SmtpStateMachine."""
    return SmtpStateMachine(use_starttls=use_starttls)
