"""
Módulo FSM: sequência SMTP como máquina de estados finita.

Connect → Greet → EHLO → [STARTTLS → EHLO] → Auth → MailFrom → RcptTo →
Data → BodyTerminate → Quit, com transição explícita para FAILED quando
a resposta do servidor não pertence ao conjunto aceito pelo estado.

Estrutura:
    - states/: SmtpState e estados terminais
    - transitions/: grafo VALID_TRANSITIONS e sucessores
    - rules/: códigos de resposta aceitos por estado
    - manager/: SmtpStateMachine
    - types/: StateTransition, TransitionResult
"""

from fsm.manager import SmtpStateMachine, create_fsm
from fsm.rules import (
    EXPECTED_REPLY_CODES,
    GuardResult,
    evaluate_reply,
    expected_codes,
)
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    SmtpState,
    is_terminal,
    is_valid_state,
)
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    next_state,
    validate_transition_map,
)
from fsm.types import StateTransition, TransitionResult

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "EXPECTED_REPLY_CODES",
    "TERMINAL_STATES",
    "VALID_TRANSITIONS",
    "GuardResult",
    "SmtpState",
    "SmtpStateMachine",
    "StateTransition",
    "TransitionResult",
    "create_fsm",
    "evaluate_reply",
    "expected_codes",
    "get_valid_targets",
    "is_terminal",
    "is_transition_valid",
    "is_valid_state",
    "next_state",
    "validate_transition_map",
]
