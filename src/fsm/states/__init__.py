"""Exports públicos do módulo fsm/states."""

from fsm.states.smtp import (
    DEFAULT_INITIAL_STATE,
    TERMINAL_STATES,
    SmtpState,
    is_terminal,
    is_valid_state,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TERMINAL_STATES",
    "SmtpState",
    "is_terminal",
    "is_valid_state",
]
