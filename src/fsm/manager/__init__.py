"""
Exports públicos do módulo fsm/manager.

Máquina de estados (SmtpStateMachine) da conversa SMTP.
"""

from fsm.manager.machine import SmtpStateMachine, create_fsm

__all__ = [
    "SmtpStateMachine",
    "create_fsm",
]
