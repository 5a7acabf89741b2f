"""
Exports públicos do módulo fsm/rules.

Guards de código de resposta por estado SMTP.
"""

from fsm.rules.guards import (
    EXPECTED_REPLY_CODES,
    GuardResult,
    evaluate_reply,
    expected_codes,
)

__all__ = [
    "EXPECTED_REPLY_CODES",
    "GuardResult",
    "evaluate_reply",
    "expected_codes",
]
