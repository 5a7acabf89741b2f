"""
Guards de resposta: códigos SMTP aceitos em cada estado.

Um código fora do conjunto do estado bloqueia o avanço e leva a
sequência para FAILED. Estados mapeados para None não checam o código.
"""

from fsm.states.smtp import SmtpState

# Códigos aceitos por estado (RFC 5321 / RFC 4954)
EXPECTED_REPLY_CODES: dict[SmtpState, frozenset[int] | None] = {
    SmtpState.GREETING: frozenset({220}),
    SmtpState.EHLO: frozenset({250}),
    SmtpState.STARTTLS: frozenset({220}),
    SmtpState.EHLO_TLS: frozenset({250}),
    SmtpState.AUTH_LOGIN: frozenset({334}),
    SmtpState.AUTH_USERNAME: frozenset({334}),
    SmtpState.AUTH_PASSWORD: frozenset({235}),
    SmtpState.MAIL_FROM: frozenset({250}),
    SmtpState.RCPT_TO: frozenset({250, 251}),
    SmtpState.DATA: frozenset({354}),
    SmtpState.BODY_TERMINATE: frozenset({250}),
    # Mensagem já aceita: resposta ao QUIT é irrelevante
    SmtpState.QUIT: None,
}


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se o avanço é permitido
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> "GuardResult":
        """Cria resultado permitindo o avanço."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "GuardResult":
        """Cria resultado negando o avanço."""
        return cls(allowed=False, reason=reason)


def expected_codes(state: SmtpState) -> frozenset[int] | None:
    """Retorna os códigos aceitos no estado (None = não checado)."""
    return EXPECTED_REPLY_CODES.get(state)


def evaluate_reply(state: SmtpState, reply_code: int | None) -> GuardResult:
    """
    Avalia o código de resposta recebido no estado.

    Args:
        state: Estado cujo comando gerou a resposta
        reply_code: Código de 3 dígitos (None quando a linha não tinha código)

    Returns:
        GuardResult permitindo ou negando o avanço
    """
    accepted = expected_codes(state)
    if accepted is None:
        return GuardResult.allow()
    if reply_code is None:
        return GuardResult.deny(f"{state.name}: resposta sem código SMTP")
    if reply_code not in accepted:
        expected = ", ".join(str(code) for code in sorted(accepted))
        return GuardResult.deny(
            f"{state.name}: código {reply_code} fora do esperado ({expected})"
        )
    return GuardResult.allow()
