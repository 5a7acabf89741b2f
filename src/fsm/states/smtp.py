"""
Estados canônicos da sequência de envio SMTP.

Cada estado não-terminal corresponde a um passo da conversa com o
servidor: o comando do passo já foi enviado (ou a conexão aberta) e a
resposta é avaliada para decidir o próximo estado.
"""

from enum import StrEnum


class SmtpState(StrEnum):
    """
    Estados da conversa SMTP de uma única mensagem.

    Estados não-terminais:
        - CONNECT: Abertura do socket TCP/TLS
        - GREETING: Leitura do banner 220
        - EHLO: Apresentação do cliente
        - STARTTLS: Pedido de upgrade para TLS
        - EHLO_TLS: Nova apresentação sobre o canal cifrado
        - AUTH_LOGIN: Início do AUTH LOGIN
        - AUTH_USERNAME: Envio do usuário em base64
        - AUTH_PASSWORD: Envio da senha em base64
        - MAIL_FROM: Envelope do remetente
        - RCPT_TO: Envelope do destinatário
        - DATA: Pedido de envio do conteúdo
        - BODY_TERMINATE: Cabeçalhos, corpo e terminador "."
        - QUIT: Encerramento educado da sessão

    Estados terminais:
        - DONE: Mensagem aceita pelo servidor
        - FAILED: Qualquer falha de conexão, protocolo ou autenticação
    """

    CONNECT = "CONNECT"
    GREETING = "GREETING"
    EHLO = "EHLO"
    STARTTLS = "STARTTLS"
    EHLO_TLS = "EHLO_TLS"
    AUTH_LOGIN = "AUTH_LOGIN"
    AUTH_USERNAME = "AUTH_USERNAME"
    AUTH_PASSWORD = "AUTH_PASSWORD"
    MAIL_FROM = "MAIL_FROM"
    RCPT_TO = "RCPT_TO"
    DATA = "DATA"
    BODY_TERMINATE = "BODY_TERMINATE"
    QUIT = "QUIT"

    DONE = "DONE"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


TERMINAL_STATES: frozenset[SmtpState] = frozenset({
    SmtpState.DONE,
    SmtpState.FAILED,
})

DEFAULT_INITIAL_STATE: SmtpState = SmtpState.CONNECT


def is_terminal(state: SmtpState) -> bool:
    """Verifica se o estado encerra a sequência."""
    return state in TERMINAL_STATES


def is_valid_state(state: SmtpState) -> bool:
    """Verifica se o valor é um SmtpState."""
    return isinstance(state, SmtpState)
