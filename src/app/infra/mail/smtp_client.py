"""Cliente SMTP mínimo (AUTH LOGIN) guiado pela máquina de estados `fsm`.

Uma conexão por mensagem, sem retry. Cada resposta do servidor é
avaliada por `SmtpStateMachine.advance`; código fora do conjunto aceito
leva a FAILED, a conversa é abortada com QUIT best-effort e o socket é
fechado. `deliver` nunca propaga exceções: retorna False e loga
`smtp_delivery_failed`.
"""

from __future__ import annotations

import base64
import contextlib
import logging
import socket
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.infra.mail.connection import open_smtp_connection
from app.infra.mail.mime import build_mime_message, smtp_data_payload
from fsm import SmtpState, SmtpStateMachine, create_fsm
from utils.errors import SmtpConnectionError, SmtpError, SmtpReplyError

if TYPE_CHECKING:
    from app.domain.email_message import EmailMessage
    from app.protocols.smtp_connection import SmtpConnectionFactory, SmtpConnectionProtocol
    from config.settings import EmailSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SmtpReply:
    """Resposta SMTP completa (uma ou mais linhas)."""

    code: int | None
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return " ".join(line[4:] for line in self.lines).strip()


def read_reply(connection: SmtpConnectionProtocol) -> SmtpReply:
    """Lê uma resposta, seguindo linhas de continuação ("250-...").

    Raises:
        SmtpConnectionError: Se o servidor encerrar a conexão.
    """
    lines: list[str] = []
    while True:
        line = connection.read_line()
        if not line:
            raise SmtpConnectionError("Conexão encerrada pelo servidor SMTP")
        lines.append(line)
        if len(line) < 4 or line[3] != "-":
            break

    prefix = lines[-1][:3]
    code = int(prefix) if prefix.isdigit() else None
    return SmtpReply(code=code, lines=tuple(lines))


def _b64(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def _local_hostname() -> str:
    return socket.gethostname() or "localhost"


class SmtpClient:
    """Entrega mensagens via servidor SMTP autenticado.

    Args:
        settings: EmailSettings (host, porta, credenciais, segurança)
        connection_factory: Abre a conexão; injetável nos testes
        hostname: Nome anunciado no EHLO (padrão: hostname da máquina)
    """

    def __init__(
        self,
        settings: EmailSettings,
        connection_factory: SmtpConnectionFactory = open_smtp_connection,
        hostname: str | None = None,
    ) -> None:
        self._settings = settings
        self._connection_factory = connection_factory
        self._hostname = hostname or _local_hostname()

    def deliver(self, message: EmailMessage) -> bool:
        machine = create_fsm(use_starttls=self._settings.smtp_security == "tls")
        connection: SmtpConnectionProtocol | None = None
        try:
            connection = self._connection_factory(
                self._settings.smtp_host,
                self._settings.smtp_port,
                self._settings.timeout_seconds,
                self._settings.smtp_security == "ssl",
            )
            machine.advance("connect")
            self._run_session(machine, connection, message)
        except SmtpError as exc:
            machine.fail(type(exc).__name__, str(exc))
            self._log_failure(machine, exc)
        except Exception as exc:
            machine.fail(type(exc).__name__, "erro inesperado")
            logger.exception(
                "smtp_delivery_failed",
                extra={"state": self._failed_state(machine), "error_type": type(exc).__name__},
            )
        finally:
            if connection is not None:
                if not machine.succeeded:
                    self._abort(connection)
                with contextlib.suppress(OSError, SmtpError):
                    connection.close()

        return machine.succeeded

    def _run_session(
        self,
        machine: SmtpStateMachine,
        connection: SmtpConnectionProtocol,
        message: EmailMessage,
    ) -> None:
        self._expect(machine, connection, "greeting")
        self._command(machine, connection, f"EHLO {self._hostname}", "EHLO")

        if machine.current_state is SmtpState.STARTTLS:
            self._command(machine, connection, "STARTTLS", "STARTTLS")
            connection.start_tls(self._settings.smtp_host)
            self._command(machine, connection, f"EHLO {self._hostname}", "EHLO")

        self._command(machine, connection, "AUTH LOGIN", "AUTH LOGIN")
        self._command(machine, connection, _b64(self._settings.smtp_username), "AUTH username")
        self._command(machine, connection, _b64(self._settings.smtp_password), "AUTH password")
        self._command(machine, connection, f"MAIL FROM:<{message.sender.email}>", "MAIL FROM")
        self._command(machine, connection, f"RCPT TO:<{message.recipient.email}>", "RCPT TO")
        self._command(machine, connection, "DATA", "DATA")

        connection.send_raw(smtp_data_payload(build_mime_message(message)))
        self._expect(machine, connection, "end of data")

        # mensagem já aceita: falha no QUIT não altera o resultado
        with contextlib.suppress(SmtpConnectionError):
            connection.send_line("QUIT")
            read_reply(connection)
        machine.advance("QUIT")

        logger.info(
            "smtp_delivery_succeeded",
            extra={"host": self._settings.smtp_host, "transitions": len(machine.history)},
        )

    def _command(
        self,
        machine: SmtpStateMachine,
        connection: SmtpConnectionProtocol,
        line: str,
        trigger: str,
    ) -> SmtpReply:
        connection.send_line(line)
        return self._expect(machine, connection, trigger)

    def _expect(
        self,
        machine: SmtpStateMachine,
        connection: SmtpConnectionProtocol,
        trigger: str,
    ) -> SmtpReply:
        state = machine.current_state
        reply = read_reply(connection)
        result = machine.advance(trigger, reply.code)
        if not result.success:
            raise SmtpReplyError(state, reply.code or 0, reply.text)
        return reply

    @staticmethod
    def _abort(connection: SmtpConnectionProtocol) -> None:
        """QUIT best-effort após falha; erros de IO são ignorados."""
        with contextlib.suppress(OSError, SmtpError):
            connection.send_line("QUIT")

    @staticmethod
    def _failed_state(machine: SmtpStateMachine) -> str:
        history = machine.history
        return history[-1].from_state.name if history else machine.current_state.name

    def _log_failure(self, machine: SmtpStateMachine, exc: SmtpError) -> None:
        extra: dict[str, object] = {
            "state": self._failed_state(machine),
            "error_type": type(exc).__name__,
            "host": self._settings.smtp_host,
        }
        if isinstance(exc, SmtpReplyError):
            extra["state"] = exc.state.name
            extra["reply_code"] = exc.code
        logger.warning("smtp_delivery_failed", extra=extra)
