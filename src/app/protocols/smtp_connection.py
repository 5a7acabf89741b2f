"""Protocolo da conexão de baixo nível usada pelo cliente SMTP.

Permite injetar conexões falsas nos testes (respostas roteirizadas).
"""

from __future__ import annotations

from typing import Protocol


class SmtpConnectionProtocol(Protocol):
    """Socket orientado a linhas com upgrade TLS."""

    def send_line(self, line: str) -> None:
        """Envia uma linha, acrescentando CRLF."""
        ...

    def send_raw(self, data: bytes) -> None:
        """Envia bytes sem alteração."""
        ...

    def read_line(self) -> str:
        """Lê uma linha (sem CRLF). String vazia indica conexão encerrada."""
        ...

    def start_tls(self, server_hostname: str) -> None:
        """Faz upgrade do canal para TLS (mínimo TLS 1.2)."""
        ...

    def close(self) -> None: ...


class SmtpConnectionFactory(Protocol):
    """Abre conexões SMTP (TCP ou TLS implícito)."""

    def __call__(
        self,
        host: str,
        port: int,
        timeout: float,
        implicit_tls: bool,
    ) -> SmtpConnectionProtocol: ...
