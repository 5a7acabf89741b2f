"""Conexão SMTP de baixo nível sobre socket (TCP ou TLS).

Implementa SmtpConnectionProtocol: leitura por linha com limite de
tamanho, envio de linhas com CRLF e upgrade STARTTLS (mínimo TLS 1.2).
"""

from __future__ import annotations

import socket
import ssl

from utils.errors import SmtpConnectionError

# RFC 5321 §4.5.3.1.5: linha de resposta com no máximo 512 octetos
MAX_REPLY_LINE = 512


def create_tls_context() -> ssl.SSLContext:
    """Contexto TLS padrão com verificação de certificado e TLS >= 1.2."""
    context = ssl.create_default_context()
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    return context


class SocketSmtpConnection:
    """Socket orientado a linhas para a conversa SMTP."""

    def __init__(self, sock: socket.socket, timeout: float) -> None:
        self._sock = sock
        self._timeout = timeout
        self._sock.settimeout(timeout)
        self._reader = sock.makefile("rb")

    def send_line(self, line: str) -> None:
        self.send_raw(line.encode("utf-8") + b"\r\n")

    def send_raw(self, data: bytes) -> None:
        try:
            self._sock.sendall(data)
        except OSError as exc:
            raise SmtpConnectionError("Falha ao enviar dados ao servidor SMTP") from exc

    def read_line(self) -> str:
        try:
            raw = self._reader.readline(MAX_REPLY_LINE + 2)
        except OSError as exc:
            raise SmtpConnectionError("Falha ao ler resposta do servidor SMTP") from exc
        return raw.decode("utf-8", errors="replace").rstrip("\r\n")

    def start_tls(self, server_hostname: str) -> None:
        """Troca o socket em claro por um socket TLS."""
        try:
            self._reader.close()
            self._sock = create_tls_context().wrap_socket(
                self._sock, server_hostname=server_hostname
            )
            self._sock.settimeout(self._timeout)
            self._reader = self._sock.makefile("rb")
        except (OSError, ssl.SSLError) as exc:
            raise SmtpConnectionError("Falha no handshake STARTTLS") from exc

    def close(self) -> None:
        try:
            self._reader.close()
        finally:
            self._sock.close()


def open_smtp_connection(
    host: str,
    port: int,
    timeout: float,
    implicit_tls: bool,
) -> SocketSmtpConnection:
    """Abre conexão TCP (ou TLS implícito) com timeout de conexão.

    Raises:
        SmtpConnectionError: Se a conexão ou o handshake falharem.
    """
    try:
        sock = socket.create_connection((host, port), timeout=timeout)
    except OSError as exc:
        raise SmtpConnectionError(f"Não foi possível conectar a {host}:{port}") from exc

    if implicit_tls:
        try:
            sock = create_tls_context().wrap_socket(sock, server_hostname=host)
        except (OSError, ssl.SSLError) as exc:
            sock.close()
            raise SmtpConnectionError(f"Falha no handshake TLS com {host}:{port}") from exc

    return SocketSmtpConnection(sock, timeout)
