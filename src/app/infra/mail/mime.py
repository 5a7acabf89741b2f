"""Montagem MIME compartilhada pelos transportes de e-mail.

O domínio (EmailMessage) não conhece MIME; aqui são adicionados os
cabeçalhos de protocolo (Date, Message-ID, X-Mailer) e a codificação
RFC 2047 de nomes/assunto não-ASCII.
"""

from __future__ import annotations

import email.policy
from email.message import EmailMessage as MimeMessage
from email.utils import formataddr, formatdate, make_msgid
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.email_message import Address, EmailMessage

MAILER_ID = "MesaContato/1.0"


def format_address(address: Address) -> str:
    """Formata endereço para cabeçalho, codificando nomes não-ASCII."""
    return formataddr((address.name, address.email), charset="utf-8")


def build_mime_message(message: EmailMessage, mailer_id: str = MAILER_ID) -> MimeMessage:
    """Converte EmailMessage em mensagem MIME text/html UTF-8.

    Args:
        message: Mensagem de domínio
        mailer_id: Valor do cabeçalho X-Mailer

    Returns:
        email.message.EmailMessage pronta para serialização
    """
    mime = MimeMessage(policy=email.policy.SMTP)
    mime["From"] = format_address(message.sender)
    mime["To"] = format_address(message.recipient)
    mime["Reply-To"] = format_address(message.reply_to)
    mime["Subject"] = message.subject
    mime["Date"] = formatdate(localtime=True)
    domain = message.sender.email.rpartition("@")[2] or None
    mime["Message-ID"] = make_msgid(domain=domain)
    mime["X-Mailer"] = mailer_id
    mime.set_content(message.html_body, subtype="html", charset="utf-8")
    return mime


def dot_stuff(data: bytes) -> bytes:
    """Duplica o ponto inicial de linhas (RFC 5321 §4.5.2)."""
    lines = data.split(b"\r\n")
    return b"\r\n".join(b"." + line if line.startswith(b".") else line for line in lines)


def smtp_data_payload(mime: MimeMessage) -> bytes:
    """Serializa a mensagem para a fase DATA, com terminador "."."""
    raw = dot_stuff(mime.as_bytes(policy=email.policy.SMTP))
    if not raw.endswith(b"\r\n"):
        raw += b"\r\n"
    return raw + b".\r\n"
