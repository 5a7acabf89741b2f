"""Transportes de e-mail: SMTP autenticado, SMTP local e log em arquivo."""

from app.infra.mail.connection import SocketSmtpConnection, open_smtp_connection
from app.infra.mail.email_file_log import EmailFileLog, format_log_entry
from app.infra.mail.local_transport import LocalMailTransport
from app.infra.mail.mime import MAILER_ID, build_mime_message, dot_stuff, smtp_data_payload
from app.infra.mail.smtp_client import SmtpClient, SmtpReply, read_reply

__all__ = [
    "MAILER_ID",
    "EmailFileLog",
    "LocalMailTransport",
    "SmtpClient",
    "SmtpReply",
    "SocketSmtpConnection",
    "build_mime_message",
    "dot_stuff",
    "format_log_entry",
    "open_smtp_connection",
    "read_reply",
    "smtp_data_payload",
]
