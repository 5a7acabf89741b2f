"""Protocolos e contratos do core da aplicação."""

from .mail_transport import MailTransportProtocol
from .rate_limit_store import RateLimitStoreProtocol
from .smtp_connection import SmtpConnectionFactory, SmtpConnectionProtocol
from .validator import SubmissionValidatorProtocol

__all__ = [
    "MailTransportProtocol",
    "RateLimitStoreProtocol",
    "SmtpConnectionFactory",
    "SmtpConnectionProtocol",
    "SubmissionValidatorProtocol",
]
