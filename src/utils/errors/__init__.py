"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    MailDeliveryError,
    RateLimitStoreError,
    RedisConnectionError,
    SmtpConnectionError,
    SmtpError,
    SmtpReplyError,
)

__all__ = [
    "InfrastructureError",
    "MailDeliveryError",
    "RateLimitStoreError",
    "RedisConnectionError",
    "SmtpConnectionError",
    "SmtpError",
    "SmtpReplyError",
]
