"""Settings de e-mail: identidade do remetente e servidor SMTP.

O caminho SMTP autenticado só é usado com usuário, senha e host não local;
caso contrário a entrega é local (catcher de desenvolvimento em :1025).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

SmtpSecurity = Literal["tls", "ssl", "none"]

LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


@dataclass(frozen=True)
class EmailSettings:
    """Configurações de envio de e-mail.

    Attributes:
        mail_to: Destinatário fixo das mensagens do formulário
        from_name: Nome do remetente
        from_email: E-mail do remetente
        site_name: Nome do site (assunto e corpo do e-mail)
        smtp_host: Host do servidor SMTP
        smtp_port: Porta do servidor SMTP
        smtp_username: Usuário SMTP (AUTH LOGIN)
        smtp_password: Senha SMTP
        smtp_security: tls (STARTTLS), ssl (TLS implícito) ou none
        timeout_seconds: Timeout de conexão e leitura
    """

    mail_to: str = "contato@mesahermetica.com.br"
    from_name: str = "Mesa Hermética"
    from_email: str = "noreply@mesahermetica.com.br"
    site_name: str = "Mesa Hermética"

    smtp_host: str = "localhost"
    smtp_port: int = 1025
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_security: SmtpSecurity = "tls"
    timeout_seconds: float = 10.0

    @property
    def is_local_host(self) -> bool:
        """Retorna True se o host SMTP aponta para a máquina local."""
        return self.smtp_host.strip().lower() in LOCAL_HOSTS

    @property
    def uses_authenticated_smtp(self) -> bool:
        """Credenciais completas e host remoto habilitam o cliente SMTP."""
        return bool(self.smtp_username and self.smtp_password) and not self.is_local_host

    def validate(self) -> list[str]:
        """Valida configurações mínimas de e-mail."""
        errors: list[str] = []
        if not self.mail_to:
            errors.append("MAIL_TO não configurado")
        if not self.from_email:
            errors.append("MAIL_FROM_EMAIL não configurado")
        if not self.smtp_host:
            errors.append("SMTP_HOST não configurado")
        if not 0 < self.smtp_port < 65536:
            errors.append(f"SMTP_PORT inválida: {self.smtp_port}")
        if self.smtp_security not in {"tls", "ssl", "none"}:
            errors.append(f"SMTP_SECURE inválido: {self.smtp_security}")
        if bool(self.smtp_username) != bool(self.smtp_password):
            errors.append("SMTP_USER e SMTP_PASS devem ser configurados juntos")
        if self.timeout_seconds <= 0:
            errors.append("SMTP_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    security_str = os.getenv("SMTP_SECURE", "tls").lower()
    security: SmtpSecurity = (
        security_str if security_str in ("tls", "ssl", "none") else "tls"
    )
    return EmailSettings(
        mail_to=os.getenv("MAIL_TO", "contato@mesahermetica.com.br"),
        from_name=os.getenv("MAIL_FROM_NAME", "Mesa Hermética"),
        from_email=os.getenv("MAIL_FROM_EMAIL", "noreply@mesahermetica.com.br"),
        site_name=os.getenv("SITE_NAME", "Mesa Hermética"),
        smtp_host=os.getenv("SMTP_HOST", "localhost"),
        smtp_port=int(os.getenv("SMTP_PORT", "1025")),
        smtp_username=os.getenv("SMTP_USER", ""),
        smtp_password=os.getenv("SMTP_PASS", ""),
        smtp_security=security,
        timeout_seconds=float(os.getenv("SMTP_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_from_env()
