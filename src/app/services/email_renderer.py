"""Renderização do e-mail de contato (Jinja2, autoescape HTML).

Todo conteúdo vindo do usuário passa pelo autoescape: `<`, `>`, `&` e
aspas nunca chegam crus ao corpo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from app.domain.email_message import Address, EmailMessage

if TYPE_CHECKING:
    from app.domain.submission import Submission
    from config.settings import EmailSettings

TEMPLATE_NAME = "contact_email.html"


def build_subject(site_name: str, subject_label: str, name: str) -> str:
    """Assunto no formato "[<site>] <rótulo> — <nome>"."""
    return f"[{site_name}] {subject_label} — {name}"


class EmailRenderer:
    """Monta EmailMessage a partir de um Submission válido.

    Args:
        settings: Identidade do remetente, destinatário e nome do site
    """

    def __init__(self, settings: EmailSettings) -> None:
        self._settings = settings
        self._env = Environment(
            loader=PackageLoader("app", "templates"),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )

    def render_body(self, submission: Submission) -> str:
        template = self._env.get_template(TEMPLATE_NAME)
        return template.render(
            site_name=self._settings.site_name,
            name=submission.name,
            email=submission.email,
            phone=submission.phone,
            subject_label=submission.subject_label,
            message=submission.message,
        )

    def build_message(self, submission: Submission) -> EmailMessage:
        """Converte o envio em mensagem pronta para o Mailer."""
        return EmailMessage(
            sender=Address(self._settings.from_email, self._settings.from_name),
            recipient=Address(self._settings.mail_to),
            reply_to=Address(submission.email, submission.name),
            subject=build_subject(
                self._settings.site_name, submission.subject_label, submission.name
            ),
            html_body=self.render_body(submission),
        )
