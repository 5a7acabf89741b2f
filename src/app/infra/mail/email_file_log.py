"""Log em arquivo: último recurso quando nenhuma entrega funcionou.

Cada mensagem vira `<diretório>/YYYY-MM-DD_HH-MM-SS_<hex>.html` com um
cabeçalho em texto (TO/FROM/REPLY-TO/SUBJECT/DATE), separador `---` e o
corpo HTML.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from utils.errors import MailDeliveryError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.email_message import EmailMessage

logger = logging.getLogger(__name__)


def format_log_entry(message: EmailMessage, sent_at: datetime) -> str:
    """Monta o conteúdo do arquivo de log."""
    return "\n".join([
        f"TO: {message.recipient.email}",
        f"FROM: {message.sender.formatted()}",
        f"REPLY-TO: {message.reply_to.formatted()}",
        f"SUBJECT: {message.subject}",
        f"DATE: {sent_at:%Y-%m-%d %H:%M:%S}",
        "---",
        "",
        message.html_body,
    ])


class EmailFileLog:
    """Grava mensagens não entregues em arquivos HTML.

    Args:
        directory: Diretório de destino (criado se ausente)
        clock: Fonte de data/hora local (injetável nos testes)
    """

    def __init__(
        self,
        directory: str | Path,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._directory = Path(directory)
        self._clock = clock

    @property
    def directory(self) -> Path:
        return self._directory

    def write(self, message: EmailMessage) -> Path:
        """Grava a mensagem e retorna o caminho do arquivo.

        Raises:
            MailDeliveryError: Se o diretório ou o arquivo não puderem ser gravados.
        """
        now = self._clock()
        path = self._directory / f"{now:%Y-%m-%d_%H-%M-%S}_{uuid.uuid4().hex[:13]}.html"
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            path.write_text(format_log_entry(message, now), encoding="utf-8")
        except OSError as exc:
            raise MailDeliveryError(f"Falha ao gravar log de e-mail em {self._directory}") from exc
        return path

    def deliver(self, message: EmailMessage) -> bool:
        try:
            path = self.write(message)
        except MailDeliveryError as exc:
            logger.error(
                "email_file_log_failed",
                extra={"directory": str(self._directory), "error_type": type(exc.__cause__).__name__},
            )
            return False
        logger.info("email_logged_to_file", extra={"file": path.name})
        return True

    def purge_older_than(self, max_age_seconds: float, now: float) -> int:
        """Remove logs com mtime anterior a `now - max_age_seconds`."""
        if not self._directory.is_dir():
            return 0
        removed = 0
        for path in self._directory.glob("*.html"):
            try:
                if path.stat().st_mtime < now - max_age_seconds:
                    path.unlink()
                    removed += 1
            except FileNotFoundError:
                continue
        return removed
