"""Testes da política de transporte do Mailer."""

import logging
from unittest.mock import MagicMock

import pytest

from app.domain.email_message import DeliveryOutcome
from app.services.mailer import Mailer
from config.settings import EmailSettings

SMTP_SETTINGS = EmailSettings(
    smtp_host="smtp.example.com",
    smtp_port=587,
    smtp_username="user",
    smtp_password="pass",
)
LOCAL_SETTINGS = EmailSettings(smtp_host="localhost", smtp_port=1025)


def _transport(result: bool = True) -> MagicMock:
    transport = MagicMock()
    transport.deliver.return_value = result
    return transport


def _mailer(settings: EmailSettings, smtp=None, local=None, file_log=None) -> Mailer:
    return Mailer(
        settings,
        smtp_transport=smtp or _transport(),
        local_transport=local or _transport(),
        file_log=file_log or _transport(),
    )


class TestSmtpPath:
    """Credenciais completas e host remoto."""

    def test_smtp_success_is_sent(self, email_message) -> None:
        smtp, local, file_log = _transport(), _transport(), _transport()
        mailer = _mailer(SMTP_SETTINGS, smtp, local, file_log)

        assert mailer.uses_smtp
        assert mailer.deliver(email_message) is DeliveryOutcome.SENT
        smtp.deliver.assert_called_once_with(email_message)
        local.deliver.assert_not_called()
        file_log.deliver.assert_not_called()

    def test_smtp_failure_has_no_fallback(self, email_message) -> None:
        file_log = _transport()
        mailer = _mailer(SMTP_SETTINGS, smtp=_transport(False), file_log=file_log)

        assert mailer.deliver(email_message) is DeliveryOutcome.FAILED
        file_log.deliver.assert_not_called()

    def test_transport_exception_is_failure(self, email_message, caplog) -> None:
        smtp = MagicMock()
        smtp.deliver.side_effect = RuntimeError("boom")
        mailer = _mailer(SMTP_SETTINGS, smtp=smtp)

        with caplog.at_level(logging.ERROR):
            assert mailer.deliver(email_message) is DeliveryOutcome.FAILED
        assert any(r.getMessage() == "mail_transport_error" for r in caplog.records)


class TestLocalPath:
    """Sem credenciais ou host local."""

    @pytest.mark.parametrize(
        "settings",
        [
            LOCAL_SETTINGS,
            EmailSettings(smtp_host="localhost", smtp_username="u", smtp_password="p"),
            EmailSettings(smtp_host="smtp.example.com", smtp_username="u"),
        ],
    )
    def test_smtp_not_used(self, settings) -> None:
        assert not _mailer(settings).uses_smtp

    def test_local_success_is_sent(self, email_message) -> None:
        smtp, file_log = _transport(), _transport()
        mailer = _mailer(LOCAL_SETTINGS, smtp=smtp, file_log=file_log)

        assert mailer.deliver(email_message) is DeliveryOutcome.SENT
        smtp.deliver.assert_not_called()
        file_log.deliver.assert_not_called()

    def test_local_failure_falls_back_to_file_log(self, email_message, caplog) -> None:
        file_log = _transport()
        mailer = _mailer(LOCAL_SETTINGS, local=_transport(False), file_log=file_log)

        with caplog.at_level(logging.WARNING):
            outcome = mailer.deliver(email_message)

        assert outcome is DeliveryOutcome.LOGGED
        assert outcome.is_success
        file_log.deliver.assert_called_once_with(email_message)
        assert any("Fallback applied" in r.getMessage() for r in caplog.records)

    def test_everything_fails(self, email_message) -> None:
        mailer = _mailer(LOCAL_SETTINGS, local=_transport(False), file_log=_transport(False))

        outcome = mailer.deliver(email_message)

        assert outcome is DeliveryOutcome.FAILED
        assert not outcome.is_success

    def test_recipient_is_masked_in_logs(self, email_message, caplog) -> None:
        with caplog.at_level(logging.INFO):
            _mailer(LOCAL_SETTINGS).deliver(email_message)

        record = next(r for r in caplog.records if r.getMessage() == "email_delivery_finished")
        assert record.outcome == "sent"
        assert record.transport == "local"
        assert "contato@mesahermetica.com.br" not in record.recipient
