"""Testes do SubmitContactUseCase."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from api.validators.contact import validate_submission
from app.domain.email_message import DeliveryOutcome
from app.infra.stores import MemoryRateLimitStore
from app.services import EmailRenderer, RateLimiter, client_key
from app.use_cases.contact import SubmitContactUseCase
from app.use_cases.contact.models import MSG_DELIVERY_FAILED, MSG_RATE_LIMITED, MSG_SUCCESS
from app.use_cases.contact.submit_contact import is_honeypot_filled
from config.settings import EmailSettings

CLIENT = "203.0.113.7"


def _valid_form(**overrides: str) -> dict[str, str]:
    form = {
        "name": "Ana Paula",
        "email": "ana@exemplo.com.br",
        "phone": "(11) 91234-5678",
        "subject": "agendamento",
        "message": "Quero agendar uma sessão na próxima semana.",
        "website": "",
    }
    form.update(overrides)
    return form


@pytest.fixture
def mailer() -> MagicMock:
    mailer = MagicMock()
    mailer.deliver.return_value = DeliveryOutcome.SENT
    return mailer


@pytest.fixture
def store() -> MemoryRateLimitStore:
    return MemoryRateLimitStore()


@pytest.fixture
def limiter(store) -> RateLimiter:
    return RateLimiter(store, limit=5, window_seconds=3600, clock=lambda: 1000.0)


@pytest.fixture
def use_case(limiter, mailer) -> SubmitContactUseCase:
    return SubmitContactUseCase(
        validator=validate_submission,
        rate_limiter=limiter,
        renderer=EmailRenderer(EmailSettings()),
        mailer=mailer,
    )


class TestHoneypot:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("", False), (None, False), ("   ", True), ("http://spam", True)],
    )
    def test_is_honeypot_filled(self, value, expected) -> None:
        assert is_honeypot_filled({"website": value}) is expected

    def test_filled_honeypot_fakes_success(self, use_case, mailer, store) -> None:
        form = {"website": "http://spam.example", "name": "", "email": "x"}

        result = use_case.execute(form, CLIENT)

        assert result.status_code == 200
        assert result.body == {"success": True, "message": MSG_SUCCESS}
        mailer.deliver.assert_not_called()
        assert store.count(client_key(CLIENT), 3600, 1000.0) == 0

    def test_whitespace_honeypot_is_a_bot(self, use_case, mailer, store) -> None:
        result = use_case.execute(_valid_form(website=" "), CLIENT)

        assert result.status_code == 200
        mailer.deliver.assert_not_called()
        assert store.count(client_key(CLIENT), 3600, 1000.0) == 0

    def test_honeypot_never_consumes_attempts(self, use_case, mailer) -> None:
        for _ in range(6):
            use_case.execute(_valid_form(website="http://spam.example"), CLIENT)

        assert use_case.execute(_valid_form(), CLIENT).status_code == 200
        assert mailer.deliver.call_count == 1


class TestValidSubmission:
    def test_success_delivers_rendered_message(self, use_case, mailer) -> None:
        result = use_case.execute(_valid_form(), CLIENT)

        assert result.status_code == 200
        assert result.body == {"success": True, "message": MSG_SUCCESS}
        (message,) = mailer.deliver.call_args.args
        assert message.reply_to.email == "ana@exemplo.com.br"
        assert message.subject.endswith("Agendamento de sessão — Ana Paula")

    def test_logged_outcome_counts_as_success(self, use_case, mailer) -> None:
        mailer.deliver.return_value = DeliveryOutcome.LOGGED

        assert use_case.execute(_valid_form(), CLIENT).status_code == 200

    def test_delivery_failure_returns_500(self, use_case, mailer) -> None:
        mailer.deliver.return_value = DeliveryOutcome.FAILED

        result = use_case.execute(_valid_form(), CLIENT)

        assert result.status_code == 500
        assert result.body == {"success": False, "message": MSG_DELIVERY_FAILED}

    def test_failed_delivery_still_consumes_attempt(self, use_case, mailer) -> None:
        mailer.deliver.return_value = DeliveryOutcome.FAILED

        statuses = [use_case.execute(_valid_form(), CLIENT).status_code for _ in range(6)]

        assert statuses == [500] * 5 + [429]


class TestInvalidSubmission:
    def test_errors_per_field(self, use_case, mailer) -> None:
        result = use_case.execute(_valid_form(name="Al", email="nao-e-email"), CLIENT)

        assert result.status_code == 422
        assert result.body["success"] is False
        assert set(result.body["errors"]) == {"name", "email"}
        assert "message" not in result.body
        mailer.deliver.assert_not_called()

    def test_invalid_does_not_consume_attempt(self, use_case, limiter) -> None:
        for _ in range(10):
            use_case.execute(_valid_form(message="curta"), CLIENT)

        assert use_case.execute(_valid_form(), CLIENT).status_code == 200


class TestRateLimit:
    def test_sixth_submission_is_rejected(self, use_case, mailer, caplog) -> None:
        for _ in range(5):
            assert use_case.execute(_valid_form(), CLIENT).status_code == 200

        with caplog.at_level(logging.WARNING):
            result = use_case.execute(_valid_form(), CLIENT)

        assert result.status_code == 429
        assert result.body == {"success": False, "message": MSG_RATE_LIMITED}
        assert mailer.deliver.call_count == 5
        record = next(r for r in caplog.records if r.getMessage() == "rate_limit_exceeded")
        assert CLIENT not in record.client_key

    def test_blocked_client_gets_429_even_when_invalid(self, use_case) -> None:
        for _ in range(5):
            use_case.execute(_valid_form(), CLIENT)

        assert use_case.execute(_valid_form(name=""), CLIENT).status_code == 429

    def test_other_clients_unaffected(self, use_case) -> None:
        for _ in range(5):
            use_case.execute(_valid_form(), CLIENT)

        assert use_case.execute(_valid_form(), "198.51.100.1").status_code == 200

    def test_acquire_race_returns_429(self, mailer) -> None:
        limiter = MagicMock()
        limiter.is_blocked.return_value = False
        limiter.acquire.return_value = False
        use_case = SubmitContactUseCase(
            validate_submission, limiter, EmailRenderer(EmailSettings()), mailer
        )

        assert use_case.execute(_valid_form(), CLIENT).status_code == 429
        mailer.deliver.assert_not_called()
