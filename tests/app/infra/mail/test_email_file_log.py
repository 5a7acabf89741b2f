"""Testes do EmailFileLog."""

import logging
import os
from datetime import datetime

from app.infra.mail import EmailFileLog, format_log_entry

FIXED_NOW = datetime(2026, 3, 14, 9, 26, 53)


class TestFormatLogEntry:
    def test_header_then_body(self, email_message) -> None:
        entry = format_log_entry(email_message, FIXED_NOW)

        lines = entry.split("\n")
        assert lines[:7] == [
            "TO: contato@mesahermetica.com.br",
            "FROM: Mesa Hermética <noreply@mesahermetica.com.br>",
            "REPLY-TO: Maria Souza <maria@example.com>",
            f"SUBJECT: {email_message.subject}",
            "DATE: 2026-03-14 09:26:53",
            "---",
            "",
        ]
        assert entry.endswith(email_message.html_body)


class TestEmailFileLog:
    def test_write_creates_directory_and_file(self, tmp_path, email_message) -> None:
        log = EmailFileLog(tmp_path / "email_logs", clock=lambda: FIXED_NOW)

        path = log.write(email_message)

        assert path.parent == tmp_path / "email_logs"
        assert path.name.startswith("2026-03-14_09-26-53_")
        assert path.suffix == ".html"
        assert path.read_text(encoding="utf-8") == format_log_entry(email_message, FIXED_NOW)

    def test_same_second_gets_distinct_names(self, tmp_path, email_message) -> None:
        log = EmailFileLog(tmp_path, clock=lambda: FIXED_NOW)

        assert log.write(email_message) != log.write(email_message)
        assert len(list(tmp_path.glob("*.html"))) == 2

    def test_deliver_returns_true(self, tmp_path, email_message) -> None:
        assert EmailFileLog(tmp_path).deliver(email_message) is True

    def test_unwritable_target_returns_false(self, tmp_path, email_message, caplog) -> None:
        blocker = tmp_path / "arquivo"
        blocker.write_text("x")

        with caplog.at_level(logging.ERROR):
            assert EmailFileLog(blocker / "logs").deliver(email_message) is False

        assert any(r.getMessage() == "email_file_log_failed" for r in caplog.records)

    def test_purge_older_than(self, tmp_path, email_message) -> None:
        log = EmailFileLog(tmp_path)
        old = log.write(email_message)
        recent = log.write(email_message)
        os.utime(old, (1_000, 1_000))
        os.utime(recent, (9_000, 9_000))

        assert log.purge_older_than(3_600, now=10_000) == 1
        assert not old.exists()
        assert recent.exists()

    def test_purge_missing_directory(self, tmp_path) -> None:
        assert EmailFileLog(tmp_path / "nada").purge_older_than(60, now=0) == 0
