"""Testes da renderização do e-mail de contato."""

from app.domain.submission import SubjectKind, Submission
from app.services.email_renderer import EmailRenderer, build_subject
from config.settings import EmailSettings


def test_build_subject_format() -> None:
    assert build_subject("Site", "Outro assunto", "Ana") == "[Site] Outro assunto — Ana"


class TestEmailRenderer:
    def test_message_identities(self, submission) -> None:
        settings = EmailSettings(
            mail_to="dest@exemplo.com.br",
            from_name="Mesa",
            from_email="noreply@exemplo.com.br",
            site_name="Mesa",
        )

        message = EmailRenderer(settings).build_message(submission)

        assert message.sender.email == "noreply@exemplo.com.br"
        assert message.sender.name == "Mesa"
        assert message.recipient.email == "dest@exemplo.com.br"
        assert message.reply_to.email == "maria@example.com"
        assert message.reply_to.name == "Maria Souza"
        assert message.subject == "[Mesa] Dúvida sobre a Mesa Radiônica — Maria Souza"

    def test_body_contains_fields(self, submission) -> None:
        body = EmailRenderer(EmailSettings()).render_body(submission)

        assert "Maria Souza" in body
        assert 'href="mailto:maria@example.com"' in body
        assert "(11) 98765-4321" in body
        assert "Dúvida sobre a Mesa Radiônica" in body
        assert "Gostaria de saber mais sobre a mesa." in body

    def test_user_content_is_escaped(self) -> None:
        submission = Submission(
            name="<b>Ana</b>",
            email="ana@exemplo.com.br",
            phone="",
            subject=SubjectKind.OUTRO,
            message='<script>alert("x")</script> & "aspas"',
        )

        body = EmailRenderer(EmailSettings()).render_body(submission)

        assert "<script>" not in body
        assert "&lt;script&gt;" in body
        assert "&lt;b&gt;Ana&lt;/b&gt;" in body
        assert "&amp; &#34;aspas&#34;" in body

    def test_empty_phone_shows_dash(self) -> None:
        submission = Submission(
            name="Ana",
            email="ana@exemplo.com.br",
            phone="",
            subject=SubjectKind.FEEDBACK,
            message="Mensagem de teste",
        )

        body = EmailRenderer(EmailSettings()).render_body(submission)

        assert ">—</td>" in body

    def test_multiline_message_keeps_line_breaks(self) -> None:
        submission = Submission(
            name="Ana",
            email="ana@exemplo.com.br",
            phone="",
            subject=SubjectKind.OUTRO,
            message="linha 1\nlinha 2",
        )

        body = EmailRenderer(EmailSettings()).render_body(submission)

        assert "linha 1\nlinha 2" in body
        assert "white-space: pre-wrap" in body


def test_outro_subject_uses_label_end_to_end() -> None:
    submission = Submission(
        name="Carlos Lima",
        email="carlos@exemplo.com.br",
        phone="",
        subject=SubjectKind.OUTRO,
        message="Uma mensagem qualquer.",
    )

    message = EmailRenderer(EmailSettings(site_name="Mesa Hermética")).build_message(submission)

    assert message.subject == "[Mesa Hermética] Outro assunto — Carlos Lima"
