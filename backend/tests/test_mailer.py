import smtplib

import pytest

from resumeforge.core.config import settings
from resumeforge.core.exceptions import EmailDeliveryError
from resumeforge.notifications.mailer import send_email


class FakeSMTP:
    """Records what the mailer does with a connection instead of talking to a server"""

    def __init__(self, host, port, context=None, timeout=None, login_error=None):
        self.host = host
        self.port = port
        self.login_error = login_error
        self.started_tls = False
        self.logins = []
        self.sent = []

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

    def starttls(self, context=None):
        self.started_tls = True

    def login(self, user, password):
        if self.login_error is not None:
            raise self.login_error
        self.logins.append((user, password))

    def send_message(self, msg):
        self.sent.append(msg)


@pytest.fixture
def smtp_settings(monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_BACKEND", "smtp")
    monkeypatch.setattr(settings, "SMTP_USE_TLS", False)
    monkeypatch.setattr(settings, "SMTP_USER", "bot@example.com")
    monkeypatch.setattr(settings, "SMTP_PASSWORD", "abcd efgh ijkl mnop")
    monkeypatch.setattr(settings, "SMTP_FROM_EMAIL", None)


@pytest.fixture
def connections(monkeypatch):
    opened = []

    def connect(host, port, **kwargs):
        server = FakeSMTP(host, port, **kwargs)
        opened.append(server)
        return server

    monkeypatch.setattr(smtplib, "SMTP_SSL", connect)
    monkeypatch.setattr(smtplib, "SMTP", connect)
    return opened


def test_sends_over_ssl(smtp_settings, connections):
    send_email("jane@example.com", "Hello", "Your OTP is 123456")

    assert len(connections) == 1
    server = connections[0]
    assert (server.host, server.port) == (settings.SMTP_HOST, settings.SMTP_PORT)
    assert server.started_tls is False
    # app passwords are pasted with spaces
    assert server.logins == [("bot@example.com", "abcdefghijklmnop")]

    msg = server.sent[0]
    assert msg["To"] == "jane@example.com"
    assert msg["Subject"] == "Hello"
    assert msg["From"] == "Resume Builder <bot@example.com>"
    assert "123456" in msg.get_content()


def test_starttls_when_configured(smtp_settings, connections, monkeypatch):
    monkeypatch.setattr(settings, "SMTP_USE_TLS", True)

    send_email("jane@example.com", "Hello", "body")

    assert connections[0].started_tls is True
    assert len(connections[0].sent) == 1


def test_from_address_prefers_configured_sender(smtp_settings, connections, monkeypatch):
    monkeypatch.setattr(settings, "SMTP_FROM_EMAIL", "no-reply@example.com")

    send_email("jane@example.com", "Hello", "body")

    assert connections[0].sent[0]["From"] == "Resume Builder <no-reply@example.com>"


def test_login_rejection_raises_delivery_error(smtp_settings, monkeypatch):
    def connect(host, port, **kwargs):
        return FakeSMTP(host, port, login_error=smtplib.SMTPAuthenticationError(535, b"bad credentials"), **kwargs)

    monkeypatch.setattr(smtplib, "SMTP_SSL", connect)

    with pytest.raises(EmailDeliveryError) as exc_info:
        send_email("jane@example.com", "Hello", "body")

    assert exc_info.value.status_code == 500
    assert "bad credentials" in exc_info.value.details["reason"]


def test_unreachable_server_raises_delivery_error(smtp_settings, monkeypatch):
    def connect(host, port, **kwargs):
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(smtplib, "SMTP_SSL", connect)

    with pytest.raises(EmailDeliveryError):
        send_email("jane@example.com", "Hello", "body")


def test_missing_sender_fails_before_connecting(smtp_settings, connections, monkeypatch):
    monkeypatch.setattr(settings, "SMTP_USER", None)

    with pytest.raises(EmailDeliveryError) as exc_info:
        send_email("jane@example.com", "Hello", "body")

    assert exc_info.value.message == "Email sender is not configured"
    assert connections == []


def test_console_backend_sends_nothing(connections, monkeypatch):
    monkeypatch.setattr(settings, "EMAIL_BACKEND", "console")
    monkeypatch.setattr(settings, "SMTP_USER", None)

    assert send_email("jane@example.com", "Hello", "body") is None
    assert connections == []
