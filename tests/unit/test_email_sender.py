"""Unit tests for email composition and the outbound email transports."""

from unittest.mock import Mock

import pytest
import requests

from notifications.adapters import email_sender
from notifications.adapters.email_sender import (
    ConsoleEmailSender,
    EmailSenderError,
    HTTPEmailSender,
)
from notifications.domain.model import EmailMessage, compose_product_created_email


@pytest.fixture
def message():
    return compose_product_created_email(
        product_id="prod-001",
        name="Desk <Lamp>",
        price=39.9,
        sender="catalog@example.com",
        recipient="team@example.com",
    )


def test_compose_product_created_email(message):
    assert message.source == "catalog@example.com"
    assert message.destination == "team@example.com"
    assert message.subject == "New Product Added: Desk <Lamp>"
    assert "<strong>ID:</strong> prod-001" in message.html_body
    assert "<strong>Name:</strong> Desk &lt;Lamp&gt;" in message.html_body
    assert "<strong>Price:</strong> 39.9" in message.html_body


class TestHTTPEmailSender:

    def test_posts_message_to_mail_api(self, message):
        session = Mock()
        session.post.return_value.json.return_value = {"id": "<20240115.1@mail.example.com>"}

        sender = HTTPEmailSender(api_url="https://mail.example.com/v3/catalog/", api_key="key-123",
                                 timeout=5, session=session)
        message_id = sender.send(message)

        assert message_id == "<20240115.1@mail.example.com>"
        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == "https://mail.example.com/v3/catalog/messages"
        assert kwargs["auth"] == ("api", "key-123")
        assert kwargs["timeout"] == 5
        assert kwargs["data"]["from"] == "catalog@example.com"
        assert kwargs["data"]["to"] == ["team@example.com"]
        assert kwargs["data"]["subject"] == message.subject
        assert kwargs["data"]["html"] == message.html_body

    def test_http_error_is_wrapped(self, message):
        session = Mock()
        session.post.return_value.raise_for_status.side_effect = requests.exceptions.HTTPError("401 Unauthorized")

        sender = HTTPEmailSender(api_url="https://mail.example.com", api_key="bad", session=session)

        with pytest.raises(EmailSenderError, match="rejected"):
            sender.send(message)

    def test_network_error_is_wrapped(self, message):
        session = Mock()
        session.post.side_effect = requests.exceptions.ConnectionError("connection refused")

        sender = HTTPEmailSender(api_url="https://mail.example.com", api_key="key", session=session)

        with pytest.raises(EmailSenderError, match="Network error"):
            sender.send(message)

    def test_reads_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("EMAIL_API_URL", "https://mail.internal/v3/shop")
        monkeypatch.setenv("EMAIL_API_KEY", "env-key")
        monkeypatch.setenv("EMAIL_API_TIMEOUT", "3")

        sender = HTTPEmailSender(session=Mock())

        assert sender.api_url == "https://mail.internal/v3/shop"
        assert sender.api_key == "env-key"
        assert sender.timeout == 3.0


def test_console_sender_returns_message_id(message, caplog):
    caplog.set_level("INFO")

    message_id = ConsoleEmailSender().send(message)

    assert message_id.startswith("console-")
    assert "New Product Added" in caplog.text


@pytest.mark.parametrize("backend, expected", [("console", ConsoleEmailSender), ("http", HTTPEmailSender)])
def test_from_config_selects_backend(monkeypatch, backend, expected):
    monkeypatch.setenv("EMAIL_BACKEND", backend)

    assert isinstance(email_sender.from_config(), expected)


def test_email_message_is_immutable(message):
    with pytest.raises(AttributeError):
        message.subject = "changed"
    assert isinstance(message, EmailMessage)
