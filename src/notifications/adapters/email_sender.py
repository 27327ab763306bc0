"""Outbound email transport - adapter over an HTTP mail API."""

import abc
import logging
import uuid
from typing import Optional

import requests

import config
from notifications.domain.model import EmailMessage

logger = logging.getLogger(__name__)


class AbstractEmailSender(abc.ABC):
    """Abstract base class for email transports."""

    @abc.abstractmethod
    def send(self, message: EmailMessage) -> str:
        """
        Send an email.

        Args:
            message: Rendered email with source, destination, subject and HTML body

        Returns:
            Transport message ID

        Raises:
            EmailSenderError: If the transport rejects the message or is unreachable
        """
        raise NotImplementedError


class HTTPEmailSender(AbstractEmailSender):
    """Mailgun-style HTTP client: form-encoded POST to {api_url}/messages."""

    def __init__(self, api_url: Optional[str] = None, api_key: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        email_config = config.get_email_config()
        self.api_url = (api_url or email_config["api_url"]).rstrip("/")
        self.api_key = api_key if api_key is not None else email_config["api_key"]
        self.timeout = timeout or email_config["timeout"]
        self.session = session or requests.Session()

    def send(self, message: EmailMessage) -> str:
        url = f"{self.api_url}/messages"

        try:
            response = self.session.post(
                url,
                auth=("api", self.api_key),
                data={
                    "from": message.source,
                    "to": [message.destination],
                    "subject": message.subject,
                    "html": message.html_body,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json().get("id", "")

        except requests.exceptions.HTTPError as e:
            raise EmailSenderError(f"Mail API rejected message: {e}") from e

        except requests.exceptions.RequestException as e:
            raise EmailSenderError(f"Network error: {e}") from e

        except ValueError as e:
            raise EmailSenderError(f"Unreadable mail API response: {e}") from e


class ConsoleEmailSender(AbstractEmailSender):
    """Writes emails to the log instead of sending them (local development)."""

    def send(self, message: EmailMessage) -> str:
        message_id = f"console-{uuid.uuid4()}"
        logger.info(
            "Email %s from=%s to=%s subject=%r\n%s",
            message_id, message.source, message.destination, message.subject, message.html_body,
        )
        return message_id


class EmailSenderError(Exception):
    """Exception raised when an email could not be dispatched."""
    pass


def from_config() -> AbstractEmailSender:
    backend = config.get_email_config()["backend"]
    if backend == "console":
        return ConsoleEmailSender()
    return HTTPEmailSender()
