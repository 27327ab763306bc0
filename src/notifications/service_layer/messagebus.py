"""Message bus wiring for the notification service."""

import functools

from shared.service_layer.messagebus import MessageBus
from notifications.adapters.email_sender import AbstractEmailSender
from notifications.domain.commands import SendProductCreatedEmail
from notifications.service_layer import handlers


def bootstrap(email_sender: AbstractEmailSender) -> MessageBus:
    """Build a bus whose handlers are bound to the given email transport."""
    bus = MessageBus()
    bus.register_handler(
        SendProductCreatedEmail,
        functools.partial(handlers.send_product_created_email, email_sender=email_sender),
    )
    return bus
