import logging

from notifications.adapters.email_sender import AbstractEmailSender
from notifications.domain.commands import SendProductCreatedEmail
from notifications.domain.model import compose_product_created_email

logger = logging.getLogger(__name__)


def send_product_created_email(
    command: SendProductCreatedEmail,
    email_sender: AbstractEmailSender
) -> str:
    """Render and dispatch the ProductCreated email; transport errors propagate."""
    message = compose_product_created_email(
        product_id=command.product_id,
        name=command.name,
        price=command.price,
        sender=command.sender,
        recipient=command.recipient,
    )

    message_id = email_sender.send(message)
    logger.info(f"Email sent successfully for product {command.product_id}. Message ID: {message_id}")
    return message_id
