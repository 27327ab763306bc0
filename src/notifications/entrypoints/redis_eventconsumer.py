"""Redis event consumer for notifications - emails the team about ProductCreated events."""

import enum
import logging
from typing import Iterable, List, Optional

import redis
from pydantic import ValidationError

import config
from shared.service_layer.messagebus import MessageBus
from notifications.adapters import email_sender
from notifications.domain.commands import SendProductCreatedEmail
from notifications.domain.model import (
    PRODUCT_CREATED,
    MessageEnvelope,
    NotificationAddresses,
    ProductCreatedPayload,
)
from notifications.service_layer import messagebus

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

r = redis.Redis(**config.get_redis_host_and_port())
bus = messagebus.bootstrap(email_sender.from_config())


class NotificationOutcome(enum.Enum):
    SENT = "sent"
    SKIPPED = "skipped"
    PARSE_ERROR = "parse_error"
    SEND_FAILED = "send_failed"


def main():
    """Main entry point for Redis event consumer."""
    logger.info("Notification Redis pubsub consumer starting")

    channel = config.get_product_events_channel()
    if not channel:
        logger.error("Configuration error: PRODUCT_EVENTS_CHANNEL is not set")
        return

    batch_config = config.get_batch_config()

    pubsub = r.pubsub(ignore_subscribe_messages=True)
    pubsub.subscribe(channel)

    logger.info(f"Subscribed to '{channel}' channel, waiting for messages...")

    while True:
        batch = next_batch(pubsub, batch_config["max_size"], batch_config["wait_seconds"])
        if batch:
            handle_product_events(batch)


def next_batch(pubsub, max_size: int, wait_seconds: float) -> List[dict]:
    """Collect up to max_size pending messages, in delivery order."""
    batch = []
    while len(batch) < max_size:
        m = pubsub.get_message(timeout=wait_seconds)
        if m is None:
            break
        batch.append(m)
    return batch


def handle_product_events(batch: Iterable[dict], message_bus: Optional[MessageBus] = None) -> List[NotificationOutcome]:
    """
    Handle a batch of product event messages from Redis.

    Sender and recipient addresses are read once per batch; if they are
    missing the whole batch is skipped. Otherwise every message is handled
    on its own and its outcome recorded, so one bad message never stops
    the rest. Nothing is raised to the caller.

    Args:
        batch: Redis message dictionaries
        message_bus: Bus to dispatch email commands through, defaults to the module bus

    Returns:
        One NotificationOutcome per handled message, empty if the batch was skipped
    """
    batch = list(batch)
    logger.info("Received batch of %d messages", len(batch))
    logger.debug("Batch contents: %s", batch)

    try:
        addresses = NotificationAddresses(**config.get_notification_addresses())
    except ValidationError as e:
        logger.error(
            "Configuration error: missing or invalid sender or recipient email address "
            "(%d errors), skipping batch", e.error_count()
        )
        return []

    message_bus = message_bus or bus
    return [handle_product_event(m, addresses, message_bus) for m in batch]


def handle_product_event(m: dict, addresses: NotificationAddresses, bus: MessageBus) -> NotificationOutcome:
    """Handle a single message; every failure is logged and turned into an outcome."""
    try:
        envelope = MessageEnvelope.model_validate_json(m.get("data") or b"")
    except ValidationError as e:
        logger.error(f"Error parsing message envelope: {e}")
        return NotificationOutcome.PARSE_ERROR

    if envelope.event_type != PRODUCT_CREATED:
        logger.info(f"Skipping message with eventType: {envelope.event_type}")
        return NotificationOutcome.SKIPPED

    try:
        payload = ProductCreatedPayload.model_validate_json(envelope.message)
    except ValidationError as e:
        logger.error(f"Error parsing product event message body: {e}")
        return NotificationOutcome.PARSE_ERROR

    logger.info(f"Parsed product data: {payload}")

    cmd = SendProductCreatedEmail(
        product_id=payload.product_id,
        name=payload.name,
        price=payload.price,
        sender=addresses.sender,
        recipient=addresses.recipient,
    )

    try:
        bus.handle(cmd)
    except Exception as e:
        logger.error(f"Error sending email for product {payload.product_id}: {e}")
        return NotificationOutcome.SEND_FAILED

    return NotificationOutcome.SENT


if __name__ == "__main__":
    main()
