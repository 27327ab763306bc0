"""Redis adapter for publishing product events with an out-of-band event type."""

import abc
import json
import logging
from dataclasses import asdict
from datetime import datetime
import redis

from config import get_redis_host_and_port
from shared.domain.commands import Event

logger = logging.getLogger(__name__)

r = redis.Redis(**get_redis_host_and_port())


def _camel_case(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.title() for part in rest)


def _serialize_event(event: Event) -> str:
    """Serialize event payload to JSON with camelCase keys, handling datetime objects."""
    payload = {}
    for key, value in asdict(event).items():
        if isinstance(value, datetime):
            value = value.isoformat()
        payload[_camel_case(key)] = value

    return json.dumps(payload)


def build_envelope(event: Event) -> str:
    """Wrap the serialized payload in an envelope carrying the eventType attribute."""
    return json.dumps({
        "attributes": {"eventType": type(event).__name__},
        "message": _serialize_event(event),
    })


class AbstractEventPublisher(abc.ABC):

    @abc.abstractmethod
    def publish(self, event: Event):
        raise NotImplementedError


class RedisEventPublisher(AbstractEventPublisher):
    """Publishes events to a single Redis pub/sub channel."""

    def __init__(self, channel: str, client: redis.Redis = None):
        self.channel = channel
        self.client = client or r

    def publish(self, event: Event) -> int:
        logger.info("publishing: channel=%s, event=%s", self.channel, event)
        receivers = self.client.publish(self.channel, build_envelope(event))
        logger.info("published %s to %s (%s subscribers)", type(event).__name__, self.channel, receivers)
        return receivers
