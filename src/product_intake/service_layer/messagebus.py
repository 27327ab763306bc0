"""Message bus for the product intake service."""

from __future__ import annotations
import logging
from typing import List, Dict, Callable, Type, Union, TYPE_CHECKING

from shared.domain.commands import Command, Event
from product_intake.domain.commands import CreateProduct
from product_intake.domain.events import ProductCreated
from product_intake.service_layer import handlers

if TYPE_CHECKING:
    from product_intake.service_layer.unit_of_work import AbstractProductUnitOfWork

logger = logging.getLogger(__name__)

Message = Union[CreateProduct, ProductCreated]


def handle(
    message: Message,
    uow: AbstractProductUnitOfWork,
):
    """Handle message (command or event) and everything it raises, in order."""
    results = []
    queue = [message]

    while queue:
        message = queue.pop(0)

        if isinstance(message, Event):
            handle_event(message, queue, uow)
        elif isinstance(message, Command):
            cmd_result = handle_command(message, queue, uow)
            results.append(cmd_result)
        else:
            raise Exception(f"{message} was not an Event or Command")

    return results


def handle_event(
    event: Event,
    queue: List[Message],
    uow: AbstractProductUnitOfWork,
):
    """Handle event by calling all registered event handlers.

    Handler failures are re-raised: a product whose event could not be
    published must not be reported as created.
    """
    for handler in EVENT_HANDLERS[type(event)]:
        try:
            logger.info(f"calling handler {handler.__name__} for event {type(event).__name__}")
            handler(event, uow=uow)
            queue.extend(uow.collect_new_events())
        except Exception:
            logger.exception("Exception handling event %s", event)
            raise


def handle_command(
    command: Command,
    queue: List[Message],
    uow: AbstractProductUnitOfWork,
):
    """Handle command by calling the registered command handler."""
    logger.info(f"handling command {command}")
    try:
        handler = COMMAND_HANDLERS[type(command)]
        result = handler(command, uow=uow)
        new_events = list(uow.collect_new_events())
        logger.info(f"Collected {len(new_events)} events after command: {[type(e).__name__ for e in new_events]}")
        queue.extend(new_events)
        return result
    except Exception:
        logger.exception("Exception handling command %s", command)
        raise


EVENT_HANDLERS = {
    ProductCreated: [
        handlers.publish_product_created_event,
    ],
}  # type: Dict[Type[Event], List[Callable]]

COMMAND_HANDLERS = {
    CreateProduct: handlers.create_product,
}  # type: Dict[Type[Command], Callable]
