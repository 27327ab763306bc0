"""Simple message bus for command handling."""

import logging
from typing import Callable, Dict, Type

from shared.domain.commands import Command

logger = logging.getLogger(__name__)


class MessageBus:
    """Routes each command type to a single handler.

    Dependencies (clients, settings) are bound into the handlers at
    registration time, so handlers take the command as their only argument.
    """

    def __init__(self):
        self.command_handlers: Dict[Type[Command], Callable] = {}

    def register_handler(self, command_type: Type[Command], handler: Callable):
        """Register the handler for a command type."""
        self.command_handlers[command_type] = handler

    def handle(self, command: Command):
        """Handle a command by calling the registered handler; failures propagate."""
        command_type = type(command)

        if not isinstance(command, Command):
            raise ValueError(f"{command} is not a Command")
        if command_type not in self.command_handlers:
            raise ValueError(f"No handler registered for command {command_type.__name__}")

        handler = self.command_handlers[command_type]

        try:
            logger.info(f"Handling command {command_type.__name__}")
            return handler(command)
        except Exception as e:
            logger.error(f"Error handling command {command_type.__name__}: {e}")
            raise
