"""Commands for the notification service."""

from dataclasses import dataclass
from typing import Union

from shared.domain.commands import Command


@dataclass
class SendProductCreatedEmail(Command):
    """Command to email the catalog team about a newly created product."""
    product_id: str
    name: str
    price: Union[int, float]
    sender: str
    recipient: str
