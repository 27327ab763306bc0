"""Domain events for the product intake service."""

from dataclasses import dataclass
from typing import Union

from shared.domain.commands import Event


@dataclass
class ProductCreated(Event):
    """Event raised when a product record has been written to the store."""
    product_id: str
    name: str
    price: Union[int, float]
