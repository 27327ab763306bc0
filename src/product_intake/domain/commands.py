"""Commands for the product intake service."""

from dataclasses import dataclass
from typing import Optional, Union

from shared.domain.commands import Command


@dataclass
class CreateProduct(Command):
    """Command to persist a new product record and announce it."""
    product_id: str
    name: str
    price: Union[int, float]
    created_at: str  # ISO-8601 UTC, set by the API
    description: Optional[str] = None
