"""Domain model for product records."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from product_intake.domain.events import ProductCreated


@dataclass(unsafe_hash=True)
class Product:
    """A catalog product. Created once, never updated by this system."""
    product_id: str
    name: str
    price: Union[int, float]
    created_at: str
    description: Optional[str] = None
    object_key: Optional[str] = field(default=None, compare=False, hash=False)
    events: List = field(default_factory=list, compare=False, hash=False)

    def store(self, object_key: str) -> str:
        """
        Mark product as persisted and raise ProductCreated.

        Called by the repository only after the store accepted the write, so
        the event exists if and only if the record does.
        """
        self.object_key = object_key
        self.events.append(
            ProductCreated(
                product_id=self.product_id,
                name=self.name,
                price=self.price,
            )
        )
        return object_key

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the record shape exposed over HTTP and written to the store."""
        record = {
            "productId": self.product_id,
            "name": self.name,
            "price": self.price,
            "createdAt": self.created_at,
        }
        if self.description is not None:
            record["description"] = self.description
        return record

