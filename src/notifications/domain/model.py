"""Message and email models for the notification service."""

import html
from dataclasses import dataclass
from typing import Dict, Union

from pydantic import BaseModel, EmailStr, Field

PRODUCT_CREATED = "ProductCreated"


class MessageEnvelope(BaseModel):
    """Channel message: attributes travel beside the payload, not inside it."""
    attributes: Dict[str, str] = Field(default_factory=dict)
    message: str

    @property
    def event_type(self):
        return self.attributes.get("eventType")


class ProductCreatedPayload(BaseModel):
    product_id: str = Field(alias="productId")
    name: str
    price: Union[int, float]


class NotificationAddresses(BaseModel):
    sender: EmailStr
    recipient: EmailStr


@dataclass(frozen=True)
class EmailMessage:
    source: str
    destination: str
    subject: str
    html_body: str


def compose_product_created_email(product_id: str, name: str, price, sender: str, recipient: str) -> EmailMessage:
    """Render the fixed ProductCreated notification template."""
    html_body = f"""
      <p>A new product has been added to the catalog:</p>
      <ul>
        <li><strong>ID:</strong> {html.escape(product_id)}</li>
        <li><strong>Name:</strong> {html.escape(name)}</li>
        <li><strong>Price:</strong> {price}</li>
      </ul>
      <p>This is an automated email.</p>
    """
    return EmailMessage(
        source=sender,
        destination=recipient,
        subject=f"New Product Added: {name}",
        html_body=html_body,
    )
