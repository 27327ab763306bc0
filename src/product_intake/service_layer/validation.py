"""Parse-then-validate step for product submissions."""

import enum
import json
import math
from dataclasses import dataclass
from typing import Optional, Union


class ValidationFailure(enum.Enum):
    """Why a submission was rejected; the value is the client-facing message."""
    MISSING_BODY = "Bad request: Missing request body."
    INVALID_JSON = "Bad request: Invalid JSON format."
    INVALID_PRODUCT = "Bad request: Missing or invalid product name or price."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProductSubmission:
    name: str
    price: Union[int, float]
    description: Optional[str] = None


def _is_number(value) -> bool:
    # bool is an int subclass but not a price
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # integer too large for a float
        return False


def _is_text(value) -> bool:
    """A string that can be written out as UTF-8 (no lone surrogates)."""
    if not isinstance(value, str):
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def parse_product_submission(body: Optional[Union[str, bytes]]) -> Union[ProductSubmission, ValidationFailure]:
    """
    Turn a raw request body into a ProductSubmission or a ValidationFailure.

    Rules:
    - empty or absent body -> MISSING_BODY
    - body that is not a JSON object -> INVALID_JSON
    - name not a non-empty string, price not a finite number, or description
      present but not a string -> INVALID_PRODUCT; strings must encode as UTF-8
    """
    if not body:
        return ValidationFailure.MISSING_BODY

    try:
        data = json.loads(body)
    except ValueError:
        return ValidationFailure.INVALID_JSON

    if not isinstance(data, dict):
        return ValidationFailure.INVALID_JSON

    name = data.get("name")
    price = data.get("price")
    description = data.get("description")

    if not _is_text(name) or not name:
        return ValidationFailure.INVALID_PRODUCT
    if not _is_number(price):
        return ValidationFailure.INVALID_PRODUCT
    if description is not None and not _is_text(description):
        return ValidationFailure.INVALID_PRODUCT

    return ProductSubmission(name=name, price=price, description=description)
