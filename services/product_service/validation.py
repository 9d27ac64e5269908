"""
Parse-and-validate boundary for product payloads.

Payloads come straight from JSON bodies, where numbers typed into a form
often arrive as strings. Everything is converted here, before the service
touches the store; nothing downstream relies on implicit coercion.
"""
import math
from typing import Any, Mapping

from .errors import InvalidField, MissingField
from .schemas import ProductFields

DEFAULT_DESCRIPTION = ""
DEFAULT_CATEGORY = "General"
PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/150/999999/ffffff?text=Product"
# Largest value an SQLite INTEGER column can hold.
MAX_QUANTITY = 2 ** 63 - 1

_OPTIONAL_DEFAULTS = {
    "description": DEFAULT_DESCRIPTION,
    "category": DEFAULT_CATEGORY,
    "image_url": PLACEHOLDER_IMAGE_URL,
}


def parse_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MissingField("name")
    return value.strip()


def parse_price(value: Any) -> float:
    if value is None or isinstance(value, bool):
        raise InvalidField("price", "must be a non-negative number")

    if isinstance(value, (int, float)):
        try:
            price = float(value)
        except OverflowError:
            raise InvalidField("price", "must be a non-negative number") from None
    elif isinstance(value, str):
        try:
            price = float(value.strip())
        except ValueError:
            raise InvalidField("price", "must be a non-negative number") from None
    else:
        raise InvalidField("price", "must be a non-negative number")

    if not math.isfinite(price) or price < 0:
        raise InvalidField("price", "must be a non-negative number")
    return price


def parse_quantity(value: Any) -> int:
    if value is None or isinstance(value, bool):
        raise InvalidField("quantity", "must be a non-negative integer")

    if isinstance(value, int):
        quantity = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise InvalidField("quantity", "must be a non-negative integer")
        quantity = int(value)
    elif isinstance(value, str):
        try:
            quantity = int(value.strip())
        except ValueError:
            raise InvalidField("quantity", "must be a non-negative integer") from None
    else:
        raise InvalidField("quantity", "must be a non-negative integer")

    if quantity < 0 or quantity > MAX_QUANTITY:
        raise InvalidField("quantity", "must be a non-negative integer")
    return quantity


def _parse_text(field: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidField(field, "must be text")
    return value


def _required_fields(payload: Mapping[str, Any]) -> dict:
    # Order matters: name, then price, then quantity.
    return {
        "name": parse_name(payload.get("name")),
        "price": parse_price(payload.get("price")),
        "quantity": parse_quantity(payload.get("quantity")),
    }


def validate_for_create(payload: Mapping[str, Any]) -> ProductFields:
    """Validate a create payload, filling defaults for omitted optional fields."""
    fields = _required_fields(payload)
    for field, default in _OPTIONAL_DEFAULTS.items():
        value = payload.get(field)
        fields[field] = _parse_text(field, value) if value else default
    return ProductFields(**fields)


def validate_for_update(payload: Mapping[str, Any]) -> ProductFields:
    """
    Validate an update payload.

    Updates overwrite the whole row, so every field must be supplied and the
    optional text fields are written exactly as given.
    """
    fields = _required_fields(payload)
    for field in _OPTIONAL_DEFAULTS:
        value = payload.get(field)
        if value is None:
            raise MissingField(field)
        fields[field] = _parse_text(field, value)
    return ProductFields(**fields)
