"""Order payload posted by the storefront, normalized into typed models.

Every field is untrusted. Missing or malformed values never fail validation,
they fall back to defaults so the notification can still be rendered.
"""
import json
import math

from pydantic import BaseModel, Field, field_validator, model_validator


def _text(value):
    if value is None:
        return ""
    return str(value)


def _number(value, default):
    # Falsy values (missing, 0, "") take the default, as the storefront does.
    if not value or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number):
        return default
    return number


def format_amount(value):
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class OrderMeta(BaseModel):
    id: str = ""
    order_number: str = ""
    order_name: str = ""
    phone: str = ""
    shipping_address: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value):
        return _text(value)


class LineItem(BaseModel):
    title: str = ""
    qty: float = 1
    price: float = 0

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data):
        if not isinstance(data, dict):
            data = {}
        return {
            "title": _text(data.get("title")),
            "qty": _number(data.get("qty"), 1),
            "price": _number(data.get("price"), 0),
        }

    @property
    def subtotal(self):
        return self.price * self.qty


class OrderRequest(BaseModel):
    order_meta: OrderMeta = Field(default_factory=OrderMeta, alias="orderMeta")
    items: list[LineItem] = Field(default_factory=list)

    @field_validator("order_meta", mode="before")
    @classmethod
    def _meta_object(cls, value):
        return value if isinstance(value, dict) else {}

    @field_validator("items", mode="before")
    @classmethod
    def _items_list(cls, value):
        return value if isinstance(value, list) else []

    @property
    def total(self):
        return sum(item.subtotal for item in self.items)


def parse_order_request(payload):
    """Build an OrderRequest from an already decoded JSON document."""
    if not isinstance(payload, dict):
        payload = {}
    return OrderRequest.model_validate(payload)


def load_order_request(request):
    """Normalize the body of a Flask request into an OrderRequest.

    The JSON parsed by the framework is used when it holds something;
    otherwise the raw body is decoded here, which covers callers that do not
    send an ``application/json`` content type. Malformed JSON raises
    ``json.JSONDecodeError``.
    """
    payload = request.get_json(silent=True)
    if not payload:
        payload = json.loads(request.get_data(as_text=True))
    return parse_order_request(payload)
