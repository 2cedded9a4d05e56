"""
Configuration models.

Merchant configuration arrives as JSON with camelCase keys. Unknown keys
are ignored and every recognized key is required.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class FunctionConfiguration(BaseModel):
    """Base for configuration payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class DeliveryConfiguration(FunctionConfiguration):
    """Append ``message`` to delivery options shipping to ``zip``."""

    zip: str
    message: str


class PaymentConfiguration(FunctionConfiguration):
    """Hide the payment method named like ``payment_method_name``
    once the cart total reaches ``cart_total``."""

    payment_method_name: str
    cart_total: Decimal = Field(allow_inf_nan=False)

    @field_validator("cart_total", mode="before")
    @classmethod
    def require_number(cls, value: Any) -> Any:
        # JSON strings and booleans are not amounts
        if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
            raise PydanticCustomError("decimal_type", "Input should be a number")
        return value

    @field_serializer("cart_total", when_used="json")
    def serialize_cart_total(self, value: Decimal) -> int | float:
        # JSON number, not pydantic's default decimal string
        if value == value.to_integral_value():
            return int(value)
        return float(value)
