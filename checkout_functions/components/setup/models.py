"""
Setup component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DeliverySetupInput:
    """Input for setting up a delivery customization."""

    function_id: str
    zip: str
    message: str


@dataclass(frozen=True)
class PaymentSetupInput:
    """Input for setting up a payment customization."""

    function_id: str
    payment_method_name: str
    cart_total: Decimal


@dataclass(frozen=True)
class MetafieldDefinition:
    """Metafield holding the function configuration on the customization."""

    namespace: str
    key: str
    value: str
    type: str = "json"


@dataclass(frozen=True)
class SetupValidationError:
    """Validation error with actionable message."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class CustomizationDefinition:
    """A customization ready to be created on the host."""

    function_id: str
    title: str
    metafield: MetafieldDefinition
    enabled: bool = True


@dataclass(frozen=True)
class CustomizationSetupOutput:
    """Output from building a customization."""

    customization: CustomizationDefinition | None
    errors: tuple[SetupValidationError, ...] = ()
    success: bool = True
