"""
Setup component - Build customizations and their configuration metafields.
"""

from .component import (
    delivery_title,
    payment_title,
    run,
    run_delivery_setup,
    run_payment_setup,
)
from .models import (
    CustomizationDefinition,
    CustomizationSetupOutput,
    DeliverySetupInput,
    MetafieldDefinition,
    PaymentSetupInput,
    SetupValidationError,
)

__all__ = [
    # Entry points
    "run",
    "run_delivery_setup",
    "run_payment_setup",
    # Titles
    "delivery_title",
    "payment_title",
    # Models
    "DeliverySetupInput",
    "PaymentSetupInput",
    "CustomizationDefinition",
    "CustomizationSetupOutput",
    "MetafieldDefinition",
    "SetupValidationError",
]
