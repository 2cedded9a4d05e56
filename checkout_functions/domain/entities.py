"""
Cart snapshot entities.

Read-only views of the checkout state the host hands to a function for a
single invocation. Field names follow Python conventions; the host's
camelCase keys are accepted through aliases.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SnapshotModel(BaseModel):
    """Base for host snapshot entities (frozen, camelCase aliases)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# --- Metafield ---


class Metafield(SnapshotModel):
    value: str


class CustomizationOwner(SnapshotModel):
    """The customization a function runs for; carries the config metafield."""

    metafield: Metafield | None = None


# --- Delivery ---


class DeliveryAddress(SnapshotModel):
    zip: str | None = None


class DeliveryOption(SnapshotModel):
    handle: str
    title: str | None = None


class DeliveryGroup(SnapshotModel):
    delivery_address: DeliveryAddress | None = None
    delivery_options: tuple[DeliveryOption, ...]


class DeliveryCart(SnapshotModel):
    delivery_groups: tuple[DeliveryGroup, ...]


class DeliveryCustomizationInput(SnapshotModel):
    """Input snapshot for the delivery customization function."""

    cart: DeliveryCart
    delivery_customization: CustomizationOwner


# --- Payment ---


class MoneyV2(SnapshotModel):
    amount: str  # decimal as string


class CartCost(SnapshotModel):
    total_amount: MoneyV2


class PaymentCart(SnapshotModel):
    cost: CartCost


class PaymentMethod(SnapshotModel):
    id: str
    name: str


class PaymentCustomizationInput(SnapshotModel):
    """Input snapshot for the payment customization function."""

    cart: PaymentCart
    payment_methods: tuple[PaymentMethod, ...]
    payment_customization: CustomizationOwner
