"""
Setup component - Build customizations for merchants.

Produces the customization title and the configuration metafield the host
needs to create a customization. Sending it is the caller's job; this
module does no I/O.
"""

from __future__ import annotations

from decimal import Decimal

from checkout_functions.components.configuration import (
    DeliveryConfiguration,
    PaymentConfiguration,
    dump_configuration,
)
from checkout_functions.domain.metafields import (
    CONFIGURATION_KEY,
    CONFIGURATION_TYPE,
    DELIVERY_CUSTOMIZATION_NAMESPACE,
    PAYMENT_CUSTOMIZATION_NAMESPACE,
)

from .models import (
    CustomizationDefinition,
    CustomizationSetupOutput,
    DeliverySetupInput,
    MetafieldDefinition,
    PaymentSetupInput,
    SetupValidationError,
)


def delivery_title(zip_code: str) -> str:
    return f"Display message for postal code: {zip_code}"


def payment_title(payment_method_name: str, cart_total: Decimal) -> str:
    return f"Hide {payment_method_name} if cart total is larger than {cart_total}"


def _require(value: str, field: str) -> list[SetupValidationError]:
    if not value or not value.strip():
        return [
            SetupValidationError(
                field=field,
                code="required",
                message=f"Field '{field}' is required",
            )
        ]
    return []


def _validate_delivery(inp: DeliverySetupInput) -> list[SetupValidationError]:
    errors: list[SetupValidationError] = []
    errors.extend(_require(inp.function_id, "function_id"))
    errors.extend(_require(inp.zip, "zip"))
    return errors


def _validate_payment(inp: PaymentSetupInput) -> list[SetupValidationError]:
    errors: list[SetupValidationError] = []
    errors.extend(_require(inp.function_id, "function_id"))
    errors.extend(_require(inp.payment_method_name, "payment_method_name"))

    if not inp.cart_total.is_finite():
        errors.append(
            SetupValidationError(
                field="cart_total",
                code="invalid_value",
                message="Field 'cart_total' must be a finite number",
            )
        )
    elif inp.cart_total < 0:
        errors.append(
            SetupValidationError(
                field="cart_total",
                code="min_value",
                message="Field 'cart_total' must not be negative",
            )
        )
    return errors


def run_delivery_setup(inp: DeliverySetupInput) -> CustomizationSetupOutput:
    """
    Build a delivery customization.

    Args:
        inp: Function ID, postal code and message chosen by the merchant.

    Returns:
        CustomizationSetupOutput with the definition, or validation errors.
    """
    errors = _validate_delivery(inp)
    if errors:
        return CustomizationSetupOutput(customization=None, errors=tuple(errors), success=False)

    config = DeliveryConfiguration(zip=inp.zip, message=inp.message)
    return CustomizationSetupOutput(
        customization=CustomizationDefinition(
            function_id=inp.function_id,
            title=delivery_title(inp.zip),
            metafield=MetafieldDefinition(
                namespace=DELIVERY_CUSTOMIZATION_NAMESPACE,
                key=CONFIGURATION_KEY,
                value=dump_configuration(config),
                type=CONFIGURATION_TYPE,
            ),
        )
    )


def run_payment_setup(inp: PaymentSetupInput) -> CustomizationSetupOutput:
    """
    Build a payment customization.

    Args:
        inp: Function ID, payment method name and cart total threshold.

    Returns:
        CustomizationSetupOutput with the definition, or validation errors.
    """
    errors = _validate_payment(inp)
    if errors:
        return CustomizationSetupOutput(customization=None, errors=tuple(errors), success=False)

    config = PaymentConfiguration(
        payment_method_name=inp.payment_method_name,
        cart_total=inp.cart_total,
    )
    return CustomizationSetupOutput(
        customization=CustomizationDefinition(
            function_id=inp.function_id,
            title=payment_title(inp.payment_method_name, inp.cart_total),
            metafield=MetafieldDefinition(
                namespace=PAYMENT_CUSTOMIZATION_NAMESPACE,
                key=CONFIGURATION_KEY,
                value=dump_configuration(config),
                type=CONFIGURATION_TYPE,
            ),
        )
    )


def run(inp: DeliverySetupInput | PaymentSetupInput) -> CustomizationSetupOutput:
    """
    Main entry point for the setup component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, DeliverySetupInput):
        return run_delivery_setup(inp)
    elif isinstance(inp, PaymentSetupInput):
        return run_payment_setup(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
