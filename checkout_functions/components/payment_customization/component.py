"""
Payment customization component - Hide a payment method above a cart total.

Once the cart total reaches the configured threshold, the first payment
method whose name contains the configured text is hidden. Carts below the
threshold are never customized.

Pure function - no I/O operations.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import Decimal

from checkout_functions.components.configuration import (
    PaymentConfiguration,
    load_configuration,
)
from checkout_functions.domain.entities import (
    PaymentCustomizationInput,
    PaymentMethod,
)
from checkout_functions.domain.errors import CartTotalError
from checkout_functions.domain.operations import (
    NO_CHANGES,
    FunctionResult,
    HideOperation,
)
from .ports import DiagnosticsPort

BELOW_THRESHOLD_MESSAGE = "Cart total is not high enough, no need to hide the payment method."

# Plain decimal: no whitespace, digit separators, or inf/nan
AMOUNT_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_cart_total(amount: str) -> Decimal:
    """
    Parse the host's decimal-as-string amount.

    Raises:
        CartTotalError: amount is not a finite decimal.
    """
    if not AMOUNT_PATTERN.fullmatch(amount):
        raise CartTotalError(amount)
    return Decimal(amount)


def is_below_threshold(total: Decimal, config: PaymentConfiguration) -> bool:
    return total < config.cart_total


def find_payment_method_to_hide(
    config: PaymentConfiguration,
    methods: Sequence[PaymentMethod],
) -> PaymentMethod | None:
    """First method whose name contains the configured text (case-sensitive)."""
    return next(
        (method for method in methods if config.payment_method_name in method.name),
        None,
    )


def project_hide(method: PaymentMethod | None) -> FunctionResult:
    if method is None:
        return NO_CHANGES
    return FunctionResult(operations=(HideOperation(payment_method_id=method.id),))


def run(
    inp: PaymentCustomizationInput,
    *,
    diagnostics: DiagnosticsPort | None = None,
) -> FunctionResult:
    """
    Main entry point for the payment customization function.

    Args:
        inp: Host input snapshot.
        diagnostics: Optional diagnostics stream.

    Returns:
        FunctionResult with at most one hide operation.

    Raises:
        ConfigurationMalformedError: configuration metafield is unusable.
        CartTotalError: cart total amount cannot be parsed.
    """
    metafield = inp.payment_customization.metafield
    config = load_configuration(
        metafield.value if metafield is not None else None,
        PaymentConfiguration,
    )
    if config is None:
        if diagnostics is not None:
            diagnostics.emit("No configuration metafield, no payment method to hide.")
        return NO_CHANGES

    # Threshold check runs before the name search
    total = parse_cart_total(inp.cart.cost.total_amount.amount)
    if is_below_threshold(total, config):
        if diagnostics is not None:
            diagnostics.emit(BELOW_THRESHOLD_MESSAGE)
        return NO_CHANGES

    return project_hide(find_payment_method_to_hide(config, inp.payment_methods))
