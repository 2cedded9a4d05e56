"""
Payment customization component - Hide a payment method above a cart total.
"""

from .component import (
    BELOW_THRESHOLD_MESSAGE,
    find_payment_method_to_hide,
    is_below_threshold,
    parse_cart_total,
    project_hide,
    run,
)
from .ports import DiagnosticsPort

__all__ = [
    # Entry point
    "run",
    # Rule evaluation
    "parse_cart_total",
    "is_below_threshold",
    "find_payment_method_to_hide",
    "project_hide",
    # Ports
    "DiagnosticsPort",
    # Constants
    "BELOW_THRESHOLD_MESSAGE",
]
