"""
Checkout function errors.

All of these are fatal: they abort the invocation. Business outcomes such as
"no configuration", "below threshold" or "no match" are never errors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigurationIssue:
    """One problem found in a configuration payload."""

    field: str
    code: str
    message: str


class CheckoutFunctionError(Exception):
    """Base class for fatal checkout function errors."""


class ConfigurationMalformedError(CheckoutFunctionError):
    """Raised when a configuration payload is present but unusable."""

    def __init__(self, issues: list[ConfigurationIssue]) -> None:
        self.issues = issues
        super().__init__(
            "Unable to parse configuration value from metafield: "
            + "; ".join(issue.message for issue in issues)
        )


class CartTotalError(CheckoutFunctionError):
    """Raised when the cart total amount is not a finite decimal."""

    def __init__(self, amount: str) -> None:
        self.amount = amount
        super().__init__(f"Cart total amount is not a valid decimal: {amount!r}")


class SnapshotError(CheckoutFunctionError):
    """Raised when host input does not match the expected snapshot shape."""

    def __init__(self, function_name: str, errors: list[str]) -> None:
        self.function_name = function_name
        self.errors = errors
        super().__init__(f"Invalid input for {function_name}: {'; '.join(errors)}")


class UnknownFunctionError(CheckoutFunctionError):
    """Raised when the runner is asked for a function it does not provide."""

    def __init__(self, function_name: str, known: list[str]) -> None:
        self.function_name = function_name
        super().__init__(
            f"Unknown function: {function_name!r} (expected one of: {', '.join(known)})"
        )
