"""
Function runner - Host boundary for checkout functions.

Validates host JSON into the function's input snapshot, runs the function
and encodes the result the way the host reads it. All fatal errors
propagate to the caller as CheckoutFunctionError subclasses.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from checkout_functions.components import delivery_customization, payment_customization
from checkout_functions.domain.entities import (
    DeliveryCustomizationInput,
    PaymentCustomizationInput,
)
from checkout_functions.domain.errors import SnapshotError, UnknownFunctionError
from checkout_functions.domain.metafields import (
    DELIVERY_CUSTOMIZATION_NAMESPACE,
    PAYMENT_CUSTOMIZATION_NAMESPACE,
)
from checkout_functions.domain.operations import FunctionResult, to_wire
from checkout_functions.ports.diagnostics import DiagnosticsPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredFunction:
    """A checkout function the runner can invoke."""

    name: str
    input_model: type[BaseModel]
    handler: Callable[..., FunctionResult]
    metafield_namespace: str


FUNCTIONS: dict[str, RegisteredFunction] = {
    "delivery-customization": RegisteredFunction(
        name="delivery-customization",
        input_model=DeliveryCustomizationInput,
        handler=delivery_customization.run,
        metafield_namespace=DELIVERY_CUSTOMIZATION_NAMESPACE,
    ),
    "payment-customization": RegisteredFunction(
        name="payment-customization",
        input_model=PaymentCustomizationInput,
        handler=payment_customization.run,
        metafield_namespace=PAYMENT_CUSTOMIZATION_NAMESPACE,
    ),
}


def get_function(name: str) -> RegisteredFunction:
    try:
        return FUNCTIONS[name]
    except KeyError:
        raise UnknownFunctionError(name, sorted(FUNCTIONS)) from None


def parse_input(function: RegisteredFunction, input_json: str | bytes) -> BaseModel:
    """
    Validate host JSON into the function's input snapshot.

    Raises:
        SnapshotError: input is not JSON or does not match the snapshot shape.
    """
    try:
        return function.input_model.model_validate_json(input_json)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or '_input'}: {err['msg']}"
            for err in e.errors()
        ]
        raise SnapshotError(function.name, errors) from e


def invoke(
    name: str,
    input_json: str | bytes,
    *,
    diagnostics: DiagnosticsPort | None = None,
) -> dict[str, Any]:
    """Run a function on host JSON and return the wire-shaped result."""
    function = get_function(name)
    snapshot = parse_input(function, input_json)
    result = function.handler(snapshot, diagnostics=diagnostics)
    logger.debug(
        "%s (%s) produced %d operation(s)",
        name,
        function.metafield_namespace,
        len(result.operations),
    )
    return to_wire(result)


def run_function(
    name: str,
    input_json: str | bytes,
    *,
    diagnostics: DiagnosticsPort | None = None,
) -> str:
    """Run a function on host JSON and return the result as JSON text."""
    return json.dumps(invoke(name, input_json, diagnostics=diagnostics))
