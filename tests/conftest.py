from typing import Any

import pytest

from checkout_functions.adapters.diagnostics import RecordingDiagnostics


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    """Fresh in-memory diagnostics stream."""
    return RecordingDiagnostics()


@pytest.fixture
def delivery_config() -> dict[str, Any]:
    return {"zip": "90210", "message": "Remote area surcharge"}


@pytest.fixture
def payment_config() -> dict[str, Any]:
    return {"paymentMethodName": "Cash", "cartTotal": 100.0}


@pytest.fixture
def payment_methods() -> list[dict[str, Any]]:
    return [
        {"id": "gid://1", "name": "Cash on Delivery"},
        {"id": "gid://2", "name": "Card"},
    ]
