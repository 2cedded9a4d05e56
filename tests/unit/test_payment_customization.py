"""
Payment customization tests.

Carts at or above the configured total hide the first payment method whose
name contains the configured text. Carts below it are never customized.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from checkout_functions.adapters.diagnostics import RecordingDiagnostics
from checkout_functions.components.configuration import (
    ConfigurationMalformedError,
    PaymentConfiguration,
)
from checkout_functions.components.payment_customization import (
    BELOW_THRESHOLD_MESSAGE,
    find_payment_method_to_hide,
    is_below_threshold,
    parse_cart_total,
    run,
)
from checkout_functions.domain.entities import PaymentMethod
from checkout_functions.domain.errors import CartTotalError
from checkout_functions.domain.operations import HideOperation
from tests.builders import make_payment_input


@pytest.fixture
def config() -> PaymentConfiguration:
    return PaymentConfiguration(payment_method_name="Cash", cart_total=Decimal("100"))


# --- Cart Total ---


class TestParseCartTotal:
    """Host amount parsing."""

    def test_parses_decimal_string(self) -> None:
        assert parse_cart_total("150.00") == Decimal("150.00")

    def test_parses_integer_string(self) -> None:
        assert parse_cart_total("42") == Decimal("42")

    def test_parses_exponent_string(self) -> None:
        assert parse_cart_total("1.5e2") == Decimal("150")

    @pytest.mark.parametrize(
        "amount",
        ["", "abc", "1,000.00", "1_000", " 150 ", "150.00\n", "NaN", "Infinity"],
    )
    def test_rejects_non_finite_or_garbage(self, amount: str) -> None:
        with pytest.raises(CartTotalError) as exc_info:
            parse_cart_total(amount)

        assert exc_info.value.amount == amount


class TestThreshold:
    """Threshold comparison."""

    def test_strictly_below(self, config: PaymentConfiguration) -> None:
        assert is_below_threshold(Decimal("99.99"), config) is True

    def test_equal_is_not_below(self, config: PaymentConfiguration) -> None:
        assert is_below_threshold(Decimal("100.00"), config) is False


class TestFindPaymentMethod:
    """Name search."""

    def test_first_substring_match_wins(self, config: PaymentConfiguration) -> None:
        methods = [
            PaymentMethod(id="gid://1", name="Card"),
            PaymentMethod(id="gid://2", name="Cash on Delivery"),
            PaymentMethod(id="gid://3", name="Cash (in store)"),
        ]

        method = find_payment_method_to_hide(config, methods)

        assert method is not None
        assert method.id == "gid://2"

    def test_case_sensitive(self, config: PaymentConfiguration) -> None:
        methods = [PaymentMethod(id="gid://1", name="cash on delivery")]

        assert find_payment_method_to_hide(config, methods) is None

    def test_no_methods(self, config: PaymentConfiguration) -> None:
        assert find_payment_method_to_hide(config, []) is None


# --- Entry Point ---


class TestRun:
    """End-to-end payment function behavior."""

    def test_below_threshold_yields_nothing(
        self,
        payment_config: dict,
        payment_methods: list[dict],
        diagnostics: RecordingDiagnostics,
    ) -> None:
        inp = make_payment_input(payment_config, "50.00", payment_methods)

        result = run(inp, diagnostics=diagnostics)

        assert result.is_empty
        assert diagnostics.messages == [BELOW_THRESHOLD_MESSAGE]

    def test_match_hides_first_method(
        self, payment_config: dict, payment_methods: list[dict]
    ) -> None:
        inp = make_payment_input(payment_config, "150.00", payment_methods)

        result = run(inp)

        assert result.operations == (HideOperation(payment_method_id="gid://1"),)

    def test_no_match_yields_nothing(self, payment_methods: list[dict]) -> None:
        inp = make_payment_input(
            {"paymentMethodName": "Bitcoin", "cartTotal": 100.0},
            "150.00",
            payment_methods,
        )

        assert run(inp).operations == ()

    def test_total_at_threshold_is_customized(self, payment_config: dict) -> None:
        inp = make_payment_input(
            payment_config,
            "100.00",
            [{"id": "gid://9", "name": "Cash"}],
        )

        assert run(inp).operations == (HideOperation(payment_method_id="gid://9"),)

    def test_at_most_one_hide(self, payment_config: dict) -> None:
        inp = make_payment_input(
            payment_config,
            "500",
            [
                {"id": "gid://1", "name": "Cash on Delivery"},
                {"id": "gid://2", "name": "Cash on Pickup"},
            ],
        )

        assert len(run(inp).operations) == 1

    def test_absent_configuration_yields_nothing(
        self, payment_methods: list[dict], diagnostics: RecordingDiagnostics
    ) -> None:
        inp = make_payment_input(None, "150.00", payment_methods)

        assert run(inp, diagnostics=diagnostics).is_empty
        assert BELOW_THRESHOLD_MESSAGE not in diagnostics.messages

    def test_absent_configuration_skips_amount_parsing(self, payment_methods: list[dict]) -> None:
        inp = make_payment_input(None, "not-a-number", payment_methods)

        assert run(inp).is_empty

    def test_unparsable_total_fails(self, payment_config: dict, payment_methods: list[dict]) -> None:
        inp = make_payment_input(payment_config, "not-a-number", payment_methods)

        with pytest.raises(CartTotalError):
            run(inp)

    def test_malformed_configuration_fails(self, payment_methods: list[dict]) -> None:
        inp = make_payment_input('{"paymentMethodName": "Cash"}', "150.00", payment_methods)

        with pytest.raises(ConfigurationMalformedError):
            run(inp)

    def test_same_input_same_output(self, payment_config: dict, payment_methods: list[dict]) -> None:
        inp = make_payment_input(payment_config, "150.00", payment_methods)

        assert run(inp) == run(inp)
