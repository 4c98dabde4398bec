"""Tests for the individual checkout gates."""

from decimal import Decimal

import pytest

from checkout_eligibility.engine.errors import UnknownCurrency
from checkout_eligibility.engine.gates import (
    capability_gate,
    capture_mode_gate,
    currency_gate,
    domestic_restriction_gate,
    is_capability_active,
    is_inside_currency_limits,
    limits_for_currency,
    reusability_gate,
)
from checkout_eligibility.methods.descriptors import AmountLimit, MethodDescriptor
from checkout_eligibility.methods.registry import get_descriptor


class TestCapability:
    def test_active(self):
        assert is_capability_active({"eps_payments": "active"}, "eps_payments")

    def test_inactive(self):
        assert not is_capability_active({"eps_payments": "inactive"}, "eps_payments")

    def test_absent_key(self):
        assert not is_capability_active({}, "eps_payments")

    def test_unexpected_status(self):
        assert not is_capability_active({"eps_payments": "pending"}, "eps_payments")

    def test_card_exemption_is_a_descriptor_flag(self):
        assert capability_gate(get_descriptor("card"), {"card_payments": "inactive"})
        assert not capability_gate(get_descriptor("link"), {"link_payments": "inactive"})

    def test_test_mode_passes_every_method(self):
        assert capability_gate(get_descriptor("link"), {"link_payments": "inactive"}, test_mode=True)
        assert capability_gate(get_descriptor("sepa_debit"), {}, test_mode=True)


class TestCurrency:
    def test_empty_set_accepts_everything(self):
        assert currency_gate("CASHMONEY", ())

    def test_member(self):
        assert currency_gate("EUR", ("EUR", "PLN"))

    def test_case_insensitive(self):
        assert currency_gate("pln", ("EUR", "PLN"))

    def test_non_member(self):
        assert not currency_gate("USD", ("EUR", "PLN"))


class TestDomesticRestriction:
    def test_unrestricted_always_passes(self):
        assert domestic_restriction_gate(False, "MXN", None)
        assert domestic_restriction_gate(False, "MXN", "USD")

    def test_match(self):
        assert domestic_restriction_gate(True, "USD", "usd")

    def test_mismatch(self):
        assert not domestic_restriction_gate(True, "MXN", "USD")

    def test_missing_account_currency_fails_closed(self):
        assert not domestic_restriction_gate(True, "USD", None)


class TestCurrencyLimits:
    @pytest.fixture
    def limited(self):
        return MethodDescriptor(
            id="limited",
            label="Limited",
            is_reusable=False,
            retrievable_type="limited",
            amount_limits={
                "USD": AmountLimit(Decimal("10"), Decimal("100")),
                "EUR": AmountLimit(min=Decimal("5")),
                "GBP": AmountLimit(max=Decimal("50")),
            },
        )

    @pytest.mark.parametrize("method_id", ["affirm", "afterpay_clearpay"])
    def test_bnpl_outside_limits(self, method_id):
        assert not is_inside_currency_limits(get_descriptor(method_id), "USD", Decimal("0.3"))

    @pytest.mark.parametrize("method_id", ["affirm", "afterpay_clearpay"])
    def test_bnpl_inside_limits(self, method_id):
        assert is_inside_currency_limits(get_descriptor(method_id), "USD", Decimal("150"))

    @pytest.mark.parametrize("method_id", ["affirm", "afterpay_clearpay"])
    def test_bnpl_zero_amount(self, method_id):
        assert is_inside_currency_limits(get_descriptor(method_id), "USD", Decimal("0"))

    def test_bounds_are_inclusive(self, limited):
        assert is_inside_currency_limits(limited, "USD", Decimal("10"))
        assert is_inside_currency_limits(limited, "USD", Decimal("100"))
        assert not is_inside_currency_limits(limited, "USD", Decimal("100.01"))

    def test_missing_max_is_unbounded(self, limited):
        assert is_inside_currency_limits(limited, "EUR", Decimal("1000000"))
        assert not is_inside_currency_limits(limited, "EUR", Decimal("4.99"))

    def test_missing_min_is_unbounded(self, limited):
        assert is_inside_currency_limits(limited, "GBP", Decimal("0.01"))
        assert not is_inside_currency_limits(limited, "GBP", Decimal("51"))

    def test_unknown_currency_fails_closed(self, limited):
        assert not is_inside_currency_limits(limited, "JPY", Decimal("50"))

    def test_unknown_currency_fails_closed_even_for_zero(self, limited):
        assert not is_inside_currency_limits(limited, "JPY", Decimal("0"))

    def test_lookup_is_case_insensitive(self, limited):
        assert is_inside_currency_limits(limited, "usd", Decimal("50"))

    def test_no_table_always_passes(self):
        assert is_inside_currency_limits(get_descriptor("card"), "JPY", Decimal("999999"))

    def test_strict_lookup_raises(self, limited):
        with pytest.raises(UnknownCurrency) as exc:
            limits_for_currency(limited, "JPY", strict=True)
        assert exc.value.currency == "JPY"
        assert exc.value.method_id == "limited"

    def test_non_strict_lookup_returns_none(self, limited):
        assert limits_for_currency(limited, "JPY") is None


class TestReusability:
    def test_no_recurring_item(self):
        assert reusability_gate(False, False)
        assert reusability_gate(True, False)

    def test_recurring_item(self):
        assert reusability_gate(True, True)
        assert not reusability_gate(False, True)


class TestCaptureMode:
    def test_immediate_capture(self):
        assert capture_mode_gate(False, manual_capture=False)

    def test_manual_capture(self):
        assert capture_mode_gate(True, manual_capture=True)
        assert not capture_mode_gate(False, manual_capture=True)
