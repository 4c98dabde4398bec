"""Shared test fixtures."""

from decimal import Decimal

import pytest

from checkout_eligibility.methods.registry import AVAILABLE_METHOD_IDS, METHOD_REGISTRY
from checkout_eligibility.models.configuration import PluginConfiguration
from checkout_eligibility.models.context import CheckoutContext


@pytest.fixture
def active_capabilities() -> dict[str, str]:
    """Capability snapshot with every registered method approved."""
    return {d.capability_key: "active" for d in METHOD_REGISTRY.values()}


@pytest.fixture
def inactive_capabilities() -> dict[str, str]:
    return {d.capability_key: "inactive" for d in METHOD_REGISTRY.values()}


@pytest.fixture
def make_context():
    """Factory for checkout contexts; amounts go through str() so 0.3 stays exact."""

    def _make(store_currency="USD", order_amount=150, **kwargs) -> CheckoutContext:
        return CheckoutContext(
            store_currency=store_currency, order_amount=Decimal(str(order_amount)), **kwargs
        )

    return _make


@pytest.fixture
def enabled_config() -> PluginConfiguration:
    """Plugin enabled in live mode with every method accepted and immediate capture."""
    return PluginConfiguration(enabled="yes", accepted_methods=AVAILABLE_METHOD_IDS, capture="yes")


@pytest.fixture
def manual_capture_config() -> PluginConfiguration:
    return PluginConfiguration(enabled="yes", accepted_methods=AVAILABLE_METHOD_IDS, capture="no")


@pytest.fixture
def sandbox_config() -> PluginConfiguration:
    return PluginConfiguration(enabled="yes", accepted_methods=AVAILABLE_METHOD_IDS, test_mode=True)
