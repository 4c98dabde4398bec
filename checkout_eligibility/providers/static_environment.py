"""
In-memory checkout environment.

Holds fixed answers for every environment call. Used by the test suite and
for evaluating hypothetical checkouts (e.g. "which methods would a EUR cart
of 150 see?") without a store or processor account.
"""

from decimal import Decimal
from typing import Mapping, Optional

from checkout_eligibility.models.enums import CapabilityStatus
from checkout_eligibility.providers.base import CheckoutEnvironment


class StaticCheckoutEnvironment(CheckoutEnvironment):
    """Checkout environment backed by constructor arguments."""

    def __init__(
        self,
        store_currency: str = "USD",
        capabilities: Optional[Mapping[str, str]] = None,
        account_currency: Optional[str] = None,
        order_amount: Decimal = Decimal("0"),
        subscription_in_cart: bool = False,
        pre_order_in_cart: bool = False,
    ):
        self._store_currency = store_currency
        self._capabilities = dict(capabilities or {})
        self._account_currency = account_currency
        self._order_amount = Decimal(str(order_amount))
        self._subscription_in_cart = subscription_in_cart
        self._pre_order_in_cart = pre_order_in_cart

    @classmethod
    def with_all_capabilities(
        cls, capability_keys, status: CapabilityStatus = CapabilityStatus.ACTIVE, **kwargs
    ) -> "StaticCheckoutEnvironment":
        return cls(capabilities={key: status.value for key in capability_keys}, **kwargs)

    def get_capabilities_response(self) -> Mapping[str, str]:
        return self._capabilities

    def get_woocommerce_currency(self) -> str:
        return self._store_currency

    def get_account_currency(self) -> Optional[str]:
        return self._account_currency

    def is_subscription_item_in_cart(self) -> bool:
        return self._subscription_in_cart

    def is_pre_order_item_in_cart(self) -> bool:
        return self._pre_order_in_cart

    def get_current_order_amount(self) -> Decimal:
        return self._order_amount
