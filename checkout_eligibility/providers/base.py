"""
Abstract checkout environment interface.

The engine never talks to the store or the processor. An environment adapter
(store session, cart, processor account API) implements this interface and
is read once per request into immutable snapshots before evaluation.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Mapping, Optional

from checkout_eligibility.models.context import CheckoutContext, ProcessorCapabilities


class CheckoutEnvironment(ABC):
    """Source of the per-request facts the eligibility engine needs."""

    @abstractmethod
    def get_capabilities_response(self) -> Mapping[str, str]:
        """Processor account capabilities (key -> "active"/"inactive")."""
        ...

    @abstractmethod
    def get_woocommerce_currency(self) -> str:
        """Store currency, ISO 4217."""
        ...

    @abstractmethod
    def get_account_currency(self) -> Optional[str]:
        """Processor account's default settlement currency, if known."""
        ...

    @abstractmethod
    def is_subscription_item_in_cart(self) -> bool:
        ...

    @abstractmethod
    def is_pre_order_item_in_cart(self) -> bool:
        ...

    @abstractmethod
    def get_current_order_amount(self) -> Decimal:
        """Cart or order total in major units. 0 when not priced yet."""
        ...


def snapshot_checkout(environment: CheckoutEnvironment) -> tuple[ProcessorCapabilities, CheckoutContext]:
    """
    Read an environment once into the values an evaluation consumes.

    The capability mapping is copied so later changes on the environment side
    cannot leak into an evaluation in progress.
    """
    capabilities = dict(environment.get_capabilities_response() or {})
    context = CheckoutContext(
        store_currency=environment.get_woocommerce_currency(),
        account_currency=environment.get_account_currency(),
        order_amount=environment.get_current_order_amount() or Decimal("0"),
        cart_has_recurring_item=environment.is_subscription_item_in_cart(),
        cart_has_pre_order_item=environment.is_pre_order_item_in_cart(),
    )
    return capabilities, context
