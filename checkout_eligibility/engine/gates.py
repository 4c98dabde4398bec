"""
Checkout gates for payment method eligibility.

Each gate is a pure function answering one question about a method in the
current checkout:
  1. Capability: is the method approved on the processor account?
  2. Currency: does the method accept the store currency?
  3. Domestic: do store and account currency match, where required?
  4. Amount limit: is the order amount inside the method's limits?
  5. Reusability: can the method be charged again later, if the cart needs it?
  6. Capture mode: can the method be authorized now and captured later?

checkout_eligibility.engine.eligibility composes them into a single decision.
"""

import logging
from decimal import Decimal
from typing import Iterable, Mapping, Optional

from checkout_eligibility.engine.errors import UnknownCurrency
from checkout_eligibility.methods.descriptors import AmountLimit, MethodDescriptor
from checkout_eligibility.models.enums import CapabilityStatus

logger = logging.getLogger("checkout_eligibility.gates")


def _same_currency(a: Optional[str], b: Optional[str]) -> bool:
    return a is not None and b is not None and a.strip().lower() == b.strip().lower()


def is_capability_active(capabilities: Mapping[str, str], capability_key: str) -> bool:
    """True iff the processor reports the capability as active. Absent keys are inactive."""
    return capabilities.get(capability_key) == CapabilityStatus.ACTIVE.value


def capability_gate(
    descriptor: MethodDescriptor,
    capabilities: Mapping[str, str],
    test_mode: bool = False,
) -> bool:
    """Test-mode accounts treat every capability as active."""
    if test_mode or descriptor.capability_always_active:
        return True
    return is_capability_active(capabilities, descriptor.capability_key)


def currency_gate(store_currency: str, supported_currencies: Iterable[str]) -> bool:
    """An empty supported set means the method accepts every currency."""
    supported = list(supported_currencies)
    if not supported:
        return True
    return any(_same_currency(store_currency, currency) for currency in supported)


def domestic_restriction_gate(
    has_domestic_restriction: bool,
    store_currency: str,
    account_currency: Optional[str],
) -> bool:
    """Domestic-only methods need a known account currency equal to the store currency."""
    if not has_domestic_restriction:
        return True
    return _same_currency(store_currency, account_currency)


def limits_for_currency(
    descriptor: MethodDescriptor,
    currency: str,
    strict: bool = False,
) -> Optional[AmountLimit]:
    """
    Amount-limit row for a currency.

    Args:
        descriptor: Method whose limit table to read.
        currency: ISO 4217 code, any case.
        strict: Raise instead of returning None when the row is missing.

    Raises:
        UnknownCurrency: If strict and the method has no row for the currency.
    """
    table = descriptor.amount_limits or {}
    row = table.get((currency or "").strip().upper())
    if row is None and strict:
        raise UnknownCurrency(descriptor.id, currency)
    return row


def is_inside_currency_limits(descriptor: MethodDescriptor, currency: str, order_amount: Decimal) -> bool:
    """
    Check the order amount against the method's limits for a currency.

    Methods without a limit table always pass. A currency with no row fails
    closed. An order amount of exactly 0 (cart not priced yet, or a free
    order) always passes.
    """
    if not descriptor.has_amount_limits:
        return True

    row = limits_for_currency(descriptor, currency)
    if row is None:
        logger.debug("No %s amount limits for %s, failing closed", currency, descriptor.id)
        return False

    amount = Decimal(str(order_amount))
    if amount == 0:
        return True
    return row.contains(amount)


def amount_limit_gate(descriptor: MethodDescriptor, store_currency: str, order_amount: Decimal) -> bool:
    return is_inside_currency_limits(descriptor, store_currency, order_amount)


def reusability_gate(is_reusable: bool, cart_has_recurring_item: bool) -> bool:
    """Carts that create a recurring charge may only use reusable methods."""
    if not cart_has_recurring_item:
        return True
    return is_reusable


def capture_mode_gate(supports_manual_capture: bool, manual_capture: bool) -> bool:
    if not manual_capture:
        return True
    return supports_manual_capture
