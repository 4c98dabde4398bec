"""
Checkout eligibility for payment methods, with the failing gate reported.

Before a payment method is rendered at checkout, we verify in order:
  1. Method is enabled (plugin on and method accepted in settings)
  2. Capability is active on the processor account (card and test mode exempt)
  3. Store currency is supported by the method
  4. Store and account currency match, for domestic-only methods
  5. Order amount is inside the method's limits, for BNPLs
  6. Method is reusable, if the cart will be charged again later
  7. Method supports manual capture, if the plugin only authorizes

Evaluation short-circuits on the first failure. The order only decides which
gate a diagnostic reports; the boolean outcome is the same either way.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from checkout_eligibility.engine.gates import (
    amount_limit_gate,
    capability_gate,
    capture_mode_gate,
    currency_gate,
    domestic_restriction_gate,
    reusability_gate,
)
from checkout_eligibility.methods.descriptors import MethodDescriptor
from checkout_eligibility.methods.registry import METHOD_REGISTRY
from checkout_eligibility.models.configuration import PluginConfiguration
from checkout_eligibility.models.context import CheckoutContext, ProcessorCapabilities
from checkout_eligibility.models.enums import GateName

logger = logging.getLogger("checkout_eligibility.eligibility")


@dataclass(frozen=True)
class EligibilityResult:
    """Result of a checkout eligibility evaluation."""

    eligible: bool
    failed_gate: Optional[GateName] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.eligible


def is_enabled(descriptor: MethodDescriptor, configuration: PluginConfiguration) -> bool:
    """True iff the plugin is enabled and the merchant accepts this method."""
    return configuration.is_plugin_enabled and descriptor.id in configuration.accepted_methods


def _fail(descriptor: MethodDescriptor, gate: GateName, message: str) -> EligibilityResult:
    logger.debug("%s hidden at checkout: %s (%s)", descriptor.id, gate.value, message)
    return EligibilityResult(eligible=False, failed_gate=gate, message=message)


def evaluate_checkout_eligibility(
    descriptor: MethodDescriptor,
    capabilities: ProcessorCapabilities,
    context: CheckoutContext,
    configuration: PluginConfiguration,
    account_currency: Optional[str] = None,
) -> EligibilityResult:
    """
    Decide whether a payment method may be shown for this checkout.

    Args:
        descriptor: Static metadata of the method being evaluated.
        capabilities: Processor capability snapshot (key -> "active"/"inactive").
        context: Store currency, order amount and cart state.
        configuration: Stored plugin options for this request.
        account_currency: Processor account's default currency. Overrides
            context.account_currency when given.

    Returns:
        EligibilityResult with the first failing gate, if any.
    """
    store_currency = context.store_currency
    if account_currency is None:
        account_currency = context.account_currency

    if not is_enabled(descriptor, configuration):
        return _fail(descriptor, GateName.METHOD_DISABLED, "Method not enabled in plugin settings")

    if not capability_gate(descriptor, capabilities, configuration.test_mode):
        return _fail(
            descriptor,
            GateName.CAPABILITY,
            f"Capability {descriptor.capability_key} is not active",
        )

    if not currency_gate(store_currency, descriptor.supported_currencies):
        return _fail(descriptor, GateName.CURRENCY, f"Currency not supported: {store_currency}")

    if not domestic_restriction_gate(descriptor.has_domestic_restriction, store_currency, account_currency):
        return _fail(
            descriptor,
            GateName.DOMESTIC_RESTRICTION,
            f"Store currency {store_currency} does not match account currency {account_currency or 'unknown'}",
        )

    if not amount_limit_gate(descriptor, store_currency, context.order_amount):
        return _fail(
            descriptor,
            GateName.AMOUNT_LIMIT,
            f"Order amount {context.order_amount} {store_currency} outside limits",
        )

    if not reusability_gate(descriptor.is_reusable, context.charges_off_session):
        return _fail(descriptor, GateName.REUSABILITY, "Cart requires a reusable payment method")

    if not capture_mode_gate(descriptor.supports_manual_capture, configuration.is_manual_capture):
        return _fail(descriptor, GateName.CAPTURE_MODE, "Manual capture is not supported")

    return EligibilityResult(eligible=True)


def is_enabled_at_checkout(
    descriptor: MethodDescriptor,
    capabilities: ProcessorCapabilities,
    context: CheckoutContext,
    configuration: PluginConfiguration,
    account_currency: Optional[str] = None,
) -> bool:
    """Boolean form of evaluate_checkout_eligibility."""
    return evaluate_checkout_eligibility(
        descriptor, capabilities, context, configuration, account_currency
    ).eligible


def available_methods(
    capabilities: ProcessorCapabilities,
    context: CheckoutContext,
    configuration: PluginConfiguration,
    account_currency: Optional[str] = None,
) -> list[MethodDescriptor]:
    """Every registered method eligible for this checkout, in registry order."""
    eligible = [
        descriptor
        for descriptor in METHOD_REGISTRY.values()
        if is_enabled_at_checkout(descriptor, capabilities, context, configuration, account_currency)
    ]
    logger.info(
        "Checkout %s %s: %d/%d methods available (%s)",
        context.order_amount,
        context.store_currency,
        len(eligible),
        len(METHOD_REGISTRY),
        ", ".join(d.id for d in eligible) or "none",
    )
    return eligible
