"""
Registry of every payment method the plugin can offer.

Maps method ids to their static descriptor: label, reusability, supported
currencies, domestic restriction, per-currency amount limits and the
stored-token family. Built once at import time and never modified.

Ordering matters: METHOD_REGISTRY iterates in the order methods are listed
on the settings page, which is also the default checkout order.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, Optional

from checkout_eligibility.methods.descriptors import AmountLimit, MethodDescriptor
from checkout_eligibility.models.enums import PaymentMethodId


def _limits(table: dict[str, tuple[str, str]]) -> Mapping[str, AmountLimit]:
    return MappingProxyType(
        {currency: AmountLimit(Decimal(lo), Decimal(hi)) for currency, (lo, hi) in table.items()}
    )


_DESCRIPTORS = (
    # ─── Cards ─────────────────────────────────────────────────────────
    # Card payments are enabled on every account type this plugin targets,
    # so the capability flag is not consulted.
    MethodDescriptor(
        id=PaymentMethodId.CARD.value,
        label="Credit / Debit Card",
        is_reusable=True,
        retrievable_type="card",
        capability_always_active=True,
        supports_manual_capture=True,
    ),
    # ─── Redirect / voucher methods (single use) ───────────────────────
    MethodDescriptor(
        id=PaymentMethodId.ALIPAY.value,
        label="Alipay",
        is_reusable=False,
        retrievable_type="alipay",
        supported_currencies=("AUD", "CAD", "CNY", "EUR", "GBP", "HKD", "JPY", "MYR", "NZD", "USD"),
    ),
    MethodDescriptor(
        id=PaymentMethodId.GIROPAY.value,
        label="giropay",
        is_reusable=False,
        retrievable_type="giropay",
        supported_currencies=("EUR",),
    ),
    MethodDescriptor(
        id=PaymentMethodId.P24.value,
        label="Przelewy24",
        is_reusable=False,
        retrievable_type="p24",
        supported_currencies=("EUR", "PLN"),
    ),
    MethodDescriptor(
        id=PaymentMethodId.EPS.value,
        label="EPS",
        is_reusable=False,
        retrievable_type="eps",
        supported_currencies=("EUR",),
    ),
    # ─── SEPA Direct Debit family ──────────────────────────────────────
    # iDEAL, Sofort and Bancontact payments generate a SEPA mandate that is
    # saved and charged as sepa_debit afterwards.
    MethodDescriptor(
        id=PaymentMethodId.SEPA_DEBIT.value,
        label="SEPA Direct Debit",
        is_reusable=True,
        retrievable_type="sepa_debit",
        supported_currencies=("EUR",),
    ),
    MethodDescriptor(
        id=PaymentMethodId.SOFORT.value,
        label="Sofort",
        is_reusable=True,
        retrievable_type="sepa_debit",
        supported_currencies=("EUR",),
    ),
    MethodDescriptor(
        id=PaymentMethodId.BANCONTACT.value,
        label="Bancontact",
        is_reusable=True,
        retrievable_type="sepa_debit",
        supported_currencies=("EUR",),
    ),
    MethodDescriptor(
        id=PaymentMethodId.IDEAL.value,
        label="iDEAL",
        is_reusable=True,
        retrievable_type="sepa_debit",
        supported_currencies=("EUR",),
    ),
    MethodDescriptor(
        id=PaymentMethodId.BOLETO.value,
        label="Boleto",
        is_reusable=False,
        retrievable_type="boleto",
        supported_currencies=("BRL",),
    ),
    MethodDescriptor(
        id=PaymentMethodId.OXXO.value,
        label="OXXO",
        is_reusable=False,
        retrievable_type="oxxo",
        supported_currencies=("MXN",),
    ),
    MethodDescriptor(
        id=PaymentMethodId.WECHAT_PAY.value,
        label="WeChat Pay",
        is_reusable=False,
        retrievable_type="wechat_pay",
        supported_currencies=(
            "AUD", "CAD", "CHF", "CNY", "DKK", "EUR", "GBP", "HKD", "JPY", "NOK", "SEK", "SGD", "USD",
        ),
    ),
    # ─── Buy now, pay later ────────────────────────────────────────────
    # Only available for domestic transactions (store currency must match the
    # account's settlement currency) and within per-currency order limits.
    MethodDescriptor(
        id=PaymentMethodId.AFFIRM.value,
        label="Affirm",
        is_reusable=False,
        retrievable_type="affirm",
        supported_currencies=("USD", "CAD"),
        has_domestic_restriction=True,
        amount_limits=_limits({
            "USD": ("50", "30000"),
            "CAD": ("50", "30000"),
        }),
        supports_manual_capture=True,
    ),
    MethodDescriptor(
        id=PaymentMethodId.AFTERPAY_CLEARPAY.value,
        label="Afterpay",
        is_reusable=False,
        retrievable_type="afterpay_clearpay",
        supported_currencies=("USD", "CAD", "GBP", "AUD", "NZD"),
        has_domestic_restriction=True,
        amount_limits=_limits({
            "USD": ("1", "2000"),
            "CAD": ("1", "2000"),
            "GBP": ("1", "1000"),
            "AUD": ("1", "2000"),
            "NZD": ("1", "2000"),
        }),
        supports_manual_capture=True,
    ),
    MethodDescriptor(
        id=PaymentMethodId.KLARNA.value,
        label="Klarna",
        is_reusable=False,
        retrievable_type="klarna",
        supported_currencies=(
            "USD", "EUR", "GBP", "DKK", "NOK", "SEK", "CZK", "PLN", "CHF", "AUD", "NZD", "CAD",
        ),
        has_domestic_restriction=True,
        amount_limits=_limits({
            "USD": ("1", "10000"),
            "EUR": ("1", "10000"),
            "GBP": ("1", "5000"),
            "DKK": ("1", "100000"),
            "NOK": ("1", "100000"),
            "SEK": ("1", "150000"),
            "CZK": ("1", "250000"),
            "PLN": ("1", "45000"),
            "CHF": ("1", "10000"),
            "AUD": ("1", "10000"),
            "NZD": ("1", "10000"),
            "CAD": ("1", "10000"),
        }),
        supports_manual_capture=True,
    ),
    # ─── Wallets / identities (reusable) ───────────────────────────────
    MethodDescriptor(
        id=PaymentMethodId.LINK.value,
        label="Link",
        is_reusable=True,
        retrievable_type="link",
        supported_currencies=("USD",),
        supports_manual_capture=True,
    ),
    MethodDescriptor(
        id=PaymentMethodId.CASHAPP.value,
        label="Cash App Pay",
        is_reusable=True,
        retrievable_type="cashapp",
        supported_currencies=("USD",),
        supports_manual_capture=True,
    ),
)

METHOD_REGISTRY: Mapping[str, MethodDescriptor] = MappingProxyType(
    {descriptor.id: descriptor for descriptor in _DESCRIPTORS}
)

AVAILABLE_METHOD_IDS: tuple[str, ...] = tuple(METHOD_REGISTRY)

REUSABLE_METHOD_IDS = frozenset(d.id for d in _DESCRIPTORS if d.is_reusable)


def get_descriptor(method_id: str) -> MethodDescriptor:
    """
    Look up a method descriptor by id.

    Raises:
        KeyError: If no method with that id is registered.
    """
    try:
        return METHOD_REGISTRY[method_id]
    except KeyError:
        raise KeyError(f"Unknown payment method: {method_id}") from None


def find_descriptor(method_id: Optional[str]) -> Optional[MethodDescriptor]:
    return METHOD_REGISTRY.get(method_id or "")


def display_title(descriptor: MethodDescriptor, payment_details: Optional[Mapping[str, Any]] = None) -> str:
    """
    Title shown for a method on orders and receipts.

    Cards are refined with the network and funding type of the card actually
    used (e.g. "Visa debit card"). Every other method uses its label.
    """
    if descriptor.id != PaymentMethodId.CARD.value or not payment_details:
        return descriptor.label

    card = payment_details.get("card") or {}
    network = card.get("network")
    funding = card.get("funding")
    if not network or not funding:
        return descriptor.label

    return f"{network.replace('_', ' ').title()} {funding} card"
