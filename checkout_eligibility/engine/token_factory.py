"""
Stored payment tokens from completed payments.

After a payment with a reusable method succeeds, the processor returns the
payment method record, e.g.:

    {"id": "pm_...", "type": "card", "card": {"brand": "visa", "last4": "4242", ...}}

The record's type tag is resolved to a TokenType through the method registry
(iDEAL, Sofort and Bancontact records resolve to sepa_debit) and the matching
token is built. Persisting the token is the caller's job.
"""

import logging
from typing import Any, Callable, Mapping

from checkout_eligibility.engine.errors import InvalidPaymentRecord, UnsupportedOperation
from checkout_eligibility.methods.descriptors import MethodDescriptor
from checkout_eligibility.methods.registry import find_descriptor
from checkout_eligibility.models.enums import TokenType
from checkout_eligibility.models.tokens import (
    BankDebitToken,
    CardToken,
    CashAppToken,
    LinkToken,
    PaymentToken,
)

logger = logging.getLogger("checkout_eligibility.tokens")


def resolve_card_brand(card: Mapping[str, Any]) -> str:
    """
    Brand to store for a card.

    Co-badged cards (e.g. Cartes Bancaires + Visa) report the scheme shown to
    the shopper as display_brand. Failing that, the preferred network chosen
    at checkout wins over the base brand.
    """
    if card.get("display_brand"):
        return card["display_brand"]

    networks = card.get("networks") or {}
    if networks.get("preferred"):
        return networks["preferred"]

    return card.get("brand", "")


def resolve_token_type(record_type: str) -> TokenType:
    """
    Map a payment method record's type tag to its stored-token family.

    Raises:
        UnsupportedOperation: If the type has no stored-token family.
    """
    descriptor = find_descriptor(record_type)
    retrievable = descriptor.retrievable_type if descriptor else record_type
    try:
        return TokenType(retrievable)
    except ValueError:
        raise UnsupportedOperation(
            f"Payment method type {record_type} cannot be saved", method_id=record_type
        ) from None


def _details(record: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    details = record.get(key)
    if not isinstance(details, Mapping):
        raise InvalidPaymentRecord(f"Payment method record {record.get('id')} has no {key} details")
    return details


def _card_token(user_id: int, record: Mapping[str, Any]) -> CardToken:
    card = _details(record, "card")
    return CardToken(
        token=record["id"],
        user_id=user_id,
        last4=card.get("last4", ""),
        card_type=resolve_card_brand(card),
        expiry_month=card.get("exp_month"),
        expiry_year=card.get("exp_year"),
    )


def _bank_debit_token(user_id: int, record: Mapping[str, Any]) -> BankDebitToken:
    # Mandates created through iDEAL/Sofort/Bancontact still carry sepa_debit details.
    record_type = record["type"]
    details_key = "sepa_debit" if "sepa_debit" in record else record_type
    return BankDebitToken(
        token=record["id"],
        user_id=user_id,
        last4=_details(record, details_key).get("last4", ""),
        payment_method_type=record_type,
    )


def _link_token(user_id: int, record: Mapping[str, Any]) -> LinkToken:
    return LinkToken(token=record["id"], user_id=user_id, email=_details(record, "link").get("email", ""))


def _cashapp_token(user_id: int, record: Mapping[str, Any]) -> CashAppToken:
    return CashAppToken(
        token=record["id"],
        user_id=user_id,
        cashtag=_details(record, "cashapp").get("cashtag", ""),
    )


_BUILDERS: dict[TokenType, Callable[[int, Mapping[str, Any]], PaymentToken]] = {
    TokenType.CARD: _card_token,
    TokenType.SEPA_DEBIT: _bank_debit_token,
    TokenType.LINK: _link_token,
    TokenType.CASHAPP: _cashapp_token,
}


def create_payment_token_for_user(
    descriptor: MethodDescriptor,
    user_id: int,
    record: Mapping[str, Any],
) -> PaymentToken:
    """
    Build the stored token for a completed payment.

    Args:
        descriptor: Method the shopper paid with.
        user_id: Customer the token will belong to.
        record: Processor payment method record (id, type and type details).

    Returns:
        A fully populated token, not yet persisted.

    Raises:
        UnsupportedOperation: If the method is not reusable, or the record type
            has no stored-token family.
        InvalidPaymentRecord: If the record lacks an id, type tag or details.
    """
    if not descriptor.is_reusable:
        raise UnsupportedOperation(
            f"{descriptor.label} payments cannot be saved for later use", method_id=descriptor.id
        )

    record_type = record.get("type")
    if not record_type or not record.get("id"):
        raise InvalidPaymentRecord("Payment method record is missing its id or type")

    token_type = resolve_token_type(record_type)
    token = _BUILDERS[token_type](user_id, record)

    logger.info(
        "Created %s token for user=%s method=%s pm=%s",
        token_type.value,
        user_id,
        descriptor.id,
        token.token,
    )
    return token
