"""
Stored payment tokens produced from completed payments.

Tokens are created once by the token factory and handed to the caller for
persistence. They are never mutated afterwards.
"""

from dataclasses import dataclass
from typing import Optional, Union

from checkout_eligibility.models.enums import TokenType

GATEWAY_ID = "stripe"


@dataclass(frozen=True)
class CardToken:
    """Saved card. card_type holds the network-resolved brand."""

    token: str  # Processor payment method id, e.g. "pm_..."
    user_id: int
    last4: str
    card_type: str
    expiry_month: Optional[str] = None
    expiry_year: Optional[str] = None
    gateway_id: str = GATEWAY_ID

    @property
    def type(self) -> TokenType:
        return TokenType.CARD


@dataclass(frozen=True)
class BankDebitToken:
    """Saved SEPA Direct Debit mandate, including mandates set up via iDEAL, Sofort or Bancontact."""

    token: str
    user_id: int
    last4: str
    payment_method_type: str  # Method the shopper actually paid with
    gateway_id: str = GATEWAY_ID

    @property
    def type(self) -> TokenType:
        return TokenType.SEPA_DEBIT


@dataclass(frozen=True)
class LinkToken:
    """Saved Link identity, keyed by the shopper's Link email."""

    token: str
    user_id: int
    email: str
    gateway_id: str = GATEWAY_ID

    @property
    def type(self) -> TokenType:
        return TokenType.LINK


@dataclass(frozen=True)
class CashAppToken:
    """Saved Cash App Pay wallet."""

    token: str
    user_id: int
    cashtag: str
    gateway_id: str = GATEWAY_ID

    @property
    def type(self) -> TokenType:
        return TokenType.CASHAPP


PaymentToken = Union[CardToken, BankDebitToken, LinkToken, CashAppToken]
