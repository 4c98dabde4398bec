from checkout_eligibility.models.configuration import PluginConfiguration
from checkout_eligibility.models.context import CheckoutContext, ProcessorCapabilities
from checkout_eligibility.models.enums import CapabilityStatus, GateName, PaymentMethodId, TokenType
from checkout_eligibility.models.tokens import (
    BankDebitToken,
    CardToken,
    CashAppToken,
    LinkToken,
    PaymentToken,
)

__all__ = [
    "PluginConfiguration",
    "CheckoutContext",
    "ProcessorCapabilities",
    "CapabilityStatus",
    "GateName",
    "PaymentMethodId",
    "TokenType",
    "BankDebitToken",
    "CardToken",
    "CashAppToken",
    "LinkToken",
    "PaymentToken",
]
