"""Enumerations for the checkout eligibility domain model."""

from enum import Enum


class PaymentMethodId(str, Enum):
    """Identifiers of the payment methods the plugin can offer."""

    CARD = "card"
    ALIPAY = "alipay"
    GIROPAY = "giropay"
    P24 = "p24"
    EPS = "eps"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    BANCONTACT = "bancontact"
    IDEAL = "ideal"
    BOLETO = "boleto"
    OXXO = "oxxo"
    WECHAT_PAY = "wechat_pay"
    AFFIRM = "affirm"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    KLARNA = "klarna"
    LINK = "link"
    CASHAPP = "cashapp"


class CapabilityStatus(str, Enum):
    """Status values the processor reports for an account capability."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class TokenType(str, Enum):
    """Stored-token families a reusable payment method settles into."""

    CARD = "card"
    SEPA_DEBIT = "sepa_debit"
    LINK = "link"
    CASHAPP = "cashapp"


class GateName(str, Enum):
    """Checkout gates, in evaluation order. Reported as the failure reason."""

    METHOD_DISABLED = "method_disabled"
    CAPABILITY = "capability"
    CURRENCY = "currency"
    DOMESTIC_RESTRICTION = "domestic_restriction"
    AMOUNT_LIMIT = "amount_limit"
    REUSABILITY = "reusability"
    CAPTURE_MODE = "capture_mode"
