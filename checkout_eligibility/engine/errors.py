"""
Error taxonomy for the eligibility engine.

Gates never raise for business outcomes: an unknown currency or an inactive
capability is a failed gate, not an exception. Exceptions are reserved for
calls the engine must refuse outright.
"""

from typing import Optional


class EligibilityEngineError(Exception):
    """Base exception for eligibility engine errors."""


class ConfigurationMissing(EligibilityEngineError):
    """Required plugin options have never been stored."""

    def __init__(self, option: str = "settings"):
        super().__init__(f"Plugin option missing: {option}")
        self.option = option


class UnsupportedOperation(EligibilityEngineError):
    """Operation not supported by this payment method (e.g. saving a single-use method)."""

    def __init__(self, message: str, method_id: Optional[str] = None):
        super().__init__(message)
        self.method_id = method_id


class UnknownCurrency(EligibilityEngineError):
    """No amount-limit row exists for the requested currency."""

    def __init__(self, method_id: str, currency: str):
        super().__init__(f"No amount limits for {currency} on {method_id}")
        self.method_id = method_id
        self.currency = currency


class InvalidPaymentRecord(EligibilityEngineError):
    """Completed-payment record is missing its type tag or type details."""
