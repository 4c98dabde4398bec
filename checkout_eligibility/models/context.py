"""
Per-request checkout inputs.

ProcessorCapabilities is the raw capability snapshot from the processor
account. CheckoutContext carries the store/cart facts an evaluation needs.
Both are read-only for the lifetime of one evaluation.
"""

from decimal import Decimal
from typing import Mapping, Optional

from pydantic import BaseModel, Field, field_validator

# capability key -> "active" | "inactive"
ProcessorCapabilities = Mapping[str, str]


class CheckoutContext(BaseModel):
    """Store and cart state for a single checkout evaluation."""

    store_currency: str
    account_currency: Optional[str] = None
    order_amount: Decimal = Field(default=Decimal("0"), ge=0)
    cart_has_recurring_item: bool = False
    cart_has_pre_order_item: bool = False

    model_config = {"frozen": True}

    @field_validator("store_currency")
    @classmethod
    def _normalize_store_currency(cls, value: str) -> str:
        return value.strip().upper()

    @field_validator("account_currency")
    @classmethod
    def _normalize_account_currency(cls, value: Optional[str]) -> Optional[str]:
        # A blank account currency means the account lookup returned nothing.
        if value is None or not value.strip():
            return None
        return value.strip().upper()

    @property
    def charges_off_session(self) -> bool:
        """True when the cart will be charged again later without the shopper."""
        return self.cart_has_recurring_item or self.cart_has_pre_order_item
