"""Static per-method metadata."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping, Optional


@dataclass(frozen=True)
class AmountLimit:
    """Order amount bounds for one currency, in major units. None = unbounded."""

    min: Optional[Decimal] = None
    max: Optional[Decimal] = None

    def contains(self, amount: Decimal) -> bool:
        if self.min is not None and amount < self.min:
            return False
        if self.max is not None and amount > self.max:
            return False
        return True


@dataclass(frozen=True)
class MethodDescriptor:
    """Capabilities of one payment method. One instance per method id."""

    id: str
    label: str
    is_reusable: bool
    retrievable_type: str  # Stored-token family, e.g. iDEAL settles as "sepa_debit"
    supported_currencies: tuple[str, ...] = ()  # Empty = every currency
    has_domestic_restriction: bool = False
    amount_limits: Optional[Mapping[str, AmountLimit]] = field(default=None, hash=False)
    capability_always_active: bool = False
    supports_manual_capture: bool = False
    capability_key: str = field(default="")

    def __post_init__(self):
        if not self.capability_key:
            object.__setattr__(self, "capability_key", f"{self.id}_payments")

    @property
    def has_amount_limits(self) -> bool:
        return bool(self.amount_limits)
