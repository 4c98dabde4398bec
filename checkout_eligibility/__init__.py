"""
Checkout payment-method eligibility engine.

Decides which payment methods (card, SEPA, Link, Cash App Pay, BNPLs such as
Affirm, Afterpay and Klarna, and regional redirect methods) may be shown at
checkout, and builds the stored payment token for reusable methods once a
payment completes.

Everything here is a pure function over plain data. Capability snapshots,
store currency and cart state are supplied by the caller.
"""

__version__ = "0.1.0"
