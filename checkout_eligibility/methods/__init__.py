from checkout_eligibility.methods.descriptors import AmountLimit, MethodDescriptor
from checkout_eligibility.methods.registry import (
    AVAILABLE_METHOD_IDS,
    METHOD_REGISTRY,
    REUSABLE_METHOD_IDS,
    display_title,
    find_descriptor,
    get_descriptor,
)

__all__ = [
    "AmountLimit",
    "MethodDescriptor",
    "AVAILABLE_METHOD_IDS",
    "METHOD_REGISTRY",
    "REUSABLE_METHOD_IDS",
    "display_title",
    "find_descriptor",
    "get_descriptor",
]
