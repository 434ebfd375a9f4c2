# capkit/core/__init__.py
"""
capkit core - guard, exclusion set and error hierarchy shared by every layer.

Public API:
    - guard, abstract, is_abstract: Abstract-Type Guard
    - EXCLUSION_SET, effective_exclusions: names never copied by compose()
    - Exceptions: standard error hierarchy

Configuration (capkit.core.config) and the provider registry
(capkit.core.registry) are imported from their modules directly.
"""

from .abstract import abstract, guard, is_abstract
from .exceptions import (
    AbstractInstantiationError,
    CapkitError,
    InvalidBaseTypeError,
    MissingCapabilityError,
    NotImplementedCapabilityError,
)
from .exclusion import EXCLUSION_SET, effective_exclusions, is_excluded

__all__ = [
    "guard",
    "abstract",
    "is_abstract",
    "EXCLUSION_SET",
    "effective_exclusions",
    "is_excluded",
    "CapkitError",
    "AbstractInstantiationError",
    "MissingCapabilityError",
    "InvalidBaseTypeError",
    "NotImplementedCapabilityError",
]
