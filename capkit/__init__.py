"""
capkit - capability composition and abstraction layers.

Two mechanisms, one supporting rule:

    - compose: build a composite type from a base and capability providers
      (mixin-style multiple inheritance with a last-wins merge policy)
    - Gateway: bind a consumer to a capability contract instead of a
      concrete provider
    - abstract / guard: reject direct construction of abstract types

Quick Start:
    >>> from capkit import abstract, compose
    >>>
    >>> @abstract
    ... class Printer:
    ...     def print(self, doc): ...
    >>>
    >>> class Scanner:
    ...     def scan(self, doc): return f"scanned {doc}"
    >>>
    >>> class Photocopier(compose(Printer, [Scanner])):
    ...     pass
    >>>
    >>> Photocopier().scan("memo")
    'scanned memo'

Architecture:
    capkit/
    ├── core/          # guard, exclusion set, exceptions, config, registry
    ├── aggregation/   # compose()
    ├── gateway/       # capabilities and consumers
    ├── logging/       # logger setup and tags
    └── examples/      # device and genealogy domains
"""

__version__ = "0.1.0"

from capkit.aggregation import Aggregator, capabilities_of, compose
from capkit.core import (
    EXCLUSION_SET,
    AbstractInstantiationError,
    CapkitError,
    InvalidBaseTypeError,
    MissingCapabilityError,
    NotImplementedCapabilityError,
    abstract,
    guard,
    is_abstract,
)
from capkit.core.config import load_config
from capkit.core.registry import ProviderNotFoundError, ProviderRegistry
from capkit.core.schema import CapkitConfig
from capkit.gateway import Capability, CapabilityProxy, Gateway, Operation, bind, require

__all__ = [
    "__version__",
    # Aggregator
    "Aggregator",
    "compose",
    "capabilities_of",
    "EXCLUSION_SET",
    # Gateway
    "Operation",
    "Capability",
    "CapabilityProxy",
    "Gateway",
    "bind",
    "require",
    # Guard
    "abstract",
    "guard",
    "is_abstract",
    # Registry and config
    "ProviderRegistry",
    "ProviderNotFoundError",
    "CapkitConfig",
    "load_config",
    # Exceptions
    "CapkitError",
    "AbstractInstantiationError",
    "MissingCapabilityError",
    "InvalidBaseTypeError",
    "NotImplementedCapabilityError",
]
