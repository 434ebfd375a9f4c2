# capkit/gateway/__init__.py
"""
Abstraction Gateway - capability contracts and the consumers bound to them.

Public API:
    - Operation, Capability: structural contracts
    - require, bind: runtime validation of providers
    - CapabilityProxy, unwrap: capability-restricted views
    - Gateway: base class for capability consumers
"""

from .contracts import Capability, CapabilityLike, Operation, as_capability
from .gateway import CapabilityProxy, Gateway, bind, require, unwrap

__all__ = [
    "Operation",
    "Capability",
    "CapabilityLike",
    "as_capability",
    "require",
    "bind",
    "unwrap",
    "CapabilityProxy",
    "Gateway",
]
