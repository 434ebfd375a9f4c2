# capkit/gateway/gateway.py
"""
Abstraction Gateway - bind consumers to capabilities, not concrete providers.

A high-level consumer states the capability it needs; any provider that
satisfies it can be handed in. The consumer never touches the provider's
internal representation, so swapping storage mechanisms needs no consumer
change.

Usage:
    from capkit.gateway import Gateway

    class Research(Gateway):
        requires = RelationshipBrowser

        def children_of(self, name):
            return self.provider.find_all_children_of(name)

    Research(Relationships())   # ok
    Research(object())          # MissingCapabilityError, before any logic runs
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from capkit.core.abstract import abstract
from capkit.core.exceptions import MissingCapabilityError
from capkit.gateway.contracts import Capability, CapabilityLike, as_capability
from capkit.logging.logger import get_logger
from capkit.logging.tags import GATEWAY

logger = get_logger(__name__)


def require(provider: Any, capability: CapabilityLike, check_arity: bool = True) -> Any:
    """
    Return provider unchanged if it satisfies capability.

    Raises:
        MissingCapabilityError: Listing every operation the provider lacks
    """
    cap = as_capability(capability)
    missing = cap.missing(provider, check_arity=check_arity)
    if missing:
        logger.debug(f"{GATEWAY} {type(provider).__name__} rejected for {cap.name!r}: {missing}")
        raise MissingCapabilityError(cap.name, missing, provider)
    return provider


def bind(provider: Any, capability: CapabilityLike, check_arity: bool = True) -> "CapabilityProxy":
    """Validate provider and wrap it so only the capability's operations are reachable."""
    cap = as_capability(capability)
    require(provider, cap, check_arity=check_arity)
    logger.debug(f"{GATEWAY} Bound {type(provider).__name__} as {cap.name!r}")
    return CapabilityProxy(provider, cap)


class CapabilityProxy:
    """
    View of a provider restricted to one capability.

    Attribute access for declared operations is forwarded to the provider;
    everything else raises AttributeError. The proxy holds no state besides
    the two references.
    """

    __slots__ = ("_provider", "_capability")

    def __init__(self, provider: Any, capability: Capability):
        object.__setattr__(self, "_provider", provider)
        object.__setattr__(self, "_capability", capability)

    def __getattr__(self, name: str) -> Any:
        # only reached when normal lookup fails, including unset slots
        if name.startswith("_"):
            raise AttributeError(name)

        capability = object.__getattribute__(self, "_capability")
        if name in capability.operation_names:
            return getattr(object.__getattribute__(self, "_provider"), name)
        raise AttributeError(f"{name!r} is not an operation of capability {capability.name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Capability view {self._capability.name!r} is read-only")

    def __reduce__(self):
        return (type(self), (self._provider, self._capability))

    def __dir__(self):
        return list(self._capability.operation_names)

    def __repr__(self) -> str:
        return f"<{self._capability.name} via {type(self._provider).__name__}>"

    @property
    def capability(self) -> Capability:
        return self._capability


def unwrap(proxy: CapabilityProxy) -> Any:
    """Return the provider behind a capability view."""
    return object.__getattribute__(proxy, "_provider")


@abstract
class Gateway:
    """
    Base class for consumers that depend on a capability.

    Subclasses set ``requires`` to a Capability or a contract class. The
    constructor validates the provider before any subclass logic runs and
    stores only the restricted view in ``self.provider``.

    Attributes:
        requires: Capability the consumer depends on
        check_arity: Default for arity checking; overridable per instance
    """

    requires: ClassVar[Optional[CapabilityLike]] = None
    check_arity: ClassVar[bool] = True

    def __init__(self, provider: Any, *, check_arity: Optional[bool] = None):
        if check_arity is None:
            check_arity = type(self).check_arity

        self.provider = bind(provider, type(self).capability(), check_arity=check_arity)

    @classmethod
    def from_config(cls, provider: Any, config: Any, **kwargs: Any) -> "Gateway":
        """Create with arity checking taken from a GatewayConfig (or a full CapkitConfig)."""
        section = getattr(config, "gateway", config)
        return cls(provider, check_arity=section.check_arity, **kwargs)

    @classmethod
    def capability(cls) -> Capability:
        """The resolved capability this consumer requires."""
        if cls.requires is None:
            raise TypeError(f"{cls.__name__} must declare the capability it requires")
        return as_capability(cls.requires)

    @classmethod
    def accepts(cls, provider: Any) -> bool:
        """True if provider could be bound to this consumer."""
        return cls.capability().is_satisfied_by(provider, check_arity=cls.check_arity)


__all__ = [
    "require",
    "bind",
    "unwrap",
    "CapabilityProxy",
    "Gateway",
]
