# capkit/aggregation/aggregator.py
"""
Capability Aggregator - synthesize a composite type from a base and providers.

Python has multiple inheritance, but providers written independently rarely
cooperate through super(). compose() gives one documented merge policy
instead of the MRO:

    class Photocopier(compose(Printer, [Scanner])):
        ...

Merge policy:
    - Type level (once, at definition time): each provider's own class
      members (methods, static/class methods, properties, class data) are
      copied onto the composite in list order. Later providers win. Copied
      members shadow what the composite inherits from the base.
    - Instance level (every construction): the base construction path runs
      with the caller's arguments, then each provider is instantiated with no
      arguments and its own instance members are copied onto the new object.
      Later providers win, but members set by the base are never overwritten.
    - Names in the Exclusion Set are never copied, at either level.

Each composite instance gets freshly constructed provider members, so
mutating one instance's copied state never leaks into another instance.
"""

from __future__ import annotations

import abc
import inspect
import types
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Optional, Tuple, Type

from capkit.core.exceptions import InvalidBaseTypeError
from capkit.core.exclusion import effective_exclusions, is_excluded
from capkit.logging.logger import get_logger
from capkit.logging.tags import COMPOSE

logger = get_logger(__name__)

CAPABILITIES_ATTR = "__capabilities__"


class Aggregator:
    """
    Builds composite types.

    An Aggregator is immutable once created: its exclusion set is a frozenset
    computed in the constructor, so one instance can serve concurrent
    compose() calls.

    Args:
        extra_exclusions: Names to exclude on top of the built-in Exclusion Set

    Examples:
        >>> aggregator = Aggregator(extra_exclusions=["close"])
        >>> Device = aggregator.compose(Printer, [Scanner])
    """

    def __init__(self, extra_exclusions: Iterable[str] = ()):
        self._exclusions = effective_exclusions(extra_exclusions)

    @classmethod
    def from_config(cls, config: Any) -> "Aggregator":
        """Create from an AggregatorConfig (or a full CapkitConfig)."""
        section = getattr(config, "aggregator", config)
        return cls(extra_exclusions=section.extra_exclusions)

    @property
    def exclusions(self) -> FrozenSet[str]:
        return self._exclusions

    def compose(
        self,
        base: type,
        capabilities: Iterable[type] = (),
        *,
        name: Optional[str] = None,
        exclude: Iterable[str] = (),
    ) -> type:
        """
        Compose base with capability providers.

        Args:
            base: Type whose construction path the composite reuses
            capabilities: Provider classes, in precedence order (last wins)
            name: Name for the composite (default: base name + provider names)
            exclude: Extra names to skip for this composition only

        Returns:
            A new subclass of base carrying the merged member set

        Raises:
            InvalidBaseTypeError: If base is not a class or cannot be subclassed
        """
        if not isinstance(base, type):
            raise InvalidBaseTypeError(f"Composite base must be a class, got {base!r}")

        providers = tuple(capabilities)
        for provider in providers:
            if not isinstance(provider, type):
                raise TypeError(f"Capability provider must be a class, got {provider!r}")

        exclusions = self._exclusions | frozenset(exclude)
        carriers = _build_carriers(providers)

        namespace = _merge_type_members(providers, exclusions)
        namespace["__module__"] = base.__module__
        namespace[CAPABILITIES_ATTR] = providers

        composite_name = name or base.__name__ + "".join(p.__name__ for p in providers)
        namespace["__qualname__"] = composite_name

        try:
            composite = type(base)(composite_name, (base,), namespace)
        except TypeError as e:
            raise InvalidBaseTypeError(
                f"Cannot derive a composite from {base.__name__}: {e}"
            ) from e

        composite.__init__ = _make_init(composite, carriers, exclusions)

        # a provider may implement an abstract method declared by the base
        abc.update_abstractmethods(composite)

        logger.debug(
            f"{COMPOSE} Composed {composite_name} from {base.__name__} + "
            f"{[p.__name__ for p in providers]}"
        )
        return composite


# =============================================================================
# Module-level API
# =============================================================================


_DEFAULT = Aggregator()


def compose(
    base: type,
    capabilities: Iterable[type] = (),
    *,
    name: Optional[str] = None,
    exclude: Iterable[str] = (),
) -> type:
    """
    Compose base with capability providers using the built-in Exclusion Set.

    See Aggregator.compose for the merge policy.
    """
    return _DEFAULT.compose(base, capabilities, name=name, exclude=exclude)


def capabilities_of(cls: type) -> Tuple[type, ...]:
    """Providers a composite (or a subclass of one) was built from, in order."""
    return getattr(cls, CAPABILITIES_ATTR, ())


# =============================================================================
# Helpers
# =============================================================================


def _merge_type_members(providers: Tuple[type, ...], exclusions: FrozenSet[str]) -> Dict[str, Any]:
    """Collect own class members of every provider, later providers winning."""
    merged: Dict[str, Any] = {}
    for provider in providers:
        for attr, value in vars(provider).items():
            if is_excluded(attr, exclusions) or inspect.ismemberdescriptor(value):
                continue
            merged[attr] = value
    return merged


def _build_carriers(providers: Tuple[type, ...]) -> Tuple[type, ...]:
    """
    Map each provider to a class that can be instantiated without arguments.

    Providers are routinely abstract (guarded or with abstract methods). A
    private subclass passes the abstract-type guard, since the object under
    construction is no longer the abstract type itself, and has its
    abstract-method set cleared so ABCs instantiate too.
    """
    cache: Dict[type, type] = {}
    carriers = []
    for provider in providers:
        if provider not in cache:
            cache[provider] = _carrier_for(provider)
        carriers.append(cache[provider])
    return tuple(carriers)


def _carrier_for(provider: Type[Any]) -> Type[Any]:
    try:
        carrier = type(provider)(
            f"{provider.__name__}Carrier",
            (provider,),
            {"__module__": provider.__module__},
        )
    except TypeError:
        # final types such as bool cannot be subclassed; use them directly
        return provider

    if getattr(carrier, "__abstractmethods__", None):
        carrier.__abstractmethods__ = frozenset()
    return carrier


def _make_init(composite: type, carriers: Tuple[type, ...], exclusions: FrozenSet[str]):
    """Build the composite's construction path."""

    def __init__(self, *args, **kwargs):
        if _next_init_owner(type(self), composite) is object:
            # built in __new__ (namedtuple, int, str); arguments are already consumed
            super(composite, self).__init__()
        else:
            super(composite, self).__init__(*args, **kwargs)

        state = vars(self)
        base_owned = frozenset(state)

        for carrier in carriers:
            donor = carrier()
            for attr, value in _instance_members(donor):
                if is_excluded(attr, exclusions) or attr in base_owned:
                    continue
                if inspect.ismethod(value) and value.__self__ is donor:
                    value = types.MethodType(value.__func__, self)
                # direct write, like defining the property on the instance
                state[attr] = value

    __init__.__qualname__ = f"{composite.__qualname__}.__init__"
    return __init__


def _next_init_owner(cls: type, composite: type) -> type:
    """Class whose __init__ super(composite, ...) resolves to for an instance of cls."""
    mro = cls.__mro__
    for klass in mro[mro.index(composite) + 1 :]:
        if "__init__" in vars(klass):
            return klass
    return object


def _instance_members(donor: Any) -> Iterator[Tuple[str, Any]]:
    """Own per-object members of a provider instance: its __dict__ and its slots."""
    yield from getattr(donor, "__dict__", {}).items()

    for klass in type(donor).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot.startswith("__") or slot in ("__dict__", "__weakref__"):
                continue
            if hasattr(donor, slot):
                yield slot, getattr(donor, slot)


__all__ = ["Aggregator", "compose", "capabilities_of", "CAPABILITIES_ATTR"]
