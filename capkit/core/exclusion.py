# capkit/core/exclusion.py
"""
Exclusion Set - member names never copied during composition.

Copying any of these would corrupt the composite's own construction,
identity or representation instead of adding a capability. The set is a
frozenset and is never mutated; callers that need extra exclusions build a
new set with effective_exclusions().
"""

from __future__ import annotations

from typing import FrozenSet, Iterable

# Construction entry points
CONSTRUCTION = frozenset(
    {
        "__init__",
        "__new__",
        "__init_subclass__",
        "__post_init__",
    }
)

# Type metadata and identity
IDENTITY = frozenset(
    {
        "__class__",
        "__name__",
        "__qualname__",
        "__module__",
        "__dict__",
        "__weakref__",
        "__doc__",
        "__slots__",
        "__mro__",
        "__bases__",
        "__annotations__",
        "__annotate__",
        "__annotate_func__",
        "__annotations_cache__",
        "__firstlineno__",
        "__static_attributes__",
        "__type_params__",
        "__orig_bases__",
        "__parameters__",
        "__class_getitem__",
        "__abstractmethods__",
        "_abc_impl",
        "__subclasshook__",
        "_is_protocol",
        "_is_runtime_protocol",
        "__protocol_attrs__",
        "__non_callable_proto_members__",
        "__callable_proto_members_only__",
        "__dataclass_fields__",
        "__dataclass_params__",
        "__match_args__",
        "__hash__",
        "__eq__",
        "__capabilities__",
        "__abstract_type__",
    }
)

# Call-binding helpers
BINDING = frozenset(
    {
        "__call__",
        "__get__",
        "__set_name__",
        "__func__",
        "__self__",
        "__wrapped__",
    }
)

# String conversion and representation hooks
REPRESENTATION = frozenset(
    {
        "__str__",
        "__repr__",
        "__format__",
    }
)

# Length-style arity markers
LENGTH = frozenset(
    {
        "__len__",
        "__length_hint__",
    }
)

EXCLUSION_SET: FrozenSet[str] = CONSTRUCTION | IDENTITY | BINDING | REPRESENTATION | LENGTH


def effective_exclusions(extra: Iterable[str] = ()) -> FrozenSet[str]:
    """
    Return the Exclusion Set extended with extra names.

    The result is a new frozenset; EXCLUSION_SET itself is left untouched.
    """
    extra = frozenset(extra)
    if not extra:
        return EXCLUSION_SET
    return EXCLUSION_SET | extra


def is_excluded(name: str, exclusions: FrozenSet[str] = EXCLUSION_SET) -> bool:
    """Check whether a member name must be skipped during composition."""
    return name in exclusions


__all__ = ["EXCLUSION_SET", "effective_exclusions", "is_excluded"]
