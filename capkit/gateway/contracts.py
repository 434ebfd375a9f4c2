# capkit/gateway/contracts.py
"""
Capability contracts - named, minimal operation sets a consumer depends on.

A Capability is purely structural: a name and an ordered tuple of operation
signatures. It carries no state and never changes after declaration.

Contracts can be declared directly:
    >>> PRINTING = Capability.of("printing", Operation("print", arity=1))

or derived from a class that documents the contract (a typing.Protocol, an
abc.ABC, or an @abstract base):
    >>> RELATIONSHIP_BROWSER = Capability.from_type(RelationshipBrowser)

Static type checkers see the Protocol; Capability is the runtime fallback
used when providers are wired together dynamically.
"""

from __future__ import annotations

import functools
import inspect
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union

_MISSING = object()

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

# Members of these bases are plumbing, not contract operations
_CONTRACT_ROOTS = frozenset({"object", "Protocol", "Generic", "ABC"})


# =============================================================================
# Operation
# =============================================================================


@dataclass(frozen=True)
class Operation:
    """
    Signature of one contract operation.

    Attributes:
        name: Member name the provider must expose
        arity: Number of positional arguments callers pass (excluding self)
        returns: Return-kind label, informational only
    """

    name: str
    arity: int = 0
    returns: str = "any"

    def __post_init__(self) -> None:
        if not self.name.isidentifier():
            raise ValueError(f"Operation name must be an identifier: {self.name!r}")
        if self.arity < 0:
            raise ValueError(f"Operation arity must be >= 0, got {self.arity}")

    def check(self, target: Any, check_arity: bool = True) -> Optional[str]:
        """
        Check target (an instance or a class) for this operation.

        Returns:
            None when satisfied, otherwise a short reason string
        """
        member = _resolve_member(target, self.name)
        if member is _MISSING:
            return f"{self.name} (absent)"

        if not callable(member):
            return f"{self.name} (not callable)"

        if check_arity and not _accepts(member, self.arity):
            return f"{self.name} (cannot take {self.arity} argument(s))"

        return None

    @classmethod
    def from_callable(cls, name: str, func: Callable[..., Any]) -> "Operation":
        """Derive an operation from a function defined on a contract class."""
        signature = inspect.signature(func)
        params = list(signature.parameters.values())

        # drop self/cls
        if params and params[0].kind in _POSITIONAL:
            params = params[1:]

        arity = sum(1 for p in params if p.kind in _POSITIONAL)
        return cls(name=name, arity=arity, returns=_return_label(signature.return_annotation))


# =============================================================================
# Capability
# =============================================================================


@dataclass(frozen=True)
class Capability:
    """
    A named set of operation signatures.

    Examples:
        >>> SCANNING = Capability.of("scanning", Operation("scan", arity=1))
        >>> SCANNING.missing(Photocopier())
        []
    """

    name: str
    operations: Tuple[Operation, ...] = ()

    def __post_init__(self) -> None:
        names = [op.name for op in self.operations]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Capability {self.name!r} declares {duplicates} more than once")

    @classmethod
    def of(cls, name: str, *operations: Operation) -> "Capability":
        """Declare a capability from operations."""
        return cls(name=name, operations=tuple(operations))

    @classmethod
    def from_type(cls, contract: type, name: Optional[str] = None) -> "Capability":
        """
        Derive a capability from a contract class.

        Every public function declared on the class or its contract bases
        (not object/Protocol/ABC plumbing) becomes an operation, in
        declaration order.
        """
        return _from_type_cached(contract, name)

    @property
    def operation_names(self) -> Tuple[str, ...]:
        return tuple(op.name for op in self.operations)

    def missing(self, target: Any, check_arity: bool = True) -> List[str]:
        """List the operations target lacks (empty when satisfied)."""
        reasons = []
        for op in self.operations:
            reason = op.check(target, check_arity=check_arity)
            if reason is not None:
                reasons.append(reason)
        return reasons

    def is_satisfied_by(self, target: Any, check_arity: bool = True) -> bool:
        return not self.missing(target, check_arity=check_arity)


CapabilityLike = Union[Capability, type]


def as_capability(contract: CapabilityLike) -> Capability:
    """Accept a Capability or a contract class and return a Capability."""
    if isinstance(contract, Capability):
        return contract
    if isinstance(contract, type):
        return Capability.from_type(contract)
    raise TypeError(f"Expected a Capability or a contract class, got {type(contract).__name__}")


# =============================================================================
# Helpers
# =============================================================================


@functools.lru_cache(maxsize=None)
def _from_type_cached(contract: type, name: Optional[str]) -> Capability:
    operations: dict[str, Operation] = {}

    # base-first so that subclasses refine inherited operations in place
    for klass in reversed(contract.__mro__):
        if klass.__name__ in _CONTRACT_ROOTS and klass.__module__ in ("builtins", "typing", "abc"):
            continue

        for attr, raw in vars(klass).items():
            if attr.startswith("_"):
                continue
            func = raw.__func__ if isinstance(raw, (staticmethod, classmethod)) else raw
            if not inspect.isfunction(func):
                continue
            op = Operation.from_callable(attr, func)
            if isinstance(raw, staticmethod):
                # no self to drop
                op = Operation(attr, arity=_positional_count(func), returns=op.returns)
            operations[attr] = op

    return Capability(name=name or contract.__name__, operations=tuple(operations.values()))


def _resolve_member(target: Any, name: str) -> Any:
    """Look up name on an instance, or the unbound equivalent on a class."""
    if not isinstance(target, type):
        return getattr(target, name, _MISSING)

    raw = inspect.getattr_static(target, name, _MISSING)
    if raw is _MISSING:
        return _MISSING
    if isinstance(raw, (staticmethod, classmethod)):
        return getattr(target, name)
    if inspect.isfunction(raw):
        # stand-in for self so the signature matches a bound call
        return functools.partial(raw, None)
    return raw


def _accepts(member: Callable[..., Any], arity: int) -> bool:
    try:
        signature = inspect.signature(member)
    except (TypeError, ValueError):
        # builtins without signatures: cannot verify, assume compatible
        return True

    try:
        signature.bind(*([None] * arity))
    except TypeError:
        return False
    return True


def _positional_count(func: Callable[..., Any]) -> int:
    return sum(1 for p in inspect.signature(func).parameters.values() if p.kind in _POSITIONAL)


def _return_label(annotation: Any) -> str:
    if annotation is inspect.Signature.empty:
        return "any"
    if isinstance(annotation, str):
        return annotation
    return getattr(annotation, "__name__", repr(annotation))


__all__ = ["Operation", "Capability", "CapabilityLike", "as_capability"]
