# capkit/core/exceptions.py
"""
Core exceptions for capability composition.

These exceptions provide a standard error hierarchy for capkit. Every failure
is raised at the point of violation (composition or construction time), never
deferred to the first use of an affected member.
"""

from __future__ import annotations

from typing import Sequence


class CapkitError(Exception):
    """
    Base exception for all capkit errors.

    Allows consumers to catch every composition, binding or guard failure with
    a single handler.

    Examples:
        >>> try:
        ...     Research(object())
        ... except CapkitError as e:
        ...     print(f"Wiring failed: {e}")
    """

    pass


class AbstractInstantiationError(CapkitError, TypeError):
    """
    Direct construction of a type declared abstract.

    Raised by the abstract-type guard when the object under construction is
    exactly the abstract type. Strict descendants never trigger it.

    Examples:
        >>> Machine()
        Traceback (most recent call last):
        ...
        AbstractInstantiationError: Machine is abstract!
    """

    def __init__(self, abstract_type: type):
        self.abstract_type = abstract_type
        super().__init__(f"{abstract_type.__name__} is abstract!")


class MissingCapabilityError(CapkitError, TypeError):
    """
    Bound object does not satisfy a capability contract.

    Raised when a consumer is handed a provider lacking one or more of the
    operations its capability declares. The error lists every missing
    operation, not just the first one found.
    """

    def __init__(self, capability: str, missing: Sequence[str], provider: object = None):
        self.capability = capability
        self.missing = tuple(missing)
        self.provider = provider
        provider_name = type(provider).__name__ if provider is not None else "provider"
        super().__init__(
            f"{provider_name} does not implement capability {capability!r}: "
            f"missing {', '.join(self.missing)}"
        )


class InvalidBaseTypeError(CapkitError, TypeError):
    """
    Base type cannot be used to build a composite.

    Raised by the aggregator when the base is not a class, or when Python
    refuses to derive a new class from it (e.g. ``bool``).
    """

    pass


class NotImplementedCapabilityError(CapkitError, NotImplementedError):
    """
    A provider deliberately declines one of its stated operations.

    This is the explicit, discoverable alternative to leaving an operation as a
    silent no-op.

    Examples:
        >>> OldFashionedPrinter().scan(doc)
        Traceback (most recent call last):
        ...
        NotImplementedCapabilityError: OldFashionedPrinter.scan is not implemented!
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} is not implemented!")


__all__ = [
    "CapkitError",
    "AbstractInstantiationError",
    "MissingCapabilityError",
    "InvalidBaseTypeError",
    "NotImplementedCapabilityError",
]
