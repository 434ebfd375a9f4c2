# capkit/core/abstract.py
"""
Abstract-Type Guard.

A type declared abstract must reject direct instantiation while its concrete
descendants stay constructible, even though they run the inherited
construction path.

Two entry points:
    - guard(self, Cls): call it as the first statement of Cls.__init__
    - @abstract: class decorator that installs the guard for you

Usage:
    from capkit.core.abstract import abstract, guard

    @abstract
    class Machine:
        def print(self, doc): ...

    class Scanner:
        def __init__(self):
            guard(self, Scanner)

Classes with abstract methods can keep using abc.ABC; the guard exists for
contracts whose operations all have default bodies, where ABC would happily
allow instantiation.
"""

from __future__ import annotations

import functools
from typing import Type, TypeVar

from capkit.core.exceptions import AbstractInstantiationError
from capkit.logging.logger import get_logger
from capkit.logging.tags import GUARD

logger = get_logger(__name__)

T = TypeVar("T", bound=type)

_MARKER = "__abstract_type__"


def guard(instance: object, abstract_type: type) -> None:
    """
    Refuse construction when instance is exactly abstract_type.

    Args:
        instance: The object under construction (``self``)
        abstract_type: The class whose construction path is running

    Raises:
        AbstractInstantiationError: If type(instance) is abstract_type
    """
    if type(instance) is abstract_type:
        logger.debug(f"{GUARD} Refused direct construction of {abstract_type.__name__}")
        raise AbstractInstantiationError(abstract_type)


def abstract(cls: T) -> T:
    """
    Class decorator marking cls abstract.

    Wraps cls.__init__ (or the inherited one) so that the guard runs before
    anything else in the construction path.
    """
    own_init = cls.__dict__.get("__init__")

    if own_init is not None:

        @functools.wraps(own_init)
        def __init__(self, *args, **kwargs):
            guard(self, cls)
            own_init(self, *args, **kwargs)

    else:

        def __init__(self, *args, **kwargs):
            guard(self, cls)
            super(cls, self).__init__(*args, **kwargs)

        __init__.__qualname__ = f"{cls.__qualname__}.__init__"

    cls.__init__ = __init__
    setattr(cls, _MARKER, cls)
    return cls


def is_abstract(cls: Type) -> bool:
    """True if cls itself (not an ancestor) was declared with @abstract."""
    return isinstance(cls, type) and cls.__dict__.get(_MARKER) is cls


__all__ = ["guard", "abstract", "is_abstract"]
