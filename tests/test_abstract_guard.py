# tests/test_abstract_guard.py
"""
Tests for the Abstract-Type Guard.

The guard fails for exactly the abstract type and passes for every strict
descendant, whether it is installed by hand or with @abstract.
"""

from __future__ import annotations

import pytest

from capkit.core.abstract import abstract, guard, is_abstract
from capkit.core.exceptions import AbstractInstantiationError, CapkitError

pytestmark = pytest.mark.tier1


@abstract
class Machine:
    def print(self, doc):
        return None


class MultiFunctionPrinter(Machine):
    def print(self, doc):
        return f"printed {doc}"


@abstract
class Account:
    def __init__(self, owner: str):
        self.owner = owner


class Savings(Account):
    pass


class Checking(Account):
    def __init__(self, owner: str, limit: int):
        super().__init__(owner)
        self.limit = limit


class HandGuarded:
    def __init__(self):
        guard(self, HandGuarded)
        self.ready = True


class HandGuardedChild(HandGuarded):
    pass


# =============================================================================
# Scenario: Machine
# =============================================================================


def test_machine_direct_construction_fails():
    with pytest.raises(AbstractInstantiationError) as exc_info:
        Machine()

    assert exc_info.value.abstract_type is Machine
    assert str(exc_info.value) == "Machine is abstract!"


def test_multifunction_printer_constructs():
    printer = MultiFunctionPrinter()
    assert printer.print("doc") == "printed doc"


# =============================================================================
# Guard placement
# =============================================================================


def test_guard_runs_before_own_init_body():
    with pytest.raises(AbstractInstantiationError):
        Account("ann")


def test_descendants_run_inherited_construction_path():
    assert Savings("ann").owner == "ann"

    checking = Checking("bob", limit=100)
    assert checking.owner == "bob"
    assert checking.limit == 100


def test_manual_guard():
    with pytest.raises(AbstractInstantiationError):
        HandGuarded()

    assert HandGuardedChild().ready is True


def test_guard_is_a_plain_precondition():
    """guard() on an unrelated instance passes through without side effects."""
    printer = MultiFunctionPrinter()

    assert guard(printer, Machine) is None
    assert vars(printer) == {}


def test_abstract_decorator_keeps_init_metadata():
    assert Account.__init__.__name__ == "__init__"
    assert Machine.__init__.__qualname__ == "Machine.__init__"


def test_abstract_class_without_init_rejects_arguments_like_object():
    with pytest.raises(TypeError):
        MultiFunctionPrinter("unexpected")


def test_abstract_instantiation_is_catchable_as_base_errors():
    with pytest.raises(CapkitError):
        Machine()
    with pytest.raises(TypeError):
        Machine()


# =============================================================================
# is_abstract
# =============================================================================


def test_is_abstract_only_for_declared_class():
    assert is_abstract(Machine)
    assert not is_abstract(MultiFunctionPrinter)
    assert not is_abstract(HandGuarded)


def test_is_abstract_rejects_non_types():
    assert not is_abstract("Machine")
