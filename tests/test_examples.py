# tests/test_examples.py
"""
Tests for the example domains.

Devices:
- Machine is abstract; concrete machines construct
- Declined operations raise explicitly, never silently no-op
- Photocopier composes Printer and Scanner

Genealogy:
- Research works against any RelationshipBrowser provider
- Both storage providers answer identically
"""

from __future__ import annotations

import logging

import pytest

from capkit.aggregation import capabilities_of
from capkit.core.exceptions import (
    AbstractInstantiationError,
    MissingCapabilityError,
    NotImplementedCapabilityError,
)
from capkit.examples.devices import (
    PRINTING,
    SCANNING,
    Document,
    Machine,
    MultiFunctionPrinter,
    OldFashionedPrinter,
    Photocopier,
    Printer,
    Scanner,
)
from capkit.examples.genealogy import (
    RELATIONSHIP_BROWSER,
    ParentIndex,
    Person,
    Relationship,
    RelationshipBrowser,
    Relationships,
    Research,
)
from capkit.gateway import require

pytestmark = pytest.mark.tier1

MEMO = Document("memo", "Quarterly numbers")


# =============================================================================
# Devices
# =============================================================================


class TestDevices:
    @pytest.mark.parametrize("abstract_type", [Machine, Printer, Scanner])
    def test_abstract_devices_refuse_construction(self, abstract_type):
        with pytest.raises(AbstractInstantiationError):
            abstract_type()

    def test_multifunction_printer_does_everything(self):
        mfp = MultiFunctionPrinter()

        assert mfp.print(MEMO) == "printed memo"
        assert mfp.fax(MEMO) == "faxed memo"
        assert mfp.scan(MEMO) == "scanned memo"
        assert mfp.jobs == [("print", "memo"), ("fax", "memo"), ("scan", "memo")]

    def test_old_fashioned_printer_declines_explicitly(self):
        printer = OldFashionedPrinter()

        assert printer.print(MEMO) == "printed memo"

        with pytest.raises(NotImplementedCapabilityError) as exc_info:
            printer.scan(MEMO)
        assert str(exc_info.value) == "OldFashionedPrinter.scan is not implemented!"

        with pytest.raises(NotImplementedError):
            printer.fax(MEMO)

        assert printer.jobs == [("print", "memo")]

    def test_photocopier_is_built_from_both_capabilities(self):
        assert capabilities_of(Photocopier) == (Scanner,)
        assert issubclass(Photocopier, Printer)

        copier = Photocopier()

        assert copier.copy(MEMO) == "printed memo"
        assert copier.scanned == ["memo"]
        assert copier.printed == ["memo"]

    def test_photocopier_instances_keep_separate_job_lists(self):
        first, second = Photocopier(), Photocopier()
        first.scan(MEMO)

        assert second.scanned == []

    def test_capabilities_match_devices(self):
        assert PRINTING.operation_names == ("print",)
        assert SCANNING.operation_names == ("scan",)

        copier = Photocopier()
        assert require(copier, PRINTING) is copier
        assert require(copier, SCANNING) is copier

        with pytest.raises(MissingCapabilityError):
            require(Document("x"), SCANNING)


# =============================================================================
# Genealogy
# =============================================================================


class TestGenealogy:
    def test_relationship_browser_is_abstract(self):
        with pytest.raises(AbstractInstantiationError):
            RelationshipBrowser()

    def test_relationships_store_both_directions(self, relationships, family):
        parent, children = family

        assert (parent, Relationship.PARENT, children[0]) in relationships.data
        assert (children[0], Relationship.CHILD, parent) in relationships.data

    def test_research_reports_children(self, relationships, capkit_debug_logs):
        capkit_debug_logs.set_level(logging.INFO, logger="capkit.examples")

        lines = Research(relationships).report("John")

        assert lines == ["John has a child named Chris", "John has a child named Matt"]
        assert "John has a child named Chris" in capkit_debug_logs.text

    def test_research_never_sees_storage(self, relationships):
        research = Research(relationships)

        with pytest.raises(AttributeError):
            research.provider.data

    def test_unknown_person_has_no_children(self, relationships):
        assert Research(relationships).children_of("Nobody") == []

    def test_children_are_not_parents(self, relationships):
        assert Research(relationships).children_of("Chris") == []

    @pytest.mark.parametrize("name", ["John", "Chris", "Matt", "Nobody"])
    def test_providers_are_substitutable(self, relationships, parent_index, name):
        assert Research(relationships).children_of(name) == Research(parent_index).children_of(name)

    def test_research_rejects_non_browsers(self):
        with pytest.raises(MissingCapabilityError) as exc_info:
            Research([Person("John")])

        assert exc_info.value.capability == "relationship browser"

    def test_capability_derived_from_contract(self):
        assert RELATIONSHIP_BROWSER.operation_names == ("find_all_children_of",)
        assert RELATIONSHIP_BROWSER.operations[0].arity == 1
        assert ParentIndex.provider_name == "parent_index"
        assert Relationships.provider_name == "relationships"
