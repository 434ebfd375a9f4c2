# tests/conftest.py
"""
Root conftest - shared fixtures.

Test Tiers:
- tier1: pure logic, no I/O (compose, guard, gateway)
         Run: pytest -m tier1
- tier2: touches the filesystem or environment (config loading)
         Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

import logging

import pytest

from capkit.examples.genealogy import ParentIndex, Person, Relationships

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def family():
    """John with two children, as (parent, children) people."""
    john = Person("John")
    return john, [Person("Chris"), Person("Matt")]


@pytest.fixture
def relationships(family) -> Relationships:
    parent, children = family
    store = Relationships()
    for child in children:
        store.add_parent_and_child(parent, child)
    return store


@pytest.fixture
def parent_index(family) -> ParentIndex:
    parent, children = family
    store = ParentIndex()
    for child in children:
        store.add_parent_and_child(parent, child)
    return store


@pytest.fixture
def capkit_debug_logs(caplog):
    """Capture capkit DEBUG records."""
    caplog.set_level(logging.DEBUG, logger="capkit")
    return caplog
