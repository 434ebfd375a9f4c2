# capkit/examples/genealogy.py
"""
Genealogy research - a high-level consumer over low-level relationship storage.

Research depends on the RelationshipBrowser capability only. Relationships
(a flat list of triples) and ParentIndex (a dict keyed by parent name) store
the same facts differently; either can be handed to Research unchanged.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from capkit.core.abstract import abstract
from capkit.core.exceptions import NotImplementedCapabilityError
from capkit.core.registry import ProviderRegistry
from capkit.gateway import Capability, Gateway
from capkit.logging.logger import get_logger

logger = get_logger(__name__)


class Relationship(Enum):
    PARENT = 0
    CHILD = 1
    SIBLING = 2


@dataclass(frozen=True)
class Person:
    name: str


# =============================================================================
# LOW-LEVEL (STORAGE)
# =============================================================================


@abstract
class RelationshipBrowser:
    """Query surface research code is allowed to depend on."""

    def find_all_children_of(self, name: str) -> List[Person]:
        raise NotImplementedCapabilityError(f"{type(self).__name__}.find_all_children_of")


RELATIONSHIP_BROWSER = Capability.from_type(RelationshipBrowser, name="relationship browser")


class Relationships(RelationshipBrowser):
    """Stores each relation twice, once from each side."""

    provider_name = "relationships"

    def __init__(self):
        self.data: List[Tuple[Person, Relationship, Person]] = []

    def add_parent_and_child(self, parent: Person, child: Person) -> None:
        self.data.append((parent, Relationship.PARENT, child))
        self.data.append((child, Relationship.CHILD, parent))

    def find_all_children_of(self, name: str) -> List[Person]:
        return [
            to
            for source, relation, to in self.data
            if source.name == name and relation is Relationship.PARENT
        ]


class ParentIndex(RelationshipBrowser):
    """Children indexed by parent name."""

    provider_name = "parent_index"

    def __init__(self):
        self._children: Dict[str, List[Person]] = defaultdict(list)
        self._parents: Dict[str, List[Person]] = defaultdict(list)

    def add_parent_and_child(self, parent: Person, child: Person) -> None:
        self._children[parent.name].append(child)
        self._parents[child.name].append(parent)

    def find_all_children_of(self, name: str) -> List[Person]:
        return list(self._children.get(name, ()))


BROWSERS = ProviderRegistry(
    name="relationship browser",
    capability=RELATIONSHIP_BROWSER,
    scan_packages=[__name__],
)


# =============================================================================
# HIGH-LEVEL (RESEARCH)
# =============================================================================


class Research(Gateway):
    """Answers questions about families through the browser capability only."""

    requires = RELATIONSHIP_BROWSER

    def children_of(self, name: str) -> List[Person]:
        return self.provider.find_all_children_of(name)

    def report(self, name: str) -> List[str]:
        lines = [f"{name} has a child named {child.name}" for child in self.children_of(name)]
        for line in lines:
            logger.info(line)
        return lines


__all__ = [
    "Relationship",
    "Person",
    "RelationshipBrowser",
    "RELATIONSHIP_BROWSER",
    "Relationships",
    "ParentIndex",
    "BROWSERS",
    "Research",
]
