# capkit/examples/devices.py
"""
Office devices - one fat interface versus segregated capabilities.

Machine forces every device to claim print, fax and scan. An old-fashioned
printer can only print, so it has to decline the rest explicitly.

Printer and Scanner split the interface. Photocopier gets both through
compose(), and a device that only prints never has to mention faxing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from capkit.aggregation import compose
from capkit.core.abstract import abstract
from capkit.core.exceptions import NotImplementedCapabilityError
from capkit.gateway.contracts import Capability


@dataclass(frozen=True)
class Document:
    title: str
    body: str = ""


# =============================================================================
# Fat interface
# =============================================================================


@abstract
class Machine:
    """Every machine claims every operation, whether it can do it or not."""

    def print(self, doc: Document) -> str:
        raise NotImplementedCapabilityError(f"{type(self).__name__}.print")

    def fax(self, doc: Document) -> str:
        raise NotImplementedCapabilityError(f"{type(self).__name__}.fax")

    def scan(self, doc: Document) -> str:
        raise NotImplementedCapabilityError(f"{type(self).__name__}.scan")


class MultiFunctionPrinter(Machine):
    def __init__(self):
        self.jobs: List[Tuple[str, str]] = []

    def print(self, doc: Document) -> str:
        self.jobs.append(("print", doc.title))
        return f"printed {doc.title}"

    def fax(self, doc: Document) -> str:
        self.jobs.append(("fax", doc.title))
        return f"faxed {doc.title}"

    def scan(self, doc: Document) -> str:
        self.jobs.append(("scan", doc.title))
        return f"scanned {doc.title}"


class OldFashionedPrinter(Machine):
    """Prints. Faxing and scanning are declined, never silently ignored."""

    def __init__(self):
        self.jobs: List[Tuple[str, str]] = []

    def print(self, doc: Document) -> str:
        self.jobs.append(("print", doc.title))
        return f"printed {doc.title}"

    def fax(self, doc: Document) -> str:
        raise NotImplementedCapabilityError("OldFashionedPrinter.fax")

    def scan(self, doc: Document) -> str:
        raise NotImplementedCapabilityError("OldFashionedPrinter.scan")


# =============================================================================
# Segregated capabilities
# =============================================================================


@abstract
class Printer:
    def __init__(self):
        self.printed: List[str] = []

    def print(self, doc: Document) -> str:
        raise NotImplementedCapabilityError(f"{type(self).__name__}.print")


@abstract
class Scanner:
    def __init__(self):
        self.scanned: List[str] = []

    def scan(self, doc: Document) -> str:
        raise NotImplementedCapabilityError(f"{type(self).__name__}.scan")


PRINTING = Capability.from_type(Printer, name="printing")
SCANNING = Capability.from_type(Scanner, name="scanning")


class Photocopier(compose(Printer, [Scanner])):
    """Printer and scanner in one body; each instance keeps its own job lists."""

    def print(self, doc: Document) -> str:
        self.printed.append(doc.title)
        return f"printed {doc.title}"

    def scan(self, doc: Document) -> str:
        self.scanned.append(doc.title)
        return f"scanned {doc.title}"

    def copy(self, doc: Document) -> str:
        self.scan(doc)
        return self.print(doc)


__all__ = [
    "Document",
    "Machine",
    "MultiFunctionPrinter",
    "OldFashionedPrinter",
    "Printer",
    "Scanner",
    "Photocopier",
    "PRINTING",
    "SCANNING",
]
