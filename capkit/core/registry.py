# capkit/core/registry.py
"""
Provider Registry.

Keeps named provider classes for one capability, so application code can pick
a storage mechanism by name and hand it to a Gateway consumer without
importing the concrete class.

Providers are discovered lazily from packages (non-recursive) or registered
by hand. Every registered class is checked against the capability first.

Usage:
    BROWSERS = ProviderRegistry(
        name="relationship browser",
        capability=RelationshipBrowser,
        scan_packages=["capkit.examples"],
    )
    Research(BROWSERS.get("relationships")())
"""

from __future__ import annotations

import importlib
import pkgutil
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Type

from capkit.core.exceptions import CapkitError
from capkit.gateway.contracts import CapabilityLike, as_capability
from capkit.logging.logger import get_logger
from capkit.logging.tags import REGISTRY

logger = get_logger(__name__)


# =============================================================================
# Exceptions
# =============================================================================


class ProviderRegistryError(CapkitError):
    """Base error for provider registry operations."""

    pass


class ProviderNotFoundError(ProviderRegistryError):
    """Raised when requested provider doesn't exist."""

    pass


class DuplicateProviderError(ProviderRegistryError):
    """Raised when two providers have the same name."""

    pass


# =============================================================================
# ProviderRegistry Class
# =============================================================================


@dataclass
class ProviderRegistry:
    """
    Provider registry with lazy auto-discovery.

    Args:
        name: Registry name (for error messages)
        capability: Capability every provider must satisfy
        scan_packages: Package names to scan for providers
        provider_name_attr: Attribute containing the provider name
        check_module_match: If True, only register classes defined in the scanned module
    """

    name: str
    capability: CapabilityLike
    scan_packages: List[str] = field(default_factory=list)
    provider_name_attr: str = "provider_name"
    check_module_match: bool = True
    _providers: Dict[str, Type[Any]] = field(default_factory=dict, repr=False)
    _discovered: bool = field(default=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def get(self, provider_name: str) -> Type[Any]:
        """Get a provider class by name."""
        self._ensure_discovered()

        with self._lock:
            if provider_name not in self._providers:
                available = sorted(self._providers.keys())
                raise ProviderNotFoundError(
                    f"Unknown {self.name} provider: {provider_name!r}. Available: {available}"
                )
            return self._providers[provider_name]

    def list_available(self) -> List[str]:
        """List all available provider names."""
        self._ensure_discovered()
        with self._lock:
            return sorted(self._providers.keys())

    def providers(self) -> Dict[str, Type[Any]]:
        """Snapshot of name -> provider class."""
        self._ensure_discovered()
        with self._lock:
            return dict(self._providers)

    def register(self, provider_class: Type[Any]) -> Type[Any]:
        """
        Manually register a provider class.

        Returns the class, so this also works as a decorator.

        Raises:
            ProviderRegistryError: If the class lacks the capability or a name
            DuplicateProviderError: If another class already uses the name
        """
        capability = as_capability(self.capability)
        missing = capability.missing(provider_class)
        if missing:
            raise ProviderRegistryError(
                f"{self.name} provider {provider_class.__name__} does not implement "
                f"{capability.name!r}: missing {', '.join(missing)}"
            )

        if not hasattr(provider_class, self.provider_name_attr):
            raise ProviderRegistryError(
                f"{self.name} provider {provider_class.__name__} missing required "
                f"attribute {self.provider_name_attr!r}"
            )

        name = getattr(provider_class, self.provider_name_attr)

        with self._lock:
            if name in self._providers:
                existing = self._providers[name]
                if existing is not provider_class:
                    raise DuplicateProviderError(
                        f"Duplicate {self.name} provider: {name!r}. "
                        f"Found in {existing.__module__} and {provider_class.__module__}"
                    )
                return provider_class

            self._providers[name] = provider_class

        logger.debug(f"{REGISTRY} Registered {self.name} provider: {name!r}")
        return provider_class

    def _ensure_discovered(self) -> None:
        """Run auto-discovery if not already done."""
        with self._lock:
            if self._discovered:
                return

            for package_name in self.scan_packages:
                try:
                    package = importlib.import_module(package_name)
                except ImportError as e:
                    logger.debug(f"{REGISTRY} Could not import {package_name}: {e}")
                    continue

                self._scan_package(package)

            self._discovered = True
            logger.debug(
                f"{REGISTRY} Discovered {len(self._providers)} {self.name} provider(s): "
                f"{sorted(self._providers.keys())}"
            )

    def _scan_package(self, package: Any) -> None:
        """Scan a package for provider classes (non-recursive)."""
        package_path = getattr(package, "__path__", None)
        if not package_path:
            self._scan_module(package)
            return

        for _importer, modname, ispkg in pkgutil.iter_modules(
            package_path, prefix=f"{package.__name__}."
        ):
            if ispkg:
                continue

            try:
                module = importlib.import_module(modname)
            except ImportError as e:
                logger.debug(f"{REGISTRY} Could not import {modname}: {e}")
                continue

            self._scan_module(module)

    def _scan_module(self, module: Any) -> None:
        """Scan a module for provider classes."""
        capability = as_capability(self.capability)

        for name in dir(module):
            if name.startswith("_"):
                continue

            obj = getattr(module, name)

            if not isinstance(obj, type):
                continue

            if not hasattr(obj, self.provider_name_attr):
                continue

            if not capability.is_satisfied_by(obj):
                continue

            if self.check_module_match and obj.__module__ != module.__name__:
                continue

            try:
                self.register(obj)
            except ProviderRegistryError as e:
                logger.debug(f"{REGISTRY} Skipping {name}: {e}")


__all__ = [
    "ProviderRegistryError",
    "ProviderNotFoundError",
    "DuplicateProviderError",
    "ProviderRegistry",
]
