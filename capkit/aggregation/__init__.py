# capkit/aggregation/__init__.py
"""Capability Aggregator - composite types from a base and capability providers."""

from .aggregator import CAPABILITIES_ATTR, Aggregator, capabilities_of, compose

__all__ = ["Aggregator", "compose", "capabilities_of", "CAPABILITIES_ATTR"]
