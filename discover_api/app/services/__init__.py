"""Service layer: state shared across requests."""

from .discovery_store import DiscoveryStore, PrimaryEntry, SubEntry

__all__ = ["DiscoveryStore", "PrimaryEntry", "SubEntry"]
