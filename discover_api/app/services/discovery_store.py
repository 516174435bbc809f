"""
In-memory two-level store backing the discovery endpoints.

Values are grouped under a primary key.  Each group is an ordered list
of ``(sub, value)`` records in which every sub-key appears at most
once.  The first ``put`` for a sub-key appends it to the end of the
group; later puts for the same sub-key overwrite the value without
moving it.  Nothing is ever removed: there is no expiration and no
eviction, so the store only grows for the lifetime of the process.

The whole mapping is guarded by a single reader/writer lock.  ``get``
takes it in shared mode and ``put`` in exclusive mode, so writes are
serialised across all keys while reads may overlap each other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from discover_api.app.core.rwlock import ReadWriteLock


logger = logging.getLogger(__name__)


@dataclass
class SubEntry:
    """A single ``(sub, value)`` slot inside a primary entry."""

    sub: str
    value: str


@dataclass
class PrimaryEntry:
    """All sub-entries published under one primary key, in insertion order."""

    key: str
    entries: List[SubEntry] = field(default_factory=list)


class DiscoveryStore:
    """Concurrent mapping of primary key to an ordered list of sub-entries.

    Both operations are total: unknown keys read as an empty list and
    any string (including the empty string) is accepted as key, sub-key
    or value.
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._entries: Dict[str, PrimaryEntry] = {}

    def put(self, key: str, sub: str, value: str) -> None:
        """Store ``value`` under ``key``/``sub``.

        The sub-key lookup is a linear scan over the group.  Groups are
        expected to stay small (one record per peer), so this keeps the
        insertion order trivially stable.
        """
        with self._lock.write_lock():
            entry = self._entries.get(key)
            if entry is None:
                entry = PrimaryEntry(key=key)
                self._entries[key] = entry
                logger.debug("Created primary entry %r", key)

            for item in entry.entries:
                if item.sub == sub:
                    item.value = value
                    return

            entry.entries.append(SubEntry(sub=sub, value=value))

    def get(self, key: str) -> List[SubEntry]:
        """Return a snapshot of the sub-entries stored under ``key``.

        The returned list and its records are fresh copies; neither later
        puts nor changes made by the caller are visible on the other side.
        """
        with self._lock.read_lock():
            entry = self._entries.get(key)
            if entry is None:
                return []
            return [SubEntry(sub=item.sub, value=item.value) for item in entry.entries]

    def __len__(self) -> int:
        with self._lock.read_lock():
            return len(self._entries)
