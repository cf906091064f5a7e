"""
In-memory cache for the item mapping and per-item drop responses.

One DropsCache is created at process start and passed explicitly to the
orchestrator. Entries never expire: the mapping is loaded once and each item's
response is built once, so a restart is needed to pick up wiki changes.
Entries are organized by tag (mapping, drops) for selective clearing.

The HTTP server runs lookups on worker threads, so the cache also hands out
one lock per item id. Holding it while building a response guarantees at most
one upstream fetch per item. A lock only lives while some caller is building
or waiting on that id.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from osrs_drops.models import ItemDropsResponse
from osrs_drops.types import MappingEntry


@dataclass
class _ItemLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


class DropsCache:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._mapping: dict[int, MappingEntry] | None = None
        self._drops: dict[int, ItemDropsResponse] = {}
        self._item_locks: dict[int, _ItemLock] = {}
        self.mapping_lock = threading.Lock()

    def get_mapping(self) -> dict[int, MappingEntry] | None:
        return self._mapping

    def set_mapping(self, entries: list[MappingEntry]) -> None:
        self._mapping = {entry["id"]: entry for entry in entries}

    def get_item_name(self, item_id: int) -> str | None:
        if self._mapping is None:
            return None
        entry = self._mapping.get(item_id)
        return entry["name"] if entry else None

    def get_item_drops(self, item_id: int) -> ItemDropsResponse | None:
        return self._drops.get(item_id)

    def set_item_drops(self, item_id: int, data: ItemDropsResponse) -> None:
        with self._lock:
            self._drops[item_id] = data

    @contextmanager
    def item_lock(self, item_id: int) -> Iterator[None]:
        """Hold the construction lock for one item id.

        The lock is shared by every caller building the same id and is dropped
        from the cache once the last of them leaves, whether the build
        succeeded or not.
        """
        with self._lock:
            entry = self._item_locks.get(item_id)
            if entry is None:
                entry = self._item_locks[item_id] = _ItemLock()
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._lock:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._item_locks[item_id]

    def clear_cache(self, tags: list[str] | None = None) -> None:
        with self._lock:
            if not tags or "mapping" in tags:
                self._mapping = None
            if not tags or "drops" in tags:
                self._drops.clear()
