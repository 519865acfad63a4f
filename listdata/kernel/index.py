"""
ListData Kernel — Keyed Index

Constant-time lookup of an item, or its position, by key.

The backing dict is built lazily, on the first lookup against a given
items sequence, and reused for as long as lookups keep passing that same
sequence object. A different sequence object throws the whole dict away;
there is no incremental patching.

Duplicate keys are last-write-wins. check_keys() reports them (and None or
empty keys) for callers that want to know.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Generic, NamedTuple, TypeVar

from listdata.kernel.types import GetKey, Key, Warning, default_get_key

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Entry(NamedTuple):
    item: Any
    index: int


class ItemsByKey(Generic[T]):
    """
    Lazily built key → (item, index) map over one items sequence at a time.

    Lookups take the sequence they should answer for. If it is not the
    sequence the dict was built from (identity, not equality), the dict is
    rebuilt before answering.
    """

    def __init__(self, get_key: GetKey | None = None) -> None:
        self.get_key: GetKey = get_key or default_get_key
        self._source: Sequence[T] | None = None
        self._entries: dict[Key, Entry] | None = None

    def _entry(self, items: Sequence[T], key: Key) -> Entry | None:
        if self._entries is None or items is not self._source:
            self._entries = self._build(items)
            self._source = items
        return self._entries.get(key)

    def _build(self, items: Sequence[T]) -> dict[Key, Entry]:
        logger.debug("ItemsByKey: building index over %d items", len(items))
        get_key = self.get_key
        return {get_key(item): Entry(item, i) for i, item in enumerate(items)}

    def index(self, items: Sequence[T], key: Key) -> int | None:
        """Position of key in items, or None."""
        entry = self._entry(items, key)
        return None if entry is None else entry.index

    def item(self, items: Sequence[T], key: Key) -> T | None:
        """Item with key in items, or None."""
        entry = self._entry(items, key)
        return None if entry is None else entry.item

    def is_built_for(self, items: Sequence[T]) -> bool:
        """True when the dict exists and was built from exactly this sequence."""
        return self._entries is not None and items is self._source

    def find_index(self, items: Sequence[T], key: Key) -> int:
        """
        Linear scan for key in items, bypassing the cached dict.
        Returns -1 when absent.
        """
        get_key = self.get_key
        for i, item in enumerate(items):
            if get_key(item) == key:
                return i
        return -1


def check_keys(items: Sequence[Any], get_key: GetKey | None = None) -> list[Warning]:
    """
    Report keys that break the uniqueness contract.
    Returns a list of Warnings. Empty list = every key is usable.

    Flags:
    - DUPLICATE_KEY: two or more items share a key (lookups see the last one)
    - MISSING_KEY: get_key returned None
    - EMPTY_KEY: get_key returned ""
    """
    get_key = get_key or default_get_key
    warnings: list[Warning] = []
    first_seen: dict[Key, int] = {}

    for i, item in enumerate(items):
        key = get_key(item)
        if key is None:
            warnings.append(Warning(
                code="MISSING_KEY",
                message=f"Item at index {i} has no key",
                details={"index": i},
            ))
            continue
        if key == "":
            warnings.append(Warning(
                code="EMPTY_KEY",
                message=f"Item at index {i} has an empty key",
                details={"index": i},
            ))
        if key in first_seen:
            warnings.append(Warning(
                code="DUPLICATE_KEY",
                message=f"Key {key!r} at index {i} duplicates index {first_seen[key]}",
                details={"key": key, "index": i, "first_index": first_seen[key]},
            ))
        else:
            first_seen[key] = i

    return warnings
