"""Process-wide memo of member and mapping-capability lookups.

Introspecting a type is far more expensive than reading an attribute, so the
answers (including "no such member") are remembered per type. Stores are
size-bounded: when a store grows past its limit, the oldest half of its
entries is dropped before the next insert.
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar, cast

from .config import OBJPATH_CONFIG
from .members import (
    MappingCapability,
    MemberAccessor,
    find_field,
    find_mapping_capability,
    find_property,
)
from .runtime.logging import get_logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_UNSET = object()


class BoundedStore(Generic[K, V]):
    """Thread-safe memo that drops its oldest half when it outgrows ``max_size``.

    ``max_size=None`` follows ``OBJPATH_CONFIG.cache_max_size``.
    """

    def __init__(self, name: str, max_size: int | None = None) -> None:
        self.name = name
        self._max_size = max_size
        self._entries: dict[K, V] = {}
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        if self._max_size is None:
            return OBJPATH_CONFIG.cache_max_size
        return self._max_size

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        with self._lock:
            cached = self._entries.get(key, _UNSET)
        if cached is not _UNSET:
            return cast(V, cached)

        # Computed outside the lock; concurrent callers may duplicate the work
        # but all of them return whichever value was stored first.
        value = compute()

        with self._lock:
            cached = self._entries.get(key, _UNSET)
            if cached is not _UNSET:
                return cast(V, cached)
            if len(self._entries) > self.max_size:
                self._evict_half()
            self._entries[key] = value
        return value

    def _evict_half(self) -> None:
        total = len(self._entries)
        doomed = list(itertools.islice(self._entries, total // 2))
        for key in doomed:
            del self._entries[key]
        get_logger().debug(
            "%s cache: evicted %d of %d entries", self.name, len(doomed), total
        )

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class MemberLookupCache:
    """Thread-safe memo of record member and mapping-capability lookups."""

    def __init__(self, max_size: int | None = None) -> None:
        self._members: BoundedStore[tuple[type, str, bool], MemberAccessor | None] = (
            BoundedStore("member", max_size)
        )
        self._mappings: BoundedStore[type, MappingCapability | None] = BoundedStore(
            "mapping", max_size
        )

    def lookup_member(
        self, cls: type, name: str, ignore_case: bool
    ) -> MemberAccessor | None:
        """Property-like member first, then field-like member."""

        def compute() -> MemberAccessor | None:
            found = find_property(cls, name, ignore_case=ignore_case)
            if found is None:
                found = find_field(cls, name, ignore_case=ignore_case)
            return found

        return self._members.get_or_compute((cls, name, ignore_case), compute)

    def lookup_mapping_capability(self, cls: type) -> MappingCapability | None:
        return self._mappings.get_or_compute(
            cls, lambda: find_mapping_capability(cls)
        )

    def clear_all(self) -> None:
        self._members.clear()
        self._mappings.clear()
        get_logger().debug("member cache: cleared")

    def stats(self) -> dict[str, int]:
        return {"member": len(self._members), "mapping": len(self._mappings)}


_MEMBER_CACHE = MemberLookupCache()


def get_member_cache() -> MemberLookupCache:
    return _MEMBER_CACHE


__all__ = ["BoundedStore", "MemberLookupCache", "get_member_cache"]
