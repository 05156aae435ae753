"""Client-side query cache.

Maps a query key (a tuple such as ``('/api/projects', 3, 'cameras')``) to the
last fetched data. Invalidation is the only way fresh server data reaches a
subscriber after a mutation: matching entries with a loader and at least one
subscriber are refetched immediately, the others are marked stale and
refetched on their next ``fetch``.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple
import logging

QueryKey = Tuple[Hashable, ...]
Loader = Callable[[], Any]


def normalize_key(key) -> QueryKey:
    if isinstance(key, tuple):
        return key
    if isinstance(key, list):
        return tuple(key)
    return (key,)


@dataclass
class QueryEntry:
    data: Any = None
    has_data: bool = False
    stale: bool = False
    error: Optional[Exception] = None
    loader: Optional[Loader] = None
    subscribers: List[Callable[[Any], None]] = field(default_factory=list)


class QueryCache:
    """In-memory query cache with subscribers.

    Subscribers are called as ``callback(data)`` whenever an entry's data is
    replaced, whether by ``set_data`` or by a (re)fetch.
    """

    def __init__(self):
        self._entries: Dict[QueryKey, QueryEntry] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def _entry(self, key) -> QueryEntry:
        key = normalize_key(key)
        entry = self._entries.get(key)
        if entry is None:
            entry = self._entries[key] = QueryEntry()
        return entry

    def has(self, key) -> bool:
        entry = self._entries.get(normalize_key(key))
        return entry is not None and entry.has_data

    def get(self, key, default=None):
        """Cached data for ``key``, or ``default`` when absent."""
        entry = self._entries.get(normalize_key(key))
        if entry is None or not entry.has_data:
            return default
        return entry.data

    def is_stale(self, key) -> bool:
        entry = self._entries.get(normalize_key(key))
        return entry is None or not entry.has_data or entry.stale

    def get_error(self, key) -> Optional[Exception]:
        """The error of the last failed refetch of ``key``, if any."""
        entry = self._entries.get(normalize_key(key))
        return entry.error if entry else None

    def set_data(self, key, data) -> None:
        """Replace the data of ``key`` and notify its subscribers."""
        entry = self._entry(key)
        entry.data = data
        entry.has_data = True
        entry.stale = False
        entry.error = None
        self._notify(entry)

    def fetch(self, key, loader: Optional[Loader] = None, force: bool = False):
        """Return cached data, loading it when absent, stale or forced.

        The loader is remembered for later refetches. Loader exceptions
        propagate to the caller.
        """
        entry = self._entry(key)
        if loader is not None:
            entry.loader = loader
        if entry.has_data and not entry.stale and not force:
            return entry.data
        if entry.loader is None:
            raise KeyError(f"No loader registered for query {normalize_key(key)}")

        self.logger.debug(f"Fetching {normalize_key(key)}")
        data = entry.loader()
        self.set_data(key, data)
        return data

    def invalidate(self, prefix=()) -> int:
        """Invalidate every key starting with ``prefix`` (all keys for ``()``).

        Returns:
            Number of entries refetched
        """
        prefix = normalize_key(prefix)
        refetched = 0
        for key, entry in list(self._entries.items()):
            if key[:len(prefix)] != prefix:
                continue
            entry.stale = True
            if entry.loader is not None and entry.subscribers:
                self._refetch(key, entry)
                refetched += 1
        self.logger.debug(f"Invalidated {prefix}: {refetched} refetched")
        return refetched

    def _refetch(self, key, entry):
        try:
            data = entry.loader()
        except Exception as e:
            # Keep showing the last good data; the error stays readable via get_error()
            self.logger.error(f"Refetch of {key} failed: {e}")
            entry.error = e
            return
        entry.data = data
        entry.has_data = True
        entry.stale = False
        entry.error = None
        self._notify(entry)

    def subscribe(self, key, callback: Callable[[Any], None]) -> Callable[[], None]:
        """Register ``callback(data)`` for ``key``; returns an unsubscribe function."""
        entry = self._entry(key)
        entry.subscribers.append(callback)

        def unsubscribe():
            if callback in entry.subscribers:
                entry.subscribers.remove(callback)
        return unsubscribe

    def remove(self, key) -> None:
        self._entries.pop(normalize_key(key), None)

    def clear(self) -> None:
        self._entries.clear()

    def keys(self):
        return list(self._entries)

    @staticmethod
    def _notify(entry):
        for callback in list(entry.subscribers):
            callback(entry.data)
