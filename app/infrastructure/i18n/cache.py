"""Process-scoped cache of culture dictionaries.

Each culture gets a lazily built entry. The store lock only guards
get-or-insert of entries; building runs under the entry's own lock, so
concurrent first requests for one culture share a single build while
other cultures build in parallel.
"""

import threading
from typing import Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class LazyEntry(Generic[T]):
    """Value built once, on first access, by ``factory``.

    A factory that raises leaves the entry unbuilt; the next access retries.
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._built = False

    @property
    def is_built(self) -> bool:
        return self._built

    def get(self) -> T:
        if self._built:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if not self._built:
                self._value = self._factory()
                self._built = True
        return self._value  # type: ignore[return-value]


class DictionaryCache(Generic[T]):
    """Thread-safe map of lazily built values.

    Removing a key never disturbs callers already holding its entry; they
    finish with the old value while the next caller starts a new build.

    Args:
        max_size: Entry count at which the cache is emptied before a new
            entry is added.
    """

    def __init__(self, max_size: int = 1000):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._entries: Dict[str, LazyEntry[T]] = {}
        self._lock = threading.Lock()

    def get_or_create(self, key: str, factory: Callable[[], T]) -> T:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                if len(self._entries) >= self.max_size:
                    self._entries.clear()
                entry = LazyEntry(factory)
                self._entries[key] = entry
        return entry.get()

    def remove(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
