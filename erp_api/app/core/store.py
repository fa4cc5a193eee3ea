"""
In-memory record storage.

Every service keeps its records in one or more ``InMemoryStore``
instances created at import time.  A store is a thin wrapper around a
dictionary keyed by record id which preserves insertion order, so
listings come back oldest first.  Data vanishes when the process
exits; swapping these stores for database repositories is the
intended path to persistence and nothing outside this module and the
services depends on the dictionary underneath.

All stores register themselves in a module-level registry so that the
test-suite (or an administrator) can wipe every collection at once via
``reset_stores``.
"""

from __future__ import annotations

import secrets
import string
import time
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

_ID_ALPHABET = string.ascii_lowercase + string.digits
_registry: List["InMemoryStore[Any]"] = []


def new_id(length: int = 9) -> str:
    """Return a random lowercase base36 identifier."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def document_number(prefix: str) -> str:
    """Return a human readable number such as ``INV-1718035200123`` (milliseconds)."""
    return f"{prefix}-{int(time.time() * 1000)}"


class InMemoryStore(Generic[T]):
    """Dictionary-backed collection of records addressed by ``id``."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._items: Dict[str, T] = {}
        _registry.append(self)

    def add(self, item: T) -> T:
        self._items[getattr(item, "id")] = item
        return item

    def get(self, item_id: str) -> Optional[T]:
        return self._items.get(item_id)

    def get_owned(self, item_id: str, company_id: str) -> Optional[T]:
        """Return the record only if it belongs to ``company_id``."""
        item = self._items.get(item_id)
        if item is None or getattr(item, "company_id", None) != company_id:
            return None
        return item

    def delete(self, item_id: str) -> bool:
        return self._items.pop(item_id, None) is not None

    def all(self) -> List[T]:
        return list(self._items.values())

    def filter(self, predicate: Optional[Callable[[T], bool]] = None, **criteria: Any) -> List[T]:
        """Return records matching every keyword criterion.

        Criteria whose value is ``None`` are ignored, which lets callers
        pass optional query parameters straight through.  An optional
        ``predicate`` is applied after the keyword match.
        """
        active = {key: value for key, value in criteria.items() if value is not None}
        result = []
        for item in self._items.values():
            if any(getattr(item, key) != value for key, value in active.items()):
                continue
            if predicate is not None and not predicate(item):
                continue
            result.append(item)
        return result

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))

    def __repr__(self) -> str:
        return f"InMemoryStore({self.name!r}, size={len(self._items)})"


def reset_stores() -> None:
    """Clear every registered store."""
    for store in _registry:
        store.clear()


def registered_stores() -> List[InMemoryStore[Any]]:
    return list(_registry)
