from __future__ import annotations

import copy
from typing import Optional, Protocol


class Store(Protocol):
    """Key-value persistence backend.

    Each key names a logical collection; the value is the whole collection as
    a list of plain dicts. Repositories own the collection semantics, the store
    only loads and saves.
    """

    def get(self, key: str) -> Optional[list[dict]]:
        raise NotImplementedError

    def put(self, key: str, value: list[dict]) -> None:
        raise NotImplementedError


class InMemoryStore(Store):
    """Process-local store, used for tests and the `memory` backend."""

    def __init__(self, initial: Optional[dict[str, list[dict]]] = None):
        self._data: dict[str, list[dict]] = copy.deepcopy(initial or {})

    def get(self, key: str) -> Optional[list[dict]]:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    def put(self, key: str, value: list[dict]) -> None:
        self._data[key] = copy.deepcopy(list(value))

    def keys(self) -> list[str]:
        return sorted(self._data)
