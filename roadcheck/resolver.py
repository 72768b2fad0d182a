from __future__ import annotations
import logging
from typing import Callable, Dict, Generic, Iterable, Optional, Sequence, TypeVar

LOG = logging.getLogger("roadcheck.resolver")

T = TypeVar("T")


def find(collection: Iterable[T], predicate: Callable[[str], bool]) -> Optional[T]:
    for item in collection:
        if predicate(item.id):
            return item
    return None


def find_by_id(collection: Iterable[T], entity_id: Optional[str]) -> Optional[T]:
    if entity_id is None:
        return None
    return find(collection, lambda i: i == entity_id)


class EntityIndex(Generic[T]):
    """Id -> entity map that answers exactly like a linear first-match scan.

    Ids are assumed unique; when they are not, the first entity in collection
    order wins and the duplicate is logged.
    """

    def __init__(self, collection: Sequence[T], kind: str = "entity") -> None:
        self._items: Dict[str, T] = {}
        dup = 0
        for item in collection:
            if item.id in self._items:
                dup += 1
                continue
            self._items[item.id] = item
        if dup:
            LOG.warning("%d duplicate %s id(s) found; first occurrence wins", dup, kind)

    def get(self, entity_id: Optional[str]) -> Optional[T]:
        if entity_id is None:
            return None
        return self._items.get(entity_id)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items


__all__ = ["EntityIndex", "find", "find_by_id"]
