from __future__ import annotations

from typing import Any, Generic, List, Optional, TypeVar

from .document_store import DocumentStore

T = TypeVar("T")


class Collection(Generic[T]):
    """One entity list of the document, accessed by linear scan.

    The list is looked up on the store every call so a reload or reset of the
    document is picked up. Repositories never save; services do, once per
    mutation.
    """

    collection_name: str = ""

    def __init__(self, store: DocumentStore):
        self._store = store

    @property
    def _items(self) -> List[T]:
        return getattr(self._store.document, self.collection_name)

    def list_all(self) -> List[T]:
        return list(self._items)

    def find_by_field(self, field_name: str, value: Any) -> Optional[T]:
        for item in self._items:
            if getattr(item, field_name) == value:
                return item
        return None

    def filter_by_field(self, field_name: str, value: Any) -> List[T]:
        return [item for item in self._items if getattr(item, field_name) == value]

    def find_by_id(self, entity_id: str) -> Optional[T]:
        return self.find_by_field("id", entity_id)

    def insert(self, entity: T) -> T:
        self._items.append(entity)
        return entity

    def update_in_place(self, entity_id: str, **changes: Any) -> Optional[T]:
        entity = self.find_by_id(entity_id)
        if entity is None:
            return None
        for name in changes:
            if not hasattr(entity, name) or name == "id":
                raise AttributeError(f"{type(entity).__name__} has no updatable field {name!r}")
        for name, value in changes.items():
            setattr(entity, name, value)
        return entity

    def remove(self, entity_id: str) -> bool:
        items = self._items
        for index, item in enumerate(items):
            if getattr(item, "id") == entity_id:
                del items[index]
                return True
        return False
