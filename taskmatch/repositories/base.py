"""
Base repository with generic CRUD operations over a store collection.

All entity-specific repositories inherit from this.
"""
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from taskmatch.core.store import MarketplaceStore
from taskmatch.models.base import Entity

ModelType = TypeVar("ModelType", bound=Entity)


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing standard CRUD operations.

    Usage:
        class JobRepository(BaseRepository[Job]):
            def __init__(self):
                super().__init__(Job, "jobs")
    """

    def __init__(self, model: Type[ModelType], collection: str):
        self.model = model
        self.collection = collection

    def list_all(self, store: MarketplaceStore) -> List[ModelType]:
        """All records, insertion order."""
        return list(store.snapshot(self.collection))

    def find(
        self,
        store: MarketplaceStore,
        predicate: Callable[[ModelType], bool],
    ) -> List[ModelType]:
        """Records matching a predicate, insertion order preserved."""
        return [item for item in store.snapshot(self.collection) if predicate(item)]

    def get_by_id(
        self,
        store: MarketplaceStore,
        id: str,
    ) -> Optional[ModelType]:
        """Get a single record by ID."""
        for item in store.snapshot(self.collection):
            if item.id == id:
                return item
        return None

    def count(self, store: MarketplaceStore) -> int:
        return len(store.snapshot(self.collection))

    def create(
        self,
        store: MarketplaceStore,
        **kwargs: Any,
    ) -> ModelType:
        """Append a new record with a store-issued ID."""
        kwargs.setdefault("id", store.new_id())
        instance = self.model(**kwargs)
        store.replace(self.collection, store.snapshot(self.collection) + (instance,))
        return instance

    def update(
        self,
        store: MarketplaceStore,
        instance: ModelType,
        **kwargs: Any,
    ) -> ModelType:
        """Replace a record with an updated copy, keeping its position."""
        updated = instance.model_copy(update=kwargs)
        store.replace(
            self.collection,
            (updated if item.id == instance.id else item for item in store.snapshot(self.collection)),
        )
        return updated

    def replace_many(
        self,
        store: MarketplaceStore,
        updated: List[ModelType],
    ) -> None:
        """Swap several records in one collection replacement."""
        by_id = {item.id: item for item in updated}
        store.replace(
            self.collection,
            (by_id.get(item.id, item) for item in store.snapshot(self.collection)),
        )

    def delete(
        self,
        store: MarketplaceStore,
        id: str,
    ) -> bool:
        """Remove a record by ID."""
        before = store.snapshot(self.collection)
        after = tuple(item for item in before if item.id != id)
        store.replace(self.collection, after)
        return len(after) < len(before)
