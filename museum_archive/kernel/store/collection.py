"""
Ordered in-memory collection of frozen entities.
"""

from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from museum_archive.kernel.models.base import EntityModel, PatchModel

E = TypeVar("E", bound=EntityModel)


def _detached(entity: E) -> E:
    # frozen is shallow; list fields (tags, images) need their own copy
    return entity.model_copy(deep=True)


class EntityCollection(Generic[E]):
    """
    Insertion-ordered list of entities addressed by id.
    
    Everything handed out is a deep copy of the stored record, so the
    collection can only change through these methods.
    """
    
    def __init__(self, name: str, entities: Optional[List[E]] = None):
        self.name = name
        self._items: List[E] = [_detached(e) for e in entities or []]
    
    def __len__(self) -> int:
        return len(self._items)
    
    def __iter__(self) -> Iterator[E]:
        return iter(self.all())
    
    def all(self) -> List[E]:
        return [_detached(entity) for entity in self._items]
    
    def get(self, entity_id: str) -> Optional[E]:
        for entity in self._items:
            if entity.id == entity_id:
                return _detached(entity)
        return None
    
    def filter(self, predicate: Callable[[E], bool]) -> List[E]:
        return [_detached(entity) for entity in self._items if predicate(entity)]
    
    def append(self, entity: E) -> E:
        self._items.append(_detached(entity))
        return entity
    
    def apply_patch(self, entity_id: str, patch: PatchModel) -> Optional[E]:
        """
        Shallow-merge a patch over the entity with entity_id.
        
        The merged record is re-validated, so model invariants hold after
        the update. Returns None when no entity has that id.
        """
        for index, existing in enumerate(self._items):
            if existing.id != entity_id:
                continue
            changes = patch.changes()
            if not changes:
                return _detached(existing)
            updated = type(existing).model_validate({**existing.model_dump(), **changes})
            self._items[index] = updated
            return _detached(updated)
        return None
    
    def remove(self, entity_id: str) -> bool:
        return self.remove_where(lambda entity: entity.id == entity_id) > 0
    
    def remove_where(self, predicate: Callable[[E], bool]) -> int:
        kept = [entity for entity in self._items if not predicate(entity)]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed
