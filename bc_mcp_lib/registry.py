"""
In-memory catalog of entity definitions.
"""

from typing import Dict, Iterable, List, Optional

from .models import EntityDefinition, FieldDefinition


class EntityRegistry:
    """Keyed by entity name; registering an existing name replaces it."""

    def __init__(self, entities: Optional[Iterable[EntityDefinition]] = None):
        self._entities: Dict[str, EntityDefinition] = {}
        for entity in entities or []:
            self.register(entity)

    def register(self, entity: EntityDefinition):
        self._entities[entity.name] = entity

    def get(self, name: str) -> Optional[EntityDefinition]:
        return self._entities.get(name)

    def get_by_plural_name(self, plural_name: str) -> Optional[EntityDefinition]:
        return next((e for e in self._entities.values() if e.plural_name == plural_name), None)

    def list_all(self) -> List[EntityDefinition]:
        return list(self._entities.values())

    def get_writable_fields(self, name: str) -> List[FieldDefinition]:
        entity = self.get(name)
        return [f for f in entity.fields if not f.read_only] if entity else []

    def get_required_fields(self, name: str) -> List[FieldDefinition]:
        entity = self.get(name)
        return [f for f in entity.fields if f.required] if entity else []

    def get_filterable_fields(self, name: str) -> List[FieldDefinition]:
        """All fields except foreign-key GUIDs; the primary id stays filterable."""
        entity = self.get(name)
        return [f for f in entity.fields if f.type != "guid" or f.name == "id"] if entity else []

    def __contains__(self, name: str) -> bool:
        return name in self._entities

    def __len__(self) -> int:
        return len(self._entities)
