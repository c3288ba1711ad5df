"""Inventory of collections and relations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator

import yaml

from collectionql.core import memory
from collectionql.core.condition import Condition
from collectionql.core.interface import (
    SCALAR_TYPES,
    Collection,
    CollectionKey,
    ListType,
    NullableType,
    ObjectField,
    ObjectType,
    Relation,
)
from collectionql.core.schema import BuildOptions, CollectionSchema, FieldSchema, InventorySchema

logger = logging.getLogger(__name__)


class InventoryError(Exception):
    """Raised when an inventory is inconsistent."""

    pass


class Inventory:
    """
    Registry of every collection and relation in a data model.

    Collections are indexed by name and by object type. Relations are kept
    in registration order, which is the order their fields appear in.
    """

    def __init__(self, options: BuildOptions | None = None) -> None:
        self._collections: dict[str, Collection] = {}
        self._relations: list[Relation] = []
        # Secondary index: id(object type) -> Collection
        self._type_index: dict[int, Collection] = {}
        self.options = options or BuildOptions()

    @classmethod
    def load(cls, path: str | Path) -> Inventory:
        """Load inventory from YAML file."""
        path = Path(path)
        with path.open() as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Inventory:
        """Create inventory from a declaration dictionary."""
        # Validate with schema
        schema = InventorySchema(**data)
        inventory = cls(schema.options)

        # Object types first so fields can reference any of them
        types = {
            c.type: ObjectType(c.type, description=c.type_description or c.description)
            for c in schema.collections.values()
        }
        for name, declared in schema.collections.items():
            object_type = types[declared.type]
            for field_name, field in declared.fields.items():
                object_type.fields[field_name] = ObjectField(
                    field_name,
                    _resolve_field_type(field, types, name),
                    description=field.description,
                )
            inventory.add_collection(_create_collection(name, declared, object_type))

        for relation in schema.relations:
            inventory.add_relation(
                _create_relation(
                    relation.name,
                    inventory.get_collection(relation.head),
                    schema.collections[relation.head],
                    inventory.get_collection(relation.tail),
                    relation.tail_fields,
                    relation.conditional,
                )
            )

        logger.debug("Loaded inventory: %d collections, %d relations", len(inventory), len(inventory.get_relations()))
        return inventory

    def add_collection(self, collection: Collection) -> None:
        if collection.name in self._collections:
            raise InventoryError(f"Duplicate collection: {collection.name}")
        if id(collection.type) in self._type_index:
            raise InventoryError(
                f"Object type '{collection.type.name}' already belongs to collection "
                f"'{self._type_index[id(collection.type)].name}'"
            )
        self._collections[collection.name] = collection
        self._type_index[id(collection.type)] = collection

    def add_relation(self, relation: Relation) -> None:
        for collection in (relation.head_collection, relation.tail_collection):
            if self._collections.get(collection.name) is not collection:
                raise InventoryError(
                    f"Relation '{relation.name}' references unregistered collection: {collection.name}"
                )
        self._relations.append(relation)

    def get_collections(self) -> list[Collection]:
        return list(self._collections.values())

    def get_relations(self) -> list[Relation]:
        return list(self._relations)

    def get_collection(self, name: str) -> Collection | None:
        """Get collection by name."""
        return self._collections.get(name)

    def get_collection_for_type(self, object_type: ObjectType) -> Collection | None:
        """Get the collection whose values have this object type."""
        return self._type_index.get(id(object_type))

    def __len__(self) -> int:
        return len(self._collections)

    def __iter__(self) -> Iterator[Collection]:
        return iter(self._collections.values())

    def __contains__(self, item: str) -> bool:
        return item in self._collections


def _resolve_field_type(field: FieldSchema, types: dict[str, ObjectType], collection_name: str) -> Any:
    if field.type in SCALAR_TYPES:
        resolved: Any = SCALAR_TYPES[field.type]
    elif field.type in types:
        resolved = types[field.type]
    else:
        raise InventoryError(f"Unknown field type in collection '{collection_name}': {field.type}")
    if field.list:
        resolved = ListType(resolved)
    if field.nullable:
        resolved = NullableType(resolved)
    return resolved


def _create_collection(name: str, declared: CollectionSchema, object_type: ObjectType) -> Collection:
    rows = [dict(row) for row in declared.rows]
    collection = Collection(
        name,
        object_type,
        description=declared.description,
        paginator=memory.MemoryPaginator(name, object_type, rows) if declared.paginated else None,
    )
    if declared.primary_key:
        field_names = declared.primary_key
        key_type: Any = (
            object_type.fields[field_names[0]].type
            if len(field_names) == 1
            else ListType(object_type.fields[field_names[0]].type)
        )
        collection.primary_key = CollectionKey(
            collection,
            "-and-".join(field_names),
            key_type,
            lambda value, names=field_names: memory.get_key(names, value),
            read=memory.MemoryKeyReader(field_names, rows),
        )
        collection.keys.append(collection.primary_key)
    return collection


def _create_relation(
    name: str,
    head: Collection | None,
    head_schema: CollectionSchema,
    tail: Collection | None,
    tail_fields: list[str],
    conditional: bool,
) -> Relation:
    if head is None or tail is None or head.primary_key is None:
        raise InventoryError(f"Relation '{name}' needs a head collection with a primary key")
    head_fields = head_schema.primary_key

    def get_tail_condition_from_head_value(head_value: Any) -> Condition:
        return memory.key_condition(tail_fields, memory.get_key(head_fields, head_value))

    def get_head_key_from_tail_value(tail_value: Any) -> Any:
        return memory.get_key(tail_fields, tail_value)

    return Relation(
        name,
        head.primary_key,
        tail,
        get_tail_condition_from_head_value=get_tail_condition_from_head_value if conditional else None,
        get_head_key_from_tail_value=get_head_key_from_tail_value,
    )
