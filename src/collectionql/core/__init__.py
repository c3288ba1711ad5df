"""Core data model for collections, relations and conditions."""

from collectionql.core.interface import (
    Collection,
    CollectionKey,
    ListType,
    NodeValue,
    NullableType,
    ObjectField,
    ObjectType,
    Relation,
    ScalarType,
)
from collectionql.core.inventory import Inventory, InventoryError
from collectionql.core.schema import BuildOptions, InventorySchema

__all__ = [
    "Collection",
    "CollectionKey",
    "ListType",
    "NodeValue",
    "NullableType",
    "ObjectField",
    "ObjectType",
    "Relation",
    "ScalarType",
    "Inventory",
    "InventoryError",
    "BuildOptions",
    "InventorySchema",
]
