"""Data model consumed by the GraphQL type builders."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, Protocol


class ScalarType:
    """A named scalar type (string, integer, ...)."""

    def __init__(self, name: str, description: str | None = None) -> None:
        self.name = name
        self.description = description

    def __repr__(self) -> str:
        return f"ScalarType({self.name})"


STRING = ScalarType("string")
INTEGER = ScalarType("integer")
FLOAT = ScalarType("float")
BOOLEAN = ScalarType("boolean")
ID = ScalarType("id")
JSON = ScalarType("json")

SCALAR_TYPES: dict[str, ScalarType] = {
    t.name: t for t in (STRING, INTEGER, FLOAT, BOOLEAN, ID, JSON)
}


class NullableType:
    """Wraps a type whose values may be None. Types are non-null otherwise."""

    def __init__(self, base: Any) -> None:
        self.base = base

    def __repr__(self) -> str:
        return f"NullableType({self.base!r})"


class ListType:
    def __init__(self, item: Any) -> None:
        self.item = item

    def __repr__(self) -> str:
        return f"ListType({self.item!r})"


class ObjectField:
    """
    A single field on an object type.

    Args:
        name: Field name as declared in the data model
        type: Semantic type of the field's values
        description: Optional documentation
        get_value: Extracts the field's raw value from an object value,
            defaults to ``value.get(name)``
    """

    def __init__(
        self,
        name: str,
        type: Any,
        description: str | None = None,
        get_value: Callable[[Any], Any] | None = None,
    ) -> None:
        self.name = name
        self.type = type
        self.description = description
        self._get_value = get_value

    def get_value(self, value: Any) -> Any:
        if self._get_value is not None:
            return self._get_value(value)
        return value.get(self.name)

    def __repr__(self) -> str:
        return f"ObjectField({self.name}: {self.type!r})"


class ObjectType:
    """
    An entity shape: an ordered set of named fields.

    The field mapping may be filled after construction, which is how
    object types referencing each other are declared.
    """

    def __init__(
        self,
        name: str,
        fields: dict[str, ObjectField] | None = None,
        description: str | None = None,
        is_type_of: Callable[[Any], bool] | None = None,
    ) -> None:
        self.name = name
        self.fields: dict[str, ObjectField] = fields if fields is not None else {}
        self.description = description
        self._is_type_of = is_type_of

    def is_type_of(self, value: Any) -> bool:
        if self._is_type_of is not None:
            return self._is_type_of(value)
        return isinstance(value, Mapping)

    def __repr__(self) -> str:
        return f"ObjectType({self.name}, fields={list(self.fields)})"


class Paginator(Protocol):
    """Pages through the values of a collection, filtered by a condition."""

    name: str
    item_type: ObjectType

    def count(self, condition: Any) -> int: ...

    def read_page(self, condition: Any, first: int | None = None, offset: int = 0) -> list[Any]: ...


class CollectionKey:
    """
    A unique key of a collection.

    ``read`` fetches the single value for a key and is optional; keys that
    cannot read are still usable for identifiers.
    """

    def __init__(
        self,
        collection: Collection,
        name: str,
        key_type: Any,
        get_key_from_value: Callable[[Any], Any],
        read: Callable[[Any], Any | None] | None = None,
    ) -> None:
        self.collection = collection
        self.name = name
        self.key_type = key_type
        self.get_key_from_value = get_key_from_value
        self.read = read

    def __repr__(self) -> str:
        return f"CollectionKey({self.collection.name}.{self.name})"


class Collection:
    """A named source of values sharing one object type."""

    def __init__(
        self,
        name: str,
        type: ObjectType,
        description: str | None = None,
        primary_key: CollectionKey | None = None,
        paginator: Paginator | None = None,
        keys: Iterable[CollectionKey] = (),
    ) -> None:
        self.name = name
        self.type = type
        self.description = description
        self.primary_key = primary_key
        self.paginator = paginator
        self.keys = list(keys)

    def __repr__(self) -> str:
        return f"Collection({self.name}, type={self.type.name})"


class Relation:
    """
    A one-to-many link from a head collection key to a tail collection.

    Both callables are optional. Without ``get_tail_condition_from_head_value``
    the head side cannot page through its tail values; without
    ``get_head_key_from_tail_value`` the tail side cannot look up its head.
    """

    def __init__(
        self,
        name: str,
        head_collection_key: CollectionKey,
        tail_collection: Collection,
        get_tail_condition_from_head_value: Callable[[Any], Any] | None = None,
        get_head_key_from_tail_value: Callable[[Any], Any] | None = None,
    ) -> None:
        self.name = name
        self.head_collection_key = head_collection_key
        self.tail_collection = tail_collection
        self.get_tail_condition_from_head_value = get_tail_condition_from_head_value
        self.get_head_key_from_tail_value = get_head_key_from_tail_value

    @property
    def head_collection(self) -> Collection:
        return self.head_collection_key.collection

    def __repr__(self) -> str:
        return f"Relation({self.name}: {self.head_collection.name} -> {self.tail_collection.name})"


class NodeValue(dict):
    """A value fetched through the global node lookup, tagged with its collection."""

    def __init__(self, collection: Collection, value: Mapping[str, Any]) -> None:
        super().__init__(value)
        self.collection = collection


def get_value_collection(value: Any) -> Collection | None:
    """Return the collection a value was tagged with, if any."""
    if isinstance(value, NodeValue):
        return value.collection
    return None
