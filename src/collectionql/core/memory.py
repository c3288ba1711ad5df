"""In-memory backing for declared collections."""

from __future__ import annotations

from typing import Any, Sequence

from collectionql.core.condition import Condition, and_, evaluate, field_equals
from collectionql.core.interface import ObjectType


class MemoryPaginator:
    """Pages through a fixed list of rows."""

    def __init__(self, name: str, item_type: ObjectType, rows: list[dict[str, Any]]) -> None:
        self.name = name
        self.item_type = item_type
        self._rows = rows

    def count(self, condition: Condition) -> int:
        return sum(1 for row in self._rows if evaluate(condition, row))

    def read_page(self, condition: Condition, first: int | None = None, offset: int = 0) -> list[dict[str, Any]]:
        matched = [row for row in self._rows if evaluate(condition, row)]
        end = None if first is None else offset + first
        return matched[offset:end]

    def __repr__(self) -> str:
        return f"MemoryPaginator({self.name}, rows={len(self._rows)})"


def get_key(field_names: Sequence[str], value: Any) -> Any:
    """Key of a row: the bare value for single-field keys, a list otherwise."""
    if len(field_names) == 1:
        return value.get(field_names[0])
    return [value.get(name) for name in field_names]


def key_parts(field_names: Sequence[str], key: Any) -> list[Any]:
    if len(field_names) == 1:
        return [key]
    return list(key)


def key_condition(field_names: Sequence[str], key: Any) -> Condition:
    parts = key_parts(field_names, key)
    return and_(*(field_equals(name, part) for name, part in zip(field_names, parts)))


class MemoryKeyReader:
    """Reads single rows by key."""

    def __init__(self, field_names: Sequence[str], rows: list[dict[str, Any]]) -> None:
        self._field_names = list(field_names)
        self._rows = rows

    def __call__(self, key: Any) -> dict[str, Any] | None:
        if key is None:
            return None
        try:
            condition = key_condition(self._field_names, key)
        except TypeError:
            # Composite keys must be sequences
            return None
        for row in self._rows:
            if evaluate(condition, row):
                return row
        return None
