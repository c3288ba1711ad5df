"""Build context threaded through every type builder."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from collectionql.core.inventory import Inventory
from collectionql.core.schema import BuildOptions

if TYPE_CHECKING:
    from graphql import GraphQLField

    from collectionql.core.interface import ObjectType

FieldEntries = list[tuple[str, "GraphQLField"]]

T = TypeVar("T")


@dataclass(frozen=True)
class Hooks:
    """Optional extension callbacks."""

    # Extra fields for every collection object type
    object_type_field_entries: Callable[[ObjectType, BuildToken], FieldEntries] | None = None


class BuildToken:
    """
    Everything needed to build the types of one schema.

    Options, inventory and hooks are read-only after construction. The memo
    table is private to this token, so types built for one token are never
    shared with another.
    """

    def __init__(
        self,
        inventory: Inventory,
        options: BuildOptions | None = None,
        hooks: Hooks | None = None,
    ) -> None:
        self.inventory = inventory
        self.options = options or inventory.options
        self.hooks = hooks or Hooks()
        self._memo: dict[Callable[..., Any], dict[int, tuple[Any, Any]]] = {}

    def __repr__(self) -> str:
        return f"BuildToken(collections={len(self.inventory)}, options={self.options!r})"


def memoize_on_token(fn: Callable[[BuildToken, Any], T]) -> Callable[[BuildToken, Any], T]:
    """
    Memoize a ``(token, key)`` builder by key identity, per token.

    The result is stored as soon as ``fn`` returns. Builders that return
    types with lazy field thunks can therefore be re-entered for the same
    key while those thunks resolve.
    """

    @functools.wraps(fn)
    def wrapper(token: BuildToken, key: Any) -> T:
        cache = token._memo.setdefault(wrapper, {})
        hit = cache.get(id(key))
        if hit is not None:
            return hit[1]
        result = fn(token, key)
        # Keep the key alive so its id is never reused within this token
        cache[id(key)] = (key, result)
        return result

    return wrapper


def memoize_per_token(fn: Callable[[BuildToken], T]) -> Callable[[BuildToken], T]:
    """Memoize a builder that only depends on the token."""
    keyed = memoize_on_token(lambda token, _key: fn(token))

    @functools.wraps(fn)
    def wrapper(token: BuildToken) -> T:
        return keyed(token, token)

    return wrapper
