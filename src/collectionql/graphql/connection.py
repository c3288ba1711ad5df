"""Paginated connection fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from graphql import (
    GraphQLArgument,
    GraphQLError,
    GraphQLField,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
)

from collectionql.core.interface import Paginator
from collectionql.graphql.build_token import BuildToken, memoize_on_token
from collectionql.graphql.naming import format_type_name
from collectionql.graphql.types import get_gql_type


@dataclass(frozen=True)
class ConnectionPage:
    """What a connection field resolves to; read lazily by the connection type."""

    paginator: Paginator
    condition: Any
    first: int | None
    offset: int

    def nodes(self) -> list[Any]:
        return self.paginator.read_page(self.condition, first=self.first, offset=self.offset)

    def total_count(self) -> int:
        return self.paginator.count(self.condition)


@memoize_on_token
def get_connection_gql_type(token: BuildToken, paginator: Paginator) -> GraphQLObjectType:
    """The ``<Paginator>Connection`` type, one per paginator."""
    type_name = format_type_name(paginator.name)
    return GraphQLObjectType(
        name=f"{type_name}Connection",
        description=f"A connection to a list of `{format_type_name(paginator.item_type.name)}` values.",
        fields=lambda: {
            "nodes": GraphQLField(
                GraphQLNonNull(GraphQLList(get_gql_type(token, paginator.item_type, False))),
                description="The values in this page of the connection.",
                resolve=lambda page, _info: page.nodes(),
            ),
            "totalCount": GraphQLField(
                GraphQLNonNull(GraphQLInt),
                description="The count of *all* values matching the condition, ignoring paging.",
                resolve=lambda page, _info: page.total_count(),
            ),
        },
    )


def create_connection_field(
    token: BuildToken,
    paginator: Paginator,
    input_arg_entries: list[tuple[str, GraphQLArgument]],
    get_paginator_input: Callable[[Any, dict[str, Any]], Any],
    description: str | None = None,
) -> GraphQLField:
    """
    Create a field paging through ``paginator``.

    Args:
        token: Build context
        paginator: Source of the connection's values
        input_arg_entries: Arguments passed to ``get_paginator_input``
        get_paginator_input: Computes the paginator input from the source
            value and the input arguments on every resolution
        description: Optional field description
    """
    input_arg_names = [name for name, _arg in input_arg_entries]
    args = {
        "first": GraphQLArgument(GraphQLInt, description="Only read the first `n` values."),
        "offset": GraphQLArgument(GraphQLInt, description="Skip the first `n` values."),
        **dict(input_arg_entries),
    }

    def resolve(source: Any, _info: Any, **kwargs: Any) -> ConnectionPage:
        first = kwargs.get("first")
        offset = kwargs.get("offset")
        if first is not None and first < 0:
            raise GraphQLError("`first` must be non-negative")
        if offset is not None and offset < 0:
            raise GraphQLError("`offset` must be non-negative")
        input_args = {name: kwargs[name] for name in input_arg_names if name in kwargs}
        return ConnectionPage(paginator, get_paginator_input(source, input_args), first, offset or 0)

    return GraphQLField(
        get_connection_gql_type(token, paginator),
        args=args,
        description=description or f"Reads and enables pagination through a set of `{format_type_name(paginator.item_type.name)}`.",
        resolve=resolve,
    )
