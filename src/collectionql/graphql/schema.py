"""Schema assembly from an inventory."""

from __future__ import annotations

import logging
from typing import Any

from graphql import GraphQLError, GraphQLField, GraphQLObjectType, GraphQLSchema, validate_schema

from collectionql.core.interface import Collection
from collectionql.core.inventory import Inventory
from collectionql.core.schema import BuildOptions
from collectionql.graphql.build_token import BuildToken, Hooks
from collectionql.graphql.collection import get_collection_gql_type
from collectionql.graphql.condition import get_condition_gql_type
from collectionql.graphql.connection import create_connection_field
from collectionql.graphql.naming import format_field_name
from collectionql.graphql.node import create_node_field_entry

logger = logging.getLogger(__name__)


class SchemaBuildError(Exception):
    """Raised when a schema cannot be built from an inventory."""

    pass


def build_schema(
    inventory: Inventory,
    options: BuildOptions | None = None,
    hooks: Hooks | None = None,
) -> GraphQLSchema:
    """
    Build a GraphQL schema exposing every collection of an inventory.

    The query type has a ``node`` field and an ``all<Collection>``
    connection for every collection with a paginator.

    Raises:
        SchemaBuildError: If a type cannot be built or the schema is invalid
    """
    token = BuildToken(inventory, options, hooks)
    query_type = GraphQLObjectType(
        name="Query",
        description="The root query type.",
        fields=lambda: dict(_create_query_field_entries(token)),
    )

    try:
        schema = GraphQLSchema(
            query=query_type,
            types=[get_collection_gql_type(token, c) for c in inventory],
        )
    except (TypeError, GraphQLError) as e:
        raise SchemaBuildError(f"Failed to build schema: {e}") from e

    errors = validate_schema(schema)
    if errors:
        raise SchemaBuildError("Invalid schema: " + "; ".join(error.message for error in errors))

    logger.info(
        "Built schema: %d collections, %d relations", len(inventory), len(inventory.get_relations())
    )
    return schema


def _create_query_field_entries(token: BuildToken) -> list[tuple[str, GraphQLField]]:
    entries = [create_node_field_entry(token)]
    for collection in token.inventory:
        if collection.paginator is not None:
            entries.append(_create_all_field_entry(token, collection))
    return entries


def _create_all_field_entry(token: BuildToken, collection: Collection) -> tuple[str, GraphQLField]:
    condition_type = get_condition_gql_type(token, collection.type)

    def get_paginator_input(_source: Any, args: dict[str, Any]) -> Any:
        return condition_type.from_input(args.get("condition"))

    return (
        format_field_name(f"all-{collection.name}"),
        create_connection_field(
            token,
            collection.paginator,
            input_arg_entries=condition_type.arg_entries(),
            get_paginator_input=get_paginator_input,
        ),
    )
