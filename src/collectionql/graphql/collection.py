"""Output object types for collections."""

from __future__ import annotations

import logging
from typing import Any, Callable

from graphql import GraphQLField, GraphQLID, GraphQLNonNull, GraphQLObjectType

from collectionql.core.condition import and_
from collectionql.core.interface import Collection, Relation, get_value_collection
from collectionql.graphql.build_token import BuildToken, FieldEntries, memoize_on_token
from collectionql.graphql.condition import get_condition_gql_type
from collectionql.graphql.connection import create_connection_field
from collectionql.graphql.id_serde import serialize_id
from collectionql.graphql.naming import format_field_name, format_type_name
from collectionql.graphql.node import NODE_ID_DESCRIPTION, get_node_interface_type
from collectionql.graphql.types import create_object_field

logger = logging.getLogger(__name__)


class FieldConflictError(Exception):
    """Raised when two fields of a collection type get the same name."""

    pass


@memoize_on_token
def get_collection_gql_type(token: BuildToken, collection: Collection) -> GraphQLObjectType:
    """
    Get the output object type for a collection.

    The type includes an id field, every field of the collection's object
    type, hook fields, and relation fields (tail, then head). One type is
    built per collection and token; fields are resolved lazily, so types
    of collections referencing each other can be built in any order.
    """
    return _create_collection_gql_type(token, collection)


def _create_collection_gql_type(token: BuildToken, collection: Collection) -> GraphQLObjectType:
    object_type = collection.type
    primary_key = collection.primary_key
    logger.debug("Creating object type for collection %s", collection.name)

    # Values from the `node` field carry the collection they came from and
    # must only match that collection's type.
    def is_type_of(value: Any, _info: Any) -> bool:
        source = get_value_collection(value)
        if source is not None and source is not collection:
            return False
        return object_type.is_type_of(value)

    return GraphQLObjectType(
        name=format_type_name(object_type.name),
        description=collection.description,
        is_type_of=is_type_of,
        # If there is a primary key, this is a node.
        interfaces=[get_node_interface_type(token)] if primary_key else [],
        # A thunk, so types of related collections are only requested once
        # these fields are needed.
        fields=lambda: dict(create_collection_field_entries(token, collection)),
    )


def create_collection_field_entries(token: BuildToken, collection: Collection) -> FieldEntries:
    """Field entries in order: id, declared, hook, tail relation, head relation."""
    entries: FieldEntries = []

    # Collections without a primary key are not globally addressable.
    if collection.primary_key:
        entries.append((
            token.options.node_id_field_name,
            GraphQLField(
                GraphQLNonNull(GraphQLID),
                description=NODE_ID_DESCRIPTION,
                resolve=lambda value, _info: serialize_id(collection, value),
            ),
        ))

    entries.extend(
        (format_field_name(field_name), create_object_field(token, collection.name, field))
        for field_name, field in collection.type.fields.items()
    )

    hook = token.hooks.object_type_field_entries
    if hook is not None:
        entries.extend(hook(collection.type, token))

    entries.extend(create_collection_relation_tail_field_entries(token, collection))

    for relation in token.inventory.get_relations():
        if relation.head_collection is collection:
            entry = _create_head_relation_field_entry(token, relation)
            if entry is not None:
                entries.append(entry)

    seen: set[str] = set()
    for name, _field in entries:
        if name in seen:
            raise FieldConflictError(f"Duplicate field in collection '{collection.name}': {name}")
        seen.add(name)

    return entries


def _create_head_relation_field_entry(token: BuildToken, relation: Relation) -> tuple[str, GraphQLField] | None:
    tail_collection = relation.tail_collection
    tail_paginator = tail_collection.paginator
    get_tail_condition = relation.get_tail_condition_from_head_value

    # Both are needed to page through the tail values of one head value.
    if tail_paginator is None or get_tail_condition is None:
        logger.debug("Skipping head relation field for %r", relation)
        return None

    condition_type = get_condition_gql_type(token, tail_collection.type)

    def get_paginator_input(head_value: Any, args: dict[str, Any]) -> Any:
        return and_(get_tail_condition(head_value), condition_type.from_input(args.get("condition")))

    return (
        format_field_name(f"{tail_collection.name}-by-{relation.name}"),
        create_connection_field(
            token,
            tail_paginator,
            input_arg_entries=condition_type.arg_entries(),
            get_paginator_input=get_paginator_input,
        ),
    )


def create_collection_relation_tail_field_entries(token: BuildToken, collection: Collection) -> FieldEntries:
    """
    Fields for relations where this collection is the tail.

    Each field reads the single head value referenced by a tail value.
    Relations whose head key cannot be derived or read are skipped.
    """
    entries: FieldEntries = []
    for relation in token.inventory.get_relations():
        if relation.tail_collection is not collection:
            continue
        head_key = relation.head_collection_key
        get_head_key = relation.get_head_key_from_tail_value
        if head_key.read is None or get_head_key is None:
            logger.debug("Skipping tail relation field for %r", relation)
            continue
        entries.append((
            format_field_name(f"{relation.head_collection.type.name}-by-{relation.name}"),
            GraphQLField(
                get_collection_gql_type(token, head_key.collection),
                description=f"Reads a single `{format_type_name(relation.head_collection.type.name)}` that is related to this `{format_type_name(collection.type.name)}`.",
                resolve=_tail_relation_resolver(head_key.read, get_head_key),
            ),
        ))
    return entries


def _tail_relation_resolver(
    read: Callable[[Any], Any], get_head_key: Callable[[Any], Any]
) -> Callable[[Any, Any], Any]:
    def resolve(value: Any, _info: Any) -> Any:
        key = get_head_key(value)
        if key is None:
            return None
        return read(key)

    return resolve
