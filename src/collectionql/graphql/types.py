"""Resolution of semantic types to GraphQL types."""

from __future__ import annotations

from typing import Any

from graphql import (
    GraphQLBoolean,
    GraphQLField,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLString,
    GraphQLType,
    value_from_ast_untyped,
)

from collectionql.core.interface import ListType, NullableType, ObjectField, ObjectType, ScalarType
from collectionql.graphql.build_token import BuildToken, memoize_on_token
from collectionql.graphql.naming import format_field_name, format_type_name


class TypeResolutionError(Exception):
    """Raised when a semantic type has no GraphQL counterpart."""

    pass


GraphQLJSON = GraphQLScalarType(
    name="JSON",
    description="An arbitrary JSON value.",
    serialize=lambda value: value,
    parse_value=lambda value: value,
    parse_literal=value_from_ast_untyped,
)

_SCALARS: dict[str, GraphQLScalarType] = {
    "string": GraphQLString,
    "integer": GraphQLInt,
    "float": GraphQLFloat,
    "boolean": GraphQLBoolean,
    "id": GraphQLID,
    "json": GraphQLJSON,
}


def get_gql_type(token: BuildToken, type_: Any, input_: bool) -> GraphQLType:
    """
    Get the GraphQL type for a semantic type.

    Types are non-null unless wrapped in ``NullableType``. Object types that
    belong to a collection resolve to that collection's object type.

    Raises:
        TypeResolutionError: If the type has no GraphQL counterpart
    """
    if isinstance(type_, NullableType):
        return _get_nullable_gql_type(token, type_.base, input_)
    return GraphQLNonNull(_get_nullable_gql_type(token, type_, input_))


def _get_nullable_gql_type(token: BuildToken, type_: Any, input_: bool) -> GraphQLType:
    if isinstance(type_, NullableType):
        return _get_nullable_gql_type(token, type_.base, input_)

    if isinstance(type_, ScalarType):
        scalar = _SCALARS.get(type_.name)
        if scalar is None:
            raise TypeResolutionError(f"Unknown scalar type: {type_.name}")
        return scalar

    if isinstance(type_, ListType):
        return GraphQLList(get_gql_type(token, type_.item, input_))

    if isinstance(type_, ObjectType):
        if input_:
            raise TypeResolutionError(f"Object type cannot be used as input: {type_.name}")
        collection = token.inventory.get_collection_for_type(type_)
        if collection is not None:
            from collectionql.graphql.collection import get_collection_gql_type

            return get_collection_gql_type(token, collection)
        return _get_object_gql_type(token, type_)

    raise TypeResolutionError(f"Unknown type: {type_!r}")


def is_scalar_like(type_: Any) -> bool:
    """Whether values of the type can be compared for equality in a condition."""
    if isinstance(type_, NullableType):
        return is_scalar_like(type_.base)
    return isinstance(type_, ScalarType) and type_.name in _SCALARS and type_.name != "json"


@memoize_on_token
def _get_object_gql_type(token: BuildToken, object_type: ObjectType) -> GraphQLObjectType:
    """Object type for values that do not belong to any collection."""
    return GraphQLObjectType(
        name=format_type_name(object_type.name),
        description=object_type.description,
        is_type_of=lambda value, _info: object_type.is_type_of(value),
        fields=lambda: {
            format_field_name(field_name): create_object_field(token, object_type.name, field)
            for field_name, field in object_type.fields.items()
        },
    )


def create_object_field(token: BuildToken, owner_name: str, field: ObjectField) -> GraphQLField:
    """
    Output field forwarding to the field's stored value.

    Type resolution errors are re-raised naming ``owner_name`` and the field.
    """
    try:
        gql_type = get_gql_type(token, field.type, False)
    except TypeResolutionError as e:
        raise TypeResolutionError(f"Field '{owner_name}.{field.name}': {e}") from e

    return GraphQLField(
        gql_type,
        description=field.description,
        resolve=lambda value, _info: field.get_value(value),
    )
