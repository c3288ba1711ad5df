"""Condition input types for filtering collection values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from graphql import GraphQLArgument, GraphQLInputField, GraphQLInputObjectType

from collectionql.core.condition import Condition, and_, field_equals, true
from collectionql.core.interface import NullableType, ObjectType
from collectionql.graphql.build_token import BuildToken, memoize_on_token
from collectionql.graphql.naming import format_field_name, format_type_name
from collectionql.graphql.types import get_gql_type, is_scalar_like


@dataclass(frozen=True)
class ConditionType:
    gql_type: GraphQLInputObjectType
    from_input: Callable[[dict[str, Any] | None], Condition]
    # No comparable fields, so no input object can be exposed
    is_empty: bool = False

    def arg_entries(self) -> list[tuple[str, GraphQLArgument]]:
        """The `condition` argument, or nothing when there is no field to compare."""
        if self.is_empty:
            return []
        return [
            ("condition", GraphQLArgument(
                self.gql_type,
                description="A condition to be used in determining which values should be returned by the collection.",
            )),
        ]


@memoize_on_token
def get_condition_gql_type(token: BuildToken, object_type: ObjectType) -> ConditionType:
    """
    Build the ``<Type>Condition`` input object for an object type.

    Every scalar field becomes an optional equality test. ``from_input``
    turns the raw argument into a condition; an absent argument is ``true``.
    """
    # GraphQL field name -> declared field name
    field_names = {
        format_field_name(name): name
        for name, field in object_type.fields.items()
        if is_scalar_like(field.type)
    }

    gql_type = GraphQLInputObjectType(
        name=f"{format_type_name(object_type.name)}Condition",
        description=(
            f"A condition to be used against `{format_type_name(object_type.name)}` object types. "
            "All fields are tested for equality and combined with a logical 'and.'"
        ),
        fields=lambda: {
            gql_name: GraphQLInputField(
                get_gql_type(token, NullableType(object_type.fields[name].type), True),
                description=(
                    f"Checks for equality with the object's `{gql_name}` field."
                    if object_type.fields[name].description is None
                    else object_type.fields[name].description
                ),
            )
            for gql_name, name in field_names.items()
        },
    )

    def from_input(args: dict[str, Any] | None) -> Condition:
        if not args:
            return true()
        return and_(
            *(field_equals(field_names[gql_name], value) for gql_name, value in args.items() if gql_name in field_names)
        )

    return ConditionType(gql_type, from_input, is_empty=not field_names)
