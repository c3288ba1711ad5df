"""The ``Node`` interface and the global ``node`` lookup field."""

from __future__ import annotations

import logging
from typing import Any

from graphql import GraphQLArgument, GraphQLField, GraphQLID, GraphQLInterfaceType, GraphQLNonNull

from collectionql.core.interface import NodeValue
from collectionql.graphql.build_token import BuildToken, memoize_per_token
from collectionql.graphql.id_serde import deserialize_id

logger = logging.getLogger(__name__)

NODE_ID_DESCRIPTION = (
    "A globally unique identifier. Can be used in various places throughout "
    "the system to identify this single value."
)


@memoize_per_token
def get_node_interface_type(token: BuildToken) -> GraphQLInterfaceType:
    return GraphQLInterfaceType(
        name="Node",
        description="An object with a globally unique identifier.",
        fields={
            token.options.node_id_field_name: GraphQLField(
                GraphQLNonNull(GraphQLID),
                description=NODE_ID_DESCRIPTION,
            ),
        },
    )


def create_node_field_entry(token: BuildToken) -> tuple[str, GraphQLField]:
    """
    Root field fetching any addressable value by its identifier.

    Values are tagged with the collection they came from, so the
    ``Node`` interface resolves to the right object type.
    """
    id_field_name = token.options.node_id_field_name

    def resolve(_source: Any, _info: Any, **args: Any) -> NodeValue | None:
        collection, key = deserialize_id(token.inventory, args[id_field_name])
        read = collection.primary_key.read
        if read is None:
            logger.debug("Collection %s cannot read by primary key", collection.name)
            return None
        value = read(key)
        if value is None:
            return None
        return NodeValue(collection, value)

    return "node", GraphQLField(
        get_node_interface_type(token),
        description="Fetches an object given its globally unique identifier.",
        args={
            id_field_name: GraphQLArgument(
                GraphQLNonNull(GraphQLID),
                description="The globally unique identifier to be used in selecting a single value.",
            ),
        },
        resolve=resolve,
    )
