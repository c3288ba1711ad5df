"""GraphQL types generated from collections."""

from collectionql.graphql.build_token import BuildToken, Hooks
from collectionql.graphql.collection import get_collection_gql_type
from collectionql.graphql.schema import SchemaBuildError, build_schema

__all__ = [
    "BuildToken",
    "Hooks",
    "get_collection_gql_type",
    "SchemaBuildError",
    "build_schema",
]
