"""
Collectionql - GraphQL object types generated from collection metadata.

This package provides tools for:
- Declaring collections, primary keys and relations (in code or YAML)
- Building one memoized GraphQL object type per collection, with lazy
  fields so collections may reference each other cyclically
- Exposing one-to-many relations as paginated connection fields
- Assembling and printing a complete schema for an inventory
"""

__version__ = "0.1.0"

from collectionql.core.inventory import Inventory
from collectionql.core.schema import BuildOptions
from collectionql.graphql.build_token import BuildToken, Hooks
from collectionql.graphql.collection import get_collection_gql_type
from collectionql.graphql.schema import build_schema

__all__ = [
    "__version__",
    "Inventory",
    "BuildOptions",
    "BuildToken",
    "Hooks",
    "get_collection_gql_type",
    "build_schema",
]
