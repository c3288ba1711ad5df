"""Shared fixtures."""

import pytest

from collectionql.core.inventory import Inventory
from collectionql.graphql.build_token import BuildToken


@pytest.fixture
def inventory_data():
    """Sample inventory declaration.

    people (head) -> posts (tail) via author_id, posts (head) -> comments
    (tail) via post_id. Comments have no primary key and no paginator.
    """
    return {
        "collections": {
            "people": {
                "type": "person",
                "description": "A user of the forum.",
                "primary_key": ["id"],
                "fields": {
                    "id": {"type": "integer"},
                    "name": {"type": "string"},
                    "email": {"type": "string", "nullable": True},
                },
                "rows": [
                    {"id": 1, "name": "Alice", "email": "alice@example.com"},
                    {"id": 2, "name": "Bob", "email": None},
                ],
            },
            "posts": {
                "type": "post",
                "description": "A forum post.",
                "primary_key": ["id"],
                "fields": {
                    "id": {"type": "integer"},
                    "author_id": {"type": "integer"},
                    "title": {"type": "string"},
                },
                "rows": [
                    {"id": 10, "author_id": 1, "title": "Hello"},
                    {"id": 11, "author_id": 1, "title": "Again"},
                    {"id": 12, "author_id": 2, "title": "Hi all"},
                ],
            },
            "comments": {
                "type": "comment",
                "paginated": False,
                "fields": {
                    "post_id": {"type": "integer"},
                    "body": {"type": "string"},
                },
                "rows": [{"post_id": 10, "body": "First!"}],
            },
        },
        "relations": [
            {"name": "author_id", "head": "people", "tail": "posts", "tail_fields": ["author_id"]},
            {"name": "post_id", "head": "posts", "tail": "comments", "tail_fields": ["post_id"]},
        ],
    }


@pytest.fixture
def inventory(inventory_data):
    return Inventory.from_dict(inventory_data)


@pytest.fixture
def token(inventory):
    return BuildToken(inventory)
