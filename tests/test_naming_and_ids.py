"""Tests for naming conventions and node identifiers."""

import pytest

from collectionql.core.interface import Collection, ObjectType
from collectionql.graphql.id_serde import IdentifierError, deserialize_id, serialize_id
from collectionql.graphql.naming import format_field_name, format_type_name


@pytest.mark.parametrize(
    "name,expected",
    [
        ("person", "Person"),
        ("person-address", "PersonAddress"),
        ("blog_post", "BlogPost"),
        ("HTTPServer", "HttpServer"),
    ],
)
def test_format_type_name(name, expected):
    assert format_type_name(name) == expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("name", "name"),
        ("author_id", "authorId"),
        ("posts-by-author_id", "postsByAuthorId"),
        ("all-people", "allPeople"),
        ("nodeId", "nodeId"),
    ],
)
def test_format_field_name(name, expected):
    assert format_field_name(name) == expected


class TestIdSerde:
    """Tests for node identifier encoding."""

    def test_round_trip(self, inventory):
        people = inventory.get_collection("people")
        node_id = serialize_id(people, {"id": 2, "name": "Bob"})

        collection, key = deserialize_id(inventory, node_id)
        assert collection is people
        assert key == 2

    def test_ids_differ_per_collection(self, inventory):
        people = inventory.get_collection("people")
        posts = inventory.get_collection("posts")

        assert serialize_id(people, {"id": 1}) != serialize_id(posts, {"id": 1})

    def test_no_primary_key(self, inventory):
        with pytest.raises(IdentifierError, match="no primary key"):
            serialize_id(inventory.get_collection("comments"), {"post_id": 10})

    def test_garbage(self, inventory):
        with pytest.raises(IdentifierError):
            deserialize_id(inventory, "not an id!")

    def test_unknown_collection(self, inventory):
        stray = Collection("stray", ObjectType("stray"))
        stray.primary_key = inventory.get_collection("people").primary_key

        with pytest.raises(IdentifierError, match="stray"):
            deserialize_id(inventory, serialize_id(stray, {"id": 1}))
