"""Tests for inventory module."""

import pytest
from pydantic import ValidationError

from collectionql.core.condition import field_equals, true
from collectionql.core.interface import (
    INTEGER,
    STRING,
    Collection,
    CollectionKey,
    ListType,
    NullableType,
    ObjectType,
    Relation,
)
from collectionql.core.inventory import Inventory, InventoryError


class TestInventory:
    """Tests for Inventory class."""

    def test_from_dict(self, inventory):
        assert len(inventory) == 3
        assert "people" in inventory
        assert [c.name for c in inventory] == ["people", "posts", "comments"]
        assert [r.name for r in inventory.get_relations()] == ["author_id", "post_id"]

    def test_get_collection_for_type(self, inventory):
        people = inventory.get_collection("people")

        assert inventory.get_collection_for_type(people.type) is people
        assert inventory.get_collection_for_type(ObjectType("person")) is None

    def test_field_types(self, inventory):
        fields = inventory.get_collection("people").type.fields

        assert fields["id"].type is INTEGER
        assert isinstance(fields["email"].type, NullableType)
        assert fields["email"].type.base is STRING

    def test_list_and_object_field_types(self, inventory_data):
        inventory_data["collections"]["people"]["fields"]["posts"] = {"type": "post", "list": True}
        inventory = Inventory.from_dict(inventory_data)
        field_type = inventory.get_collection("people").type.fields["posts"].type

        assert isinstance(field_type, ListType)
        assert field_type.item is inventory.get_collection("posts").type

    def test_field_shorthand(self, inventory_data):
        inventory_data["collections"]["comments"]["fields"] = {"post_id": "integer", "body": "string"}
        inventory = Inventory.from_dict(inventory_data)

        assert inventory.get_collection("comments").type.fields["body"].type is STRING

    def test_primary_key(self, inventory):
        people = inventory.get_collection("people")

        assert people.primary_key.get_key_from_value({"id": 2, "name": "Bob"}) == 2
        assert people.primary_key.read(2)["name"] == "Bob"
        assert people.primary_key.read(3) is None
        assert inventory.get_collection("comments").primary_key is None

    def test_relation_callables(self, inventory):
        relation = inventory.get_relations()[0]

        assert relation.head_collection is inventory.get_collection("people")
        assert relation.get_tail_condition_from_head_value({"id": 1}) == field_equals("author_id", 1)
        assert relation.get_head_key_from_tail_value({"id": 10, "author_id": 1}) == 1

    def test_duplicate_collection(self, inventory):
        with pytest.raises(InventoryError, match="Duplicate collection"):
            inventory.add_collection(Collection("people", ObjectType("other")))

    def test_unregistered_relation(self, inventory):
        stray = Collection("stray", ObjectType("stray"))
        key = CollectionKey(stray, "id", INTEGER, lambda value: value["id"])

        with pytest.raises(InventoryError, match="unregistered"):
            inventory.add_relation(Relation("stray", key, inventory.get_collection("posts")))

    def test_unknown_field_type(self, inventory_data):
        inventory_data["collections"]["people"]["fields"]["age"] = {"type": "decimal"}

        with pytest.raises(InventoryError, match="decimal"):
            Inventory.from_dict(inventory_data)

    def test_relation_to_unknown_collection(self, inventory_data):
        inventory_data["relations"][0]["tail"] = "articles"

        with pytest.raises(ValidationError):
            Inventory.from_dict(inventory_data)

    def test_primary_key_must_be_declared(self, inventory_data):
        inventory_data["collections"]["people"]["primary_key"] = ["uuid"]

        with pytest.raises(ValidationError):
            Inventory.from_dict(inventory_data)

    def test_load(self, tmp_path):
        path = tmp_path / "inventory.yml"
        path.write_text(
            "collections:\n"
            "  tags:\n"
            "    type: tag\n"
            "    primary_key: name\n"
            "    fields:\n"
            "      name: string\n"
            "options:\n"
            "  node_id_field_name: globalId\n"
        )
        inventory = Inventory.load(path)

        assert len(inventory) == 1
        assert inventory.options.node_id_field_name == "globalId"


class TestMemoryPaginator:
    """Tests for the in-memory paginator."""

    def test_count_and_read(self, inventory):
        paginator = inventory.get_collection("posts").paginator

        assert paginator.count(true()) == 3
        assert paginator.count(field_equals("author_id", 1)) == 2
        assert [p["id"] for p in paginator.read_page(true(), first=2, offset=1)] == [11, 12]
        assert [p["id"] for p in paginator.read_page(field_equals("author_id", 2))] == [12]

    def test_not_paginated(self, inventory):
        assert inventory.get_collection("comments").paginator is None


class TestCompositeKeys:
    """Tests for multi-field primary keys."""

    @pytest.fixture
    def memberships(self):
        return Inventory.from_dict({
            "collections": {
                "memberships": {
                    "type": "membership",
                    "primary_key": ["group_id", "person_id"],
                    "fields": {"group_id": "integer", "person_id": "integer", "role": "string"},
                    "rows": [
                        {"group_id": 1, "person_id": 1, "role": "owner"},
                        {"group_id": 1, "person_id": 2, "role": "member"},
                    ],
                },
            },
        }).get_collection("memberships")

    def test_key_from_value(self, memberships):
        assert memberships.primary_key.get_key_from_value({"group_id": 1, "person_id": 2}) == [1, 2]

    def test_read(self, memberships):
        assert memberships.primary_key.read([1, 2])["role"] == "member"
        assert memberships.primary_key.read([2, 2]) is None
        assert memberships.primary_key.read(5) is None
