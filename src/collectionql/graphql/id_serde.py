"""Globally unique node identifiers."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from collectionql.core.interface import Collection
from collectionql.core.inventory import Inventory


class IdentifierError(Exception):
    """Raised when a node identifier cannot be encoded or decoded."""

    pass


def serialize_id(collection: Collection, value: Any) -> str:
    """Encode the collection name and primary key of a value."""
    if collection.primary_key is None:
        raise IdentifierError(f"Collection has no primary key: {collection.name}")
    key = collection.primary_key.get_key_from_value(value)
    payload = json.dumps([collection.name, key], separators=(",", ":"))
    return base64.urlsafe_b64encode(payload.encode()).decode()


def deserialize_id(inventory: Inventory, node_id: str) -> tuple[Collection, Any]:
    """Decode an identifier into its collection and primary key."""
    try:
        payload = json.loads(base64.urlsafe_b64decode(node_id.encode()).decode())
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise IdentifierError(f"Invalid node identifier: {node_id}") from e

    if not isinstance(payload, list) or len(payload) != 2 or not isinstance(payload[0], str):
        raise IdentifierError(f"Invalid node identifier: {node_id}")

    name, key = payload
    collection = inventory.get_collection(name)
    if collection is None or collection.primary_key is None:
        raise IdentifierError(f"No addressable collection for identifier: {name}")
    return collection, key
