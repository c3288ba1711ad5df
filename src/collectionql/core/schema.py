"""Pydantic schemas for inventory declarations and build options."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class BuildOptions(BaseModel):
    """Options shared by every type built for one schema."""

    node_id_field_name: str = "nodeId"

    model_config = {"frozen": True}


class FieldSchema(BaseModel):
    """
    A declared collection field.

    ``type`` is either a scalar name (string, integer, float, boolean, id,
    json) or the entity type name of another declared collection.
    """

    type: str
    description: str | None = None
    nullable: bool = False
    list: bool = False

    @field_validator("type")
    @classmethod
    def normalize_type(cls, v: str) -> str:
        return v.strip()


class CollectionSchema(BaseModel):
    """Schema for a single collection."""

    type: str  # Entity type name, e.g. "person" for collection "people"
    description: str | None = None
    type_description: str | None = None
    primary_key: list[str] = Field(default_factory=list)
    paginated: bool = True
    fields: dict[str, FieldSchema]
    rows: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("fields", mode="before")
    @classmethod
    def normalize_fields(cls, v: Any) -> Any:
        """Accept the shorthand ``name: integer`` for ``name: {type: integer}``."""
        if isinstance(v, dict):
            return {name: {"type": f} if isinstance(f, str) else f for name, f in v.items()}
        return v

    @field_validator("primary_key", mode="before")
    @classmethod
    def normalize_primary_key(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        return v

    @model_validator(mode="after")
    def validate_primary_key(self) -> CollectionSchema:
        for name in self.primary_key:
            if name not in self.fields:
                raise ValueError(f"Primary key field not declared: {name}")
        return self


class RelationSchema(BaseModel):
    """
    Schema for a relation.

    ``tail_fields`` reference the head collection's primary key fields,
    position by position.
    """

    name: str
    head: str
    tail: str
    tail_fields: list[str]
    # A relation without head-to-tail conditions cannot page tail values
    conditional: bool = True

    @field_validator("tail_fields", mode="before")
    @classmethod
    def normalize_tail_fields(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        return v


class InventorySchema(BaseModel):
    """Schema for the complete inventory file."""

    collections: dict[str, CollectionSchema]
    relations: list[RelationSchema] = Field(default_factory=list)
    options: BuildOptions = Field(default_factory=BuildOptions)

    @model_validator(mode="after")
    def validate_relations(self) -> InventorySchema:
        for relation in self.relations:
            for end in (relation.head, relation.tail):
                if end not in self.collections:
                    raise ValueError(f"Relation '{relation.name}' references unknown collection: {end}")
            head = self.collections[relation.head]
            if len(relation.tail_fields) != len(head.primary_key):
                raise ValueError(
                    f"Relation '{relation.name}': {len(relation.tail_fields)} tail fields "
                    f"for a primary key of {len(head.primary_key)}"
                )
            tail = self.collections[relation.tail]
            for name in relation.tail_fields:
                if name not in tail.fields:
                    raise ValueError(f"Relation '{relation.name}': unknown tail field {name}")
        return self
