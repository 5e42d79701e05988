"""Model fields used to generate form components and table columns.

Field sources stand in for database/ORM introspection: they answer "which
columns does this model have" and nothing else.  ``FileFieldSource`` reads a
JSON or YAML document shaped like::

    - name: title
      type: string
    - name: author_id
      type: foreignId
      relationship: author
    - name: published_at
      type: datetime
      nullable: true

A mapping with a top-level ``fields`` key is accepted as well.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, Sequence

import yaml
from pydantic import BaseModel, Field, ValidationError

from resourcegen.utils import load_structured, relation_name

NUMERIC_TYPES = frozenset({
    "int", "integer", "tinyint", "smallint", "mediumint", "bigint",
    "decimal", "float", "double", "real", "numeric",
})
TEXT_TYPES = frozenset({"text", "mediumtext", "longtext", "json", "jsonb"})
BOOLEAN_TYPES = frozenset({"bool", "boolean"})
DATE_TYPES = frozenset({"date"})
DATETIME_TYPES = frozenset({"datetime", "datetimetz", "timestamp", "timestamptz"})
FOREIGN_KEY_TYPES = frozenset({"foreignid", "foreign", "foreignkey"})

TIMESTAMP_COLUMNS = ("created_at", "updated_at", "deleted_at")


class FieldSourceError(Exception):
    """Raised when a field definition document cannot be read."""


class FieldDefinition(BaseModel):
    """A single model column."""

    name: str = Field(..., min_length=1)
    type: str = Field(default="string")
    nullable: bool = Field(default=False)
    relationship: str | None = Field(
        default=None, description="Eloquent relationship for a foreign key column"
    )

    @property
    def kind(self) -> str:
        """Coarse category: relationship, boolean, numeric, text, date, datetime or string."""
        lower = self.type.lower()
        if self.is_foreign_key:
            return "relationship"
        if lower in BOOLEAN_TYPES:
            return "boolean"
        if lower in NUMERIC_TYPES:
            return "numeric"
        if lower in TEXT_TYPES:
            return "text"
        if lower in DATE_TYPES:
            return "date"
        if lower in DATETIME_TYPES:
            return "datetime"
        return "string"

    @property
    def is_foreign_key(self) -> bool:
        if self.relationship:
            return True
        return self.type.lower() in FOREIGN_KEY_TYPES or (
            self.name.endswith("_id") and self.type.lower() in NUMERIC_TYPES | FOREIGN_KEY_TYPES
        )

    @property
    def relationship_name(self) -> str:
        return self.relationship or relation_name(self.name)

    @property
    def is_primary_key(self) -> bool:
        return self.name == "id"

    @property
    def is_timestamp(self) -> bool:
        return self.name in TIMESTAMP_COLUMNS


class FieldSource(Protocol):
    """Anything that can list the fields of a model."""

    def fields_for(self, entity_name: str) -> list[FieldDefinition]: ...


class EmptyFieldSource:
    """Field source for models that should not be introspected."""

    def fields_for(self, entity_name: str) -> list[FieldDefinition]:
        return []


class StaticFieldSource:
    """Returns a fixed list of fields regardless of the model."""

    def __init__(self, fields: Sequence[FieldDefinition | dict[str, Any]]) -> None:
        self._fields = [
            f if isinstance(f, FieldDefinition) else FieldDefinition.model_validate(f)
            for f in fields
        ]

    def fields_for(self, entity_name: str) -> list[FieldDefinition]:
        return list(self._fields)


class FileFieldSource:
    """Reads field definitions from a JSON or YAML file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def fields_for(self, entity_name: str) -> list[FieldDefinition]:
        try:
            data = load_structured(self.path)
        except FileNotFoundError:
            raise FieldSourceError(f"Field definition file not found: {self.path}") from None
        except (ValueError, yaml.YAMLError) as exc:
            raise FieldSourceError(f"Could not parse {self.path}: {exc}") from exc

        if isinstance(data, dict):
            data = data.get("fields", [])
        if not isinstance(data, list):
            raise FieldSourceError(f"Expected a list of fields in {self.path}")

        try:
            return [FieldDefinition.model_validate(item) for item in data]
        except ValidationError as exc:
            raise FieldSourceError(f"Invalid field definition in {self.path}: {exc}") from exc
