"""Pydantic v2 models describing one resource to generate.

A ``ResourceSpec`` is constructed once per generation run and never
modified.  Its validators are the precondition checks of the generators:
malformed names are rejected at construction with a ``ValidationError``
instead of producing broken source later.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from resourcegen.utils import class_basename, extract_namespace, is_valid_fqn, normalize_fqn


def _validate_fqn(value: str, label: str) -> str:
    value = normalize_fqn(value)
    if not is_valid_fqn(value):
        raise ValueError(f"{label} must be a valid fully qualified class name, got {value!r}")
    return value


class PageSpec(BaseModel):
    """A route-bound page class registered by a resource."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page_class: str = Field(..., alias="class", description="FQN of the page class")
    route_path: str = Field(..., alias="path", description="Route path, e.g. '/{record}/edit'")

    @field_validator("page_class")
    @classmethod
    def _check_class(cls, value: str) -> str:
        return _validate_fqn(value, "Page class")

    @field_validator("route_path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        if not value:
            raise ValueError("Route path must not be empty")
        return value

    @property
    def namespace(self) -> str:
        return extract_namespace(self.page_class)

    @property
    def basename(self) -> str:
        return class_basename(self.page_class)


class ResourceSpec(BaseModel):
    """Immutable description of a resource class.

    ``pages`` keeps insertion order, which is the order the pages are
    imported and registered in ``getPages()``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    target_name: str = Field(..., description="FQN of the resource class to generate")
    entity_name: str = Field(..., description="FQN of the Eloquent model")
    pages: dict[str, PageSpec] = Field(default_factory=dict)
    cluster_name: str | None = Field(default=None, description="FQN of the containing cluster")
    has_view_capability: bool = False
    is_generated: bool = False
    is_soft_deletable: bool = False
    is_simple: bool = False

    @field_validator("target_name")
    @classmethod
    def _check_target(cls, value: str) -> str:
        return _validate_fqn(value, "Target name")

    @field_validator("entity_name")
    @classmethod
    def _check_entity(cls, value: str) -> str:
        return _validate_fqn(value, "Entity name")

    @field_validator("cluster_name")
    @classmethod
    def _check_cluster(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return _validate_fqn(value, "Cluster name")

    @field_validator("pages")
    @classmethod
    def _check_routes(cls, value: dict[str, PageSpec]) -> dict[str, PageSpec]:
        for route_name in value:
            if not route_name:
                raise ValueError("Route names must not be empty")
        return value

    @model_validator(mode="after")
    def _check_cluster_differs(self) -> "ResourceSpec":
        if self.cluster_name and self.cluster_name.lower() == self.target_name.lower():
            raise ValueError("Cluster name must differ from the target name")
        return self
