"""Shared pytest fixtures for the resourcegen test suite.

Provides reusable fixtures for:
- Configurations writing into temporary project directories
- Resource specs for the common resource shapes (simple, full, clustered)
- Sample model fields and field sources
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from resourcegen.config import Config
from resourcegen.scaffolder.fields import StaticFieldSource
from resourcegen.scaffolder.spec import ResourceSpec


# ---------------------------------------------------------------------------
# Paths & Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary Laravel project root (auto-cleanup)."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def config(tmp_project_dir: Path) -> Config:
    """Default configuration writing below the temporary project."""
    return Config(output_dir=tmp_project_dir)


# ---------------------------------------------------------------------------
# Resource specs
# ---------------------------------------------------------------------------

POSTS_NS = "App\\Filament\\Resources\\Posts"


@pytest.fixture
def make_spec() -> Callable[..., ResourceSpec]:
    """Factory for a ``PostResource`` spec; keyword arguments override fields."""

    def _make(**overrides: Any) -> ResourceSpec:
        data: dict[str, Any] = {
            "target_name": f"{POSTS_NS}\\PostResource",
            "entity_name": "App\\Models\\Post",
            "pages": {
                "index": {"class": f"{POSTS_NS}\\Pages\\ListPosts", "path": "/"},
                "create": {"class": f"{POSTS_NS}\\Pages\\CreatePost", "path": "/create"},
                "edit": {"class": f"{POSTS_NS}\\Pages\\EditPost", "path": "/{record}/edit"},
            },
        }
        data.update(overrides)
        return ResourceSpec.model_validate(data)

    return _make


@pytest.fixture
def foo_spec() -> ResourceSpec:
    """The minimal simple resource: one page, no cluster, no view, no soft deletes."""
    return ResourceSpec(
        target_name="App\\Resources\\FooResource",
        entity_name="App\\Models\\Foo",
        pages={"index": {"class": "App\\Resources\\Pages\\ListFoos", "path": "/"}},
        is_simple=True,
    )


@pytest.fixture
def full_spec(make_spec: Callable[..., ResourceSpec]) -> ResourceSpec:
    """A resource with every optional element switched on."""
    return make_spec(
        pages={
            "index": {"class": f"{POSTS_NS}\\Pages\\ListPosts", "path": "/"},
            "create": {"class": f"{POSTS_NS}\\Pages\\CreatePost", "path": "/create"},
            "view": {"class": f"{POSTS_NS}\\Pages\\ViewPost", "path": "/{record}"},
            "edit": {"class": f"{POSTS_NS}\\Pages\\EditPost", "path": "/{record}/edit"},
        },
        cluster_name="App\\Filament\\Clusters\\Blog",
        has_view_capability=True,
        is_generated=True,
        is_soft_deletable=True,
    )


# ---------------------------------------------------------------------------
# Fields
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_fields() -> list[dict[str, Any]]:
    """Columns of a typical ``posts`` table."""
    return [
        {"name": "id", "type": "bigint"},
        {"name": "title", "type": "string"},
        {"name": "body", "type": "text"},
        {"name": "is_published", "type": "boolean"},
        {"name": "author_id", "type": "foreignId"},
        {"name": "published_at", "type": "datetime", "nullable": True},
        {"name": "created_at", "type": "timestamp", "nullable": True},
        {"name": "updated_at", "type": "timestamp", "nullable": True},
    ]


@pytest.fixture
def field_source(sample_fields: list[dict[str, Any]]) -> StaticFieldSource:
    return StaticFieldSource(sample_fields)
