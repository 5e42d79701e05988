"""Tests for the ResourceScaffolder orchestrator.

Covers:
- Spec derivation from a model name and flags
- Cluster namespaces
- In-memory rendering keyed by PSR-4 path
- Async file writing and overwrite protection
"""

from __future__ import annotations

from pathlib import Path

import pytest

from resourcegen.config import Config
from resourcegen.scaffolder.fields import StaticFieldSource
from resourcegen.scaffolder.generator import ResourceScaffolder
from resourcegen.scaffolder.resource_class import GeneratorHooks

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Spec building
# ---------------------------------------------------------------------------


class TestBuildSpec:
    def test_bare_model_name(self):
        spec = ResourceScaffolder().build_spec("Post")
        assert spec.entity_name == "App\\Models\\Post"
        assert spec.target_name == "App\\Filament\\Resources\\Posts\\PostResource"
        assert list(spec.pages) == ["index", "create", "edit"]
        assert spec.pages["index"].page_class == "App\\Filament\\Resources\\Posts\\Pages\\ListPosts"

    def test_snake_case_model_name(self):
        spec = ResourceScaffolder().build_spec("blog_post")
        assert spec.entity_name == "App\\Models\\BlogPost"
        assert spec.target_name == "App\\Filament\\Resources\\BlogPosts\\BlogPostResource"

    def test_qualified_model_name_used_as_given(self):
        spec = ResourceScaffolder().build_spec("\\Domain\\Blog\\Post")
        assert spec.entity_name == "Domain\\Blog\\Post"

    def test_flags(self):
        spec = ResourceScaffolder().build_spec(
            "Post", view=True, soft_deletes=True, simple=False, generate=True
        )
        assert spec.has_view_capability
        assert spec.is_soft_deletable
        assert spec.is_generated
        assert not spec.is_simple
        assert "view" in spec.pages

    def test_simple(self):
        spec = ResourceScaffolder().build_spec("Post", simple=True)
        assert spec.is_simple
        assert list(spec.pages) == ["index"]
        assert spec.pages["index"].basename == "ManagePosts"

    def test_cluster(self):
        spec = ResourceScaffolder().build_spec("Post", cluster="App\\Filament\\Clusters\\Blog")
        assert spec.cluster_name == "App\\Filament\\Clusters\\Blog"
        assert spec.target_name == "App\\Filament\\Clusters\\Blog\\Resources\\Posts\\PostResource"

    def test_configured_namespaces(self):
        config = Config(models_namespace="App\\Domain", resources_namespace="App\\Admin")
        spec = ResourceScaffolder(config).build_spec("Post")
        assert spec.entity_name == "App\\Domain\\Post"
        assert spec.target_name == "App\\Admin\\Posts\\PostResource"

    def test_invalid_model_name(self):
        with pytest.raises(ValueError):
            ResourceScaffolder().build_spec("Blog Post!")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_paths(self, config: Config, tmp_project_dir: Path):
        scaffolder = ResourceScaffolder(config)
        files = scaffolder.render(scaffolder.build_spec("Post", view=True))
        base = tmp_project_dir / "app" / "Filament" / "Resources" / "Posts"
        assert list(files) == [
            base / "PostResource.php",
            base / "Pages" / "ListPosts.php",
            base / "Pages" / "CreatePost.php",
            base / "Pages" / "ViewPost.php",
            base / "Pages" / "EditPost.php",
        ]

    def test_without_pages(self, config: Config):
        scaffolder = ResourceScaffolder(config)
        files = scaffolder.render(scaffolder.build_spec("Post"), pages=False)
        assert [p.name for p in files] == ["PostResource.php"]

    def test_field_source_feeds_both_bodies(self, config: Config):
        source = StaticFieldSource([{"name": "title"}])
        scaffolder = ResourceScaffolder(config, field_source=source)
        files = scaffolder.render(scaffolder.build_spec("Post", generate=True), pages=False)
        resource = next(iter(files.values()))
        assert "Forms\\Components\\TextInput::make('title')" in resource
        assert "Tables\\Columns\\TextColumn::make('title')" in resource

    def test_hooks_are_passed_through(self, config: Config):
        hooks = GeneratorHooks(navigation_icon=lambda prop: prop.set_value("heroicon-o-star"))
        scaffolder = ResourceScaffolder(config, hooks=hooks)
        resource = next(iter(scaffolder.render(scaffolder.build_spec("Post")).values()))
        assert "'heroicon-o-star'" in resource

    def test_model_named_record(self, config: Config):
        scaffolder = ResourceScaffolder(config)
        files = scaffolder.render(scaffolder.build_spec("Record", view=True))
        pages = {path.stem: source for path, source in files.items() if path.parent.name == "Pages"}
        assert sorted(pages) == ["CreateRecord", "EditRecord", "ListRecords", "ViewRecord"]
        for name, source in pages.items():
            assert f"class {name} extends {name}2\n" in source
            assert f"use Filament\\Resources\\Pages\\{name} as {name}2;" in source
            assert f"use Filament\\Resources\\Pages\\{name};" not in source

    def test_edit_page_knows_about_view_page(self, config: Config):
        scaffolder = ResourceScaffolder(config)
        generators = scaffolder.page_generators(scaffolder.build_spec("Post", view=True))
        edit = next(g for g in generators if g.get_basename() == "EditPost")
        assert edit.get_header_actions()[0] == "ViewAction"


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


class TestGenerate:
    @pytest.mark.asyncio
    async def test_writes_all_files(self, config: Config):
        scaffolder = ResourceScaffolder(config)
        spec = scaffolder.build_spec("Post", soft_deletes=True)
        written = await scaffolder.generate(spec)

        assert len(written) == 4
        assert all(path.exists() for path in written)
        resource = written[0].read_text(encoding="utf-8")
        assert resource.startswith("<?php\n\nnamespace App\\Filament\\Resources\\Posts;\n")
        assert "getEloquentQuery" in resource

    @pytest.mark.asyncio
    async def test_refuses_to_overwrite(self, config: Config):
        scaffolder = ResourceScaffolder(config)
        spec = scaffolder.build_spec("Post")
        resource_path = config.path_for_class(spec.target_name)
        resource_path.parent.mkdir(parents=True)
        resource_path.write_text("original", encoding="utf-8")

        with pytest.raises(FileExistsError, match="PostResource.php"):
            await scaffolder.generate(spec)

        assert resource_path.read_text(encoding="utf-8") == "original"
        assert not (resource_path.parent / "Pages").exists()

    @pytest.mark.asyncio
    async def test_force_overwrites(self, config: Config):
        scaffolder = ResourceScaffolder(config)
        spec = scaffolder.build_spec("Post")
        resource_path = config.path_for_class(spec.target_name)
        resource_path.parent.mkdir(parents=True)
        resource_path.write_text("original", encoding="utf-8")

        await scaffolder.generate(spec, force=True)
        assert resource_path.read_text(encoding="utf-8").startswith("<?php")

    @pytest.mark.asyncio
    async def test_reports_every_failed_write(self, config: Config):
        scaffolder = ResourceScaffolder(config)
        spec = scaffolder.build_spec("Post")
        resource_path = config.path_for_class(spec.target_name)
        resource_path.parent.mkdir(parents=True)
        (resource_path.parent / "Pages").write_text("not a directory", encoding="utf-8")

        with pytest.raises(OSError, match="Failed to write 3 file") as exc_info:
            await scaffolder.generate(spec)

        message = str(exc_info.value)
        for name in ("ListPosts.php", "CreatePost.php", "EditPost.php"):
            assert name in message
        assert "PostResource.php" not in message
        assert resource_path.exists()

    @pytest.mark.asyncio
    async def test_target_outside_app_namespace(self, tmp_project_dir: Path):
        config = Config(output_dir=tmp_project_dir, resources_namespace="Admin\\Resources")
        scaffolder = ResourceScaffolder(config)
        with pytest.raises(ValueError, match="outside"):
            await scaffolder.generate(scaffolder.build_spec("Post"))
