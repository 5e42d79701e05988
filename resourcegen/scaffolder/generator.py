"""Main scaffolding orchestrator.

Turns a model name and a handful of flags into a ``ResourceSpec``, renders
the resource class plus its page classes, and writes them to the PSR-4
locations described by the ``Config``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from resourcegen.config import Config
from resourcegen.scaffolder.bodies import ResourceFormBodyProvider, ResourceTableBodyProvider
from resourcegen.scaffolder.fields import EmptyFieldSource, FieldSource
from resourcegen.scaffolder.page_class import ResourcePageClassGenerator, default_pages
from resourcegen.scaffolder.resource_class import GeneratorHooks, ResourceClassGenerator
from resourcegen.scaffolder.spec import ResourceSpec
from resourcegen.utils import (
    NAMESPACE_SEPARATOR,
    class_basename,
    extract_namespace,
    normalize_fqn,
    pluralize,
    qualify,
    to_pascal,
)


class ResourceScaffolder:
    """Main scaffolding orchestrator.

    Given a ``Config``, builds resource specs and generates:
    - the resource class (form, table, pages, optional infolist/query scope)
    - one page class per conventional route (list/create/edit/view/manage)
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        field_source: FieldSource | None = None,
        hooks: GeneratorHooks | None = None,
    ) -> None:
        self.config = config or Config()
        self.field_source = field_source or EmptyFieldSource()
        self.hooks = hooks or GeneratorHooks()

    # -- Spec building -----------------------------------------------------

    def build_spec(
        self,
        model: str,
        *,
        cluster: str | None = None,
        view: bool = False,
        soft_deletes: bool = False,
        simple: bool = False,
        generate: bool = False,
    ) -> ResourceSpec:
        """Derive a ``ResourceSpec`` from a model name and flags.

        A bare model name (``"BlogPost"``) is placed in ``models_namespace``;
        a qualified one is used as given.  Resources of a cluster live below
        the cluster's ``Resources`` namespace.
        """
        model_fqn = self.model_fqn(model)
        basename = class_basename(model_fqn)
        resource_namespace = qualify(self.resources_namespace_for(cluster), pluralize(basename))

        return ResourceSpec(
            target_name=qualify(resource_namespace, f"{basename}Resource"),
            entity_name=model_fqn,
            pages=default_pages(
                qualify(resource_namespace, "Pages"), basename, simple=simple, view=view
            ),
            cluster_name=cluster,
            has_view_capability=view,
            is_generated=generate,
            is_soft_deletable=soft_deletes,
            is_simple=simple,
        )

    def model_fqn(self, model: str) -> str:
        model = normalize_fqn(model)
        if NAMESPACE_SEPARATOR in model:
            return model
        return qualify(self.config.models_namespace, to_pascal(model))

    def resources_namespace_for(self, cluster: str | None) -> str:
        if not cluster:
            return self.config.resources_namespace
        cluster = normalize_fqn(cluster)
        return qualify(extract_namespace(cluster), class_basename(cluster), "Resources")

    # -- Generators --------------------------------------------------------

    def resource_generator(self, spec: ResourceSpec) -> ResourceClassGenerator:
        return ResourceClassGenerator(
            spec,
            form_body=ResourceFormBodyProvider(self.field_source),
            table_body=ResourceTableBodyProvider(self.field_source),
            hooks=self.hooks,
            config=self.config,
        )

    def page_generators(self, spec: ResourceSpec) -> list[ResourcePageClassGenerator]:
        """Generators for every page whose route name has a known page kind."""
        generators = []
        for route_name, page in spec.pages.items():
            generator = ResourcePageClassGenerator.for_page(
                route_name,
                page,
                spec.target_name,
                simple=spec.is_simple,
                has_view_page="view" in spec.pages,
                is_soft_deletable=spec.is_soft_deletable,
                config=self.config,
            )
            if generator is not None:
                generators.append(generator)
        return generators

    # -- Rendering ---------------------------------------------------------

    def render(self, spec: ResourceSpec, *, pages: bool = True) -> dict[Path, str]:
        """Render every file for *spec* in memory, keyed by destination path."""
        files: dict[Path, str] = {}
        resource = self.resource_generator(spec)
        files[self.config.path_for_class(resource.get_fqn())] = resource.generate()
        if pages:
            for generator in self.page_generators(spec):
                files[self.config.path_for_class(generator.get_fqn())] = generator.generate()
        return files

    async def generate(
        self,
        spec: ResourceSpec,
        *,
        force: bool = False,
        pages: bool = True,
    ) -> list[Path]:
        """Render and write every file for *spec*.

        Args:
            spec: The resource to generate.
            force: Overwrite files that already exist.
            pages: Also generate the page classes.

        Returns:
            List of written file paths, resource first.

        Raises:
            FileExistsError: If a target file exists and *force* is false.
                Nothing is written in that case.
            OSError: If any write fails.  The message lists every failed
                path. Files that were written successfully are left in place.
        """
        files = self.render(spec, pages=pages)

        if not force:
            existing = [path for path in files if path.exists()]
            if existing:
                listing = ", ".join(str(p) for p in existing)
                raise FileExistsError(f"Refusing to overwrite existing files: {listing}")

        results = await asyncio.gather(
            *(asyncio.to_thread(_write_file, path, content) for path, content in files.items()),
            return_exceptions=True,
        )
        failures = [
            (path, result) for path, result in zip(files, results) if isinstance(result, BaseException)
        ]
        if failures:
            listing = "; ".join(f"{path}: {exc}" for path, exc in failures)
            raise OSError(f"Failed to write {len(failures)} file(s): {listing}") from failures[0][1]
        return list(files)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
