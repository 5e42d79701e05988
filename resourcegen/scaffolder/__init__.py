"""resourcegen scaffolder -- generates Filament resource classes.

This module takes a ``ResourceSpec`` (or a model name plus flags) and
renders the resource class and its page classes.

Quick usage::

    from resourcegen.scaffolder import ResourceClassGenerator, ResourceSpec

    spec = ResourceSpec(
        target_name="App\\Filament\\Resources\\Posts\\PostResource",
        entity_name="App\\Models\\Post",
        pages={"index": {"class": "App\\Filament\\Resources\\Posts\\Pages\\ListPosts", "path": "/"}},
    )
    source = ResourceClassGenerator(spec).generate()
"""

from resourcegen.scaffolder.bodies import (
    FormBodyProvider,
    ResourceFormBodyProvider,
    ResourceTableBodyProvider,
    TableBodyProvider,
)
from resourcegen.scaffolder.class_generator import ClassGenerator
from resourcegen.scaffolder.fields import (
    EmptyFieldSource,
    FieldDefinition,
    FieldSourceError,
    FileFieldSource,
    StaticFieldSource,
)
from resourcegen.scaffolder.generator import ResourceScaffolder
from resourcegen.scaffolder.page_class import PageKind, ResourcePageClassGenerator, default_pages
from resourcegen.scaffolder.resource_class import GeneratorHooks, ResourceClassGenerator
from resourcegen.scaffolder.spec import PageSpec, ResourceSpec

__all__ = [
    "ClassGenerator",
    "EmptyFieldSource",
    "FieldDefinition",
    "FieldSourceError",
    "FileFieldSource",
    "FormBodyProvider",
    "GeneratorHooks",
    "PageKind",
    "PageSpec",
    "ResourceClassGenerator",
    "ResourceFormBodyProvider",
    "ResourcePageClassGenerator",
    "ResourceScaffolder",
    "ResourceSpec",
    "ResourceTableBodyProvider",
    "StaticFieldSource",
    "TableBodyProvider",
    "default_pages",
]
