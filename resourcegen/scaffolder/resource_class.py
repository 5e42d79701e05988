"""Class-assembly engine for Filament resource classes.

Given a ``ResourceSpec``, ``ResourceClassGenerator`` decides which imports,
properties and methods the resource class gets, in a fixed order:

* imports: base types, model, cluster, soft-delete types, pages, and the
  broad Filament namespaces when partial imports apply;
* properties: ``$model``, ``$navigationIcon``, ``$cluster``;
* methods: ``form``, ``infolist``, ``table``, ``getRelations``, ``getPages``,
  ``getEloquentQuery``.

Every element is followed by a ``configure_*`` call, which runs the matching
callback from ``GeneratorHooks``.  Subclasses may override the
``configure_*`` methods instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from resourcegen.config import Config
from resourcegen.php.nodes import ClassDescription, ClassName, ClassReference, Literal, Method, Property
from resourcegen.php.printer import ClassPrinter
from resourcegen.scaffolder import framework
from resourcegen.scaffolder.bodies import (
    FormBodyProvider,
    ResourceFormBodyProvider,
    ResourceTableBodyProvider,
    TableBodyProvider,
)
from resourcegen.scaffolder.class_generator import ClassGenerator, ImportEntry, unique_imports
from resourcegen.scaffolder.spec import PageSpec, ResourceSpec
from resourcegen.utils import class_basename

# The generic role name that a model or cluster must not shadow.
RESERVED_BASENAME = "Resource"
MODEL_ALIAS = "ResourceModel"
CLUSTER_ALIAS = "ResourceCluster"


def _noop(element: object) -> None:
    return None


@dataclass
class GeneratorHooks:
    """Per-element customization callbacks, each a no-op by default."""

    model: Callable[[Property], None] = _noop
    navigation_icon: Callable[[Property], None] = _noop
    cluster: Callable[[Property], None] = _noop
    form: Callable[[Method], None] = _noop
    infolist: Callable[[Method], None] = _noop
    table: Callable[[Method], None] = _noop
    get_relations: Callable[[Method], None] = _noop
    get_pages: Callable[[Method], None] = _noop
    get_eloquent_query: Callable[[Method], None] = _noop


class ResourceClassGenerator(ClassGenerator):
    """Generates the resource class for one Eloquent model."""

    def __init__(
        self,
        spec: ResourceSpec,
        *,
        form_body: FormBodyProvider | None = None,
        table_body: TableBodyProvider | None = None,
        hooks: GeneratorHooks | None = None,
        config: Config | None = None,
        printer: ClassPrinter | None = None,
    ) -> None:
        self.config = config or Config()
        super().__init__(printer=printer or ClassPrinter(sort_imports=self.config.sort_imports))
        self.spec = spec
        self.form_body = form_body or ResourceFormBodyProvider()
        self.table_body = table_body or ResourceTableBodyProvider()
        self.hooks = hooks or GeneratorHooks()

    # ------------------------------------------------------------------
    # Imports
    # ------------------------------------------------------------------

    def get_imports(self) -> list[ImportEntry]:
        imports: list[ImportEntry] = [
            framework.RESOURCE,
            framework.SCHEMA,
            framework.TABLE,
            self._import_avoiding_reserved(self.get_model_fqn(), MODEL_ALIAS),
        ]
        if self.has_cluster():
            imports.append(self._import_avoiding_reserved(self.get_cluster_fqn(), CLUSTER_ALIAS))
        if self.is_soft_deletable():
            imports.extend([framework.ELOQUENT_BUILDER, framework.SOFT_DELETING_SCOPE])
        imports.extend(self.get_pages_imports())
        if self.has_partial_imports():
            imports.extend([framework.ACTIONS_NAMESPACE, framework.TABLES_NAMESPACE])
            if self.form_body.has_output(self.spec):
                imports.append(framework.FORMS_NAMESPACE)
                if self.has_view_operation():
                    imports.append(framework.INFOLISTS_NAMESPACE)
        return unique_imports(imports)

    def get_pages_imports(self) -> list[str]:
        pages = self.get_pages()
        if self.has_partial_imports():
            first = next(iter(pages.values()))
            return [first.namespace]
        return [page.page_class for page in pages.values()]

    def has_partial_imports(self) -> bool:
        """Whether every page lives in one shared, non-global namespace."""
        if not self.config.partial_imports or not self.spec.pages:
            return False
        namespaces = {page.namespace.lower() for page in self.spec.pages.values()}
        return len(namespaces) == 1 and "" not in namespaces

    @staticmethod
    def _import_avoiding_reserved(fqn: str, alias: str) -> ImportEntry:
        if class_basename(fqn) == RESERVED_BASENAME:
            return (fqn, alias)
        return fqn

    def get_extends(self) -> str:
        return framework.RESOURCE

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def add_properties_to_class(self, description: ClassDescription) -> None:
        self.add_model_property_to_class(description)
        self.add_navigation_icon_property_to_class(description)
        self.add_cluster_property_to_class(description)

    def add_model_property_to_class(self, description: ClassDescription) -> None:
        prop = (
            description.add_property("model", ClassReference(self.get_model_fqn()))
            .set_protected()
            .set_static()
            .set_type("?string")
        )
        self.configure_model_property(prop)

    def configure_model_property(self, prop: Property) -> None:
        self.hooks.model(prop)

    def add_navigation_icon_property_to_class(self, description: ClassDescription) -> None:
        icon = self.config.navigation_icon
        prop = (
            description.add_property("navigationIcon", icon)
            .set_protected()
            .set_static()
            .set_type("?string")
        )
        self.configure_navigation_icon_property(prop)

    def configure_navigation_icon_property(self, prop: Property) -> None:
        self.hooks.navigation_icon(prop)

    def add_cluster_property_to_class(self, description: ClassDescription) -> None:
        if not self.has_cluster():
            return

        prop = (
            description.add_property("cluster", ClassReference(self.get_cluster_fqn()))
            .set_protected()
            .set_static()
            .set_type("?string")
        )
        self.configure_cluster_property(prop)

    def configure_cluster_property(self, prop: Property) -> None:
        self.hooks.cluster(prop)

    # ------------------------------------------------------------------
    # Methods
    # ------------------------------------------------------------------

    def add_methods_to_class(self, description: ClassDescription) -> None:
        self.add_form_method_to_class(description)
        self.add_infolist_method_to_class(description)
        self.add_table_method_to_class(description)
        self.add_get_relations_method_to_class(description)
        self.add_get_pages_method_to_class(description)
        self.add_get_eloquent_query_method_to_class(description)

    def add_form_method_to_class(self, description: ClassDescription) -> None:
        method = (
            description.add_method("form")
            .set_public()
            .set_static()
            .set_return_type(framework.SCHEMA)
            .set_body(self.get_form_method_body())
        )
        method.add_parameter("schema").set_type(framework.SCHEMA)
        self.configure_form_method(method)

    def get_form_method_body(self) -> str:
        return self.form_body.body_for(self.spec, self.simplify_fqn)

    def configure_form_method(self, method: Method) -> None:
        self.hooks.form(method)

    def add_infolist_method_to_class(self, description: ClassDescription) -> None:
        if not self.has_view_operation():
            return

        method = (
            description.add_method("infolist")
            .set_public()
            .set_static()
            .set_return_type(framework.SCHEMA)
            .set_body(
                "return $schema\n"
                "    ->components([\n"
                "        //\n"
                "    ]);"
            )
        )
        method.add_parameter("schema").set_type(framework.SCHEMA)
        self.configure_infolist_method(method)

    def configure_infolist_method(self, method: Method) -> None:
        self.hooks.infolist(method)

    def add_table_method_to_class(self, description: ClassDescription) -> None:
        method = (
            description.add_method("table")
            .set_public()
            .set_static()
            .set_return_type(framework.TABLE)
            .set_body(self.get_table_method_body())
        )
        method.add_parameter("table").set_type(framework.TABLE)
        self.configure_table_method(method)

    def get_table_method_body(self) -> str:
        return self.table_body.body_for(self.spec, self.simplify_fqn)

    def configure_table_method(self, method: Method) -> None:
        self.hooks.table(method)

    def add_get_relations_method_to_class(self, description: ClassDescription) -> None:
        if self.is_simple():
            return

        method = (
            description.add_method("getRelations")
            .set_public()
            .set_static()
            .set_return_type("array")
            .set_body(
                "return [\n"
                "    //\n"
                "];"
            )
        )
        self.configure_get_relations_method(method)

    def configure_get_relations_method(self, method: Method) -> None:
        self.hooks.get_relations(method)

    def add_get_pages_method_to_class(self, description: ClassDescription) -> None:
        lines: list[str] = []
        args: list[object] = []
        for route_name, page in self.get_pages().items():
            lines.append("    ? => ?::route(?),")
            args.extend([route_name, ClassName(page.page_class), page.route_path])

        method = (
            description.add_method("getPages")
            .set_public()
            .set_static()
            .set_return_type("array")
            .set_body(Literal("\n".join(["return [", *lines, "];"]), args))
        )
        self.configure_get_pages_method(method)

    def configure_get_pages_method(self, method: Method) -> None:
        self.hooks.get_pages(method)

    def add_get_eloquent_query_method_to_class(self, description: ClassDescription) -> None:
        if not self.is_soft_deletable():
            return

        method = (
            description.add_method("getEloquentQuery")
            .set_public()
            .set_static()
            .set_return_type(framework.ELOQUENT_BUILDER)
            .set_body(
                Literal(
                    "return parent::getEloquentQuery()\n"
                    "    ->withoutGlobalScopes([\n"
                    "        ?,\n"
                    "    ]);",
                    [ClassReference(framework.SOFT_DELETING_SCOPE)],
                )
            )
        )
        self.configure_get_eloquent_query_method(method)

    def configure_get_eloquent_query_method(self, method: Method) -> None:
        self.hooks.get_eloquent_query(method)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_fqn(self) -> str:
        return self.spec.target_name

    def get_model_fqn(self) -> str:
        return self.spec.entity_name

    def get_model_basename(self) -> str:
        return class_basename(self.get_model_fqn())

    def get_cluster_fqn(self) -> str | None:
        return self.spec.cluster_name

    def get_cluster_basename(self) -> str | None:
        cluster = self.get_cluster_fqn()
        return class_basename(cluster) if cluster else None

    def has_cluster(self) -> bool:
        return bool(self.get_cluster_fqn())

    def get_pages(self) -> dict[str, PageSpec]:
        return self.spec.pages

    def has_view_operation(self) -> bool:
        return self.spec.has_view_capability

    def is_generated(self) -> bool:
        return self.spec.is_generated

    def is_soft_deletable(self) -> bool:
        return self.spec.is_soft_deletable

    def is_simple(self) -> bool:
        return self.spec.is_simple
