"""Page classes registered by a resource (list, create, edit, view, manage)."""

from __future__ import annotations

from enum import Enum

from resourcegen.config import Config
from resourcegen.php.nodes import ClassDescription, ClassReference
from resourcegen.php.printer import ClassPrinter
from resourcegen.scaffolder import framework
from resourcegen.scaffolder.class_generator import ClassGenerator, ImportEntry, unique_imports
from resourcegen.scaffolder.spec import PageSpec
from resourcegen.utils import class_basename, pluralize, qualify


class PageKind(str, Enum):
    """Kinds of resource page, keyed by their conventional route name."""
    LIST = "index"
    CREATE = "create"
    EDIT = "edit"
    VIEW = "view"
    MANAGE = "manage"

    @property
    def base_class(self) -> str:
        return _BASE_CLASSES[self]


_BASE_CLASSES: dict[PageKind, str] = {
    PageKind.LIST: framework.LIST_RECORDS,
    PageKind.CREATE: framework.CREATE_RECORD,
    PageKind.EDIT: framework.EDIT_RECORD,
    PageKind.VIEW: framework.VIEW_RECORD,
    PageKind.MANAGE: framework.MANAGE_RECORDS,
}


def default_pages(
    pages_namespace: str,
    model_basename: str,
    *,
    simple: bool = False,
    view: bool = False,
) -> dict[str, PageSpec]:
    """Return the conventional route -> page mapping for a resource.

    Simple resources manage records in modals on a single page; the others
    get list, create, optional view, and edit pages.
    """
    plural = pluralize(model_basename)
    if simple:
        return {
            "index": PageSpec(page_class=qualify(pages_namespace, f"Manage{plural}"), route_path="/"),
        }

    pages = {
        "index": PageSpec(page_class=qualify(pages_namespace, f"List{plural}"), route_path="/"),
        "create": PageSpec(page_class=qualify(pages_namespace, f"Create{model_basename}"), route_path="/create"),
    }
    if view:
        pages["view"] = PageSpec(
            page_class=qualify(pages_namespace, f"View{model_basename}"), route_path="/{record}"
        )
    pages["edit"] = PageSpec(
        page_class=qualify(pages_namespace, f"Edit{model_basename}"), route_path="/{record}/edit"
    )
    return pages


def page_kind_for(route_name: str, *, simple: bool) -> PageKind | None:
    """Map a route name to the page kind it conventionally uses."""
    if route_name == PageKind.LIST.value:
        return PageKind.MANAGE if simple else PageKind.LIST
    try:
        return PageKind(route_name)
    except ValueError:
        return None


class ResourcePageClassGenerator(ClassGenerator):
    """Generates one page class pointing back at its resource."""

    def __init__(
        self,
        fqn: str,
        resource_fqn: str,
        kind: PageKind,
        *,
        has_view_page: bool = False,
        is_soft_deletable: bool = False,
        config: Config | None = None,
        printer: ClassPrinter | None = None,
    ) -> None:
        self.config = config or Config()
        super().__init__(printer=printer or ClassPrinter(sort_imports=self.config.sort_imports))
        self.fqn = fqn
        self.resource_fqn = resource_fqn
        self.kind = kind
        self.has_view_page = has_view_page
        self.soft_deletable = is_soft_deletable

    def get_fqn(self) -> str:
        return self.fqn

    def get_extends(self) -> str:
        return self.kind.base_class

    def has_partial_imports(self) -> bool:
        return self.config.partial_imports

    def get_header_actions(self) -> list[str]:
        """Short names of the actions shown in the page header."""
        if self.kind in (PageKind.LIST, PageKind.MANAGE):
            return ["CreateAction"]
        if self.kind == PageKind.VIEW:
            return ["EditAction"]
        if self.kind == PageKind.EDIT:
            actions = ["ViewAction"] if self.has_view_page else []
            actions.append("DeleteAction")
            if self.soft_deletable:
                actions.extend(["ForceDeleteAction", "RestoreAction"])
            return actions
        return []

    def get_imports(self) -> list[ImportEntry]:
        imports: list[ImportEntry] = [self.resource_fqn, self.get_extends()]
        if self.get_header_actions():
            if self.has_partial_imports():
                imports.append(framework.ACTIONS_NAMESPACE)
            else:
                imports.extend(framework.action(a) for a in self.get_header_actions())
        return unique_imports(imports)

    def add_properties_to_class(self, description: ClassDescription) -> None:
        (
            description.add_property("resource", ClassReference(self.resource_fqn))
            .set_protected()
            .set_static()
            .set_type("string")
        )

    def add_methods_to_class(self, description: ClassDescription) -> None:
        actions = self.get_header_actions()
        if not actions:
            return

        lines = [f"    {self.simplify_fqn(framework.action(a))}::make()," for a in actions]
        (
            description.add_method("getHeaderActions")
            .set_protected()
            .set_return_type("array")
            .set_body("\n".join(["return [", *lines, "];"]))
        )

    @classmethod
    def for_page(
        cls,
        route_name: str,
        page: PageSpec,
        resource_fqn: str,
        *,
        simple: bool = False,
        has_view_page: bool = False,
        is_soft_deletable: bool = False,
        config: Config | None = None,
    ) -> "ResourcePageClassGenerator | None":
        """Build the generator for a configured page, or ``None`` for unknown routes."""
        kind = page_kind_for(route_name, simple=simple)
        if kind is None:
            return None
        return cls(
            page.page_class,
            resource_fqn,
            kind,
            has_view_page=has_view_page,
            is_soft_deletable=is_soft_deletable,
            config=config,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {class_basename(self.fqn)} ({self.kind.value})>"
