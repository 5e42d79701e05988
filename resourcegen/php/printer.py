"""Render a ``ClassDescription`` to PHP source text."""

from __future__ import annotations

from typing import Any

from resourcegen.php.dumper import dump, format_literal
from resourcegen.php.namespace import PhpNamespace
from resourcegen.php.nodes import ClassDescription, Literal, Method, Parameter, Property
from resourcegen.php.templates import TemplateRenderer


class ClassPrinter:
    """Prints one class per file using the ``class.php.j2`` template.

    Names used in types, property values and ``Literal`` bodies are resolved
    against the description's namespace, so the printed code only ever uses
    aliases that appear in its ``use`` list.
    """

    template_name = "class.php.j2"

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        *,
        sort_imports: bool = True,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.sort_imports = sort_imports

    def render(self, description: ClassDescription) -> str:
        """Return the complete source of the file containing *description*."""
        return self.renderer.render(self.template_name, self.build_context(description))

    def build_context(self, description: ClassDescription) -> dict[str, Any]:
        namespace = description.namespace
        uses = [imp.statement() for imp in namespace.get_uses()]
        if self.sort_imports:
            uses.sort(key=str.lower)

        return {
            "namespace": namespace.name,
            "uses": uses,
            "name": description.name,
            "extends": namespace.simplify_name(description.extends) if description.extends else None,
            "properties": [self._property_context(p, namespace) for p in description.properties],
            "methods": [self._method_context(m, namespace) for m in description.methods],
        }

    def render_body(self, method: Method, namespace: PhpNamespace) -> str:
        """Return the body of *method* as PHP code."""
        if isinstance(method.body, Literal):
            return format_literal(method.body, namespace)
        return method.body

    # -- Members -----------------------------------------------------------

    def _property_context(self, prop: Property, namespace: PhpNamespace) -> dict[str, Any]:
        return {
            "visibility": prop.visibility.value,
            "static": prop.static,
            "type": namespace.simplify_type(prop.type),
            "name": prop.name,
            "value": dump(prop.value, namespace) if prop.has_value else None,
        }

    def _method_context(self, method: Method, namespace: PhpNamespace) -> dict[str, Any]:
        return {
            "visibility": method.visibility.value,
            "static": method.static,
            "name": method.name,
            "parameters": [self._parameter(p, namespace) for p in method.parameters],
            "return_type": namespace.simplify_type(method.return_type),
            "body": self.render_body(method, namespace).strip("\n"),
        }

    def _parameter(self, parameter: Parameter, namespace: PhpNamespace) -> str:
        code = f"${parameter.name}"
        if parameter.type:
            code = f"{namespace.simplify_type(parameter.type)} {code}"
        if parameter.has_default:
            code += f" = {dump(parameter.default, namespace)}"
        return code
