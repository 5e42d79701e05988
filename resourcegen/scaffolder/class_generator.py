"""Base class for generators that emit one PHP class.

Subclasses describe *what* goes into the class by overriding the ``get_*``
accessors and the ``add_properties_to_class`` / ``add_methods_to_class``
steps.  ``assemble()`` runs the steps in a fixed order against a fresh
namespace, and ``generate()`` prints the result.
"""

from __future__ import annotations

from typing import Union

from resourcegen.php.namespace import PhpNamespace
from resourcegen.php.nodes import ClassDescription
from resourcegen.php.printer import ClassPrinter
from resourcegen.utils import class_basename, extract_namespace, normalize_fqn

# A plain FQN, or ``(fqn, alias)`` for an aliased import.
ImportEntry = Union[str, tuple[str, str]]


class ClassGenerator:
    """Assembles a ``ClassDescription`` and renders it to PHP source."""

    def __init__(self, *, printer: ClassPrinter | None = None) -> None:
        self.printer = printer or ClassPrinter()
        self._namespace: PhpNamespace | None = None

    # -- Accessors ---------------------------------------------------------

    def get_fqn(self) -> str:
        raise NotImplementedError

    def get_namespace(self) -> str:
        return extract_namespace(self.get_fqn())

    def get_basename(self) -> str:
        return class_basename(self.get_fqn())

    def get_extends(self) -> str | None:
        return None

    def get_imports(self) -> list[ImportEntry]:
        return []

    def has_partial_imports(self) -> bool:
        return False

    # -- Assembly ----------------------------------------------------------

    def assemble(self) -> ClassDescription:
        """Build the class description from scratch."""
        namespace = self.build_namespace()
        self._namespace = namespace
        description = ClassDescription(
            self.get_basename(),
            namespace,
            extends=self.get_extends(),
        )
        self.add_properties_to_class(description)
        self.add_methods_to_class(description)
        return description

    def generate(self) -> str:
        """Return the source text of the generated class file."""
        return self.printer.render(self.assemble())

    def build_namespace(self) -> PhpNamespace:
        namespace = PhpNamespace(self.get_namespace(), class_name=self.get_basename())
        for entry in self.get_imports():
            if isinstance(entry, tuple):
                namespace.add_use(*entry)
            else:
                namespace.add_use(entry)
        return namespace

    def add_properties_to_class(self, description: ClassDescription) -> None:
        pass

    def add_methods_to_class(self, description: ClassDescription) -> None:
        pass

    # -- Names -------------------------------------------------------------

    def simplify_fqn(self, fqn: str) -> str:
        """Return how *fqn* is written inside the generated class."""
        if self._namespace is None:
            self._namespace = self.build_namespace()
        return self._namespace.simplify_name(fqn)


def unique_imports(entries: list[ImportEntry]) -> list[ImportEntry]:
    """Drop repeated names, keeping the first occurrence and its alias."""
    seen: set[str] = set()
    result: list[ImportEntry] = []
    for entry in entries:
        name = entry[0] if isinstance(entry, tuple) else entry
        key = normalize_fqn(name).lower()
        if key in seen:
            continue
        seen.add(key)
        result.append(entry)
    return result
