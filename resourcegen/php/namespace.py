"""Import table and name resolution for a single PHP namespace.

``PhpNamespace`` records ``use`` statements in insertion order and turns a
fully qualified name into the shortest form that is valid inside the
namespace, taking both class imports and namespace imports into account.
"""

from __future__ import annotations

from dataclasses import dataclass

from resourcegen.utils import NAMESPACE_SEPARATOR, class_basename, normalize_fqn, qualify

# Type keywords that are never namespaced.
_KEYWORDS = frozenset({
    "array", "bool", "callable", "false", "float", "int", "iterable", "mixed",
    "never", "null", "object", "parent", "self", "static", "string", "true", "void",
})


class ImportCollisionError(ValueError):
    """Raised when an explicit alias is already taken by another import."""


@dataclass(frozen=True)
class Import:
    """A single ``use`` statement."""

    name: str
    alias: str

    @property
    def is_aliased(self) -> bool:
        return self.alias != class_basename(self.name)

    def statement(self) -> str:
        if self.is_aliased:
            return f"{self.name} as {self.alias}"
        return self.name


class PhpNamespace:
    """Ordered import table for one namespace.

    Adding the same name twice is a no-op, so duplicate imports cannot be
    produced.  An implicit alias that is already taken receives a numeric
    suffix (``Table2``); an explicit alias that is already taken raises
    ``ImportCollisionError``.  The short name of the class declared in the
    file, when given, counts as taken.
    """

    def __init__(self, name: str = "", class_name: str | None = None) -> None:
        self.name = normalize_fqn(name)
        self.class_name = class_name
        self._imports: dict[str, Import] = {}

    # -- Imports -----------------------------------------------------------

    def add_use(self, name: str, alias: str | None = None) -> str:
        """Import *name*, returning the alias it is reachable under."""
        name = normalize_fqn(name)
        key = name.lower()
        if key in self._imports:
            return self._imports[key].alias

        taken = {imp.alias.lower(): imp.name for imp in self._imports.values()}
        if self.class_name:
            taken.setdefault(self.class_name.lower(), qualify(self.name, self.class_name))
        if alias is None:
            base = class_basename(name)
            alias = base
            counter = 2
            while alias.lower() in taken:
                alias = f"{base}{counter}"
                counter += 1
        elif alias.lower() in taken:
            raise ImportCollisionError(
                f"Alias '{alias}' used already for '{taken[alias.lower()]}', "
                f"cannot use for '{name}'."
            )

        self._imports[key] = Import(name, alias)
        return alias

    def get_uses(self) -> list[Import]:
        """Return the imports in insertion order."""
        return list(self._imports.values())

    def has_use(self, name: str) -> bool:
        return normalize_fqn(name).lower() in self._imports

    def alias_of(self, name: str) -> str | None:
        imp = self._imports.get(normalize_fqn(name).lower())
        return imp.alias if imp else None

    # -- Resolution --------------------------------------------------------

    def simplify_name(self, name: str) -> str:
        """Return the shortest valid reference to *name* from this namespace.

        Resolution prefers, in order of resulting length: an exact class
        import, a prefix covered by an imported namespace, and a name
        relative to the current namespace.  Anything else is printed fully
        qualified with a leading separator.
        """
        if name.lower() in _KEYWORDS:
            return name
        name = normalize_fqn(name)
        lower = name.lower()

        candidates: list[str] = []
        for imp in self._imports.values():
            imported = imp.name.lower()
            if lower == imported:
                candidates.append(imp.alias)
            elif lower.startswith(imported + NAMESPACE_SEPARATOR):
                candidates.append(imp.alias + name[len(imp.name):])

        if self.name and lower.startswith(self.name.lower() + NAMESPACE_SEPARATOR):
            relative = name[len(self.name) + 1:]
            head = relative.split(NAMESPACE_SEPARATOR, 1)[0].lower()
            shadowed = any(imp.alias.lower() == head for imp in self._imports.values())
            if not shadowed:
                candidates.append(relative)
        elif not self.name and NAMESPACE_SEPARATOR not in name:
            candidates.append(name)

        if not candidates:
            return NAMESPACE_SEPARATOR + name
        return min(candidates, key=len)

    def simplify_type(self, type_: str | None) -> str | None:
        """Simplify each member of a (nullable or union) type declaration."""
        if not type_:
            return type_
        nullable = type_.startswith("?")
        members = type_.lstrip("?").split("|")
        simplified = "|".join(self.simplify_name(m) for m in members)
        return f"?{simplified}" if nullable else simplified
