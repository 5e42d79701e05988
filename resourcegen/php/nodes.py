"""Language-agnostic class description and PHP expression nodes.

A ``ClassDescription`` is what the generators build and what the
``ClassPrinter`` consumes.  Values and bodies that refer to other classes use
typed nodes (``ClassName``, ``ClassReference``, ``Literal``) rather than
pre-formatted strings, so that aliasing and escaping are decided by the
printer from the description's import table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from resourcegen.php.namespace import PhpNamespace


class Visibility(str, Enum):
    """Member visibility keywords."""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


# ---------------------------------------------------------------------------
# Expression nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClassName:
    """A class name that prints as its simplified form, e.g. ``Pages\\ListPosts``."""

    fqn: str


@dataclass(frozen=True)
class ClassReference:
    """A class-literal reference that prints as ``Alias::class``."""

    fqn: str


@dataclass(frozen=True)
class Literal:
    """Raw PHP code with ``?`` placeholders filled from *args*.

    Each ``?`` is replaced by the dumped form of the matching argument, so
    strings are quoted and escaped and class nodes are resolved against the
    imports.  A literal ``?`` is written as ``\\?``.
    """

    template: str
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------


_NO_VALUE = object()


@dataclass
class Parameter:
    """A method parameter."""

    name: str
    type: str | None = None
    default: Any = _NO_VALUE

    def set_type(self, type_: str | None) -> Parameter:
        self.type = type_
        return self

    def set_default(self, value: Any) -> Parameter:
        self.default = value
        return self

    @property
    def has_default(self) -> bool:
        return self.default is not _NO_VALUE


@dataclass
class Property:
    """A class property, optionally static and typed."""

    name: str
    value: Any = _NO_VALUE
    visibility: Visibility = Visibility.PUBLIC
    static: bool = False
    type: str | None = None

    def set_protected(self) -> Property:
        self.visibility = Visibility.PROTECTED
        return self

    def set_public(self) -> Property:
        self.visibility = Visibility.PUBLIC
        return self

    def set_static(self, static: bool = True) -> Property:
        self.static = static
        return self

    def set_type(self, type_: str | None) -> Property:
        self.type = type_
        return self

    def set_value(self, value: Any) -> Property:
        self.value = value
        return self

    @property
    def has_value(self) -> bool:
        return self.value is not _NO_VALUE


@dataclass
class Method:
    """A class method with a typed signature and a body.

    The body is either plain PHP code or a ``Literal`` whose placeholders are
    resolved when the class is printed.
    """

    name: str
    visibility: Visibility = Visibility.PUBLIC
    static: bool = False
    return_type: str | None = None
    parameters: list[Parameter] = field(default_factory=list)
    body: str | Literal = ""

    def set_public(self) -> Method:
        self.visibility = Visibility.PUBLIC
        return self

    def set_protected(self) -> Method:
        self.visibility = Visibility.PROTECTED
        return self

    def set_static(self, static: bool = True) -> Method:
        self.static = static
        return self

    def set_return_type(self, type_: str | None) -> Method:
        self.return_type = type_
        return self

    def set_body(self, body: str | Literal) -> Method:
        self.body = body
        return self

    def add_parameter(self, name: str) -> Parameter:
        parameter = Parameter(name)
        self.parameters.append(parameter)
        return parameter


# ---------------------------------------------------------------------------
# Class
# ---------------------------------------------------------------------------


@dataclass
class ClassDescription:
    """Everything the printer needs to render one class file."""

    name: str
    namespace: PhpNamespace
    extends: str | None = None
    properties: list[Property] = field(default_factory=list)
    methods: list[Method] = field(default_factory=list)

    def add_property(self, name: str, value: Any = _NO_VALUE) -> Property:
        if self.get_property(name) is not None:
            raise ValueError(f"Property '{name}' already defined on {self.name}")
        prop = Property(name, value)
        self.properties.append(prop)
        return prop

    def add_method(self, name: str) -> Method:
        if self.get_method(name) is not None:
            raise ValueError(f"Method '{name}' already defined on {self.name}")
        method = Method(name)
        self.methods.append(method)
        return method

    def get_property(self, name: str) -> Property | None:
        return next((p for p in self.properties if p.name == name), None)

    def get_method(self, name: str) -> Method | None:
        return next((m for m in self.methods if m.name.lower() == name.lower()), None)

    @property
    def property_names(self) -> list[str]:
        return [p.name for p in self.properties]

    @property
    def method_names(self) -> list[str]:
        return [m.name for m in self.methods]

    @property
    def fqn(self) -> str:
        if self.namespace.name:
            return f"{self.namespace.name}\\{self.name}"
        return self.name
