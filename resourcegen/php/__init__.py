"""PHP class description and printing.

Builders describe a class with ``ClassDescription`` and typed expression
nodes; ``ClassPrinter`` turns the description into source text.

Quick usage::

    from resourcegen.php import ClassDescription, ClassPrinter, PhpNamespace

    namespace = PhpNamespace("App\\Models")
    namespace.add_use("Illuminate\\Database\\Eloquent\\Model")
    description = ClassDescription("Post", namespace, extends="Illuminate\\Database\\Eloquent\\Model")
    source = ClassPrinter().render(description)
"""

from resourcegen.php.dumper import dump, format_literal, quote
from resourcegen.php.namespace import Import, ImportCollisionError, PhpNamespace
from resourcegen.php.nodes import (
    ClassDescription,
    ClassName,
    ClassReference,
    Literal,
    Method,
    Parameter,
    Property,
    Visibility,
)
from resourcegen.php.printer import ClassPrinter
from resourcegen.php.templates import TemplateRenderer

__all__ = [
    "ClassDescription",
    "ClassName",
    "ClassPrinter",
    "ClassReference",
    "Import",
    "ImportCollisionError",
    "Literal",
    "Method",
    "Parameter",
    "PhpNamespace",
    "Property",
    "TemplateRenderer",
    "Visibility",
    "dump",
    "format_literal",
    "quote",
]
