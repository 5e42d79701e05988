"""Convert Python values and expression nodes into PHP source fragments."""

from __future__ import annotations

import re
from typing import Any

from resourcegen.php.namespace import PhpNamespace
from resourcegen.php.nodes import ClassName, ClassReference, Literal

_PLACEHOLDER = re.compile(r"\\\?|\?")


def dump(value: Any, namespace: PhpNamespace) -> str:
    """Return the PHP source for *value*, resolving class nodes via *namespace*.

    Supported values: ``None``, ``bool``, ``int``, ``float``, ``str``,
    lists/tuples, dicts, and the ``ClassName``/``ClassReference``/``Literal``
    expression nodes.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, ClassName):
        return namespace.simplify_name(value.fqn)
    if isinstance(value, ClassReference):
        return f"{namespace.simplify_name(value.fqn)}::class"
    if isinstance(value, Literal):
        return format_literal(value, namespace)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(dump(item, namespace) for item in value) + "]"
    if isinstance(value, dict):
        items = ", ".join(
            f"{dump(key, namespace)} => {dump(item, namespace)}" for key, item in value.items()
        )
        return f"[{items}]"
    raise TypeError(f"Cannot dump value of type {type(value).__name__} to PHP")


def quote(value: str) -> str:
    """Single-quote a string, escaping backslashes and quotes."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def format_literal(literal: Literal, namespace: PhpNamespace) -> str:
    """Fill the ``?`` placeholders of *literal* with dumped arguments.

    Raises:
        ValueError: If the number of placeholders and arguments differ.
    """
    args = iter(literal.args)
    used = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal used
        if match.group(0) == "\\?":
            return "?"
        try:
            arg = next(args)
        except StopIteration:
            raise ValueError(
                f"Insufficient number of arguments for literal: {literal.template!r}"
            ) from None
        used += 1
        return dump(arg, namespace)

    result = _PLACEHOLDER.sub(_replace, literal.template)
    if used != len(literal.args):
        raise ValueError(
            f"Literal has {used} placeholders but {len(literal.args)} arguments: "
            f"{literal.template!r}"
        )
    return result
