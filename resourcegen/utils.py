"""Shared utility functions for resourcegen.

Provides pure namespace/class-name helpers, JSON and YAML loading, and
Rich-based console reporting.  Every name helper is stateless and takes its
inputs explicitly so that the generators never depend on hidden globals.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()

NAMESPACE_SEPARATOR = "\\"

_IDENTIFIER = r"[A-Za-z_\x80-\uffff][A-Za-z0-9_\x80-\uffff]*"
_FQN_PATTERN = re.compile(rf"^\\?{_IDENTIFIER}(\\{_IDENTIFIER})*$")

# ---------------------------------------------------------------------------
# Namespace / class-name helpers
# ---------------------------------------------------------------------------


def normalize_fqn(fqn: str) -> str:
    """Strip surrounding whitespace and a leading namespace separator."""
    return fqn.strip().lstrip(NAMESPACE_SEPARATOR)


def is_valid_fqn(fqn: str) -> bool:
    """Return ``True`` if *fqn* is a syntactically valid PHP qualified name.

    Examples::

        is_valid_fqn("App\\Models\\User")  -> True
        is_valid_fqn("App\\\\Models")      -> False
        is_valid_fqn("")                    -> False
    """
    return bool(fqn) and _FQN_PATTERN.match(fqn) is not None


def class_basename(fqn: str) -> str:
    """Return the last segment of a qualified name.

    Examples::

        class_basename("App\\Models\\User") -> "User"
        class_basename("User")              -> "User"
    """
    return normalize_fqn(fqn).rsplit(NAMESPACE_SEPARATOR, 1)[-1]


def extract_namespace(fqn: str) -> str:
    """Return everything before the last segment, or ``""`` for global names."""
    name = normalize_fqn(fqn)
    if NAMESPACE_SEPARATOR not in name:
        return ""
    return name.rsplit(NAMESPACE_SEPARATOR, 1)[0]


def qualify(*segments: str) -> str:
    """Join namespace segments, ignoring empty ones."""
    parts = [normalize_fqn(s).rstrip(NAMESPACE_SEPARATOR) for s in segments]
    return NAMESPACE_SEPARATOR.join(p for p in parts if p)


def to_pascal(name: str) -> str:
    """Convert ``some-thing``, ``some_thing`` or ``some thing`` to ``SomeThing``.

    Segments that already contain capitals keep their inner casing, so
    ``"blogPost"`` becomes ``"BlogPost"``.
    """
    parts = re.split(r"[-_\s]+", name.strip())
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def pluralize(word: str) -> str:
    """Naive English pluralisation that preserves the casing of *word*.

    Examples::

        pluralize("Post")     -> "Posts"
        pluralize("Category") -> "Categories"
        pluralize("Box")      -> "Boxes"
    """
    if not word:
        return word
    lower = word.lower()
    if lower.endswith("y") and len(word) > 1 and lower[-2] not in "aeiou":
        return word[:-1] + "ies"
    if lower.endswith(("s", "sh", "ch", "x", "z")):
        return word + "es"
    return word + "s"


def relation_name(column: str) -> str:
    """Derive an Eloquent relationship name from a foreign-key column.

    ``author_id`` -> ``author``, ``blog_post_id`` -> ``blogPost``.
    """
    base = column[: -len("_id")] if column.endswith("_id") else column
    pascal = to_pascal(base)
    return pascal[:1].lower() + pascal[1:]


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


def load_structured(path: str | Path) -> Any:
    """Load a JSON or YAML document, choosing the parser by file suffix."""
    file_path = Path(path)
    if file_path.suffix.lower() in (".yml", ".yaml"):
        return yaml.safe_load(file_path.read_text(encoding="utf-8"))
    return load_json(file_path)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
