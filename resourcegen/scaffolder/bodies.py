"""Body text for the ``form()`` and ``table()`` methods of a resource.

The class-assembly engine does not know what a form component or a table
column looks like.  It asks a ``FormBodyProvider`` and a ``TableBodyProvider``
for finished PHP statements, passing its own ``simplify_fqn`` so that every
class the body mentions is spelled the way the file's imports allow.
"""

from __future__ import annotations

from typing import Callable, Protocol

from resourcegen.php.dumper import quote
from resourcegen.scaffolder import framework
from resourcegen.scaffolder.fields import EmptyFieldSource, FieldDefinition, FieldSource
from resourcegen.scaffolder.spec import ResourceSpec

Simplify = Callable[[str], str]

PLACEHOLDER = "//"


class FormBodyProvider(Protocol):
    """Produces the body of ``form(Schema $schema): Schema``."""

    def has_output(self, spec: ResourceSpec) -> bool:
        """Whether the body references form components."""
        ...

    def body_for(self, spec: ResourceSpec, simplify: Simplify) -> str: ...


class TableBodyProvider(Protocol):
    """Produces the body of ``table(Table $table): Table``."""

    def body_for(self, spec: ResourceSpec, simplify: Simplify) -> str: ...


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def _block(entries: list[str], depth: int) -> list[str]:
    """Lines for the contents of a PHP array literal at *depth* levels of indentation."""
    pad = "    " * depth
    if not entries:
        return [f"{pad}{PLACEHOLDER}"]
    lines: list[str] = []
    for entry in entries:
        entry_lines = entry.splitlines()
        lines.extend(pad + line for line in entry_lines[:-1])
        lines.append(f"{pad}{entry_lines[-1]},")
    return lines


def _chain(head: str, calls: list[str]) -> str:
    """``Head::make('x')`` followed by one indented ``->call()`` per line."""
    return "\n".join([head, *(f"    ->{call}" for call in calls)])


# ---------------------------------------------------------------------------
# Form
# ---------------------------------------------------------------------------


class ResourceFormBodyProvider:
    """Builds ``return $schema->components([...]);``.

    When ``spec.is_generated`` is set, one component is emitted per
    editable model field; otherwise the component list is a placeholder.
    """

    def __init__(self, field_source: FieldSource | None = None) -> None:
        self.field_source = field_source or EmptyFieldSource()

    def fields(self, spec: ResourceSpec) -> list[FieldDefinition]:
        if not spec.is_generated:
            return []
        return [
            f for f in self.field_source.fields_for(spec.entity_name)
            if not f.is_primary_key and not f.is_timestamp
        ]

    def has_output(self, spec: ResourceSpec) -> bool:
        return bool(self.fields(spec))

    def body_for(self, spec: ResourceSpec, simplify: Simplify) -> str:
        components = [self.component_for(f, simplify) for f in self.fields(spec)]
        return "\n".join([
            "return $schema",
            "    ->components([",
            *_block(components, 2),
            "    ]);",
        ])

    def component_for(self, field: FieldDefinition, simplify: Simplify) -> str:
        calls: list[str] = []
        kind = field.kind
        name = quote(field.name)

        if kind == "relationship":
            component = framework.form_component("Select")
            calls.append(f"relationship({quote(field.relationship_name)}, 'name')")
        elif kind == "boolean":
            component = framework.form_component("Toggle")
        elif kind == "text":
            component = framework.form_component("Textarea")
            calls.append("columnSpanFull()")
        elif kind == "date":
            component = framework.form_component("DatePicker")
        elif kind == "datetime":
            component = framework.form_component("DateTimePicker")
        else:
            component = framework.form_component("TextInput")
            lower = field.name.lower()
            if kind == "numeric":
                calls.append("numeric()")
            elif "email" in lower:
                calls.append("email()")
            elif "password" in lower:
                calls.append("password()")
            elif "phone" in lower:
                calls.append("tel()")

        if not field.nullable and kind != "boolean":
            calls.insert(0, "required()")
        return _chain(f"{simplify(component)}::make({name})", calls)


# ---------------------------------------------------------------------------
# Table
# ---------------------------------------------------------------------------


class ResourceTableBodyProvider:
    """Builds ``return $table->columns([...])->filters([...])->...;``.

    Record and toolbar actions depend on the resource flags: simple
    resources manage records inline (delete, force-delete, restore), and
    soft-deletable ones get the trashed filter and matching bulk actions.
    """

    def __init__(self, field_source: FieldSource | None = None) -> None:
        self.field_source = field_source or EmptyFieldSource()

    def fields(self, spec: ResourceSpec) -> list[FieldDefinition]:
        if not spec.is_generated:
            return []
        return [
            f for f in self.field_source.fields_for(spec.entity_name)
            if not f.is_primary_key and f.kind != "text" and "password" not in f.name.lower()
        ]

    def body_for(self, spec: ResourceSpec, simplify: Simplify) -> str:
        columns = [self.column_for(f, simplify) for f in self.fields(spec)]
        filters = self.filters(spec, simplify)
        record_actions = self.record_actions(spec, simplify)
        toolbar_actions = self.toolbar_actions(spec, simplify)

        return "\n".join([
            "return $table",
            "    ->columns([",
            *_block(columns, 2),
            "    ])",
            "    ->filters([",
            *_block(filters, 2),
            "    ])",
            "    ->recordActions([",
            *_block(record_actions, 2),
            "    ])",
            "    ->toolbarActions([",
            *_block(toolbar_actions, 2),
            "    ]);",
        ])

    def column_for(self, field: FieldDefinition, simplify: Simplify) -> str:
        kind = field.kind
        name = field.name
        calls: list[str] = []

        if kind == "boolean":
            column = framework.table_column("IconColumn")
            calls.append("boolean()")
        else:
            column = framework.table_column("TextColumn")
            if kind == "relationship":
                name = f"{field.relationship_name}.name"
                calls.append("searchable()")
            elif kind == "numeric":
                calls.extend(["numeric()", "sortable()"])
            elif kind == "date":
                calls.extend(["date()", "sortable()"])
            elif kind == "datetime":
                calls.extend(["dateTime()", "sortable()"])
            else:
                calls.append("searchable()")

        if field.is_timestamp:
            calls.append("toggleable(isToggledHiddenByDefault: true)")
        return _chain(f"{simplify(column)}::make({quote(name)})", calls)

    def filters(self, spec: ResourceSpec, simplify: Simplify) -> list[str]:
        if not spec.is_soft_deletable:
            return []
        return [f"{simplify(framework.table_filter('TrashedFilter'))}::make()"]

    def record_actions(self, spec: ResourceSpec, simplify: Simplify) -> list[str]:
        names: list[str] = []
        if spec.has_view_capability:
            names.append("ViewAction")
        names.append("EditAction")
        if spec.is_simple:
            names.append("DeleteAction")
            if spec.is_soft_deletable:
                names.extend(["ForceDeleteAction", "RestoreAction"])
        return [f"{simplify(framework.action(n))}::make()" for n in names]

    def toolbar_actions(self, spec: ResourceSpec, simplify: Simplify) -> list[str]:
        names = ["DeleteBulkAction"]
        if spec.is_soft_deletable:
            names.extend(["ForceDeleteBulkAction", "RestoreBulkAction"])
        bulk = [f"{simplify(framework.action(n))}::make()" for n in names]
        group = simplify(framework.action("BulkActionGroup"))
        return ["\n".join([f"{group}::make([", *_block(bulk, 1), "])"])]
