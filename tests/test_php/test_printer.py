"""Tests for ClassDescription and ClassPrinter.

Covers:
- Member builders and duplicate detection
- Rendering of namespace, use statements, properties and methods
- Import sorting and name resolution in signatures and bodies
- TemplateRenderer helpers
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from resourcegen.php.namespace import PhpNamespace
from resourcegen.php.nodes import ClassDescription, ClassName, ClassReference, Literal, Visibility
from resourcegen.php.printer import ClassPrinter
from resourcegen.php.templates import TemplateRenderer

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def description() -> ClassDescription:
    namespace = PhpNamespace("App\\Support")
    namespace.add_use("Illuminate\\Support\\Collection")
    namespace.add_use("App\\Models\\Post")
    namespace.add_use("Illuminate\\Database\\Eloquent\\Model")

    desc = ClassDescription("PostFinder", namespace, extends="Illuminate\\Database\\Eloquent\\Model")
    desc.add_property("model", ClassReference("App\\Models\\Post")).set_protected().set_static().set_type("?string")
    desc.add_property("limit", 10).set_type("int")

    method = (
        desc.add_method("find")
        .set_public()
        .set_static()
        .set_return_type("?Illuminate\\Support\\Collection")
        .set_body(Literal("return ?::query()\n    ->where(?, $title)\n    ->get();", [
            ClassName("App\\Models\\Post"),
            "title",
        ]))
    )
    method.add_parameter("title").set_type("string")
    method.add_parameter("strict").set_type("bool").set_default(False)
    return desc


# ---------------------------------------------------------------------------
# ClassDescription
# ---------------------------------------------------------------------------


class TestClassDescription:
    def test_member_defaults(self):
        desc = ClassDescription("Foo", PhpNamespace("App"))
        prop = desc.add_property("bar")
        method = desc.add_method("baz")
        assert prop.visibility == Visibility.PUBLIC
        assert not prop.static
        assert not prop.has_value
        assert method.visibility == Visibility.PUBLIC
        assert method.parameters == []

    def test_duplicate_property_rejected(self):
        desc = ClassDescription("Foo", PhpNamespace("App"))
        desc.add_property("bar")
        with pytest.raises(ValueError, match="already defined"):
            desc.add_property("bar")

    def test_method_names_are_case_insensitive(self):
        desc = ClassDescription("Foo", PhpNamespace("App"))
        desc.add_method("getPages")
        with pytest.raises(ValueError):
            desc.add_method("GETPAGES")
        assert desc.get_method("getpages") is not None

    def test_names_and_fqn(self, description):
        assert description.property_names == ["model", "limit"]
        assert description.method_names == ["find"]
        assert description.fqn == "App\\Support\\PostFinder"

    def test_global_fqn(self):
        assert ClassDescription("Foo", PhpNamespace("")).fqn == "Foo"


# ---------------------------------------------------------------------------
# ClassPrinter
# ---------------------------------------------------------------------------


class TestClassPrinter:
    def test_render(self, description):
        expected = textwrap.dedent("""\
            <?php

            namespace App\\Support;

            use App\\Models\\Post;
            use Illuminate\\Database\\Eloquent\\Model;
            use Illuminate\\Support\\Collection;

            class PostFinder extends Model
            {
                protected static ?string $model = Post::class;

                public int $limit = 10;

                public static function find(string $title, bool $strict = false): ?Collection
                {
                    return Post::query()
                        ->where('title', $title)
                        ->get();
                }
            }
            """)
        assert ClassPrinter().render(description) == expected

    def test_unsorted_imports_keep_insertion_order(self, description):
        context = ClassPrinter(sort_imports=False).build_context(description)
        assert context["uses"] == [
            "Illuminate\\Support\\Collection",
            "App\\Models\\Post",
            "Illuminate\\Database\\Eloquent\\Model",
        ]

    def test_aliased_use_statement(self):
        namespace = PhpNamespace("App\\Filament\\Resources")
        namespace.add_use("App\\Models\\Resource", "ResourceModel")
        desc = ClassDescription("ResourceResource", namespace)
        desc.add_property("model", ClassReference("App\\Models\\Resource"))
        source = ClassPrinter().render(desc)
        assert "use App\\Models\\Resource as ResourceModel;" in source
        assert "public $model = ResourceModel::class;" in source

    def test_class_without_namespace_or_members(self):
        source = ClassPrinter().render(ClassDescription("Foo", PhpNamespace("")))
        assert source == "<?php\n\nclass Foo\n{\n}\n"

    def test_empty_body(self):
        desc = ClassDescription("Foo", PhpNamespace("App"))
        desc.add_method("noop").set_return_type("void")
        source = ClassPrinter().render(desc)
        assert "    public function noop(): void\n    {\n    }\n" in source

    def test_string_body_is_not_formatted(self):
        desc = ClassDescription("Foo", PhpNamespace("App"))
        desc.add_method("ask").set_body("return $a ?? $b;")
        source = ClassPrinter().render(desc)
        assert "        return $a ?? $b;\n" in source

    def test_blank_body_lines_have_no_trailing_spaces(self):
        desc = ClassDescription("Foo", PhpNamespace("App"))
        desc.add_method("run").set_body("$a = 1;\n\nreturn $a;")
        source = ClassPrinter().render(desc)
        assert "        $a = 1;\n\n        return $a;\n" in source


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TestTemplateRenderer:
    def test_renders_bundled_class_template(self, description):
        context = ClassPrinter().build_context(description)
        source = TemplateRenderer().render("class.php.j2", context)
        assert source.startswith("<?php\n\nnamespace App\\Support;\n")

    def test_indent_filter(self, tmp_path: Path):
        (tmp_path / "body.j2").write_text("{{ body | indent_lines(2) }}", encoding="utf-8")
        result = TemplateRenderer(tmp_path).render("body.j2", {"body": "a\n\nb"})
        assert result == "  a\n\n  b"

    def test_undefined_variable_raises(self, tmp_path: Path):
        from jinja2 import UndefinedError

        (tmp_path / "broken.j2").write_text("{{ missing }}", encoding="utf-8")
        with pytest.raises(UndefinedError):
            TemplateRenderer(tmp_path).render("broken.j2", {})
