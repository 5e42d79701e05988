"""Tests for dumping Python values and expression nodes to PHP."""

from __future__ import annotations

import pytest

from resourcegen.php.dumper import dump, format_literal, quote
from resourcegen.php.namespace import PhpNamespace
from resourcegen.php.nodes import ClassName, ClassReference, Literal

pytestmark = pytest.mark.unit


@pytest.fixture
def namespace() -> PhpNamespace:
    ns = PhpNamespace("App\\Filament\\Resources")
    ns.add_use("App\\Models\\Post")
    ns.add_use("App\\Models\\Resource", "ResourceModel")
    return ns


class TestDumpScalars:
    def test_null(self, namespace):
        assert dump(None, namespace) == "null"

    def test_booleans(self, namespace):
        assert dump(True, namespace) == "true"
        assert dump(False, namespace) == "false"

    def test_numbers(self, namespace):
        assert dump(3, namespace) == "3"
        assert dump(1.5, namespace) == "1.5"

    def test_string(self, namespace):
        assert dump("heroicon-o-rectangle-stack", namespace) == "'heroicon-o-rectangle-stack'"

    def test_quote_escapes(self):
        assert quote("it's") == "'it\\'s'"
        assert quote("a\\b") == "'a\\\\b'"


class TestDumpCollections:
    def test_list(self, namespace):
        assert dump(["a", 1, None], namespace) == "['a', 1, null]"

    def test_dict(self, namespace):
        assert dump({"index": "/", "n": 2}, namespace) == "['index' => '/', 'n' => 2]"

    def test_unsupported_type(self, namespace):
        with pytest.raises(TypeError):
            dump(object(), namespace)


class TestDumpNodes:
    def test_class_reference(self, namespace):
        assert dump(ClassReference("App\\Models\\Post"), namespace) == "Post::class"

    def test_aliased_class_reference(self, namespace):
        assert dump(ClassReference("App\\Models\\Resource"), namespace) == "ResourceModel::class"

    def test_unimported_class_reference(self, namespace):
        assert dump(ClassReference("Vendor\\Thing"), namespace) == "\\Vendor\\Thing::class"

    def test_class_name(self, namespace):
        assert dump(ClassName("App\\Models\\Post"), namespace) == "Post"

    def test_literal(self, namespace):
        assert dump(Literal("strtoupper(?)", ["x"]), namespace) == "strtoupper('x')"


class TestFormatLiteral:
    def test_placeholders_filled_in_order(self, namespace):
        literal = Literal("? => ?::route(?)", ["index", ClassName("App\\Models\\Post"), "/"])
        assert format_literal(literal, namespace) == "'index' => Post::route('/')"

    def test_escaped_placeholder(self, namespace):
        literal = Literal("$a \\? $b : ?", [1])
        assert format_literal(literal, namespace) == "$a ? $b : 1"

    def test_args_stored_as_tuple(self):
        assert Literal("?", ["a"]).args == ("a",)

    def test_too_few_arguments(self, namespace):
        with pytest.raises(ValueError, match="Insufficient"):
            format_literal(Literal("? + ?", [1]), namespace)

    def test_too_many_arguments(self, namespace):
        with pytest.raises(ValueError, match="placeholders"):
            format_literal(Literal("?", [1, 2]), namespace)
