"""Tests for compiling templates given as bytes."""

import pytest

from whisker import compile_template
from whisker.errors import TemplateSyntaxError
from whisker.nodes import Fetch, HashArgs, Interpolation, Multi, Section, Static


class TestBytesInput:
    """Bytes are scanned without decoding and restored on output."""

    def test_ascii_bytes(self) -> None:
        assert compile_template(b"Hi {{thing}}!") == compile_template("Hi {{thing}}!")

    def test_utf8_text_restored(self) -> None:
        tree = compile_template("héllo {{name}} wörld".encode())
        assert tree.children == (
            Static("héllo "),
            Interpolation(Fetch(("name",))),
            Static(" wörld"),
        )

    def test_raw_section_text_restored(self) -> None:
        (section,) = compile_template("{{#a}}ünïcode{{/a}}".encode()).children
        assert section.raw == "ünïcode"
        assert section.body == Multi((Static("ünïcode"),))

    def test_declared_encoding(self) -> None:
        tree = compile_template(b"caf\xe9 {{x}}", encoding="latin-1")
        assert tree.children == (Static("café "), Interpolation(Fetch(("x",))))

    def test_non_ascii_delimiters(self) -> None:
        tree = compile_template("«#a»x«/a»".encode(), delimiters=("«", "»"))
        assert tree.children == (
            Section(Fetch(("a",)), Multi((Static("x"),)), "x", ("«", "»")),
        )

    def test_error_line_restored(self) -> None:
        with pytest.raises(TemplateSyntaxError) as exc_info:
            compile_template("café {{#a}}".encode())
        assert exc_info.value.line == "café {{#a}}"
        assert exc_info.value.lineno == 1

    def test_non_ascii_delimiter_change(self) -> None:
        tree = compile_template("{{=« »=}}«x» «#s»ü«/s»".encode())
        assert tree.children == (
            Interpolation(Fetch(("x",))),
            Static(" "),
            Section(Fetch(("s",)), Multi((Static("ü"),)), "ü", ("«", "»")),
        )


class TestBytesArguments:
    """Arguments compile the same from str and from bytes."""

    @pytest.mark.parametrize(
        "source",
        [
            "{{f über}}",
            "{{f über.straße k=wört}}",
            "{{{f 'ünïcode' 2 schlüssel=\"wert\" n=1.5}}}",
            "{{#s}}{{f a, ö}}{{/s}}",
        ],
    )
    def test_same_tree_as_str(self, source: str) -> None:
        assert compile_template(source.encode()) == compile_template(source)

    def test_restored_argument_values(self) -> None:
        (node,) = compile_template("{{f über k=wört}}".encode()).children
        assert node.args == (
            Fetch(("über",)),
            HashArgs((("k", Fetch(("wört",))),)),
        )


class TestBytesErrors:
    """Malformed bytes fail with TemplateSyntaxError."""

    def test_non_ascii_tag_name(self) -> None:
        with pytest.raises(TemplateSyntaxError, match="Illegal content in tag"):
            compile_template(b"{{\xc3\xa9}}")

    def test_invalid_utf8_text(self) -> None:
        with pytest.raises(TemplateSyntaxError, match="Invalid utf-8 byte sequence"):
            compile_template(b"ok \xff {{x}}")

    def test_invalid_utf8_argument(self) -> None:
        with pytest.raises(TemplateSyntaxError, match="Invalid utf-8 byte sequence"):
            compile_template(b"{{f \xff}}")
