"""Tests for standalone-line whitespace elision."""

import pytest

from whisker import compile_template
from whisker.nodes import Fetch, Interpolation, Multi, Partial, Section, Static


class TestStandaloneBlockTags:
    """Block tags alone on their line leave no trace."""

    def test_comment_line_removed(self) -> None:
        tree = compile_template("Begin.\n{{! comment }}\nEnd.\n")
        assert tree.children == (Static("Begin.\n"), Static("End.\n"))

    def test_indented_comment_line_removed(self) -> None:
        tree = compile_template("  {{!c}}\nx")
        assert tree.children == (Static("x"),)

    def test_indented_section_lines_removed(self) -> None:
        tree = compile_template("  {{#a}}\n  body\n  {{/a}}\n")
        assert tree.children == (
            Section(Fetch(("a",)), Multi((Static("  body\n"),)), "  body\n  ", ("{{", "}}")),
        )

    @pytest.mark.parametrize("sigil", ["#", "^"])
    def test_section_tags(self, sigil: str) -> None:
        tree = compile_template(f"| \n{{{{{sigil}a}}}}\nx\n{{{{/a}}}}\n|")
        assert tree.children[0] == Static("| \n")
        assert tree.children[1].body == Multi((Static("x\n"),))
        assert tree.children[2] == Static("|")

    def test_standalone_partial_keeps_padding_on_node(self) -> None:
        tree = compile_template("  {{>item}}\n")
        assert tree.children == (Partial("item", "  "),)

    def test_standalone_delimiter_change(self) -> None:
        tree = compile_template("{{=<% %>=}}\nx<%y%>")
        assert tree.children == (Static("x"), Interpolation(Fetch(("y",))))

    def test_standalone_at_end_of_input(self) -> None:
        tree = compile_template("x\n  {{! trailing }}")
        assert tree.children == (Static("x\n"),)

    def test_standalone_close_at_end_of_input(self) -> None:
        tree = compile_template("x\n{{#a}}\n{{/a}}")
        assert tree.children == (
            Static("x\n"),
            Section(Fetch(("a",)), Multi(()), "", ("{{", "}}")),
        )

    def test_crlf_line_ending(self) -> None:
        tree = compile_template("a\r\n{{!c}}\r\nb")
        assert tree.children == (Static("a\r\n"), Static("b"))


class TestNotStandalone:
    """Tags sharing their line keep the surrounding whitespace."""

    def test_interpolation_keeps_indentation(self) -> None:
        tree = compile_template("  {{name}}\n")
        assert tree.children == (
            Static("  "),
            Interpolation(Fetch(("name",))),
            Static("\n"),
        )

    def test_interpolation_at_end_of_input_keeps_indentation(self) -> None:
        tree = compile_template("  {{name}}")
        assert tree.children == (Static("  "), Interpolation(Fetch(("name",))))

    def test_unescaped_interpolation_is_never_standalone(self) -> None:
        tree = compile_template("{{{name}}}\nx")
        assert tree.children == (
            Interpolation(Fetch(("name",)), escaped=False),
            Static("\nx"),
        )

    def test_section_followed_by_text(self) -> None:
        tree = compile_template("  {{#a}} x{{/a}}\n")
        assert tree.children == (
            Static("  "),
            Section(Fetch(("a",)), Multi((Static(" x"),)), " x", ("{{", "}}")),
            Static("\n"),
        )

    def test_partial_followed_by_text(self) -> None:
        tree = compile_template("  {{>item}} x")
        assert tree.children == (Static("  "), Partial("item", "  "), Static(" x"))

    def test_inline_partial_has_no_padding(self) -> None:
        tree = compile_template("a {{>item}}\n")
        assert tree.children == (Static("a "), Partial("item", ""), Static("\n"))

    def test_trailing_whitespace_after_tag(self) -> None:
        tree = compile_template("{{!c}}  \nx")
        assert tree.children == (Static("  \nx"),)

    def test_whitespace_before_inline_tag_is_text(self) -> None:
        tree = compile_template("a\t{{name}}")
        assert tree.children == (Static("a\t"), Interpolation(Fetch(("name",))))

    def test_comment_inside_line(self) -> None:
        tree = compile_template("a {{! c }} b\n")
        assert tree.children == (Static("a "), Static(" b\n"))


class TestElisionIdempotence:
    """Output of an elision has nothing left to elide."""

    def test_recompiling_collapsed_text(self) -> None:
        first = compile_template("Begin.\n  {{! c }}\nEnd.\n")
        collapsed = "".join(node.text for node in first.children)
        assert collapsed == "Begin.\nEnd.\n"
        assert compile_template(collapsed).children == (Static(collapsed),)
