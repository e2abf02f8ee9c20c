"""Tests for call arguments inside interpolation tags."""

import pytest

from whisker import compile_template
from whisker.nodes import Fetch, HashArgs, Interpolation, Number, Static


def _tag(source: str) -> Interpolation:
    (node,) = compile_template(source).children
    assert isinstance(node, Interpolation)
    return node


class TestPositionalArguments:
    """Quoted literals, numerals and paths."""

    def test_no_arguments(self) -> None:
        assert _tag("{{ name }}") == Interpolation(Fetch(("name",)))

    def test_path_argument(self) -> None:
        assert _tag("{{foo bar}}").args == (Fetch(("bar",)),)

    def test_dotted_path_argument(self) -> None:
        assert _tag("{{foo a.b}}").args == (Fetch(("a", "b")),)

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ('{{foo "bar baz"}}', "bar baz"),
            ("{{foo 'bar baz'}}", "bar baz"),
            ('{{foo ""}}', ""),
        ],
    )
    def test_quoted_argument(self, source: str, expected: str) -> None:
        assert _tag(source).args[0] == Static(expected)

    def test_numbers(self) -> None:
        assert _tag("{{foo 10 2.5}}").args == (Number("10"), Number("2.5"))

    def test_number_prefix_is_a_path(self) -> None:
        assert _tag("{{foo 1st}}").args == (Fetch(("1st",)),)

    def test_comma_separated(self) -> None:
        assert _tag("{{foo 'bar baz', quux, 3}}").args == (
            Static("bar baz"),
            Fetch(("quux",)),
            Number("3"),
        )

    def test_argument_order_preserved(self) -> None:
        args = _tag("{{f c b a 'z' 1}}").args
        assert args == (
            Fetch(("c",)),
            Fetch(("b",)),
            Fetch(("a",)),
            Static("z"),
            Number("1"),
        )

    def test_unescaped_call(self) -> None:
        assert _tag("{{{foo bar}}}") == Interpolation(
            Fetch(("foo",)), (Fetch(("bar",)),), escaped=False
        )

    def test_ampersand_call(self) -> None:
        assert _tag("{{& foo 'x' }}") == Interpolation(
            Fetch(("foo",)), (Static("x"),), escaped=False
        )


class TestKeywordArguments:
    """key=value pairs collect into one trailing HashArgs."""

    def test_single_pair(self) -> None:
        assert _tag("{{f n=1}}").args == (HashArgs((("n", Number("1")),)),)

    def test_value_classification(self) -> None:
        args = _tag("{{f a=b.c n=1.5 s='x y' d=\"q\"}}").args
        assert args == (
            HashArgs(
                (
                    ("a", Fetch(("b", "c"))),
                    ("n", Number("1.5")),
                    ("s", Static("x y")),
                    ("d", Static("q")),
                )
            ),
        )

    def test_value_ending_in_digit_is_a_number(self) -> None:
        assert _tag("{{f v=abc1}}").args == (HashArgs((("v", Number("abc1")),)),)

    def test_positional_then_keyword(self) -> None:
        node = _tag('{{truncate "some text" length=10 ellipsis="..."}}')
        assert node.args == (
            Static("some text"),
            HashArgs((("length", Number("10")), ("ellipsis", Static("...")))),
        )

    def test_pairs_keep_source_order(self) -> None:
        (hash_args,) = _tag("{{f z=1 a=2 m=3}}").args
        assert hash_args.keys() == ("z", "a", "m")

    def test_pair_before_close_without_space(self) -> None:
        assert _tag("{{f x=y}}").args == (HashArgs((("x", Fetch(("y",))),)),)

    def test_pairs_in_triple_mustache(self) -> None:
        node = _tag("{{{f x=1}}}")
        assert node.escaped is False
        assert node.args == (HashArgs((("x", Number("1")),)),)
