"""Tests for ``${...}`` micro-expression evaluation.

Covers ternaries (flat, nested, parenthesized), comparisons, logical
operators, the ``.trim()`` test, and graceful degradation of malformed
input.
"""

from __future__ import annotations

import pytest

from nodeplate import evaluate, evaluate_condition, substitute


class TestTernary:
    """Ternary selection through full placeholder substitution."""

    @pytest.mark.parametrize(("a", "expected"), [(True, "x"), (False, "y")])
    def test_simple(self, a, expected):
        assert substitute("${{{a}} ? 'x' : 'y'}", {"a": a}) == expected

    @pytest.mark.parametrize(
        ("props", "expected"),
        [
            ({"a": True, "b": True}, "x"),
            ({"a": True, "b": False}, "y"),
            ({"a": False, "b": True}, "z"),
            ({"a": False, "b": False}, "z"),
        ],
    )
    def test_parenthesized_nested(self, props, expected):
        assert substitute("${{{a}} ? ({{b}} ? 'x' : 'y') : 'z'}", props) == expected

    @pytest.mark.parametrize(
        ("props", "expected"),
        [
            ({"hasIcon": True, "iconPosition": "left"}, "flex"),
            ({"hasIcon": True, "iconPosition": "right"}, "none"),
            ({"hasIcon": False, "iconPosition": "left"}, "none"),
        ],
    )
    def test_comparison_inside_parentheses(self, props, expected):
        template = (
            "${{{hasIcon}} === true ? ({{iconPosition}} === 'left' ? 'flex' : 'none') : 'none'}"
        )
        assert substitute(template, props) == expected

    def test_nested_without_parentheses(self):
        template = "${{{hasIcon}} === true ? {{iconPosition}} === 'left' ? 'flex' : 'none' : 'none'}"
        assert substitute(template, {"hasIcon": True, "iconPosition": "left"}) == "flex"

    @pytest.mark.parametrize(
        ("props", "expected"),
        [
            ({"a": True, "b": True, "c": True}, "deep"),
            ({"a": True, "b": True, "c": False}, "mid"),
            ({"a": True, "b": False, "c": True}, "shallow"),
            ({"a": False, "b": True, "c": True}, "none"),
        ],
    )
    def test_three_levels(self, props, expected):
        template = "${{{a}} ? ({{b}} ? ({{c}} ? 'deep' : 'mid') : 'shallow') : 'none'}"
        assert substitute(template, props) == expected

    @pytest.mark.parametrize(
        ("props", "expected"),
        [
            ({"flag": True, "x": True, "y": False}, "a"),
            ({"flag": True, "x": False, "y": False}, "b"),
            ({"flag": False, "x": False, "y": True}, "c"),
            ({"flag": False, "x": True, "y": False}, "d"),
        ],
    )
    def test_both_branches_parenthesized(self, props, expected):
        template = "${{{flag}} ? ({{x}} ? 'a' : 'b') : ({{y}} ? 'c' : 'd')}"
        assert substitute(template, props) == expected

    def test_chained_on_false_branch(self):
        expr = "'b' === 'a' ? 'first' : 'b' === 'b' ? 'second' : 'third'"
        assert evaluate(expr) == "second"


class TestTrim:
    """'text'.trim() is true only for text with non-whitespace characters."""

    def test_blank_is_false(self):
        assert substitute("${'  '.trim() ? 'shown' : 'hidden'}", {}) == "hidden"

    def test_text_is_true(self):
        assert substitute("${'hi'.trim() ? 'shown' : 'hidden'}", {}) == "shown"

    @pytest.mark.parametrize(("label", "expected"), [("Name", "block"), ("   ", "none"), ("", "none")])
    def test_placeholder_inside_quotes(self, label, expected):
        """A string placeholder inside quotes is unquoted once more."""
        template = "${'{{label}}'.trim() ? 'block' : 'none'}"
        assert substitute(template, {"label": label}) == expected

    def test_bare_placeholder(self):
        assert substitute("${{{label}}.trim() ? 'block' : 'none'}", {"label": " x "}) == "block"


class TestComparison:
    @pytest.mark.parametrize(("kind", "expected"), [("success", "A"), ("error", "B")])
    def test_strict_equality(self, kind, expected):
        assert substitute("${{{type}} === 'success' ? 'A' : 'B'}", {"type": kind}) == expected

    def test_loose_equality(self):
        assert evaluate("'a' == \"a\" ? 'same' : 'different'") == "same"

    @pytest.mark.parametrize(
        ("expr", "expected"),
        [
            ("'a' !== 'b' ? 'yes' : 'no'", "yes"),
            ("'a' !== 'a' ? 'yes' : 'no'", "no"),
            ("'a' != 'b' ? 'yes' : 'no'", "yes"),
            ("'a' != 'a' ? 'yes' : 'no'", "no"),
        ],
    )
    def test_inequality(self, expr, expected):
        assert evaluate(expr) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ('say "hi"', "eq"),
            ("back\\slash", "ne"),
            ("tab\there", "ne"),
        ],
    )
    def test_quoted_placeholder_with_escapes(self, value, expected):
        """String values needing JSON escapes still unquote inside '...'."""
        template = "${'{{t}}' === 'say \"hi\"' ? 'eq' : 'ne'}"
        assert substitute(template, {"t": value}) == expected

    def test_quoted_placeholder_with_backslash(self):
        template = "${'{{path}}' === 'C:\\\\temp' ? 'eq' : 'ne'}"
        assert substitute(template, {"path": "C:\\temp"}) == "eq"

    def test_direction_placeholder_in_quotes(self):
        template = "${'{{direction}}' === 'horizontal' ? 'row' : 'column'}"
        assert substitute(template, {"direction": "horizontal"}) == "row"
        assert substitute(template, {"direction": "vertical"}) == "column"

    def test_operators_inside_strings_are_text(self):
        assert evaluate("'a === b' === 'a === b' ? 'eq' : 'ne'") == "eq"

    def test_numbers_compare_as_text(self):
        assert substitute("${{{n}} === 3 ? 'three' : 'other'}", {"n": 3}) == "three"


class TestLogical:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [(True, True, "both"), (True, False, "not both"), (False, True, "not both")],
    )
    def test_and(self, a, b, expected):
        assert substitute("${({{a}} && {{b}}) ? 'both' : 'not both'}", {"a": a, "b": b}) == expected

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [(False, True, "at least one"), (True, False, "at least one"), (False, False, "none")],
    )
    def test_or(self, a, b, expected):
        template = "${({{a}} || {{b}}) ? 'at least one' : 'none'}"
        assert substitute(template, {"a": a, "b": b}) == expected

    def test_and_binds_before_or(self):
        """a && b || c splits at && first: a && (b || c)."""
        assert evaluate_condition("false && false || true") is False
        assert evaluate_condition("true && false || true") is True

    def test_grouped_operands(self):
        assert evaluate_condition("('a' === 'a' || false) && 'x' !== 'y'") is True


class TestConditionTruthiness:
    @pytest.mark.parametrize(
        ("expr", "expected"),
        [
            ("true", True),
            ("false", False),
            ("null", False),
            ("''", False),
            ("'false'", False),
            ("'text'", True),
            ("0", True),
            ("[]", True),
            ("", False),
        ],
    )
    def test_fallback(self, expr, expected):
        assert evaluate_condition(expr) is expected


class TestLiteralPassthrough:
    def test_quoted_literal_is_unquoted(self):
        assert evaluate("'plain'") == "plain"

    def test_double_quoted_literal(self):
        assert evaluate('"plain"') == "plain"

    def test_bare_text_verbatim(self):
        assert evaluate("  some words  ") == "some words"

    def test_parentheses_in_string_branch(self):
        assert substitute("${{{flag}} ? 'value (with parens)' : 'other'}", {"flag": True}) == (
            "value (with parens)"
        )

    def test_parenthesis_inside_quoted_text(self):
        assert evaluate("'a (b'") == "a (b"

    def test_colon_in_string_branch(self):
        assert evaluate("true ? 'a:b' : 'c'") == "a:b"

    def test_placeholder_branch_is_unquoted(self):
        assert substitute("${{{on}} ? {{label}} : ''}", {"on": True, "label": "Go"}) == "Go"


class TestDegradation:
    """Malformed expressions return literal text and never raise."""

    def test_apostrophe_in_single_quoted_placeholder(self):
        """The substituted value closes the quote early; the block degrades."""
        template = "${'{{title}}'.trim() ? 'block' : 'none'}"
        assert substitute(template, {"title": "Don't panic"}) == (
            "\"Don't panic\"'.trim() ? 'block' : 'none"
        )

    def test_apostrophe_with_bare_placeholder(self):
        template = "${{{title}}.trim() ? 'block' : 'none'}"
        assert substitute(template, {"title": "Don't panic"}) == "block"

    def test_question_without_colon(self):
        assert evaluate("true ? 'x'") == "true ? 'x'"

    def test_unterminated_string(self):
        assert evaluate("'oops") == "'oops"

    def test_unterminated_quoted_whole(self):
        assert evaluate("true ? 'x : 'y'") == "true ? 'x : 'y'"

    def test_unbalanced_parenthesis(self):
        assert evaluate("(true ? 'x' : 'y'") == "(true ? 'x' : 'y'"

    def test_extra_closing_parenthesis(self):
        assert evaluate("true) ? 'x' : 'y'") == "true) ? 'x' : 'y'"

    def test_malformed_condition(self):
        assert evaluate_condition("('x'") is True

    def test_degradation_is_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="nodeplate.expressions.evaluator"):
            evaluate("(oops")
        assert "Degrading malformed expression" in caplog.text
