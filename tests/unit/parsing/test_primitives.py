"""Unit tests for the backtracking combinator primitives.

Covers literal matching, priority choice, comment/tag skipping and the
small helper combinators the grammar is built from.
"""

import pytest

from wikiparsec.parsers import run
from wikiparsec.parsers.primitives import (
    Fail,
    Ok,
    State,
    furthest,
    ignored_span,
    literal,
    lookahead,
    many1,
    not_followed_by,
    one_of,
    optional,
    priority_choice,
)


class TestLiteral:
    """Tests for atomic multi-character literals."""

    @pytest.mark.unit
    def test_matches_whole_literal(self) -> None:
        """Should consume exactly the literal."""
        result = literal("{{")(State("{{t}}"))
        assert isinstance(result, Ok)
        assert result.value == "{{"
        assert result.state.pos == 2

    @pytest.mark.unit
    def test_partial_match_consumes_nothing(self) -> None:
        """A prefix of the literal is a clean failure at the start position."""
        result = literal("{{")(State("{x"))
        assert result == Fail(0, "'{{'")

    @pytest.mark.unit
    def test_matches_at_offset(self) -> None:
        """Should match relative to the current position."""
        result = literal("]]")(State("[[a]]", 3))
        assert isinstance(result, Ok)
        assert result.state.pos == 5


class TestPriorityChoice:
    """Tests for repeated, priority-ordered alternation."""

    @pytest.mark.unit
    def test_zero_repetitions_is_empty_success(self) -> None:
        """Should succeed with "" when nothing matches."""
        result = priority_choice([literal("a")])(State("bbb"))
        assert isinstance(result, Ok)
        assert result.value == ""
        assert result.state.pos == 0

    @pytest.mark.unit
    def test_concatenates_repeated_matches(self) -> None:
        """Should keep applying rules and join their outputs."""
        result = priority_choice([literal("ab"), literal("a")])(State("abaab"))
        assert isinstance(result, Ok)
        assert result.value == "abaab"
        assert result.state.pos == 5

    @pytest.mark.unit
    def test_first_listed_rule_wins(self) -> None:
        """An earlier rule is used even when a later one would match more."""
        result = priority_choice([literal("a"), literal("ab")])(State("ab"))
        assert isinstance(result, Ok)
        assert result.value == "a"
        assert result.state.pos == 1

    @pytest.mark.unit
    def test_empty_match_does_not_loop(self) -> None:
        """A rule that matches without consuming counts as no match."""
        result = priority_choice([optional(literal("x"), "")])(State("abc"))
        assert isinstance(result, Ok)
        assert result.state.pos == 0
        assert result.failure is None

    @pytest.mark.unit
    def test_keeps_failure_of_final_round(self) -> None:
        """The result says what every candidate expected where repetition stopped."""
        result = priority_choice([literal("ab"), literal("ac")])(State("aba"))
        assert isinstance(result, Ok)
        assert result.value == "ab"
        assert result.failure == Fail(2, "'ab' or 'ac'")


class TestIgnoredSpan:
    """Tests for HTML comment and tag elimination."""

    @pytest.mark.unit
    def test_comment_and_tag_yield_empty_text(self) -> None:
        """Consecutive comments and tags are skipped together."""
        assert run(ignored_span, "<!-- note --><br/><ref>") == ""

    @pytest.mark.unit
    def test_comment_is_non_greedy(self) -> None:
        """A comment ends at the first -->."""
        result = ignored_span(State("<!-- a -->b-->"))
        assert isinstance(result, Ok)
        assert result.state.pos == 10

    @pytest.mark.unit
    def test_comment_may_span_lines(self) -> None:
        """Comments are not limited to one line."""
        assert run(ignored_span, "<!--\nhidden\n-->") == ""

    @pytest.mark.unit
    def test_requires_at_least_one_span(self) -> None:
        """Plain text is not an ignored span."""
        assert isinstance(ignored_span(State("text")), Fail)

    @pytest.mark.unit
    def test_unterminated_comment_fails(self) -> None:
        """An unterminated comment is not skipped."""
        assert isinstance(ignored_span(State("<!-- open")), Fail)


class TestHelperCombinators:
    """Tests for optional, lookahead, many1, one_of and not_followed_by."""

    @pytest.mark.unit
    def test_optional_returns_default(self) -> None:
        result = optional(literal("x"), "none")(State("y"))
        assert isinstance(result, Ok)
        assert result.value == "none"
        assert result.state.pos == 0

    @pytest.mark.unit
    def test_lookahead_does_not_consume(self) -> None:
        result = lookahead(literal("**"))(State("** a"))
        assert isinstance(result, Ok)
        assert result.state.pos == 0

    @pytest.mark.unit
    def test_many1_requires_one_match(self) -> None:
        assert isinstance(many1(literal("a"))(State("b")), Fail)
        result = many1(literal("a"))(State("aab"))
        assert isinstance(result, Ok)
        assert result.value == ["a", "a"]

    @pytest.mark.unit
    def test_not_followed_by(self) -> None:
        assert isinstance(not_followed_by(literal("["), "no bracket")(State("[")), Fail)
        assert isinstance(not_followed_by(literal("["), "no bracket")(State("a")), Ok)

    @pytest.mark.unit
    def test_one_of_reports_furthest_failure(self) -> None:
        """Failures from alternatives are merged at the furthest position."""
        rule = one_of(literal("ab"), literal("cd"))
        assert rule(State("xy")) == Fail(0, "'ab' or 'cd'")

    @pytest.mark.unit
    def test_furthest_keeps_later_position(self) -> None:
        merged = furthest([Fail(1, "text"), Fail(3, "'|'"), Fail(3, "'}}'")])
        assert merged == Fail(3, "'|' or '}}'")
