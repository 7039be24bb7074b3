"""Unit tests for AnnotatedText.

AnnotatedText is text plus an ordered list of links, combined by
concatenation with the empty value as identity.
"""

import pytest

from wikiparsec.annotated_text import (
    EMPTY,
    AnnotatedText,
    annotate,
    concat,
    from_text,
    get_annotations,
    get_text,
    join,
    map_text,
)
from wikiparsec.parsers import Link

LINK_TEST = Link("", "test", "")
LINK_EXAMPLE = Link("en", "example", "English")
AT1 = annotate([LINK_TEST], "test")
AT2 = annotate([LINK_EXAMPLE], "example")


class TestAccessors:
    """Tests for reading text and annotations."""

    @pytest.mark.unit
    def test_get_text(self) -> None:
        assert get_text(AT1) == "test"

    @pytest.mark.unit
    def test_get_text_empty(self) -> None:
        assert get_text(EMPTY) == ""

    @pytest.mark.unit
    def test_get_annotations(self) -> None:
        assert get_annotations(AT1) == (LINK_TEST,)

    @pytest.mark.unit
    def test_get_annotations_empty(self) -> None:
        assert get_annotations(EMPTY) == ()

    @pytest.mark.unit
    def test_plain_text_has_no_annotations(self) -> None:
        assert get_annotations(from_text("literal")) == ()

    @pytest.mark.unit
    def test_annotations_list_is_stored_as_tuple(self) -> None:
        assert AnnotatedText("x", [LINK_TEST]) == AnnotatedText("x", (LINK_TEST,))


class TestConcat:
    """Tests for concatenation."""

    @pytest.mark.unit
    def test_concat_none(self) -> None:
        assert concat([]) == EMPTY
        assert concat([]) == AnnotatedText("", ())

    @pytest.mark.unit
    def test_concat_one(self) -> None:
        assert concat([AT1]) == AT1

    @pytest.mark.unit
    def test_concat_two(self) -> None:
        assert concat([AT1, AT2]) == annotate([LINK_TEST, LINK_EXAMPLE], "testexample")

    @pytest.mark.unit
    def test_identity(self) -> None:
        assert EMPTY + AT1 == AT1
        assert AT1 + EMPTY == AT1

    @pytest.mark.unit
    def test_strings_combine_as_plain_text(self) -> None:
        assert AT1 + "!" == annotate([LINK_TEST], "test!")
        assert "a " + AT1 == annotate([LINK_TEST], "a test")

    @pytest.mark.unit
    def test_duplicate_annotations_kept(self) -> None:
        assert concat([AT1, AT1]).annotations == (LINK_TEST, LINK_TEST)

    @pytest.mark.unit
    def test_other_types_rejected(self) -> None:
        with pytest.raises(TypeError):
            AT1 + 3  # type: ignore[operator]


class TestJoin:
    """Tests for line joining; every item ends with a newline."""

    @pytest.mark.unit
    def test_join_none(self) -> None:
        assert join([]) == EMPTY

    @pytest.mark.unit
    def test_join_one(self) -> None:
        assert join([AT1]) == AT1 + from_text("\n")

    @pytest.mark.unit
    def test_join_two(self) -> None:
        assert join([AT1, AT2]) == annotate(
            [LINK_TEST, LINK_EXAMPLE], "test\nexample\n"
        )

    @pytest.mark.unit
    def test_join_matches_concat(self) -> None:
        assert join([AT1, AT2]) == concat([AT1, "\n", AT2, "\n"])


class TestMapText:
    """Tests for text-only transformation."""

    @pytest.mark.unit
    def test_map_text(self) -> None:
        assert map_text(str.upper, AT2) == annotate([LINK_EXAMPLE], "EXAMPLE")

    @pytest.mark.unit
    def test_map_text_keeps_annotations(self) -> None:
        joined = concat([AT1, AT2])
        assert map_text(lambda text: text[::-1], joined).annotations == joined.annotations
