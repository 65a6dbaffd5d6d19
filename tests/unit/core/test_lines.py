"""Tests for line matching helpers."""

import pytest

from screencap.core.lines import contains, extract_token, find_line, nth_token
from screencap.exceptions import (
    LineNotFoundError,
    ParseMismatchError,
    TokenNotFoundError,
)


class TestFindLine:
    """Tests for find_line function."""

    def test_returns_first_match(self):
        """The first matching line is returned."""
        line, _ = find_line(["a", "Width: 1", "Width: 2"], contains("Width:"))
        assert line == "Width: 1"

    def test_remaining_lines_are_unconsumed(self):
        """Lines after the match are left in the returned iterator."""
        _, remaining = find_line(iter(["a", "b", "c", "d"]), contains("b"))
        assert list(remaining) == ["c", "d"]

    def test_consumes_iterator_in_place(self):
        """The source iterator is advanced past the match."""
        source = iter(["x", "match", "y"])
        find_line(source, contains("match"))
        assert list(source) == ["y"]

    def test_no_match_raises(self):
        """Exhausting the lines without a match is a hard failure."""
        with pytest.raises(LineNotFoundError, match="Height:"):
            find_line(["Width: 1"], contains("Height:"))

    def test_empty_input_raises(self):
        """No lines at all raises LineNotFoundError."""
        with pytest.raises(LineNotFoundError):
            find_line([], lambda line: True)

    def test_accepts_plain_predicate(self):
        """Any callable works as a predicate."""
        line, _ = find_line(["short", "much longer"], lambda s: len(s) > 5)
        assert line == "much longer"


class TestNthToken:
    """Tests for nth_token function."""

    def test_extracts_token_after_trimming(self):
        """Leading whitespace and trailing newline are ignored."""
        assert nth_token("  Width: 1024\n", 1) == "1024"

    def test_first_token(self):
        """Index 0 is the first token."""
        assert nth_token("  Width: 1024\n", 0) == "Width:"

    def test_whitespace_runs_are_one_separator(self):
        """Runs of spaces and tabs separate tokens once."""
        assert nth_token("a \t  b    c", 2) == "c"

    def test_out_of_range_raises(self):
        """Requesting a token past the end fails."""
        with pytest.raises(TokenNotFoundError):
            nth_token("  Width: 1024\n", 5)

    def test_negative_index_raises(self):
        """Negative indexes are not accepted."""
        with pytest.raises(TokenNotFoundError):
            nth_token("Width: 1024", -1)


class TestExtractToken:
    """Tests for extract_token function."""

    def test_extracts_from_matching_line(self):
        """The token comes from the first matching line."""
        _, token = extract_token(
            ["Depth: 24", "  Width: 1024\n"], contains("Width:"), 1
        )
        assert token == "1024"

    def test_sequential_extraction(self):
        """Extraction can continue from the remaining lines."""
        lines = ["  Width: 1024", "  Height: 768"]
        remaining, width = extract_token(lines, contains("Width:"), 1)
        _, height = extract_token(remaining, contains("Height:"), 1)
        assert (width, height) == ("1024", "768")

    def test_earlier_lines_are_not_revisited(self):
        """A line before the previous match cannot be found again."""
        lines = ["  Height: 768", "  Width: 1024"]
        remaining, _ = extract_token(lines, contains("Width:"), 1)
        with pytest.raises(LineNotFoundError):
            extract_token(remaining, contains("Height:"), 1)

    def test_short_line_raises(self):
        """A matching line with too few tokens fails."""
        with pytest.raises(TokenNotFoundError):
            extract_token(["  Width: 1024\n"], contains("Width:"), 5)

    def test_errors_share_base_class(self):
        """Missing lines and tokens are both parse mismatches."""
        assert issubclass(LineNotFoundError, ParseMismatchError)
        assert issubclass(TokenNotFoundError, ParseMismatchError)
