"""Line matching helpers for scraping external tool output.

Tools like xdpyinfo and xwininfo print free-form text. These helpers walk a
line iterator to the first line matching a predicate and pull
whitespace-delimited tokens out of it. A missing line or token is a hard
failure: it means the tool's output format is not the one we understand.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from screencap.exceptions import LineNotFoundError, TokenNotFoundError

LinePredicate = Callable[[str], bool]


def contains(text: str) -> LinePredicate:
    """Build a predicate matching lines that contain text."""

    def predicate(line: str) -> bool:
        return text in line

    predicate.__name__ = f"contains({text!r})"
    return predicate


def _describe(predicate: LinePredicate) -> str:
    return getattr(predicate, "__name__", repr(predicate))


def find_line(
    lines: Iterable[str], predicate: LinePredicate
) -> tuple[str, Iterator[str]]:
    """Consume lines up to and including the first one matching predicate.

    Args:
        lines: Line source. Iterators are consumed in place.
        predicate: Test applied to each line.

    Returns:
        Tuple of (matched line, iterator over the remaining lines).

    Raises:
        LineNotFoundError: If no line matches.
    """
    remaining = iter(lines)
    for line in remaining:
        if predicate(line):
            return line, remaining
    raise LineNotFoundError(_describe(predicate))


def nth_token(line: str, index: int) -> str:
    """Get the index-th (zero based) whitespace-delimited token of a line.

    Raises:
        TokenNotFoundError: If the line has fewer than index + 1 tokens.
    """
    tokens = line.split()
    if index < 0 or index >= len(tokens):
        raise TokenNotFoundError(index, line)
    return tokens[index]


def extract_token(
    lines: Iterable[str], predicate: LinePredicate, index: int
) -> tuple[Iterator[str], str]:
    """Find the first line matching predicate and return one of its tokens.

    Args:
        lines: Line source. Iterators are consumed in place.
        predicate: Test applied to each line.
        index: Zero-based token index within the matched line.

    Returns:
        Tuple of (iterator over the remaining lines, token).

    Raises:
        LineNotFoundError: If no line matches.
        TokenNotFoundError: If the matched line is too short.
    """
    line, remaining = find_line(lines, predicate)
    return remaining, nth_token(line, index)
