"""Bracket-aware splitting of a token into variant names and a base class.

A colon separates segments only outside ``(...)`` and ``[...]``, so arbitrary
values such as ``bg-[url(a:b)]`` or ``grid-cols-[1fr:2fr]`` stay intact.
"""

from __future__ import annotations

from variantcore.parser.errors import TokenSyntaxError

__all__ = ["split_token", "SEPARATOR"]

SEPARATOR = ":"

_OPENERS = {"(": ")", "[": "]"}
_CLOSERS = {")": "(", "]": "["}


def _segments(token: str) -> list[str]:
    """Split *token* at depth-zero separators, keeping empty segments."""
    segments: list[str] = []
    current: list[str] = []
    stack: list[str] = []

    for index, ch in enumerate(token):
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or stack[-1] != _CLOSERS[ch]:
                raise TokenSyntaxError(
                    token, f"unbalanced {ch!r} at position {index}"
                )
            stack.pop()
        elif ch == SEPARATOR and not stack:
            segments.append("".join(current))
            current = []
            continue
        current.append(ch)

    if stack:
        raise TokenSyntaxError(token, f"unclosed {stack[-1]!r}")
    segments.append("".join(current))
    return segments


def split_token(token: str) -> tuple[list[str], str]:
    """Split a token into ``(variant names, base class)``.

    The last segment is the base class; earlier segments are variant names in
    left-to-right order. Empty segments (leading, trailing or doubled colons)
    are rejected with :class:`TokenSyntaxError`.
    """
    if not token:
        raise TokenSyntaxError(token, "token is empty")

    segments = _segments(token)
    for position, segment in enumerate(segments):
        if segment:
            continue
        if position == 0:
            raise TokenSyntaxError(token, "leading separator")
        if position == len(segments) - 1:
            raise TokenSyntaxError(token, "trailing separator (missing base class)")
        raise TokenSyntaxError(token, "empty variant between separators")

    return segments[:-1], segments[-1]
