"""Split text into tokens separated by spaces and tabs."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

_SEPARATORS = frozenset(" \t")
_TERMINATOR = "\0"


def is_space_char(c: str) -> bool:
    """Return True if ``c`` is a space or a tab."""
    return c in _SEPARATORS


def is_non_space_char(c: str) -> bool:
    """Return True if ``c`` is neither a separator nor a terminator."""
    return c not in _SEPARATORS and c not in ("", _TERMINATOR)


def _at_end(s: str, pos: int) -> bool:
    return pos >= len(s) or s[pos] == _TERMINATOR


def token_start(s: str, pos: int = 0) -> Optional[int]:
    """Return the index of the next token at or after ``pos``, or None if there is none."""
    while not _at_end(s, pos) and is_space_char(s[pos]):
        pos += 1
    return None if _at_end(s, pos) else pos


def token_terminator(s: str, pos: int = 0) -> int:
    """Return the index just past the token that starts at ``pos``."""
    while not _at_end(s, pos) and is_non_space_char(s[pos]):
        pos += 1
    return pos


def _spans(s: str):
    start = token_start(s)
    while start is not None:
        end = token_terminator(s, start)
        yield start, end
        start = token_start(s, end)


def count_tokens(s: str) -> int:
    """Count the tokens in ``s``."""
    return sum(1 for _ in _spans(s))


def tokenize(s: str) -> list[str]:
    """Return the tokens of ``s`` in order."""
    return [s[start:end] for start, end in _spans(s)]


def format_tokens(tokens: Iterable[str]) -> str:
    """Render tokens one per line with their index."""
    return "".join(f"token[{i}]: {token}\n" for i, token in enumerate(tokens))


def print_tokens(tokens: Iterable[str], file: Optional[TextIO] = None) -> None:
    """Write the rendered tokens to ``file`` (standard output by default)."""
    (file or sys.stdout).write(format_tokens(tokens))