"""Interactive prompt that tokenizes each line and keeps a history."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence, TextIO

from .history import History
from .tokenizer import print_tokens, tokenize

_MAX_LINE = 223
_EXIT_WORDS = frozenset({"exit", "quit"})
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def run(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """Run the prompt loop until end of input or an exit word."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    history = History()
    next_id = 1

    while True:
        stdout.write("$ ")
        stdout.flush()
        raw = stdin.readline(_MAX_LINE)
        if not raw:
            break
        line = raw.split("\n", 1)[0]

        if line in _EXIT_WORDS:
            break

        if len(line) > 1 and line[0] == "!":
            item = history.recall(_leading_int(line[1:]))
            if item is None:
                stdout.write("No history item found\n")
                continue
            stdout.write("%s")
            line = item.text[:_MAX_LINE]
            if line.startswith("history"):
                history.print(stdout)
                continue

        history.add(next_id, line)
        next_id += 1
        print_tokens(tokenize(line), file=stdout)

    history.clear()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the prompt on standard input and output."""
    return run(sys.stdin, sys.stdout)