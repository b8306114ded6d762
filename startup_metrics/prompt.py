"""Console chooser used to disambiguate the start time interactively."""

import sys
from functools import partial
from typing import Sequence, TextIO


class ConsolePrompt:
    """Callable ``choose(candidates) -> candidate`` backed by a numbered menu.

    The menu goes to stderr so stdout keeps only the tool's results.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stderr

    def for_component(self, name: str):
        """Chooser that asks ``Which <name>?`` before listing the candidates."""
        return partial(self, name=name)

    def __call__(self, candidates: Sequence, name: str | None = None):
        if name:
            print(f"Which {name}?", file=self._out)
        for i, value in enumerate(candidates, start=1):
            print(f"  {i}) {value}", file=self._out)
        while True:
            print(f"Select [1-{len(candidates)}]: ", end="", file=self._out, flush=True)
            answer = self._in.readline()
            if not answer:
                raise EOFError("no selection made")
            answer = answer.strip()
            if answer.isdigit() and 1 <= int(answer) <= len(candidates):
                return candidates[int(answer) - 1]
            print(f"Invalid choice: {answer!r}", file=self._out)
