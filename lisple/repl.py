"""Interactive read-eval-print loop.

Input lines are buffered until every opened parenthesis is closed, then each
complete expression is evaluated and its rendering printed.
"""

from __future__ import annotations

import logging
import sys
from contextlib import redirect_stdout
from typing import TextIO

from lisple.config import get_prompt
from lisple.errors import LispleError, ParseError
from lisple.interpreter import Interpreter
from lisple.reader.parser import lex

logger = logging.getLogger(__name__)


def is_complete(source: str) -> bool:
    """True once `source` holds balanced parentheses and no dangling quote."""
    depth = 0
    last = None
    for tok_type, _ in lex(source):
        if tok_type == "lparen":
            depth += 1
        elif tok_type == "rparen":
            depth -= 1
            if depth < 0:
                # let the reader report the stray ')'
                return True
        last = tok_type
    return depth == 0 and last != "quote"


class Repl:
    def __init__(
        self,
        interpreter: Interpreter | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        prompt: str | None = None,
    ):
        self.interpreter = interpreter or Interpreter()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.prompt = get_prompt() if prompt is None else prompt

    def run_source(self, source: str) -> None:
        """Evaluate a complete chunk, printing each result; errors are reported, not raised."""
        try:
            # display writes to sys.stdout; keep it on the session stream
            with redirect_stdout(self.stdout):
                for value in self.interpreter.eval_all(source):
                    self.stdout.write(self.interpreter.show(value) + "\n")
        except (LispleError, RecursionError) as e:
            logger.error("Evaluation failed: %s", e)
            self.stderr.write(f"error: {e}\n")
        self.stdout.flush()

    def run(self) -> int:
        """Run until end of input; returns the exit status."""
        buffer = ""
        try:
            while True:
                self.stdout.write(self.prompt if not buffer else "")
                self.stdout.flush()
                line = self.stdin.readline()
                if not line:
                    break
                buffer += line
                if not buffer.strip():
                    buffer = ""
                    continue
                if not is_complete(buffer):
                    continue
                source, buffer = buffer, ""
                self.run_source(source)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 0
        if buffer.strip():
            self.stderr.write(f"error: {ParseError('Unmatched (')}\n")
            return 1
        return 0
