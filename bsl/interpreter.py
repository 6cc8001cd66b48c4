"""Pipeline orchestration: source text in, display text out."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

from bsl.config import DEFAULT_RECURSION_LIMIT, get_check_success_marker, get_recursion_limit
from bsl.errors import BslConfigError
from bsl.evaluation.evaluator import RESOURCE_MESSAGE, evaluate
from bsl.parser.parser import parse
from bsl.printer import print_results
from bsl.reader.reader import read
from bsl.reader.tokenizer import tokenize

logger = logging.getLogger(__name__)


@contextmanager
def raised_recursion_limit(limit: int) -> Iterator[None]:
    """Raise Python's recursion limit to at least `limit` for the block."""
    previous = sys.getrecursionlimit()
    if limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def _recursion_limit_from_env() -> int:
    try:
        return get_recursion_limit()
    except BslConfigError as e:
        logger.warning("%s; using %d", e, DEFAULT_RECURSION_LIMIT)
        return DEFAULT_RECURSION_LIMIT


class Interpreter:
    """
    Composes tokenizer, reader, parser, evaluator and printer.
    Holds configuration only: every call starts from a fresh environment.
    A bad BSL_RECURSION_LIMIT is logged and replaced by the default.
    """

    def __init__(self, recursion_limit: Optional[int] = None, success_marker: Optional[str] = None):
        self.recursion_limit: int = recursion_limit or _recursion_limit_from_env()
        self.success_marker: str = (
            success_marker if success_marker is not None else get_check_success_marker()
        )

    def run(self, source: str) -> list:
        """One result per top-level form of `source`."""
        tokens = tokenize(source)
        sexps = read(tokens)
        forms = parse(sexps)
        return evaluate(forms)

    def evaluate_and_print(self, source: str) -> str:
        with raised_recursion_limit(self.recursion_limit):
            try:
                return print_results(self.run(source), self.success_marker)
            except RecursionError:
                # nesting too deep to parse or print; evaluation guards each form itself
                logger.warning("recursion limit reached outside evaluation (%d characters)", len(source))
                return RESOURCE_MESSAGE + "\n"


def evaluate_and_print(source: str) -> str:
    """Run the whole pipeline over `source` and return the display text.

    Never raises for any student program.
    """
    return Interpreter().evaluate_and_print(source)
