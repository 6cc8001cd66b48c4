import argparse
import logging
import sys
from pathlib import Path

from bsl.config import get_log_level, get_recursion_limit
from bsl.interpreter import Interpreter


def main_with_args(file: Path | None = None) -> None:
    logging.basicConfig(
        level=get_log_level(),
        format='%(name)s: %(message)s',
        stream=sys.stderr
    )
    if file is None:
        source = sys.stdin.read()
    else:
        source = file.read_text(encoding="utf-8")
    sys.stdout.write(Interpreter(recursion_limit=get_recursion_limit()).evaluate_and_print(source))


def main():
    parser = argparse.ArgumentParser(
        description="Evaluate a beginning student language program and print one line per form"
    )
    parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        help="Program to evaluate (reads standard input when omitted)",
    )
    args = parser.parse_args()
    main_with_args(**vars(args))


if __name__ == "__main__":
    main()
