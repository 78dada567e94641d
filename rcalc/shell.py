"""Interactive calculator shell and the rcalc command line."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO, Tuple

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import FileHistory, InMemoryHistory
from pydantic import ValidationError

from .config import Settings, load_settings
from .errors import CalcError
from .evaluator import evaluate, format_result

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

GREEN = 'ansigreen'
YELLOW = 'ansiyellow'
BLUE = 'ansiblue'
WHITE = 'ansiwhite'
RED = 'ansired'


class Shell:
    """Read-Eval-Print Loop for the calculator.

    Lines are read through a prompt_toolkit session unless a read_line
    callable is given; it is called with the prompt string and may raise
    EOFError or KeyboardInterrupt just like input().
    """

    def __init__(self, settings: Optional[Settings] = None,
                 read_line: Optional[Callable[[str], str]] = None,
                 stream: Optional[TextIO] = None):
        self.settings = settings or Settings()
        self._read_line = read_line
        self._session: Optional[PromptSession] = None
        self.stream = stream

    def _prompt(self) -> str:
        if self._read_line is not None:
            return self._read_line(self.settings.prompt)
        if self._session is None:
            if self.settings.history_enabled:
                history = FileHistory(self.settings.history_file)
            else:
                history = InMemoryHistory()
            self._session = PromptSession(history=history)
        return self._session.prompt(self.settings.prompt)

    def _print(self, *fragments: Tuple[str, str]) -> None:
        print_formatted_text(FormattedText(list(fragments)), file=self.stream or sys.stdout)

    def banner(self) -> None:
        quit_command = self.settings.quit_command
        self._print((GREEN, "Welcome to the rcalc calculator!"))
        self._print((YELLOW, "Enter an expression using +, -, *, /, %, ** (power) and parentheses "
                             "(full-width （ ） brackets work too)"))
        self._print((YELLOW, f"Type '{quit_command}' to quit"))

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single expression. Returns (ok, output)."""
        try:
            value = evaluate(line, self.settings.precision)
        except CalcError as e:
            logger.info(f"Evaluation of {line!r} failed: {e.kind.value}")
            return False, str(e)
        return True, format_result(value)

    def run(self) -> None:
        self.banner()
        while True:
            try:
                line = self._prompt()
            except KeyboardInterrupt:
                self._print(('', "^C"))
                continue
            except EOFError:
                break
            line = line.strip()
            if line == self.settings.quit_command:
                break
            if not line:
                continue
            ok, out = self.evaluate_line(line)
            if ok:
                self._print((BLUE, "Result: "), (WHITE, out))
            else:
                self._print((RED, f"Error: {out}"))
        self._print((GREEN, "Goodbye!"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='rcalc', description="Decimal arithmetic calculator.")
    parser.add_argument(
        '-e', '--expression',
        type=str,
        help="Evaluate one expression, print the result and exit.",
    )
    parser.add_argument(
        '--no-history',
        action='store_true',
        help="Do not read or write the shell history file.",
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG'],
        help="Logging level (default: RCALC_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    updates = {}
    if args.no_history:
        updates['history_enabled'] = False
    if args.log_level:
        updates['log_level'] = args.log_level
    if updates:
        settings = settings.model_copy(update=updates)

    logging.basicConfig(level=settings.logging_level, format=LOG_FORMAT)

    if args.expression is not None:
        try:
            value = evaluate(args.expression, settings.precision)
        except CalcError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(format_result(value))
        return 0

    Shell(settings).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
