"""CLI for passgen: prompt for or read the password parameters, then print a password."""

import argparse
import re
import sys
from typing import List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import generator_input, load_config
from .errors import PasswordGeneratorError
from .generator import GeneratorInput, new_generator
from .logging import get_logger, setup_logging

USAGE = (
    "Usage : {prog} <length> <minimum_number_of_digits> <minimum_number_of_symbols> "
    "<allow_uppercase:(false|true)> <allow_repeat:(false|true)>"
)
USAGE_NOTE = "allow_uppercase and allow_repeat are optional (default is true)"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)
log = get_logger()

Request = Tuple[int, int, int, bool, bool]


class UsageError(Exception):
    """Malformed input; the invocation stops with exit status 2."""


def parse_count(text: str, what: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise UsageError(f"invalid {what}: {text!r} is not an integer")
    value = int(text)
    if value < 0:
        raise UsageError(f"invalid {what}: must be >= 0, got {value}")
    return value


def parse_bool(text: str, what: str) -> bool:
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise UsageError(f"invalid {what}: {text!r} is not a boolean (true/false)")


def _prompt(label: str) -> str:
    try:
        return input(label)
    except EOFError:
        raise UsageError("unexpected end of input") from None


def read_interactive() -> Request:
    length = parse_count(_prompt("Length of the password : "), "length")
    digits = parse_count(_prompt("Total number of digits : "), "number of digits")
    symbols = parse_count(_prompt("Total number of symbols : "), "number of symbols")
    upper = parse_bool(_prompt("Activate the uppercase (false for NO, true for YES) : "), "uppercase flag")
    repeat = parse_bool(_prompt("Activate the character repeat (false for NO, true for YES) : "), "repeat flag")
    return length, digits, symbols, upper, repeat


def read_positional(values: Sequence[str]) -> Request:
    """Three values (length, digits, symbols) or five (plus uppercase and repeat flags)."""
    if len(values) not in (3, 5):
        raise UsageError(f"expected 3 or 5 arguments, got {len(values)}")
    length = parse_count(values[0], "length")
    digits = parse_count(values[1], "number of digits")
    symbols = parse_count(values[2], "number of symbols")
    upper, repeat = True, True
    if len(values) == 5:
        upper = parse_bool(values[3], "uppercase flag")
        repeat = parse_bool(values[4], "repeat flag")
    return length, digits, symbols, upper, repeat


def _pools(args: argparse.Namespace, cfg: dict) -> GeneratorInput:
    base = generator_input(cfg)
    return GeneratorInput(
        lower_letters=base.lower_letters if args.lower_letters is None else args.lower_letters,
        upper_letters=base.upper_letters if args.upper_letters is None else args.upper_letters,
        digits=base.digits if args.digit_chars is None else args.digit_chars,
        symbols=base.symbols if args.symbol_chars is None else args.symbol_chars,
    )


def _print_passwords(passwords: List[str]) -> None:
    # passwords may contain [ ] and : so never let rich interpret them
    if len(passwords) == 1:
        console.print(passwords[0], markup=False, highlight=False, emoji=False)
        return
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", width=4)
    table.add_column("Password", no_wrap=True)
    for i, pw in enumerate(passwords, start=1):
        table.add_row(str(i), Text(pw))
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate a random password. Without arguments, prompts for each parameter.",
        epilog=USAGE_NOTE,
    )
    parser.add_argument("values", nargs="*", metavar="ARG",
                        help="<length> <digits> <symbols> [<allow_uppercase> <allow_repeat>]")
    parser.add_argument("--lower-letters", help="Lowercase pool (empty for default)")
    parser.add_argument("--upper-letters", help="Uppercase pool (empty for default)")
    parser.add_argument("--digit-chars", help="Digit pool (empty for default)")
    parser.add_argument("--symbol-chars", help="Symbol pool (empty for default)")
    parser.add_argument("-n", "--count", type=int, default=None, help="How many passwords to generate")
    parser.add_argument("--config", type=str, default=None, help="Path to settings file")
    parser.add_argument("--no-pause", action="store_true", help="Do not wait for ENTER after interactive mode")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-file", default=None)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)
    cfg = load_config(args.config)

    interactive = not args.values
    count = args.count if args.count is not None else cfg["count"]
    try:
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise UsageError(f"count must be >= 1, got {count!r}")
        if interactive:
            request = read_interactive()
        else:
            if len(args.values) not in (3, 5):
                console.print(USAGE.format(prog=parser.prog), markup=False, highlight=False)
                console.print(USAGE_NOTE, markup=False, highlight=False)
                return 2
            request = read_positional(args.values)
    except UsageError as e:
        err_console.print(Text(f"{parser.prog}: error: {e}", style="red"))
        return 2

    gen = new_generator(_pools(args, cfg))
    try:
        passwords = [gen.generate(*request) for _ in range(count)]
    except PasswordGeneratorError as e:
        log.debug("generation failed: %s", type(e).__name__)
        console.print(Text(str(e)))
        return 1

    _print_passwords(passwords)
    if interactive and not args.no_pause and cfg.get("pause_on_exit", True):
        try:
            input("Please press ENTER to quit the program ...")
        except EOFError:
            # stdin already closed; nothing to wait for
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
