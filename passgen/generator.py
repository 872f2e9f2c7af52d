"""
passgen.generator
Secure password generator with configurable character pools.

A password is filled in three phases (letters, then digits, then symbols).
Every drawn character is inserted at a random position of the partial result,
so the final string carries no positional bias between the classes.
"""

from dataclasses import dataclass
from typing import Optional, Type

from .entropy import random_element, random_insert
from .errors import (
    DigitsExceedAvailableError,
    ExceedsTotalLengthError,
    LettersExceedAvailableError,
    PasswordGeneratorError,
    SymbolsExceedAvailableError,
)
from .logging import get_logger

LOWER_LETTERS = "abcdefghijklmnopqrstuvwxyz"
UPPER_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
SYMBOLS = "~!@#$%^&*()_+`-={}|[]\\:\"<>?,./"

log = get_logger()


@dataclass(frozen=True)
class GeneratorInput:
    """Pool overrides for new_generator(). Empty strings mean "use the default"."""
    lower_letters: str = ""
    upper_letters: str = ""
    digits: str = ""
    symbols: str = ""


@dataclass(frozen=True)
class Generator:
    lower_letters: str = LOWER_LETTERS
    upper_letters: str = UPPER_LETTERS
    digits: str = DIGITS
    symbols: str = SYMBOLS

    def generate(
        self,
        length: int,
        num_digits: int,
        num_symbols: int,
        allow_upper: bool = True,
        allow_repeat: bool = True,
    ) -> str:
        """
        Generate a password of exactly `length` characters holding `num_digits`
        digits, `num_symbols` symbols and letters for the rest.

        Raises ExceedsTotalLengthError when digits and symbols do not fit in
        `length`, one of the *ExceedAvailableError classes when repeats are
        disallowed and a pool is too small, and RandomSourceError when the
        entropy source fails.
        """
        letters = self.lower_letters
        if allow_upper:
            letters += self.upper_letters

        chars = length - num_digits - num_symbols
        log.debug(
            "generate: length=%d letters=%d digits=%d symbols=%d upper=%s repeat=%s",
            length, chars, num_digits, num_symbols, allow_upper, allow_repeat,
        )
        if chars < 0:
            raise ExceedsTotalLengthError()
        # chars >= 0 here, so only a negative digit or symbol count is left
        if num_digits < 0 or num_symbols < 0:
            raise ValueError("digits and symbols must be >= 0")
        if not allow_repeat and chars > len(letters):
            raise LettersExceedAvailableError()
        if not allow_repeat and num_digits > len(self.digits):
            raise DigitsExceedAvailableError()
        if not allow_repeat and num_symbols > len(self.symbols):
            raise SymbolsExceedAvailableError()

        result = ""
        result = _fill(result, letters, chars, allow_repeat, LettersExceedAvailableError)
        result = _fill(result, self.digits, num_digits, allow_repeat, DigitsExceedAvailableError)
        result = _fill(result, self.symbols, num_symbols, allow_repeat, SymbolsExceedAvailableError)
        return result


def _fill(
    result: str,
    pool: str,
    count: int,
    allow_repeat: bool,
    exhausted: Type[PasswordGeneratorError],
) -> str:
    """Add `count` characters drawn from `pool` to `result`."""
    added = 0
    while added < count:
        ch = random_element(pool)
        if not allow_repeat and ch in result:
            # pool used up: only possible with overlapping or duplicated custom pools
            if all(c in result for c in pool):
                log.warning("pool %r has no unused characters left", pool)
                raise exhausted()
            continue
        result = random_insert(result, ch)
        added += 1
    return result


def _has_duplicates(pool: str) -> bool:
    return len(set(pool)) != len(pool)


def new_generator(overrides: Optional[GeneratorInput] = None) -> Generator:
    """
    Build a Generator from the given overrides; any empty pool falls back to
    its default.
    """
    overrides = overrides or GeneratorInput()
    for name in ("lower_letters", "upper_letters", "digits", "symbols"):
        pool = getattr(overrides, name)
        if pool and _has_duplicates(pool):
            log.warning("%s override %r repeats characters; no-repeat passwords may fail", name, pool)
    return Generator(
        lower_letters=overrides.lower_letters or LOWER_LETTERS,
        upper_letters=overrides.upper_letters or UPPER_LETTERS,
        digits=overrides.digits or DIGITS,
        symbols=overrides.symbols or SYMBOLS,
    )


def generate(
    length: int,
    num_digits: int,
    num_symbols: int,
    allow_upper: bool = True,
    allow_repeat: bool = True,
    overrides: Optional[GeneratorInput] = None,
) -> str:
    """One-shot helper: new_generator(overrides).generate(...)."""
    return new_generator(overrides).generate(length, num_digits, num_symbols, allow_upper, allow_repeat)
