"""passgen: random passwords with exact digit and symbol counts."""

from .errors import (
    DigitsExceedAvailableError,
    ExceedsTotalLengthError,
    LettersExceedAvailableError,
    PasswordGeneratorError,
    RandomSourceError,
    SymbolsExceedAvailableError,
)
from .generator import (
    DIGITS,
    LOWER_LETTERS,
    SYMBOLS,
    UPPER_LETTERS,
    Generator,
    GeneratorInput,
    generate,
    new_generator,
)

__version__ = "1.0.0"

__all__ = [
    "DIGITS",
    "LOWER_LETTERS",
    "SYMBOLS",
    "UPPER_LETTERS",
    "Generator",
    "GeneratorInput",
    "generate",
    "new_generator",
    "PasswordGeneratorError",
    "RandomSourceError",
    "ExceedsTotalLengthError",
    "LettersExceedAvailableError",
    "DigitsExceedAvailableError",
    "SymbolsExceedAvailableError",
]
