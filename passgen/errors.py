"""
passgen.errors
Exceptions raised by the generator core.
"""


class PasswordGeneratorError(Exception):
    """Base class for every error the generator raises on purpose."""


class RandomSourceError(PasswordGeneratorError):
    """The secure random source could not supply a value."""


class ExceedsTotalLengthError(PasswordGeneratorError, ValueError):
    def __init__(self, message: str = "number of digits and symbols must be less than total length"):
        super().__init__(message)


class LettersExceedAvailableError(PasswordGeneratorError, ValueError):
    def __init__(self, message: str = "number of letters exceeds available letters and repeats are not allowed"):
        super().__init__(message)


class DigitsExceedAvailableError(PasswordGeneratorError, ValueError):
    def __init__(self, message: str = "number of digits exceeds available digits and repeats are not allowed"):
        super().__init__(message)


class SymbolsExceedAvailableError(PasswordGeneratorError, ValueError):
    def __init__(self, message: str = "number of symbols exceeds available symbols and repeats are not allowed"):
        super().__init__(message)
