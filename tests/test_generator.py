import dataclasses
import logging
import secrets
import threading

import pytest

from passgen.generator import (
    generate,
    new_generator,
    Generator,
    GeneratorInput,
    LOWER_LETTERS,
    UPPER_LETTERS,
    DIGITS,
    SYMBOLS,
)
from passgen.errors import (
    PasswordGeneratorError,
    RandomSourceError,
    ExceedsTotalLengthError,
    LettersExceedAvailableError,
    DigitsExceedAvailableError,
    SymbolsExceedAvailableError,
)

LETTERS = LOWER_LETTERS + UPPER_LETTERS


def _counts(pw):
    return (
        sum(c in LETTERS for c in pw),
        sum(c in DIGITS for c in pw),
        sum(c in SYMBOLS for c in pw),
    )


def test_length_and_digit_count():
    pw = generate(8, 2, 0, True, True)
    assert len(pw) == 8
    assert _counts(pw) == (6, 2, 0)


def test_exact_class_counts():
    for _ in range(20):
        pw = generate(20, 5, 7, True, True)
        assert len(pw) == 20
        assert _counts(pw) == (8, 5, 7)


def test_digits_and_symbols_over_length():
    with pytest.raises(ExceedsTotalLengthError):
        generate(5, 3, 3, True, True)


def test_length_check_comes_first():
    # would also exceed every pool, but the total length check wins
    with pytest.raises(ExceedsTotalLengthError):
        generate(10, 40, 40, False, False)


def test_validation_errors_are_value_errors():
    try:
        generate(1, 1, 1)
        raised = False
    except ValueError as e:
        raised = isinstance(e, PasswordGeneratorError)
    assert raised


def test_no_repeat_lowercase_only():
    pw = generate(3, 0, 0, False, False)
    assert len(pw) == 3
    assert all(c in LOWER_LETTERS for c in pw)
    assert len(set(pw)) == 3


def test_too_many_unique_letters():
    with pytest.raises(LettersExceedAvailableError):
        generate(30, 0, 0, False, False)


def test_uppercase_extends_letter_pool():
    pw = generate(30, 0, 0, True, False)
    assert len(set(pw)) == 30
    assert all(c in LETTERS for c in pw)


def test_too_many_unique_digits_custom_pool():
    gen = new_generator(GeneratorInput(digits="13"))
    with pytest.raises(DigitsExceedAvailableError):
        gen.generate(4, 4, 0, True, False)


def test_too_many_unique_symbols():
    with pytest.raises(SymbolsExceedAvailableError):
        generate(40, 0, len(SYMBOLS) + 1, True, False)


def test_repeats_allowed_past_pool_size():
    pw = generate(40, 15, 0, False, True)
    assert _counts(pw) == (25, 15, 0)


def test_every_character_once():
    length = len(LETTERS) + len(DIGITS) + len(SYMBOLS)
    pw = generate(length, len(DIGITS), len(SYMBOLS), True, False)
    assert len(pw) == length
    assert set(pw) == set(LETTERS + DIGITS + SYMBOLS)


def test_zero_length():
    assert generate(0, 0, 0) == ""


def test_negative_counts_rejected():
    with pytest.raises(ValueError) as exc:
        generate(5, -1, 0)
    assert not isinstance(exc.value, ExceedsTotalLengthError)


def test_negative_length_is_exceeds_total_length():
    with pytest.raises(ExceedsTotalLengthError):
        generate(-1, 0, 0, True, True)
    # chars = 2 - 5 - (-1) = -2
    with pytest.raises(ExceedsTotalLengthError):
        generate(2, 5, -1)


def test_custom_pools_only():
    gen = new_generator(GeneratorInput(lower_letters="xyz", digits="7", symbols="#"))
    pw = gen.generate(10, 3, 2, False, True)
    assert len(pw) == 10
    assert sum(c in "xyz" for c in pw) == 5
    assert pw.count("7") == 3
    assert pw.count("#") == 2


def test_empty_override_falls_back_to_default():
    gen = new_generator(GeneratorInput(lower_letters="", upper_letters="Q"))
    assert gen.lower_letters == LOWER_LETTERS
    assert gen.upper_letters == "Q"
    assert gen.digits == DIGITS
    assert gen.symbols == SYMBOLS
    assert new_generator() == Generator()


def test_generator_is_frozen():
    gen = new_generator()
    with pytest.raises(dataclasses.FrozenInstanceError):
        gen.digits = "0"


def test_generator_reusable():
    gen = new_generator(GeneratorInput(symbols="$%"))
    results = [gen.generate(12, 2, 2, True, False) for _ in range(10)]
    for pw in results:
        assert len(set(pw)) == 12
        assert sum(c in "$%" for c in pw) == 2


def test_duplicate_draw_is_redrawn(monkeypatch):
    # element 'a', insert at 0, element 'a' again (discarded), element 'b', insert at end
    draws = iter([0, 0, 0, 1, 1])
    monkeypatch.setattr(secrets, "randbelow", lambda n: next(draws))
    gen = new_generator(GeneratorInput(lower_letters="ab"))
    assert gen.generate(2, 0, 0, False, False) == "ab"
    assert next(draws, None) is None


def test_overlapping_pools_do_not_hang():
    # letters use up 'a' and 'b', leaving nothing for the digit phase
    gen = new_generator(GeneratorInput(lower_letters="ab", digits="ab"))
    with pytest.raises(DigitsExceedAvailableError):
        gen.generate(4, 2, 0, False, False)


def test_duplicated_pool_characters_flagged(caplog):
    with caplog.at_level(logging.WARNING, logger="passgen"):
        gen = new_generator(GeneratorInput(symbols="!!"))
    assert "repeats characters" in caplog.text
    with pytest.raises(SymbolsExceedAvailableError):
        gen.generate(2, 0, 2, True, False)


def test_random_source_failure(monkeypatch):
    def boom(n):
        raise OSError("no entropy")

    monkeypatch.setattr(secrets, "randbelow", boom)
    with pytest.raises(RandomSourceError):
        generate(8, 2, 2)


def test_shared_generator_across_threads():
    gen = new_generator()
    results = []
    errors = []
    lock = threading.Lock()

    def worker():
        try:
            for _ in range(100):
                pw = gen.generate(40, 10, 10, True, False)
                with lock:
                    results.append(pw)
        except Exception as e:
            with lock:
                errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len(results) == 800
    for pw in results:
        assert len(pw) == 40
        assert len(set(pw)) == 40
        assert _counts(pw) == (20, 10, 10)
