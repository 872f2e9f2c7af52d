"""
passgen.entropy
Uniform random picks backed by the OS CSPRNG (secrets module).
"""

import secrets

from .errors import RandomSourceError


def random_index(bound: int) -> int:
    """Return an integer in [0, bound)."""
    if bound <= 0:
        raise ValueError("bound must be > 0")
    try:
        return secrets.randbelow(bound)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"secure random source failed: {e}") from e


def random_element(pool: str) -> str:
    return pool[random_index(len(pool))]


def random_insert(sequence: str, char: str) -> str:
    """
    Insert char at a random position of sequence, ends included, and return
    the new string.
    """
    i = random_index(len(sequence) + 1)
    return sequence[:i] + char + sequence[i:]
