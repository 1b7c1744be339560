"""Word-level comparison primitives shared by the expectation engine."""

from __future__ import annotations

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1


class ForcedFailure(BaseException):
    """Raised by ``Expectations.force_fail`` to end the current case early.

    Derived from BaseException so ``except Exception`` in a test body cannot
    swallow it.
    """


def machine_word(value: object) -> int:
    """Reduce a value to the unsigned machine word ``expect`` compares.

    Integers (bools included) are taken modulo 2**64, ``None`` is 0 and any
    other object is represented by its identity. Floating-point values have no
    exact word form and are rejected; convert them explicitly first.
    """
    if isinstance(value, (float, complex)):
        raise TypeError(
            f"expect() compares machine words; got {type(value).__name__} "
            f"{value!r}, convert it to an int explicitly"
        )
    if value is None:
        return 0
    if isinstance(value, int):
        return value & WORD_MASK
    return id(value) & WORD_MASK


def signed_word(word: int) -> int:
    """Interpret an unsigned machine word as a two's complement integer."""
    word &= WORD_MASK
    if word >> (WORD_BITS - 1):
        return word - (1 << WORD_BITS)
    return word
