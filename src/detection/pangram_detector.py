"""
Pangram detection using a letter bitmask.
Sets one bit per ASCII letter seen and checks whether all 26 are present.
"""

import logging
from typing import Union

from src.utils.constants import ALPHABET, ALPHABET_SIZE, ALL_LETTERS_MASK

logger = logging.getLogger(__name__)

Text = Union[str, bytes, bytearray]


def _as_str(text: Text) -> str:
    """Normalize input to str, one character per byte for bytes input."""
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray)):
        # latin-1 maps every byte to exactly one code point
        return bytes(text).decode('latin-1')
    raise TypeError(f"Expected str or bytes, got {type(text).__name__}")


def letter_mask(text: Text) -> int:
    """
    Build the bitmask of letters present in a text.

    Bit i is set when letter 'a' + i appears at least once, in either case.
    Characters that are not ASCII letters are ignored.

    Args:
        text: Sentence to scan (str or ASCII-compatible bytes)

    Returns:
        Integer with only bits 0-25 possibly set
    """
    bits = 0
    for char in _as_str(text):
        if char.isascii() and char.isalpha():
            # letters are contiguous in ASCII, so the offset from 'a' is the bit position
            bits |= 1 << (ord(char.lower()) - ord('a'))
    return bits


def missing_letters(text: Text) -> str:
    """Return the letters absent from text, in alphabetical order."""
    bits = letter_mask(text)
    return ''.join(
        letter for index, letter in enumerate(ALPHABET)
        if not bits & (1 << index)
    )


def is_pangram(text: Text) -> bool:
    """
    Check whether a text uses every letter of the alphabet at least once.

    Args:
        text: Sentence to check (str or ASCII-compatible bytes)

    Returns:
        True if all 26 letters are present, case-insensitively
    """
    text = _as_str(text)

    # Fewer characters than letters cannot cover the alphabet
    if len(text) < ALPHABET_SIZE:
        return False

    bits = letter_mask(text)
    logger.debug(f"Letter mask: {bits:#010x}")
    return bits == ALL_LETTERS_MASK
