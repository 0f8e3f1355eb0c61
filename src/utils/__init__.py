"""
Shared constants for the pangram checker.
"""

from .constants import (
    ALPHABET,
    ALPHABET_SIZE,
    ALL_LETTERS_MASK,
    DEFAULT_SENTENCE,
    RESULT_TEMPLATE,
    DEFAULT_LOG_LEVEL
)

__all__ = [
    'ALPHABET',
    'ALPHABET_SIZE',
    'ALL_LETTERS_MASK',
    'DEFAULT_SENTENCE',
    'RESULT_TEMPLATE',
    'DEFAULT_LOG_LEVEL'
]
