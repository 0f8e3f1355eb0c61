"""
Constants used throughout the pangram checker.

This module centralizes the alphabet geometry and the fixed driver sentence
so the bitmask logic and the entry point agree on them.
"""

# Alphabet
ALPHABET = 'abcdefghijklmnopqrstuvwxyz'
ALPHABET_SIZE = 26  # Also the minimum length of a pangram

# Bitmask
ALL_LETTERS_MASK = 0x03FFFFFF  # 26 1-bits, one per letter a-z

# Driver
DEFAULT_SENTENCE = "The quick brown fox jumps over the lazy dog."
RESULT_TEMPLATE = "Is this a pangram? {result}!"
DEFAULT_LOG_LEVEL = 'WARNING'
