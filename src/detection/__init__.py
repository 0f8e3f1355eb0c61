# Pangram detection module

from .pangram_detector import is_pangram, letter_mask, missing_letters

__all__ = ['is_pangram', 'letter_mask', 'missing_letters']
