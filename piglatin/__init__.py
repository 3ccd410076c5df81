"""
Piglatin - English to Pig Latin Translator

Translates phrases, text files, and directories of text files into
Pig Latin. Vowel-initial words get "yay", consonant-initial words move
their leading consonant cluster to the end and get "ay". Punctuation
and capitalisation are kept.
"""

from .translator import (
    InvalidPhraseError,
    is_consonant,
    is_vowel,
    translate,
    translate_to_pig_latin,
)
from .core import Translator

__version__ = "1.0.0"

__all__ = [
    "InvalidPhraseError",
    "Translator",
    "is_consonant",
    "is_vowel",
    "translate",
    "translate_to_pig_latin",
]
