# Test fixtures
from .sample_phrases import (
    KNOWN_TRANSLATIONS,
    VOWEL_WORDS,
    CONSONANT_WORDS,
    SAMPLE_PHRASES,
    BLANK_PHRASES,
    SAMPLE_LETTER,
    SAMPLE_LETTER_TRANSLATED,
    SAMPLE_NOTES,
)

__all__ = [
    "KNOWN_TRANSLATIONS",
    "VOWEL_WORDS",
    "CONSONANT_WORDS",
    "SAMPLE_PHRASES",
    "BLANK_PHRASES",
    "SAMPLE_LETTER",
    "SAMPLE_LETTER_TRANSLATED",
    "SAMPLE_NOTES",
]
