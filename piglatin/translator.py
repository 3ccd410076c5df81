"""
Pig Latin Translation Rules

Pure, single-pass translation of an English phrase into Pig Latin.

- Words starting with a vowel are kept as they are and get "yay".
- Words starting with a consonant cluster have the cluster moved to the
  end of the word, then get "ay".
- A capitalised word stays capitalised, a lowercase word stays lowercase.

Delimiters and any other non-letters between words are copied verbatim.
"""

import logging
import string

logger = logging.getLogger(__name__)

VOWELS = "aeiou"
CONSONANTS = "".join(c for c in string.ascii_lowercase if c not in VOWELS)
DELIMITERS = " -,.!?"

VOWEL_SUFFIX = "yay"
CONSONANT_SUFFIX = "ay"


class InvalidPhraseError(ValueError):
    """Raised when the phrase to translate is missing, empty, or blank."""
    pass


def is_vowel(ch: str) -> bool:
    """Check if a character is a vowel (case-insensitive, ASCII only)."""
    return len(ch) == 1 and ch.lower() in VOWELS


def is_consonant(ch: str) -> bool:
    """Check if a character is a consonant (case-insensitive, ASCII only)."""
    return len(ch) == 1 and ch.lower() in CONSONANTS


def translate_to_pig_latin(phrase: str) -> str:
    """
    Translate an English phrase to Pig Latin.

    Args:
        phrase: Source phrase. Words are separated by any of " -,.!?".

    Returns:
        The phrase with every word translated and all delimiters kept
        in place.

    Raises:
        InvalidPhraseError: If phrase is None, empty, or whitespace only.

    Example:
        >>> translate_to_pig_latin("Smile, Glove!")
        'Ilesmay, Oveglay!'
    """
    if phrase is None or not phrase.strip():
        raise InvalidPhraseError("Source string cannot be null, empty, or whitespace")

    parts = []
    index = 0
    while index < len(phrase):
        ch = phrase[index]
        if is_vowel(ch) or is_consonant(ch):
            word = _extract_word(phrase, index)
            parts.append(_translate_word(word))
            index += len(word)
        else:
            parts.append(ch)
            index += 1

    result = "".join(parts)
    logger.debug("Translated %d chars -> %d chars", len(phrase), len(result))
    return result


# Short alias used by the engine and the package namespace
translate = translate_to_pig_latin


def _extract_word(phrase: str, start: int) -> str:
    """Return the run of characters from start up to the next delimiter."""
    end = start
    while end < len(phrase) and phrase[end] not in DELIMITERS:
        end += 1
    return phrase[start:end]


def _translate_word(word: str) -> str:
    if is_vowel(word[0]):
        return word + VOWEL_SUFFIX
    return _rotate_consonant_cluster(word) + CONSONANT_SUFFIX


def _rotate_consonant_cluster(word: str) -> str:
    """
    Move the leading consonant cluster to the end of the word.

    Only the first character has its case adjusted: it is lowercased
    before the move, and the new first character is uppercased if the
    original one was. A word made only of consonants comes back in its
    original order.
    """
    was_upper = word[0].isupper()
    chars = word[0].lower() + word[1:]

    cluster_len = 0
    while cluster_len < len(chars) and is_consonant(chars[cluster_len]):
        cluster_len += 1

    if cluster_len < len(chars):
        chars = chars[cluster_len:] + chars[:cluster_len]

    if was_upper:
        chars = _upper_first(chars)
    return chars


def _upper_first(word: str) -> str:
    """Uppercase the first character unless that would change its length ("ß" -> "SS")."""
    upper = word[0].upper()
    if len(upper) != 1:
        return word
    return upper + word[1:]
