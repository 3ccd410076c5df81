"""
Pig Latin Core Engine

Translates a literal phrase, a text file, or a directory of text
files. File and directory translations can be saved to an output
directory.

The translation itself lives in translator.py and is a pure function;
this module only deals with sources and output files.
"""

import logging
import os
from datetime import datetime, timezone

from .translator import (
    CONSONANT_SUFFIX,
    CONSONANTS,
    DELIMITERS,
    VOWEL_SUFFIX,
    VOWELS,
    InvalidPhraseError,
    translate_to_pig_latin,
)

logger = logging.getLogger(__name__)


class Translator:
    """
    Main translator engine.

    Accepts a phrase, a text file path, or a directory path and
    produces Pig Latin text.
    """

    DEFAULT_OUTPUT_DIRNAME = "piglatin_output"
    SUPPORTED_EXTENSIONS = {".txt", ".md"}
    OUTPUT_SUFFIX = ".pig.txt"

    def __init__(self, output_dir: str = None):
        self.output_dir = output_dir or os.path.join(os.getcwd(), self.DEFAULT_OUTPUT_DIRNAME)

    def translate(self, phrase: str) -> str:
        """Translate a single phrase."""
        return translate_to_pig_latin(phrase)

    def translate_path(self, path: str, save: bool = True) -> str:
        """
        Translate a text file or a directory of text files.

        Args:
            path: File path or directory path
            save: If True, save the translations to output_dir

        Returns:
            The translated text

        Raises:
            ValueError: If path is neither a file nor a directory
        """
        if path and os.path.isdir(path):
            logger.info("[DIR] Translating all supported files in: %s", path)
            return self.translate_directory(path, save=save)

        if path and os.path.isfile(path):
            return self.translate_file(path, save=save)

        raise ValueError(
            f"Cannot handle source: {path}\n"
            f"Provide a valid text file or directory path."
        )

    def translate_file(self, file_path: str, save: bool = True) -> str:
        """
        Translate a text file line by line.

        Blank lines are copied as they are. A file with no text at all
        is rejected the same way a blank phrase is.
        """
        logger.info("[TXT] Translating: %s", file_path)
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()

        if not content.strip():
            raise InvalidPhraseError(f"File has no text to translate: {file_path}")

        lines = content.splitlines(keepends=True)
        translated = "".join(_translate_line(line) for line in lines)

        if save:
            self._save(translated, _file_to_output_name(file_path))

        return translated

    def translate_directory(self, dir_path: str, save: bool = True) -> str:
        """Translate all supported files in a directory."""
        results = []
        translated_count = 0

        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            if not os.path.isfile(file_path):
                continue

            _, ext = os.path.splitext(filename.lower())
            if ext not in self.SUPPORTED_EXTENSIONS:
                continue

            try:
                results.append(self.translate_file(file_path, save=save))
                translated_count += 1
            except (OSError, ValueError) as e:
                logger.error("[ERROR] Failed to translate %s: %s", filename, e)

        summary = (
            f"---\n"
            f"batch_translation: true\n"
            f"source_directory: {dir_path}\n"
            f"files_translated: {translated_count}\n"
            f"timestamp: {datetime.now(timezone.utc).isoformat()}\n"
            f"---\n\n"
        )

        return summary + "\n\n---\n\n".join(results)

    def _save(self, text: str, out_name: str) -> str:
        os.makedirs(self.output_dir, exist_ok=True)
        out_path = os.path.join(self.output_dir, out_name)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("[SAVED] %s", out_path)
        return out_path

    @staticmethod
    def rules() -> dict:
        """Return a dictionary describing the fixed translation rules."""
        return {
            "Vowels": list(VOWELS),
            "Consonants": list(CONSONANTS),
            "Delimiters": [repr(d) for d in DELIMITERS],
            "Vowel-initial suffix": [VOWEL_SUFFIX],
            "Consonant-initial suffix": [CONSONANT_SUFFIX],
        }


def _translate_line(line: str) -> str:
    """Translate one line, leaving blank lines untouched."""
    if not line.strip():
        return line
    # Line endings are not word delimiters, keep them out of the last word
    body = line.rstrip("\r\n")
    return translate_to_pig_latin(body) + line[len(body):]


def _file_to_output_name(file_path: str) -> str:
    """Generate an output filename from the source file."""
    basename = os.path.basename(file_path)
    name, _ = os.path.splitext(basename)
    # Sanitize filename
    safe_name = "".join(c if c.isalnum() or c in "-_ " else "_" for c in name)
    return f"{safe_name}{Translator.OUTPUT_SUFFIX}"
