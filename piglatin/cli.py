#!/usr/bin/env python3
"""
Pig Latin CLI

Command-line interface for English-to-Pig-Latin translation.

Usage:
    piglatin [phrases...] [options]
    piglatin "Smile, Glove!"
    piglatin -f notes.txt               # translate a text file
    piglatin -f ./letters/              # translate all .txt/.md files in directory
    piglatin "Eat" -f notes.txt         # mix phrases and files
    echo "Hello world" | piglatin       # translate stdin line by line

Options:
    -f, --file PATH      Text file or directory to translate (repeatable)
    -o, --output DIR     Output directory (default: ./piglatin_output)
    --stdout             Print file translations instead of saving them
    --rules              Show the translation rules
    -v, --verbose        Enable debug logging
"""

import argparse
import logging
import sys

from piglatin.core import Translator

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level=logging.WARNING):
    """Setup basic logging configuration"""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    return logging.getLogger("piglatin")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="piglatin",
        description=(
            "English to Pig Latin Translator\n\n"
            "Words starting with a vowel get 'yay'. Words starting with a\n"
            "consonant cluster move the cluster to the end and get 'ay'.\n"
            "Punctuation and capitalisation are preserved."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  piglatin \"Smile, Glove!\"\n"
            "  piglatin -f notes.txt               # saved to ./piglatin_output\n"
            "  piglatin -f ./letters/              # whole directory\n"
            "  piglatin -f notes.txt --stdout      # print to terminal\n"
            "  piglatin -f notes.txt -o ./pig_out  # custom output dir\n"
        ),
    )

    parser.add_argument(
        "phrases",
        nargs="*",
        help="Phrases to translate",
    )
    parser.add_argument(
        "-f", "--file",
        dest="files",
        action="append",
        default=[],
        metavar="PATH",
        help="Text file or directory to translate (can be repeated)",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./piglatin_output)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print file translations to stdout instead of saving them",
    )
    parser.add_argument(
        "--rules",
        action="store_true",
        help="Show the translation rules and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.rules:
        _show_rules()
        return 0

    engine = Translator(output_dir=args.output)

    if not args.phrases and not args.files:
        if sys.stdin is not None and not sys.stdin.isatty():
            return _translate_stream(engine, sys.stdin)
        parser.print_help()
        print("\nError: No sources provided. Specify phrases, or files and directories with -f.")
        return 1

    save = not args.stdout

    print("=" * 60)
    print("  PIGLATIN - English to Pig Latin Translator")
    print("=" * 60)
    print()

    success_count = 0
    error_count = 0

    for phrase in args.phrases:
        try:
            print(engine.translate(phrase))
            success_count += 1
        except Exception as e:
            print(f"[ERROR] {phrase!r}: {e}", file=sys.stderr)
            error_count += 1

    for path in args.files:
        try:
            text = engine.translate_path(path, save=save)
            if args.stdout:
                print(text)
            success_count += 1
        except Exception as e:
            print(f"[ERROR] {path}: {e}", file=sys.stderr)
            error_count += 1

    print()
    print("-" * 60)
    print(f"  Done: {success_count} translated, {error_count} errors")
    if save:
        print(f"  Output: {engine.output_dir}")
    print("-" * 60)

    return 1 if error_count else 0


def _translate_stream(engine: Translator, stream) -> int:
    """Translate each non-blank line of a stream to stdout."""
    for line in stream:
        line = line.rstrip("\r\n")
        print(engine.translate(line) if line.strip() else line)
    return 0


def _show_rules():
    """Display the translation rules."""
    rules = Translator.rules()
    print("\nTranslation Rules:")
    print("-" * 40)
    for category, values in rules.items():
        print(f"\n  {category}:")
        print(f"    {' '.join(values)}")
    print()


if __name__ == "__main__":
    sys.exit(main())
