"""Command-line interface."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate the extended word table (WORDS.TOK.EXTENDED) from a vocabulary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using JSON config
  %(prog)s --config config.json

  # Using CLI args
  %(prog)s --vocabulary translations/sq2/vocabulary.json -o project/final -v

  # Mix both (CLI overrides JSON)
  %(prog)s --config config.json --encoding cp1255 -v

  # Trace how one word is expanded
  %(prog)s --vocabulary vocabulary.json -o final --debug-words "בית" -v --debug

Noun groups get the prefix variants ב, ה and ל for every translated
synonym, unless the variant already exists as another word. Skipped
variants are listed in SKIPPED_PREFIX_VARIANTS.txt next to the table (or
in --reports). Duplicate words stop the build and nothing is written.

Example config.json:
{
  "vocabulary": "translations/sq2/vocabulary.json",
  "output": "project/final",
  "encoding": "cp1255",
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Input / output
    parser.add_argument("--vocabulary", type=str, help="Vocabulary JSON file")
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output directory (or WORDS.TOK.EXTENDED path); stdout if omitted",
    )
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory for the skipped prefix variants report (default: output directory)",
    )

    # Parameters
    parser.add_argument(
        "--encoding",
        type=str,
        help="Single-byte code page of the runtime (default: cp1255)",
    )
    parser.add_argument(
        "--debug-words",
        type=str,
        help="Comma-separated literals to trace (requires --debug and --verbose)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")

    return parser


def create_fix_escapes_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the escape repair command."""
    parser = argparse.ArgumentParser(
        description="Restore escape sequences (\\\" and \\n) dropped from translated messages",
    )
    parser.add_argument("messages", type=str, help="messages.json file to fix in place")
    parser.add_argument(
        "--dry-run", action="store_true", help="Show what would change without writing"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    return parser
