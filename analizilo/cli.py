"""
Command-Line Interface for Analizilo.

- Checking the spelling of single words
- Dividing words into morphemes
- Spell-checking or dividing whole text files
"""
import sys
import argparse
import json
import logging

from analizilo import config
from analizilo.checker import check_word
from analizilo.entry import Capitalization
from analizilo.logging_config import setup_logging
from analizilo.orthography import x_to_accent
from analizilo.text_analyzer import analyze_file
from analizilo.vortaro import load_dictionary

logger = logging.getLogger(__name__)


def _load(args):
    """Load the dictionary named on the command line, or the default one."""
    path = args.dictionary or config.dictionary_path()
    try:
        return load_dictionary(path)
    except FileNotFoundError:
        print(f"ERROR: Dictionary not found: {path}", file=sys.stderr)
        sys.exit(1)


def cmd_check(args):
    """Check the spelling of words and divide them into morphemes."""
    dictionary = _load(args)

    results = [(word, check_word(x_to_accent(word), dictionary)) for word in args.words]

    if args.format == 'json':
        records = [dict(input=word, **result.to_dict()) for word, result in results]
        print(json.dumps(records, indent=2, ensure_ascii=False))
    else:
        for word, result in results:
            if result.valid:
                print(f"{result.word} ✓")
            else:
                print(f"✘{word}")

    if not all(result.valid for _, result in results):
        sys.exit(1)


def cmd_file(args):
    """Spell-check a text file, or divide its words into morphemes."""
    dictionary = _load(args)

    try:
        output = analyze_file(args.file, dictionary,
                              morpheme_mode=args.morphemes,
                              x_format=args.x_format,
                              progress=args.progress)
    except FileNotFoundError:
        print(f"ERROR: File does not exist: {args.file}", file=sys.stderr)
        sys.exit(1)

    if args.morphemes:
        sys.stdout.write(output)
    else:
        for word in sorted(output):
            print(word)


def cmd_info(args):
    """Display dictionary information."""
    dictionary = _load(args)

    print("=== Analizilo ===\n")
    print(f"Python: {sys.version.split()[0]}")
    print(f"Dictionary: {dictionary.source}")
    print(f"  Morphemes: {len(dictionary):,}")
    proper_names = sum(1 for key in dictionary
                       if dictionary[key].capitalization != Capitalization.MINISCULE)
    print(f"  Proper names: {proper_names:,}")
    print(f"  Rows skipped: {dictionary.skipped_rows}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='analizilo',
        description='Analizilo: spell checker and morphological analyzer for Esperanto',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check the spelling of single words (accents may be written with x)
  analizilo check ĉiutage
  analizilo check cxiutage misdirita --format json

  # List misspelled words in a file
  analizilo file teksto.txt

  # Divide the words of a file into morphemes
  analizilo file -m teksto.txt

  # Dictionary info
  analizilo info
        """
    )
    parser.add_argument('--dictionary', help='Path to the dictionary file '
                        f'(default: ${config.DICTIONARY_ENV_VAR} or data/vortaro.tsv)')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    parser.add_argument('--log-file', default=None,
                        help=f'Log file (default: ${config.LOG_FILE_ENV_VAR} or {config.DEFAULT_LOG_FILE})')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- check command ---
    parser_check = subparsers.add_parser('check', help='Check the spelling of words')
    parser_check.add_argument('words', nargs='+', help='Esperanto words to check')
    parser_check.add_argument('--format', choices=['text', 'json'], default='text',
                              help='Output format (default: text)')
    parser_check.set_defaults(func=cmd_check)

    # --- file command ---
    parser_file = subparsers.add_parser('file', help='Analyze a text file')
    parser_file.add_argument('file', help='Path to a UTF-8 text file')
    parser_file.add_argument('-m', '--morphemes', action='store_true',
                             help='Divide words into morphemes instead of listing misspelled words')
    parser_file.add_argument('-x', '--x-format', action='store_true',
                             help='The file uses x-system letters (cx, gx, ...)')
    parser_file.add_argument('--progress', action='store_true', help='Show progress')
    parser_file.set_defaults(func=cmd_file)

    # --- info command ---
    parser_info = subparsers.add_parser('info', help='Display dictionary information')
    parser_info.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(log_file=args.log_file or config.log_file(), debug=args.debug)

    args.func(args)


if __name__ == '__main__':
    main()
