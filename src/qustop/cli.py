#!/usr/bin/env python3
"""
QuStop CLI - Main command-line interface
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from importlib.metadata import version as _pkg_version, PackageNotFoundError

from .models import ProcessingError

# Resolve package version for --version flag
try:
    _QUVERSION = _pkg_version("qustop")
except PackageNotFoundError:
    from . import __version__ as _QUVERSION


class ColoredFormatter(logging.Formatter):
    COLORS = {
        'DEBUG': '\033[94m',     # Blue
        'WARNING': '\033[93m',   # Yellow
        'ERROR': '\033[91m',     # Red
        'CRITICAL': '\033[95m',  # Magenta
        'RESET': '\033[0m',
    }

    def format(self, record):
        original = super().format(record)
        color = self.COLORS.get(record.levelname, '')
        return f"{color}{original}{self.COLORS['RESET']}" if color else original


def configure_logging(verbose: bool = False, debug: bool = False, log_level: str = "WARNING") -> None:
    """
    Send log records to stderr.

    --debug shows DEBUG and --verbose shows INFO; without either flag the
    configured log_level applies.
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = getattr(logging, log_level)

    handler = logging.StreamHandler(sys.stderr)
    if sys.stderr.isatty():
        handler.setFormatter(ColoredFormatter('%(levelname)s:%(name)s:%(message)s'))
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s:%(name)s:%(message)s'))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qustop",
        description="QuStop - Stop-word removal and language guessing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  qustop clean --language en --input article.txt
  qustop clean --language fr-CA --html --input page.html --output page.txt
  echo "Le chat et la souris" | qustop guess --candidates en fr
  qustop languages
  qustop config template --output configs/qustop.yaml
        """
    )
    parser.add_argument('-V', '--version', action='version', version=f"QuStop {_QUVERSION}")
    parser.add_argument('--config', help='Configuration file (YAML)')
    parser.add_argument('--include-digits', action='store_true', help='Keep decimal digits inside tokens')
    parser.add_argument('--pattern', help='Custom token regular expression (replaces the default)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output (INFO level)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging (DEBUG level)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Clean command
    clean_parser = subparsers.add_parser('clean', help='Remove stop words of a language')
    clean_parser.add_argument('--language', '-l', help='BCP 47 tag or ISO 639 code (config default if omitted)')
    clean_parser.add_argument('--html', action='store_true', default=None, help='Strip markup and decode entities first')
    clean_parser.add_argument('--input', '-i', help='Input file (default: stdin)')
    clean_parser.add_argument('--output', '-o', help='Output file (default: stdout)')

    # Guess command
    guess_parser = subparsers.add_parser('guess', help='Guess the language among candidates')
    guess_parser.add_argument('--candidates', '-c', nargs='+', help='Candidate language codes, most likely first')
    guess_parser.add_argument('--no-html', dest='html', action='store_false', default=None, help='Do not strip markup')
    guess_parser.add_argument('--input', '-i', help='Input file (default: stdin)')
    guess_parser.add_argument('--output', '-o', help='Output file (default: stdout)')
    guess_parser.add_argument('--format', choices=['text', 'json'], default='text', help='Output format')

    # Languages command
    subparsers.add_parser('languages', help='List languages with a stop-word dictionary')

    # Config commands
    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_subparsers = config_parser.add_subparsers(dest='config_action', help='Config actions')

    config_template_parser = config_subparsers.add_parser('template', help='Generate configuration template')
    config_template_parser.add_argument('--output', required=True, help='Output file for template')

    config_validate_parser = config_subparsers.add_parser('validate', help='Validate configuration')
    config_validate_parser.add_argument('--file', required=True, help='Configuration file to validate')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(args.verbose, args.debug)

    try:
        if args.command == 'clean':
            return run_clean_command(args)
        elif args.command == 'guess':
            return run_guess_command(args)
        elif args.command == 'languages':
            return run_languages_command(args)
        elif args.command == 'config':
            return run_config_command(args)
        else:
            print(f"Unknown command: {args.command}", file=sys.stderr)
            return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 1
    except (ProcessingError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def _load_settings(args):
    """Configuration from --config, with command-line tokenizer overrides."""
    from .config import QuStopConfig, load_config_file

    config = load_config_file(args.config) if args.config else QuStopConfig()
    if args.include_digits:
        config.tokenizer.include_digits = True
    if args.pattern:
        config.tokenizer.custom_pattern = args.pattern
    configure_logging(args.verbose, args.debug, config.log_level)
    return config


def _build_cleaner(config):
    from .clean.pipeline import StopwordCleaner
    return StopwordCleaner.from_config(config)


def _read_input(path) -> str:
    if path:
        from .clean.normalize import EncodingDetector
        return EncodingDetector().decode(Path(path).read_bytes())
    return sys.stdin.read()


def _write_output(path, text: str) -> None:
    if path:
        output_path = Path(path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding='utf-8')
    else:
        sys.stdout.write(text)
        if not text.endswith('\n'):
            sys.stdout.write('\n')


def run_clean_command(args):
    """Run the clean command."""
    config = _load_settings(args)
    cleaner = _build_cleaner(config)

    language = args.language or config.default_language
    strip_markup = config.strip_markup if args.html is None else args.html

    cleaned = cleaner.clean(_read_input(args.input), language, strip_markup)
    _write_output(args.output, cleaned)
    return 0


def run_guess_command(args):
    """Run the guess command."""
    config = _load_settings(args)
    cleaner = _build_cleaner(config)

    candidates = args.candidates or config.guess.candidates
    strip_markup = config.guess.strip_markup if args.html is None else args.html

    result = cleaner.guess_language(_read_input(args.input), candidates, strip_markup)

    if args.format == 'json':
        _write_output(args.output, json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        languages = ', '.join(result.languages) if result.is_confident else 'unknown'
        print(f"Language: {languages} ({result.max_count}/{result.total_count} stop words)", file=sys.stderr)
        _write_output(args.output, result.cleaned_text)
    return 0


def run_languages_command(args):
    """Run the languages command."""
    config = _load_settings(args)
    cleaner = _build_cleaner(config)

    for code in cleaner.supported_languages():
        print(f"{code}\t{len(cleaner.registry[code])}")
    return 0


def run_config_command(args):
    """Run config management commands."""
    from .config import load_config_file, write_config_template

    if args.config_action == 'template':
        path = write_config_template(args.output)
        print(f"Configuration template written to {path}")
        return 0
    elif args.config_action == 'validate':
        config = load_config_file(args.file)
        # Building the registry checks configured dictionary files too
        _build_cleaner(config)
        print(f"Configuration {args.file} is valid")
        return 0
    else:
        print("Specify a config action: template or validate", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
