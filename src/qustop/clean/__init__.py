"""
Stop-word cleaning and language guessing module.

This module provides:
- Unicode normalization and word segmentation
- Stop-word dictionaries for 28 languages
- Stop-word filtering with match statistics
- Language guessing by stop-word frequency
- Markup stripping and language tag resolution
- A cleaning pipeline tying them together

The module-level functions below use one shared cleaner; configure it
with ``set_include_digits``/``set_token_pattern`` or
``configure_default_cleaner`` at startup.
"""

from typing import Iterable, Optional

from .normalize import (
    TextNormalizer,
    EncodingDetector
)

from .tokenization import (
    Tokenizer,
    WORD_PATTERN,
    WORD_AND_DIGIT_PATTERN,
    compile_token_pattern
)

from .dictionaries import (
    Dictionary,
    DictionaryRegistry,
    load_builtin_registry,
    load_stopwords_from_file,
    build_registry
)

from .html_cleaner import (
    MarkupStripper,
    strip_markup
)

from .language_tags import resolve_base_language_code

from .stopwords import (
    StopwordFilter,
    collapse_whitespace,
    get_filter_stats
)

from .language import LanguageGuesser

from .pipeline import (
    StopwordCleaner,
    get_default_cleaner,
    configure_default_cleaner
)

from ..models import FilterResult, GuessResult


def clean(content: str, language: str, strip_markup: bool = False) -> str:
    """Remove the stop words of a language from content."""
    return get_default_cleaner().clean(content, language, strip_markup)


def filter_count(content: str, dictionary: Dictionary) -> FilterResult:
    """Remove dictionary words from content, counting matches and tokens."""
    return get_default_cleaner().stopword_filter.filter_count(content, dictionary)


def guess_language(content: str, candidate_codes: Optional[Iterable[str]] = None,
                   strip_markup: bool = True) -> GuessResult:
    """Guess the language of content among candidate codes."""
    return get_default_cleaner().guess_language(content, candidate_codes, strip_markup)


def set_include_digits(include: bool = True) -> None:
    """Include decimal digits in tokens of the shared cleaner."""
    get_default_cleaner().set_include_digits(include)


def set_token_pattern(pattern: Optional[str]) -> None:
    """Replace the token pattern of the shared cleaner."""
    get_default_cleaner().set_token_pattern(pattern)


__all__ = [
    # Normalization
    'TextNormalizer',
    'EncodingDetector',

    # Tokenization
    'Tokenizer',
    'WORD_PATTERN',
    'WORD_AND_DIGIT_PATTERN',
    'compile_token_pattern',

    # Dictionaries
    'Dictionary',
    'DictionaryRegistry',
    'load_builtin_registry',
    'load_stopwords_from_file',
    'build_registry',

    # Markup and language tags
    'MarkupStripper',
    'strip_markup',
    'resolve_base_language_code',

    # Filtering and guessing
    'StopwordFilter',
    'collapse_whitespace',
    'get_filter_stats',
    'LanguageGuesser',
    'FilterResult',
    'GuessResult',

    # Pipeline
    'StopwordCleaner',
    'get_default_cleaner',
    'configure_default_cleaner',

    # Shared-cleaner operations
    'clean',
    'filter_count',
    'guess_language',
    'set_include_digits',
    'set_token_pattern'
]
