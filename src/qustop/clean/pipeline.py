"""
Stop-word cleaning pipeline.

This module provides a unified interface for cleaning text in a known
language: optional markup removal, language tag resolution, dictionary
selection and stop-word filtering. Unknown or unsupported languages are
passed through without filtering.
"""

import logging
from typing import Iterable, List, Optional, Union

from ..config import QuStopConfig
from ..models import FilterResult, GuessResult
from .dictionaries import DictionaryRegistry, build_registry, load_builtin_registry
from .html_cleaner import MarkupStripper
from .language import LanguageGuesser
from .language_tags import resolve_base_language_code
from .normalize import EncodingDetector, TextNormalizer
from .stopwords import StopwordFilter, collapse_whitespace
from .tokenization import Tokenizer

logger = logging.getLogger(__name__)


class StopwordCleaner:
    """
    Cleans stop words from text in a given language.

    Holds one Tokenizer, one registry and the components built on them;
    the tokenizer is shared with the filter and the guesser so changing its
    settings here changes them everywhere.
    """

    def __init__(self,
                 tokenizer: Optional[Tokenizer] = None,
                 registry: Optional[DictionaryRegistry] = None,
                 markup_stripper: Optional[MarkupStripper] = None,
                 encoding_detector: Optional[EncodingDetector] = None,
                 guess_candidates: Optional[List[str]] = None):
        """
        Initialize StopwordCleaner.

        Args:
            tokenizer: Word segmenter shared by all components
            registry: Dictionaries by language code (bundled ones by default)
            markup_stripper: Markup remover
            encoding_detector: Decoder for byte input
            guess_candidates: Default candidates for ``guess_language``
        """
        self.tokenizer = tokenizer or Tokenizer()
        self.registry = registry if registry is not None else load_builtin_registry()
        self.markup_stripper = markup_stripper or MarkupStripper()
        self.encoding_detector = encoding_detector or EncodingDetector()
        self.guess_candidates = list(guess_candidates or [])

        self.stopword_filter = StopwordFilter(tokenizer=self.tokenizer, normalizer=TextNormalizer())
        self.guesser = LanguageGuesser(
            registry=self.registry,
            stopword_filter=self.stopword_filter,
            markup_stripper=self.markup_stripper
        )

    @classmethod
    def from_config(cls, config: Optional[QuStopConfig] = None) -> 'StopwordCleaner':
        """Build a cleaner from a validated configuration."""
        config = config or QuStopConfig()
        return cls(
            tokenizer=Tokenizer(config.tokenizer),
            registry=build_registry(config.dictionaries),
            guess_candidates=config.guess.candidates
        )

    def set_include_digits(self, include: bool = True) -> None:
        """Include decimal digits in tokens."""
        self.tokenizer.set_include_digits(include)

    def set_token_pattern(self, pattern: Optional[str]) -> None:
        """Replace the token pattern; ``None`` restores the default."""
        self.tokenizer.set_token_pattern(pattern)

    def supported_languages(self) -> List[str]:
        """Language codes with a stop-word dictionary."""
        return self.registry.codes()

    def clean(self, content: str, language: str, strip_markup: bool = False) -> str:
        """
        Remove stop words of a language from content.

        Args:
            content: Text to clean
            language: BCP 47 tag or ISO 639 code
            strip_markup: Whether to remove tags and decode entities first

        Returns:
            Cleaned text; unsupported languages pass through unfiltered
        """
        if strip_markup:
            content = self.markup_stripper.strip(content)

        code = resolve_base_language_code(language)
        dictionary = self.registry.get(code)
        if dictionary is None:
            logger.debug(f"No stop-word dictionary for {language!r}, passing content through")
        else:
            content = self.stopword_filter.filter_count(content, dictionary).cleaned_text

        return collapse_whitespace(content)

    def clean_bytes(self, data: bytes, language: str, strip_markup: bool = False) -> bytes:
        """Clean byte content, returning UTF-8 bytes."""
        text = self.encoding_detector.decode(data)
        return self.clean(text, language, strip_markup).encode('utf-8')

    def filter_count(self, content: str, language: str) -> Optional[FilterResult]:
        """
        Filter content with the dictionary of a language, keeping the counts.

        Returns:
            FilterResult, or None when the language has no dictionary
        """
        dictionary = self.registry.get(resolve_base_language_code(language))
        if dictionary is None:
            return None
        return self.stopword_filter.filter_count(content, dictionary)

    def guess_language(self, content: str, candidate_codes: Optional[Iterable[str]] = None,
                       strip_markup: bool = True) -> GuessResult:
        """
        Guess the language of content among candidates and clean it.

        Args:
            content: Text to analyze
            candidate_codes: Language codes, most likely first (configured defaults if omitted)
            strip_markup: Whether to remove tags and decode entities first
        """
        if candidate_codes is None:
            candidate_codes = self.guess_candidates
        return self.guesser.guess_language(content, candidate_codes, strip_markup)

    def batch_clean(self, contents: Iterable[str], language: str,
                    strip_markup: bool = False) -> List[str]:
        """
        Clean multiple texts in the same language.

        Args:
            contents: Texts to clean
            language: BCP 47 tag or ISO 639 code
            strip_markup: Whether to remove tags and decode entities first

        Returns:
            List of cleaned texts
        """
        return [self.clean(content, language, strip_markup) for content in contents]


# Global cleaner instance
_default_cleaner: Optional[StopwordCleaner] = None


def get_default_cleaner() -> StopwordCleaner:
    """
    Get the shared StopwordCleaner instance (singleton pattern).

    Returns:
        Cleaner with the default tokenizer and the bundled dictionaries
    """
    global _default_cleaner
    if _default_cleaner is None:
        _default_cleaner = StopwordCleaner(guess_candidates=QuStopConfig().guess.candidates)
    return _default_cleaner


def configure_default_cleaner(config: Union[QuStopConfig, StopwordCleaner, None]) -> StopwordCleaner:
    """Replace the shared cleaner; call at startup, before concurrent use."""
    global _default_cleaner
    if isinstance(config, StopwordCleaner):
        _default_cleaner = config
    else:
        _default_cleaner = StopwordCleaner.from_config(config)
    return _default_cleaner
