"""
Language guessing by stop-word frequency.

This module guesses which of several candidate languages a text is written
in by counting how many of its tokens each candidate's stop-word dictionary
contains. It is a frequency heuristic, not a classifier: several candidates
can tie for the best score, and a text matching no stop words has no
winner at all.
"""

import logging
from typing import Dict, Iterable, List, Optional

from ..models import GuessResult
from .dictionaries import DictionaryRegistry, load_builtin_registry
from .html_cleaner import MarkupStripper
from .stopwords import StopwordFilter, collapse_whitespace

logger = logging.getLogger(__name__)


class LanguageGuesser:
    """
    Guesses the language of a text among candidate language codes.

    Candidates without a dictionary in the registry are skipped. Ties are
    broken by candidate order: the first winner's dictionary cleans the
    text, so callers should list the most likely languages first.
    """

    def __init__(self,
                 registry: Optional[DictionaryRegistry] = None,
                 stopword_filter: Optional[StopwordFilter] = None,
                 markup_stripper: Optional[MarkupStripper] = None):
        """
        Initialize LanguageGuesser.

        Args:
            registry: Dictionaries by language code (bundled ones by default)
            stopword_filter: Filter used for scoring and cleaning
            markup_stripper: Markup remover applied when requested
        """
        self.registry = registry if registry is not None else load_builtin_registry()
        self.stopword_filter = stopword_filter or StopwordFilter()
        self.markup_stripper = markup_stripper or MarkupStripper()

    def score_languages(self, content: str, candidate_codes: Iterable[str]) -> Dict[str, int]:
        """
        Count stop-word matches of content for every supported candidate.

        Every candidate is scored independently against the same tokens.

        Args:
            content: Text to score (markup is not stripped here)
            candidate_codes: Language codes, most likely first

        Returns:
            Match count by language code, in candidate order
        """
        normalizer = self.stopword_filter.normalizer
        tokenizer = self.stopword_filter.tokenizer
        tokens = tokenizer.tokenize(normalizer.normalize(content))

        scores: Dict[str, int] = {}
        for code in candidate_codes:
            if code in scores:
                continue
            dictionary = self.registry.get(code)
            if dictionary is None:
                logger.debug(f"No stop-word dictionary for candidate {code!r}, skipping")
                continue
            scores[code] = sum(1 for token in tokens if token in dictionary)
        return scores

    def guess_language(self, content: str, candidate_codes: Iterable[str],
                       strip_markup: bool = True) -> GuessResult:
        """
        Guess the language of content and remove its stop words.

        Args:
            content: Text to analyze
            candidate_codes: Language codes, most likely first
            strip_markup: Whether to remove tags and decode entities first

        Returns:
            GuessResult; when ``max_count`` is 0 the content is returned
            without stop-word filtering and no language is reported
        """
        if strip_markup:
            content = self.markup_stripper.strip(content)

        scores = self.score_languages(content, candidate_codes)
        max_count = max(scores.values(), default=0)

        if max_count == 0:
            logger.debug(f"No stop words matched among candidates {list(scores)}")
            return GuessResult(cleaned_text=content)

        languages = [code for code, count in scores.items() if count == max_count]
        result = self.stopword_filter.filter_count(content, self.registry[languages[0]])

        logger.debug(f"Guessed {languages} with {max_count}/{result.total_count} stop words")
        return GuessResult(
            cleaned_text=collapse_whitespace(result.cleaned_text),
            languages=languages,
            max_count=max_count,
            total_count=result.total_count
        )

    def guess_many(self, texts: Iterable[str], candidate_codes: Iterable[str],
                   strip_markup: bool = True) -> List[GuessResult]:
        """
        Guess languages for multiple texts in batch.

        Args:
            texts: Texts to analyze
            candidate_codes: Language codes, most likely first
            strip_markup: Whether to remove tags and decode entities first

        Returns:
            List of GuessResult objects
        """
        candidates = list(candidate_codes)
        return [self.guess_language(text, candidates, strip_markup) for text in texts]
