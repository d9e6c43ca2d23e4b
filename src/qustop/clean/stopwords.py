"""
Stop-word filtering module.

This module removes the words of a language dictionary from text while
counting how many tokens matched. The output is canonical rather than
byte-faithful: text is normalized and tokenized, every token is followed
by a single space, and a matched token leaves only its space behind so
neighbouring words never merge. Original punctuation and spacing are lost.
"""

import re
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from ..models import FilterResult
from .dictionaries import Dictionary
from .normalize import TextNormalizer
from .tokenization import Tokenizer

SEPARATOR = ' '

_whitespace_run_pattern = re.compile(r'[\t\n\f\r ]{2,}')


def collapse_whitespace(text: str) -> str:
    """
    Replace every run of two or more whitespace characters by one space.

    Only ASCII tab, newline, form feed, carriage return and space count;
    no-break and other Unicode spaces are left alone.
    """
    return _whitespace_run_pattern.sub(' ', text)


class StopwordFilter:
    """
    Removes dictionary words from text and counts matches.

    The tokenizer is shared by reference, so settings changed on it apply to
    every filter built with it.
    """

    def __init__(self,
                 tokenizer: Optional[Tokenizer] = None,
                 normalizer: Optional[TextNormalizer] = None):
        """
        Initialize StopwordFilter.

        Args:
            tokenizer: Word segmenter to use
            normalizer: Normalizer applied before tokenization
        """
        self.tokenizer = tokenizer or Tokenizer()
        self.normalizer = normalizer or TextNormalizer()

    def filter_count(self, text: str, dictionary: Dictionary) -> FilterResult:
        """
        Remove stop words from text, counting matched and scanned tokens.

        Args:
            text: Input text
            dictionary: Stop words of one language

        Returns:
            FilterResult with the canonical output and the counts
        """
        parts: List[str] = []
        match_count = 0
        total_count = 0

        for token in self.tokenizer.iter_tokens(self.normalizer.normalize(text)):
            if token in dictionary:
                parts.append(SEPARATOR)
                match_count += 1
            else:
                parts.append(token)
                parts.append(SEPARATOR)
            total_count += 1

        return FilterResult(
            cleaned_text=''.join(parts),
            match_count=match_count,
            total_count=total_count
        )

    def filter(self, text: str, dictionary: Dictionary) -> str:
        """Remove stop words from text and collapse the leftover spacing."""
        return collapse_whitespace(self.filter_count(text, dictionary).cleaned_text)

    def filter_many(self, texts: Iterable[str], dictionary: Dictionary) -> List[FilterResult]:
        """
        Filter multiple texts in batch.

        Args:
            texts: Texts to process
            dictionary: Stop words of one language

        Returns:
            List of FilterResult objects
        """
        return [self.filter_count(text, dictionary) for text in texts]

    def matched_words(self, text: str, dictionary: Dictionary) -> Counter:
        """Count how often each stop word occurs in text."""
        return Counter(
            token for token in self.tokenizer.iter_tokens(self.normalizer.normalize(text))
            if token in dictionary
        )


def get_filter_stats(results: List[FilterResult]) -> Dict[str, Any]:
    """
    Get statistics from multiple filter results.

    Args:
        results: List of FilterResult objects

    Returns:
        Dictionary with filtering statistics
    """
    if not results:
        return {}

    total_tokens = sum(r.total_count for r in results)
    total_matches = sum(r.match_count for r in results)

    return {
        'total_documents': len(results),
        'total_tokens': total_tokens,
        'total_matches': total_matches,
        'total_kept': total_tokens - total_matches,
        'overall_match_ratio': total_matches / total_tokens if total_tokens else 0.0,
        'average_match_ratio': sum(r.match_ratio for r in results) / len(results),
        'average_tokens_per_document': total_tokens / len(results),
    }
