"""
Word segmentation module.

This module splits normalized text into word tokens using a Unicode-aware
pattern. The default token class is letters, combining marks, hyphen,
underscore and apostrophe; decimal digits can be included, or the whole
pattern replaced by a custom expression.
"""

import logging
import regex
from typing import Iterator, List, Optional

from ..config import TokenizerConfig
from ..models import ProcessingError, ErrorSeverity

logger = logging.getLogger(__name__)

WORD_PATTERN = r"[\p{L}\p{Mc}\p{Mn}\-_']+"
WORD_AND_DIGIT_PATTERN = r"[\p{L}\p{Mc}\p{Mn}\p{Nd}\-_']+"


def compile_token_pattern(pattern: str) -> regex.Pattern:
    """
    Compile a token pattern, rejecting it immediately if unusable.

    Raises:
        ProcessingError: If the pattern is empty or malformed
    """
    if not pattern:
        raise ProcessingError(
            stage="configuration",
            error_type="InvalidTokenPattern",
            message="Token pattern must not be empty",
            severity=ErrorSeverity.HIGH
        )
    try:
        compiled = regex.compile(pattern)
    except regex.error as e:
        raise ProcessingError(
            stage="configuration",
            error_type="InvalidTokenPattern",
            message=f"Failed to compile token pattern {pattern!r}: {e}",
            severity=ErrorSeverity.HIGH,
            context={"pattern": pattern}
        )
    return compiled


class Tokenizer:
    """
    Splits text into word tokens.

    A Tokenizer is built once from a TokenizerConfig and shared by reference.
    Its settings can be changed with ``set_include_digits`` and
    ``set_token_pattern``; changes apply to later calls only and must not
    race with concurrent tokenization.
    """

    def __init__(self, config: Optional[TokenizerConfig] = None):
        self.config = config or TokenizerConfig()
        self._pattern = compile_token_pattern(self._pattern_source(self.config))

    @staticmethod
    def _pattern_source(config: TokenizerConfig) -> str:
        if config.custom_pattern:
            return config.custom_pattern
        return WORD_AND_DIGIT_PATTERN if config.include_digits else WORD_PATTERN

    @property
    def pattern(self) -> str:
        """Source of the active token pattern."""
        return self._pattern.pattern

    @property
    def include_digits(self) -> bool:
        return self.config.include_digits

    def set_include_digits(self, include: bool = True) -> None:
        """Include Unicode decimal digits in the default token class."""
        config = self.config.model_copy(update={'include_digits': bool(include)})
        self._apply(config)

    def set_token_pattern(self, pattern: Optional[str]) -> None:
        """
        Replace the token pattern. ``None`` restores the default pattern.

        Raises:
            ProcessingError: If the pattern is invalid; the previous pattern stays active
        """
        config = self.config.model_copy(update={'custom_pattern': pattern or None})
        self._apply(config)

    def _apply(self, config: TokenizerConfig) -> None:
        compiled = compile_token_pattern(self._pattern_source(config))
        self.config = config
        self._pattern = compiled
        logger.debug(f"Token pattern set to {compiled.pattern!r}")

    def iter_tokens(self, text: str) -> Iterator[str]:
        """Yield non-empty tokens from left to right."""
        if not text:
            return
        for match in self._pattern.finditer(text):
            token = match.group(0)
            if token:
                yield token

    def tokenize(self, text: str) -> List[str]:
        """Return the list of tokens in text."""
        return list(self.iter_tokens(text))

    def count_tokens(self, text: str) -> int:
        """Number of tokens in text."""
        return sum(1 for _ in self.iter_tokens(text))
