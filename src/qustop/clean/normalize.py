"""
Text normalization module.

This module canonicalizes text before tokenization and dictionary lookup
(Unicode canonical composition followed by lowercasing), and decodes raw
byte input into text using encoding detection.
"""

import logging
import unicodedata
import chardet
from typing import Dict, List, Optional, Tuple, Any

logger = logging.getLogger(__name__)


class TextNormalizer:
    """
    Canonicalizes text so that tokens and dictionary entries compare equal.

    Precomposed and decomposed spellings of the same character normalize to
    the same form, and case differences disappear.
    """

    def __init__(self, unicode_form: str = 'NFC'):
        """
        Initialize TextNormalizer.

        Args:
            unicode_form: Unicode normalization form applied before lowercasing
        """
        if unicode_form not in ('NFC', 'NFD', 'NFKC', 'NFKD'):
            raise ValueError(f"Unknown Unicode normalization form: {unicode_form}")
        self.unicode_form = unicode_form

    def normalize(self, text: str) -> str:
        """
        Compose and lowercase text.

        Uses str.lower(), not casefold(): only simple per-character case
        mappings apply, so "ß" stays "ß" and dictionary words must be listed
        in the same form.
        """
        if not text:
            return ""
        return unicodedata.normalize(self.unicode_form, text).lower()

    def normalize_words(self, words) -> List[str]:
        """Normalize an iterable of word forms, dropping blank entries."""
        normalized = []
        for word in words:
            word = self.normalize(word.strip())
            if word:
                normalized.append(word)
        return normalized


class EncodingDetector:
    """
    Encoding detection for byte input.

    Detects the text encoding with chardet and falls back to a list of
    common encodings when detection is missing or not confident enough.
    """

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize EncodingDetector.

        Args:
            config: Configuration dictionary with encoding settings
        """
        self.config = config or {}

        # Confidence threshold for encoding detection
        self.confidence_threshold = self.config.get('confidence_threshold', 0.7)

        # Fallback encodings to try if detection fails; latin-1 never fails
        self.fallback_encodings = self.config.get('fallback_encodings', [
            'utf-8', 'cp1252', 'latin-1'
        ])

    def detect(self, data: bytes) -> Tuple[Optional[str], float]:
        """Return the detected encoding and its confidence."""
        detection = chardet.detect(data)
        return detection.get('encoding'), detection.get('confidence') or 0.0

    def decode(self, data: bytes) -> str:
        """
        Decode byte data to text.

        Args:
            data: Raw byte data

        Returns:
            Decoded text
        """
        if not data:
            return ""

        # UTF-8 first: chardet is easily unsure on short inputs
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError:
            pass

        encoding, confidence = self.detect(data)
        if encoding and confidence >= self.confidence_threshold:
            try:
                return data.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                logger.debug(f"Detected encoding {encoding} failed to decode input")

        text, used = self._try_fallback_encodings(data)
        logger.debug(f"Decoded input with fallback encoding {used}")
        return text

    def _try_fallback_encodings(self, data: bytes) -> Tuple[str, str]:
        """
        Try fallback encodings when detection fails.

        Args:
            data: Raw byte data to decode

        Returns:
            Tuple of (decoded_text, encoding_used)
        """
        for encoding in self.fallback_encodings:
            try:
                return data.decode(encoding), encoding
            except (UnicodeDecodeError, LookupError):
                continue
        return data.decode('utf-8', errors='replace'), 'utf-8'
