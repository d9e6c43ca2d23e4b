"""
Unit tests for text normalization and byte decoding.

Tests the TextNormalizer and EncodingDetector classes for canonical
composition, lowercasing and encoding fallbacks.
"""

import pytest
from unittest.mock import patch

from qustop.clean.normalize import TextNormalizer, EncodingDetector


class TestTextNormalizer:
    """Test cases for TextNormalizer class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.normalizer = TextNormalizer()

    def test_basic_normalization(self):
        """Test lowercasing of plain text."""
        assert self.normalizer.normalize("Hello World") == "hello world"

    def test_unicode_composition(self):
        """Test that combining sequences are composed."""
        # e + combining acute accent
        assert self.normalizer.normalize("E\u0301te\u0301") == "\u00e9t\u00e9"
        assert self.normalizer.normalize("ÉTÉ") == "été"

    def test_lowercase_not_casefold(self):
        """Test that sharp s is kept as is."""
        assert self.normalizer.normalize("Straße") == "straße"

    def test_non_latin(self):
        """Test lowercasing of Cyrillic and Greek."""
        assert self.normalizer.normalize("Это") == "это"
        assert self.normalizer.normalize("ΑΥΤΟ") == "αυτο"

    def test_empty_text(self):
        """Test normalization of empty input."""
        assert self.normalizer.normalize("") == ""

    def test_normalize_words(self):
        """Test normalization of word lists."""
        words = self.normalizer.normalize_words(["The", "  and ", "", "   ", "ÉtÉ"])

        assert words == ["the", "and", "été"]

    def test_other_forms(self):
        """Test compatibility normalization when requested."""
        normalizer = TextNormalizer(unicode_form='NFKC')

        # Latin small ligature fi
        assert normalizer.normalize("ﬁn") == "fin"

    def test_invalid_form(self):
        """Test that unknown forms are rejected."""
        with pytest.raises(ValueError):
            TextNormalizer(unicode_form='NFX')


class TestEncodingDetector:
    """Test cases for EncodingDetector class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.detector = EncodingDetector()

    def test_utf8(self):
        """Test decoding of UTF-8 input."""
        assert self.detector.decode("café naïve".encode('utf-8')) == "café naïve"

    def test_empty(self):
        """Test decoding of empty input."""
        assert self.detector.decode(b"") == ""

    def test_detected_encoding(self):
        """Test that a confident detection is used."""
        data = "Привет".encode('cp1251')

        with patch('qustop.clean.normalize.chardet.detect',
                   return_value={'encoding': 'windows-1251', 'confidence': 0.99}):
            assert self.detector.decode(data) == "Привет"

    def test_fallback_when_unsure(self):
        """Test fallback encodings when detection is not confident."""
        data = "café".encode('cp1252')

        with patch('qustop.clean.normalize.chardet.detect',
                   return_value={'encoding': 'ascii', 'confidence': 0.3}):
            assert self.detector.decode(data) == "café"

    def test_fallback_when_detection_fails(self):
        """Test fallback encodings when the detected encoding cannot decode."""
        data = "café".encode('cp1252')

        with patch('qustop.clean.normalize.chardet.detect',
                   return_value={'encoding': 'ascii', 'confidence': 0.95}):
            assert self.detector.decode(data) == "café"

    def test_custom_fallbacks(self):
        """Test configured fallback encodings."""
        detector = EncodingDetector({'fallback_encodings': ['latin-1']})

        with patch('qustop.clean.normalize.chardet.detect',
                   return_value={'encoding': None, 'confidence': 0.0}):
            assert detector.decode(b"\x80abc") == "\x80abc"

    def test_detect(self):
        """Test the raw detection result."""
        with patch('qustop.clean.normalize.chardet.detect',
                   return_value={'encoding': 'utf-8', 'confidence': None}):
            assert self.detector.detect(b"abc") == ('utf-8', 0.0)
