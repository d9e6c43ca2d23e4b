"""
Unit tests for core data models in QuStop.

Tests cover result records, their derived properties and serialization,
and the structured processing error.
"""

import json
from datetime import datetime

import pytest

from qustop.models import ErrorSeverity, FilterResult, GuessResult, ProcessingError


class TestFilterResult:
    """Test cases for the FilterResult dataclass."""

    def test_filter_result_creation(self):
        """Test creating a FilterResult with all fields."""
        result = FilterResult(cleaned_text=" cat ", match_count=1, total_count=2)

        assert result.cleaned_text == " cat "
        assert result.match_count == 1
        assert result.total_count == 2
        assert result.kept_count == 1
        assert result.match_ratio == 0.5

    def test_filter_result_defaults(self):
        """Test FilterResult with default counts."""
        result = FilterResult(cleaned_text="")

        assert result.match_count == 0
        assert result.total_count == 0
        assert result.match_ratio == 0.0

    def test_filter_result_to_dict(self):
        """Test FilterResult serialization to dictionary."""
        result = FilterResult(cleaned_text="dog ", match_count=0, total_count=1)

        assert result.to_dict() == {
            "cleaned_text": "dog ",
            "match_count": 0,
            "total_count": 1
        }


class TestGuessResult:
    """Test cases for the GuessResult dataclass."""

    def test_single_winner(self):
        """Test a result with one winning language."""
        result = GuessResult(cleaned_text=" chat ", languages=["fr"], max_count=2, total_count=3)

        assert result.language == "fr"
        assert result.is_confident is True
        assert result.is_ambiguous is False

    def test_tie(self):
        """Test a result with tied languages."""
        result = GuessResult(cleaned_text="le ", languages=["en", "fr"], max_count=1, total_count=2)

        assert result.language == "en"
        assert result.is_ambiguous is True

    def test_no_match(self):
        """Test a result where no stop word matched."""
        result = GuessResult(cleaned_text="xyzzy")

        assert result.language is None
        assert result.languages == []
        assert result.is_confident is False
        assert result.is_ambiguous is False

    def test_guess_result_to_dict(self):
        """Test GuessResult serialization is JSON compatible."""
        result = GuessResult(cleaned_text=" chat ", languages=["fr"], max_count=2, total_count=3)

        data = json.loads(json.dumps(result.to_dict()))

        assert data == {
            "cleaned_text": " chat ",
            "languages": ["fr"],
            "max_count": 2,
            "total_count": 3
        }


class TestProcessingError:
    """Test cases for the ProcessingError exception."""

    def test_processing_error_creation(self):
        """Test creating and raising a ProcessingError."""
        error = ProcessingError(
            stage="configuration",
            error_type="InvalidTokenPattern",
            message="Invalid token pattern '['",
            severity=ErrorSeverity.HIGH,
            context={"pattern": "["}
        )

        assert isinstance(error.timestamp, datetime)
        assert str(error) == "[configuration] InvalidTokenPattern: Invalid token pattern '['"

        with pytest.raises(ProcessingError):
            raise error

    def test_processing_error_to_dict(self):
        """Test ProcessingError serialization to dictionary."""
        timestamp = datetime(2024, 1, 1, 12, 0, 0)
        error = ProcessingError(
            stage="dictionary_loading",
            error_type="DictionaryLoadError",
            message="Failed to load stop words",
            severity=ErrorSeverity.MEDIUM,
            timestamp=timestamp
        )

        assert error.to_dict() == {
            "stage": "dictionary_loading",
            "error_type": "DictionaryLoadError",
            "message": "Failed to load stop words",
            "severity": "medium",
            "timestamp": "2024-01-01T12:00:00",
            "context": {}
        }
