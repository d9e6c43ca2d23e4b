"""
Core data models for QuStop.

This module contains the result records returned by the filtering and
language guessing operations, and the structured error raised when
configuration is rejected.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorSeverity(Enum):
    """Severity levels for processing errors."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ProcessingError(Exception):
    """Represents an error that occurred while configuring or processing."""
    stage: str
    error_type: str
    message: str
    severity: ErrorSeverity
    timestamp: datetime = field(default_factory=datetime.now)
    context: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.stage}] {self.error_type}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "stage": self.stage,
            "error_type": self.error_type,
            "message": self.message,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context
        }


@dataclass
class FilterResult:
    """Result of a single stop-word filtering pass."""
    cleaned_text: str
    match_count: int = 0
    total_count: int = 0

    @property
    def kept_count(self) -> int:
        """Number of tokens that were not stop words."""
        return self.total_count - self.match_count

    @property
    def match_ratio(self) -> float:
        """Share of scanned tokens found in the dictionary."""
        if self.total_count == 0:
            return 0.0
        return self.match_count / self.total_count

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "cleaned_text": self.cleaned_text,
            "match_count": self.match_count,
            "total_count": self.total_count
        }


@dataclass
class GuessResult:
    """
    Result of guessing the language of a text among candidates.

    ``languages`` holds every candidate tied for ``max_count``, in the order
    the candidates were given. When ``max_count`` is 0 nothing was matched
    and ``cleaned_text`` carries no stop-word filtering.
    """
    cleaned_text: str
    languages: List[str] = field(default_factory=list)
    max_count: int = 0
    total_count: int = 0

    @property
    def language(self) -> Optional[str]:
        """First winning language, used for cleaning."""
        return self.languages[0] if self.languages else None

    @property
    def is_confident(self) -> bool:
        """Whether at least one stop word was matched."""
        return self.max_count > 0

    @property
    def is_ambiguous(self) -> bool:
        """Whether several candidates tied for the best score."""
        return len(self.languages) > 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        return {
            "cleaned_text": self.cleaned_text,
            "languages": list(self.languages),
            "max_count": self.max_count,
            "total_count": self.total_count
        }
