"""
Configuration management for QuStop.

This module provides configuration loading and validation for the
tokenizer, the stop-word dictionaries and the language guesser.
"""

import yaml
from pathlib import Path
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict

from .models import ProcessingError


class BaseConfig(BaseModel):
    """Base configuration class with common validation."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        validate_assignment=True
    )


class TokenizerConfig(BaseConfig):
    """Configuration for word segmentation."""
    include_digits: bool = False
    custom_pattern: Optional[str] = None

    @field_validator('custom_pattern')
    @classmethod
    def validate_pattern(cls, v):
        """Reject patterns the tokenizer cannot compile."""
        if v is None:
            return v
        # Imported here: the tokenizer module depends on this one
        from .clean.tokenization import compile_token_pattern
        try:
            compile_token_pattern(v)
        except ProcessingError as e:
            raise ValueError(e.message)
        return v


class DictionaryConfig(BaseConfig):
    """Configuration for the stop-word dictionary registry."""
    extra_dirs: List[str] = Field(default_factory=list)
    extra_files: Dict[str, str] = Field(default_factory=dict)
    languages: Optional[List[str]] = None

    @field_validator('extra_files')
    @classmethod
    def validate_codes(cls, v):
        """Language codes must be plain lowercase keys."""
        for code in v:
            if not code or code != code.strip().lower():
                raise ValueError(f"Invalid language code: {code!r}")
        return v


class GuessConfig(BaseConfig):
    """Configuration for language guessing."""
    candidates: List[str] = Field(default=["en", "fr", "de", "es", "it", "pt", "nl"])
    strip_markup: bool = True


class QuStopConfig(BaseConfig):
    """Main configuration."""
    name: str = "qustop"
    version: str = "1.0.0"

    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    dictionaries: DictionaryConfig = Field(default_factory=DictionaryConfig)
    guess: GuessConfig = Field(default_factory=GuessConfig)

    default_language: str = "en"
    strip_markup: bool = False
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @model_validator(mode='before')
    @classmethod
    def handle_flat_tokenizer_keys(cls, data):
        """Accept tokenizer options written at the top level of the YAML file."""
        if isinstance(data, dict):
            data = dict(data)
            flat = {key: data.pop(key) for key in ('include_digits', 'custom_pattern') if key in data}
            if flat:
                tokenizer = dict(data.get('tokenizer') or {})
                for key, value in flat.items():
                    tokenizer.setdefault(key, value)
                data['tokenizer'] = tokenizer
        return data


def load_config_file(config_path) -> QuStopConfig:
    """
    Load and validate a single YAML configuration file.

    A top-level ``qustop`` section is unwrapped if present.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML or its values are invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path.name}: {e}")

    if not config_data:
        config_data = {}
    if not isinstance(config_data, dict):
        raise ValueError(f"Configuration in {config_path.name} must be a mapping")

    if 'qustop' in config_data:
        config_data = config_data['qustop'] or {}

    try:
        return QuStopConfig(**config_data)
    except ValueError as e:
        raise ValueError(f"Error loading configuration from {config_path.name}: {e}")


def write_config_template(output_path) -> Path:
    """Write the default configuration as a YAML template."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump({'qustop': QuStopConfig().model_dump()}, f, default_flow_style=False, indent=2)
    return output_path

