"""
Stop-word dictionaries and the language registry.

Each language has one Dictionary: an immutable set of lowercase,
NFC-composed word forms. The registry maps language codes to
dictionaries and is built once from the word lists bundled in
``qustop/data/stopwords`` (one ``<code>.txt`` file per language, one word
per line, ``#`` starts a comment). Adding a language means adding a file.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set

from ..models import ProcessingError, ErrorSeverity
from .normalize import TextNormalizer

logger = logging.getLogger(__name__)

WORD_LIST_SUFFIX = '.txt'


@dataclass(frozen=True)
class Dictionary:
    """Stop words of one language."""
    code: str
    words: FrozenSet[str]
    source: Optional[str] = None

    def __contains__(self, word: str) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    @classmethod
    def from_words(cls, code: str, words: Iterable[str],
                   normalizer: Optional[TextNormalizer] = None,
                   source: Optional[str] = None) -> 'Dictionary':
        """Build a dictionary, normalizing every word form."""
        normalizer = normalizer or TextNormalizer()
        return cls(code=code, words=frozenset(normalizer.normalize_words(words)), source=source)


def parse_word_list(text: str) -> List[str]:
    """Extract word forms from the contents of a word list file."""
    words = []
    for line in text.splitlines():
        word = line.split('#', 1)[0].strip()
        if word:
            words.append(word)
    return words


def load_stopwords_from_file(file_path: str) -> Set[str]:
    """
    Load stop words from a file.

    Args:
        file_path: Path to file containing stop words (one per line)

    Returns:
        Set of lowercase stop words

    Raises:
        ProcessingError: If the file cannot be read
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ProcessingError(
            stage="dictionary_loading",
            error_type="DictionaryLoadError",
            message=f"Failed to load stop words from {file_path}: {e}",
            severity=ErrorSeverity.HIGH,
            context={"path": str(file_path)}
        )
    return {word.lower() for word in parse_word_list(text)}


def load_dictionary_file(file_path, code: Optional[str] = None,
                         normalizer: Optional[TextNormalizer] = None) -> Dictionary:
    """Load one dictionary; the language code defaults to the file stem."""
    file_path = Path(file_path)
    code = (code or file_path.stem).lower()
    words = load_stopwords_from_file(str(file_path))
    return Dictionary.from_words(code, words, normalizer=normalizer, source=str(file_path))


class DictionaryRegistry(Mapping):
    """
    Read-only mapping from language code to Dictionary.

    Lookups of unknown codes are not errors: use ``get`` or ``in``.
    ``extend`` and ``restrict`` return new registries and leave this one
    untouched, so a registry can be shared freely once built.
    """

    def __init__(self, dictionaries: Iterable[Dictionary] = ()):
        entries: Dict[str, Dictionary] = {}
        for dictionary in dictionaries:
            entries[dictionary.code] = dictionary
        self._dictionaries = MappingProxyType(entries)

    def __getitem__(self, code: str) -> Dictionary:
        return self._dictionaries[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._dictionaries)

    def __len__(self) -> int:
        return len(self._dictionaries)

    def __repr__(self) -> str:
        return f"DictionaryRegistry({', '.join(self.codes())})"

    def codes(self) -> List[str]:
        """Sorted language codes."""
        return sorted(self._dictionaries)

    def extend(self, dictionaries: Iterable[Dictionary]) -> 'DictionaryRegistry':
        """New registry with additional dictionaries; same codes are replaced."""
        return DictionaryRegistry(list(self._dictionaries.values()) + list(dictionaries))

    def restrict(self, codes: Iterable[str]) -> 'DictionaryRegistry':
        """New registry limited to the given codes."""
        wanted = set(codes)
        return DictionaryRegistry(d for code, d in self._dictionaries.items() if code in wanted)

    @classmethod
    def from_directory(cls, directory, normalizer: Optional[TextNormalizer] = None) -> 'DictionaryRegistry':
        """Load every ``<code>.txt`` word list of a directory."""
        directory = Path(directory)
        if not directory.is_dir():
            raise ProcessingError(
                stage="dictionary_loading",
                error_type="DictionaryLoadError",
                message=f"Stop-word directory not found: {directory}",
                severity=ErrorSeverity.HIGH,
                context={"path": str(directory)}
            )
        return cls(
            load_dictionary_file(path, normalizer=normalizer)
            for path in sorted(directory.glob(f'*{WORD_LIST_SUFFIX}'))
        )


def _builtin_word_lists():
    return resources.files('qustop') / 'data' / 'stopwords'


@lru_cache(maxsize=None)
def load_builtin_registry() -> DictionaryRegistry:
    """
    Registry of the bundled word lists.

    Built on first use and shared by every caller afterwards.
    """
    normalizer = TextNormalizer()
    dictionaries = []
    for entry in sorted(_builtin_word_lists().iterdir(), key=lambda e: e.name):
        if not entry.name.endswith(WORD_LIST_SUFFIX):
            continue
        code = entry.name[:-len(WORD_LIST_SUFFIX)].lower()
        words = parse_word_list(entry.read_text(encoding='utf-8'))
        dictionaries.append(Dictionary.from_words(code, words, normalizer=normalizer, source=entry.name))

    registry = DictionaryRegistry(dictionaries)
    logger.info(f"Loaded {len(registry)} built-in stop-word dictionaries")
    return registry


def build_registry(config=None, normalizer: Optional[TextNormalizer] = None) -> DictionaryRegistry:
    """
    Build a registry from a DictionaryConfig.

    Starts from the bundled word lists, adds the configured directories and
    files (later entries replace earlier ones for the same code), then keeps
    only the configured languages if a whitelist is given.
    """
    registry = load_builtin_registry()
    if config is None:
        return registry

    extra: List[Dictionary] = []
    for directory in config.extra_dirs:
        extra.extend(DictionaryRegistry.from_directory(directory, normalizer=normalizer).values())
    for code, path in config.extra_files.items():
        extra.append(load_dictionary_file(path, code=code, normalizer=normalizer))
    if extra:
        registry = registry.extend(extra)
        logger.info(f"Added {len(extra)} stop-word dictionaries from configuration")

    if config.languages is not None:
        missing = set(config.languages) - set(registry)
        if missing:
            logger.warning(f"No stop-word dictionary for configured languages: {sorted(missing)}")
        registry = registry.restrict(config.languages)

    return registry
