"""
Unit tests for stop-word dictionaries and the language registry.
"""

import dataclasses

import pytest

from qustop.clean.dictionaries import (
    Dictionary, DictionaryRegistry, build_registry, load_builtin_registry,
    load_dictionary_file, load_stopwords_from_file, parse_word_list
)
from qustop.clean.normalize import TextNormalizer
from qustop.config import DictionaryConfig
from qustop.models import ProcessingError

BUNDLED_CODES = [
    "ar", "bg", "ca", "cs", "da", "de", "el", "en", "es", "fa",
    "fi", "fr", "hu", "id", "it", "ja", "km", "lv", "nl", "no",
    "pl", "pt", "ro", "ru", "sk", "sv", "th", "tr"
]


class TestBuiltinRegistry:
    """Test cases for the bundled word lists."""

    def test_all_languages_present(self):
        """Test that every bundled language is registered."""
        registry = load_builtin_registry()

        assert registry.codes() == BUNDLED_CODES
        assert len(registry) == 28

    def test_registry_is_cached(self):
        """Test that the registry is built once."""
        assert load_builtin_registry() is load_builtin_registry()

    def test_dictionaries_not_empty(self):
        """Test that no bundled dictionary is empty."""
        for code, dictionary in load_builtin_registry().items():
            assert dictionary.code == code
            assert len(dictionary) > 0, code

    def test_entries_are_normalized(self):
        """Test that every entry is composed and lowercase."""
        normalizer = TextNormalizer()

        for dictionary in load_builtin_registry().values():
            for word in dictionary.words:
                assert word == normalizer.normalize(word)
                assert word == word.strip()
                assert not word.startswith('#')

    def test_common_words(self):
        """Test a few well-known stop words."""
        registry = load_builtin_registry()

        assert "the" in registry["en"]
        assert "le" in registry["fr"]
        assert "der" in registry["de"]
        assert "el" in registry["es"]
        assert "и" in registry["ru"]
        assert "cat" not in registry["en"]

    def test_unknown_code(self):
        """Test that unknown codes are absent, not errors."""
        registry = load_builtin_registry()

        assert registry.get("xx") is None
        assert "xx" not in registry
        assert "" not in registry

    def test_registry_is_read_only(self):
        """Test that neither the registry nor its dictionaries can be changed."""
        registry = load_builtin_registry()

        with pytest.raises(TypeError):
            registry["xx"] = Dictionary.from_words("xx", ["a"])

        with pytest.raises(TypeError):
            registry._dictionaries["xx"] = Dictionary.from_words("xx", ["a"])

        with pytest.raises(dataclasses.FrozenInstanceError):
            registry["en"].words = frozenset()

        with pytest.raises(AttributeError):
            registry["en"].words.add("cat")


class TestDictionary:
    """Test cases for the Dictionary dataclass."""

    def test_from_words_normalizes(self):
        """Test that entries are composed, lowercased and stripped."""
        dictionary = Dictionary.from_words("fr", ["Le", " la ", "Été", ""])

        assert dictionary.words == frozenset({"le", "la", "été"})
        assert "le" in dictionary
        assert "Le" not in dictionary
        assert len(dictionary) == 3

    def test_duplicates_collapse(self):
        """Test that duplicate entries are stored once."""
        dictionary = Dictionary.from_words("en", ["the", "The", "THE"])

        assert len(dictionary) == 1


class TestWordListFiles:
    """Test cases for word list parsing and loading."""

    def test_parse_word_list(self):
        """Test comments and blank lines are ignored."""
        text = "# English\nthe\n\n  and  \nof # preposition\n#skip\n"

        assert parse_word_list(text) == ["the", "and", "of"]

    def test_load_stopwords_from_file(self, tmp_path):
        """Test loading a word list as a lowercase set."""
        path = tmp_path / "words.txt"
        path.write_text("The\nAND\nand\n", encoding="utf-8")

        assert load_stopwords_from_file(str(path)) == {"the", "and"}

    def test_load_missing_file(self, tmp_path):
        """Test that a missing file raises a processing error."""
        with pytest.raises(ProcessingError) as exc_info:
            load_stopwords_from_file(str(tmp_path / "missing.txt"))

        assert exc_info.value.error_type == "DictionaryLoadError"

    def test_load_dictionary_file_code_from_stem(self, tmp_path):
        """Test that the language code defaults to the file name."""
        path = tmp_path / "EO.txt"
        path.write_text("la\nkaj\n", encoding="utf-8")

        dictionary = load_dictionary_file(path)

        assert dictionary.code == "eo"
        assert dictionary.source == str(path)
        assert "kaj" in dictionary


class TestDictionaryRegistry:
    """Test cases for DictionaryRegistry."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = DictionaryRegistry([
            Dictionary.from_words("en", ["the"]),
            Dictionary.from_words("fr", ["le"]),
        ])

    def test_mapping(self):
        """Test the mapping interface."""
        assert list(self.registry) == ["en", "fr"]
        assert self.registry["fr"].code == "fr"
        assert dict(self.registry).keys() == {"en", "fr"}

    def test_extend_returns_new_registry(self):
        """Test that extend leaves the original registry untouched."""
        extended = self.registry.extend([
            Dictionary.from_words("de", ["der"]),
            Dictionary.from_words("en", ["a"]),
        ])

        assert extended.codes() == ["de", "en", "fr"]
        assert "a" in extended["en"]
        assert "de" not in self.registry
        assert "the" in self.registry["en"]

    def test_restrict(self):
        """Test restricting to a subset of codes."""
        restricted = self.registry.restrict(["fr", "xx"])

        assert restricted.codes() == ["fr"]
        assert self.registry.codes() == ["en", "fr"]

    def test_from_directory(self, tmp_path):
        """Test loading every word list of a directory."""
        (tmp_path / "en.txt").write_text("the\n", encoding="utf-8")
        (tmp_path / "fr.txt").write_text("le\n", encoding="utf-8")
        (tmp_path / "notes.md").write_text("ignored\n", encoding="utf-8")

        registry = DictionaryRegistry.from_directory(tmp_path)

        assert registry.codes() == ["en", "fr"]

    def test_from_missing_directory(self, tmp_path):
        """Test that a missing directory is reported."""
        with pytest.raises(ProcessingError):
            DictionaryRegistry.from_directory(tmp_path / "missing")


class TestBuildRegistry:
    """Test cases for building a registry from configuration."""

    def test_no_config(self):
        """Test that no configuration gives the bundled registry."""
        assert build_registry() is load_builtin_registry()

    def test_empty_config(self):
        """Test that an empty configuration keeps every bundled language."""
        assert build_registry(DictionaryConfig()).codes() == BUNDLED_CODES

    def test_whitelist_with_unknown_code(self, caplog):
        """Test that unknown whitelisted codes are logged and skipped."""
        registry = build_registry(DictionaryConfig(languages=["en", "xx"]))

        assert registry.codes() == ["en"]
        assert "xx" in caplog.text

    def test_extra_files_and_dirs(self, tmp_path):
        """Test adding languages from files and directories."""
        words_dir = tmp_path / "lists"
        words_dir.mkdir()
        (words_dir / "eo.txt").write_text("kaj\n", encoding="utf-8")
        extra = tmp_path / "klingon.txt"
        extra.write_text("ghay\n", encoding="utf-8")

        registry = build_registry(DictionaryConfig(
            extra_dirs=[str(words_dir)],
            extra_files={"tlh": str(extra)}
        ))

        assert "eo" in registry
        assert "ghay" in registry["tlh"]
        assert "en" in registry
