"""Tests for DefaultKeyBuilder."""

import pytest

from speciesproxy.core.entities.translation import TranslationStyle
from speciesproxy.infrastructure.key_builders.default import DefaultKeyBuilder


class TestDefaultKeyBuilder:
    """Tests for DefaultKeyBuilder."""

    @pytest.fixture
    def key_builder(self) -> DefaultKeyBuilder:
        return DefaultKeyBuilder()

    def test_species_key(self, key_builder: DefaultKeyBuilder) -> None:
        assert key_builder.build_species_key("pikachu") == "species:pikachu"

    @pytest.mark.parametrize("name", ["Pikachu", "  pikachu ", "PIKACHU\t", "\npikachu"])
    def test_species_key_ignores_case_and_whitespace(
        self, key_builder: DefaultKeyBuilder, name: str
    ) -> None:
        """Test names equal after trim and lowercase share a key."""
        assert key_builder.build_species_key(name) == "species:pikachu"

    def test_different_species_different_key(self, key_builder: DefaultKeyBuilder) -> None:
        assert key_builder.build_species_key("ditto") != key_builder.build_species_key("mew")

    def test_translation_key(self, key_builder: DefaultKeyBuilder) -> None:
        key = key_builder.build_translation_key(TranslationStyle.INVERTED_SYNTAX, "Hello there")
        assert key == "translation:yoda:Hello there"

    def test_translation_key_keeps_text_verbatim(self, key_builder: DefaultKeyBuilder) -> None:
        """Test case and whitespace of the source text are significant."""
        style = TranslationStyle.FORMAL_ARCHAIC
        keys = {
            key_builder.build_translation_key(style, "Hello"),
            key_builder.build_translation_key(style, "hello"),
            key_builder.build_translation_key(style, " Hello"),
        }
        assert len(keys) == 3

    def test_translation_key_depends_on_style(self, key_builder: DefaultKeyBuilder) -> None:
        text = "Hello"
        assert key_builder.build_translation_key(
            TranslationStyle.FORMAL_ARCHAIC, text
        ) != key_builder.build_translation_key(TranslationStyle.INVERTED_SYNTAX, text)

    def test_prefix(self) -> None:
        key_builder = DefaultKeyBuilder(prefix="proxy")

        assert key_builder.build_species_key("Ditto") == "proxy:species:ditto"
        assert (
            key_builder.build_translation_key(TranslationStyle.FORMAL_ARCHAIC, "Hi")
            == "proxy:translation:shakespeare:Hi"
        )
