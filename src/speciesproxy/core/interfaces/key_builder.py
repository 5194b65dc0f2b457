"""Key builder interface."""

from typing import Protocol

from speciesproxy.core.entities.translation import TranslationStyle


class IKeyBuilder(Protocol):
    """Contract for building cache keys.

    Key builders turn lookup parameters into deterministic strings:
    two logically identical requests must produce the same key.
    """

    def build_species_key(self, name: str) -> str:
        """Build cache key for a species lookup.

        Args:
            name: The species name as given by the caller.

        Returns:
            A key that only depends on the trimmed, lowercased name.
        """
        ...

    def build_translation_key(self, style: TranslationStyle, text: str) -> str:
        """Build cache key for a translation.

        Args:
            style: The translation style.
            text: The exact source text.

        Returns:
            A key that depends on the style and the verbatim text.
        """
        ...
