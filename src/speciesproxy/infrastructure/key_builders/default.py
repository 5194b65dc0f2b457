"""Default key builder implementation."""

from speciesproxy.core.entities.translation import TranslationStyle
from speciesproxy.utils.text import normalize_name

SPECIES_NAMESPACE = "species"
TRANSLATION_NAMESPACE = "translation"


class DefaultKeyBuilder:
    """Default key builder using namespaced, readable keys.

    Species keys use the trimmed, lowercased name so casing and
    surrounding whitespace never split the cache. Translation keys keep
    the source text verbatim since the upstream output depends on it.
    """

    def __init__(self, prefix: str | None = None) -> None:
        """Initialize the key builder.

        Args:
            prefix: Optional prefix prepended to every key.
        """
        self._prefix = prefix

    def build_species_key(self, name: str) -> str:
        """Build cache key for a species lookup.

        Args:
            name: The species name as given by the caller.

        Returns:
            Key of the form ``species:<name>``.
        """
        return self._join(SPECIES_NAMESPACE, normalize_name(name))

    def build_translation_key(self, style: TranslationStyle, text: str) -> str:
        """Build cache key for a translation.

        Args:
            style: The translation style.
            text: The exact source text.

        Returns:
            Key of the form ``translation:<style>:<text>``.
        """
        return self._join(TRANSLATION_NAMESPACE, style.value, text)

    def _join(self, *parts: str) -> str:
        if self._prefix:
            parts = (self._prefix, *parts)
        return ":".join(parts)
