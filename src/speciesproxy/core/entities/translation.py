"""Translation style entity."""

from enum import Enum

from speciesproxy.core.entities.species import SpeciesRecord

CAVE_HABITAT = "cave"


class TranslationStyle(str, Enum):
    """Translation styles offered by the translation upstream.

    Values are the upstream endpoint slugs.
    """

    FORMAL_ARCHAIC = "shakespeare"
    INVERTED_SYNTAX = "yoda"


def select_translation_style(record: SpeciesRecord) -> TranslationStyle:
    """Pick the translation style for a species record.

    Legendary species and cave dwellers get inverted syntax; every
    other species gets the formal archaic style.

    Args:
        record: The species record to translate.

    Returns:
        The selected TranslationStyle.
    """
    if record.is_legendary or record.habitat == CAVE_HABITAT:
        return TranslationStyle.INVERTED_SYNTAX
    return TranslationStyle.FORMAL_ARCHAIC
