"""Translated species service - joins species lookup and translation."""

import logging

from speciesproxy.core.entities.errors import AppError
from speciesproxy.core.entities.species import SpeciesRecord
from speciesproxy.core.entities.translation import select_translation_style
from speciesproxy.core.services.species_fetcher import SpeciesFetcher
from speciesproxy.core.services.translation_fetcher import TranslationFetcher

logger = logging.getLogger(__name__)


class TranslatedSpeciesService:
    """Returns species records with a translated description.

    The species lookup is mandatory and its errors propagate unchanged.
    The translation is best-effort: if it fails, the record comes back
    with its original description and the call still succeeds.
    """

    def __init__(
        self,
        species_fetcher: SpeciesFetcher,
        translation_fetcher: TranslationFetcher,
    ) -> None:
        self._species_fetcher = species_fetcher
        self._translation_fetcher = translation_fetcher

    async def get_translated_species(self, name: str) -> SpeciesRecord:
        """Fetch a species and translate its description.

        Args:
            name: Species name.

        Returns:
            The record, with the translated description when the
            translation succeeded.

        Raises:
            AppError: Only errors from the species lookup.
        """
        record = await self._species_fetcher.fetch_by_name(name)
        style = select_translation_style(record)

        try:
            translated = await self._translation_fetcher.translate(style, record.description)
        except AppError as e:
            logger.warning(
                "Translation (%s) failed for %s, keeping original description: %s",
                style.value,
                record.name,
                e.message,
            )
            return record

        return record.with_description(translated)
