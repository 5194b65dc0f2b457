"""Species record entity."""

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class SpeciesRecord:
    """Normalized species record.

    ``description`` never contains line breaks; ``description`` and
    ``habitat`` are empty strings when the upstream omits them.
    """

    name: str
    description: str = ""
    habitat: str = ""
    is_legendary: bool = False

    def with_description(self, description: str) -> "SpeciesRecord":
        """Return a copy with only the description replaced.

        Args:
            description: The new description text.

        Returns:
            A new SpeciesRecord instance.
        """
        return replace(self, description=description)

    def to_dict(self) -> dict[str, Any]:
        """Render the record in its wire shape.

        Returns:
            Dictionary with ``name``, ``description``, ``habitat`` and
            ``isLegendary`` keys.
        """
        return {
            "name": self.name,
            "description": self.description,
            "habitat": self.habitat,
            "isLegendary": self.is_legendary,
        }
