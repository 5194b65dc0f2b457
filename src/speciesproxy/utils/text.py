"""Text normalization utilities."""

import re

_LINE_BREAKS = re.compile(r"[\n\r\f\v\u2028\u2029]")


def normalize_name(name: str | None) -> str:
    """Normalize a lookup name for cache keys and upstream paths.

    Args:
        name: The name as given by the caller.

    Returns:
        The trimmed, lowercased name ("" for None).
    """
    if name is None:
        return ""
    return name.strip().lower()


def flatten_line_breaks(text: str) -> str:
    """Replace every line-break character with a single space.

    Args:
        text: Raw upstream text.

    Returns:
        The text with no remaining line-break characters.
    """
    return _LINE_BREAKS.sub(" ", text)
