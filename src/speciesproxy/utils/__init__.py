"""Utility helpers for speciesproxy."""

from speciesproxy.utils.text import flatten_line_breaks, normalize_name

__all__ = ["flatten_line_breaks", "normalize_name"]
