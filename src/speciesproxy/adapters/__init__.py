"""Framework adapters for speciesproxy."""
