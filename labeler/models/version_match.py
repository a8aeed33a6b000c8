"""Version match data model."""
from typing import NamedTuple


class VersionMatch(NamedTuple):
    """Server version extracted from an issue body."""

    full_match: str
    version: str
    suffix: str
