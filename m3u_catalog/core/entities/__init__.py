"""
Entites du domaine.

Exports :
- EntryKind, M3uEntry : Entree de playlist classee
- Catalog, MovieItem, LiveStreamItem, SeriesItem, SeasonItem, EpisodeItem : Catalogue imbrique
"""

from m3u_catalog.core.entities.catalog import (
    Catalog,
    EpisodeItem,
    LiveStreamItem,
    MovieItem,
    SeasonItem,
    SeriesItem,
)
from m3u_catalog.core.entities.entry import EntryKind, M3uEntry

__all__ = [
    "Catalog",
    "EpisodeItem",
    "LiveStreamItem",
    "MovieItem",
    "SeasonItem",
    "SeriesItem",
    "EntryKind",
    "M3uEntry",
]
