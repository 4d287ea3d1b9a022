"""
Service de projection des entrees classees vers le catalogue imbrique.

Chaque appel a build() cree son propre Catalog : l'accumulateur n'est jamais
partage entre deux executions.

Regles de classement des episodes:
- Une nouvelle serie est inseree en tete de la liste des series
- La liste des saisons est agrandie jusqu'a season + 1 emplacements (None)
- La saison 0 est refusee : l'episode n'est pas classe
- La liste des episodes est agrandie jusqu'a l'indice episode, qui recoit l'episode
"""

from typing import Iterable

from loguru import logger

from m3u_catalog.core.entities import (
    Catalog,
    EntryKind,
    EpisodeItem,
    LiveStreamItem,
    M3uEntry,
    MovieItem,
    SeasonItem,
    SeriesItem,
)
from m3u_catalog.utils.constants import LOGO_KEY


class CatalogBuilder:
    """Construit un catalogue films / flux en direct / series a partir des entrees."""

    def build(self, entries: Iterable[M3uEntry]) -> Catalog:
        """
        Projette les entrees dans un nouveau catalogue.

        Seules les entrees issues d'une directive (titre renseigne) sont projetees.

        Args:
            entries: Entrees classees, dans l'ordre de la playlist

        Returns:
            Catalog nouvellement cree
        """
        catalog = Catalog()
        for entry in entries:
            if entry.title is None:
                continue
            if entry.kind is EntryKind.SERIES:
                self.add_episode(catalog, entry)
            elif entry.kind is EntryKind.MOVIE:
                self.add_movie(catalog, entry)
            else:
                self.add_live_stream(catalog, entry)
        return catalog

    def add_movie(self, catalog: Catalog, entry: M3uEntry) -> None:
        catalog.movies.append(
            MovieItem(
                name=entry.title,
                stream_url=str(entry.location),
                stream_icon=entry.metadata.get(LOGO_KEY),
                duration=entry.duration_seconds,
            )
        )

    def add_live_stream(self, catalog: Catalog, entry: M3uEntry) -> None:
        catalog.live_streams.append(
            LiveStreamItem(
                name=entry.title,
                stream_url=str(entry.location),
                stream_icon=entry.metadata.get(LOGO_KEY),
                duration=entry.duration_seconds,
            )
        )

    def add_episode(self, catalog: Catalog, entry: M3uEntry) -> None:
        """
        Classe un episode sous sa serie et sa saison.

        Args:
            catalog: Catalogue en cours de construction
            entry: Entree de type SERIES
        """
        info = entry.series
        if info is None:
            return

        series = catalog.find_series(info.series_title)
        if series is None:
            series = SeriesItem(name=info.series_title, cover=entry.metadata.get(LOGO_KEY))
            catalog.series.insert(0, series)

        while len(series.seasons) < info.season + 1:
            series.seasons.append(None)

        # TODO: confirmer avec le produit si la saison 0 (specials) doit etre cataloguee
        if info.season < 1:
            logger.debug(f"Episode de saison 0 non catalogue: {entry.title}")
            return

        season = series.seasons[info.season]
        if season is None:
            season = SeasonItem()
            series.seasons[info.season] = season

        while len(season.episodes) <= info.episode:
            season.episodes.append(None)

        season.episodes[info.episode] = EpisodeItem(
            stream_url=str(entry.location),
            episode_title=entry.title,
            episode_num=info.episode,
            season=info.season,
            duration=str(entry.duration_seconds),
        )
