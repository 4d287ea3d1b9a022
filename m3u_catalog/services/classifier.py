"""
Service de classification des entrees de playlist.

Decide le type d'une entree a partir de l'extension de son emplacement, puis
applique l'heuristique de detection de serie sur le titre pour les contenus VOD.
"""

import re
from datetime import timedelta
from typing import Optional

from m3u_catalog.core.entities.entry import EntryKind, M3uEntry
from m3u_catalog.core.value_objects import MediaLocation, Metadata, SeriesInfo
from m3u_catalog.utils.constants import VOD_EXTENSIONS

# Marqueurs saison (s, season, sezona) et episode (e, episode, epizoda),
# chacun suivi d'au plus deux caracteres quelconques puis d'un a deux chiffres.
_SEASON = r"s(?:eason|ezona)?.{0,2}[0-9]{1,2}(?![0-9])"
_EPISODE = r"e(?:pisode|pizoda)?.{0,2}[0-9]{1,2}"

SERIES_TITLE_PATTERN = re.compile(_SEASON + r".*" + _EPISODE)
SEASON_PATTERN = re.compile(_SEASON)
EPISODE_PATTERN = re.compile(_EPISODE)
NUMBER_PATTERN = re.compile(r"[0-9]{1,2}")


def extension_of(location: MediaLocation) -> str:
    """Dernier segment de la forme texte de l'emplacement, apres le dernier point."""
    return str(location).split(".")[-1]


def is_vod_extension(extension: str) -> bool:
    """Vrai si l'extension designe un contenu video a la demande."""
    return extension in VOD_EXTENSIONS


def fold_case(title: str) -> str:
    """
    Passe un titre en minuscules sans changer sa longueur.

    Les caracteres dont la minuscule n'a pas la meme longueur (ex: "İ")
    sont conserves tels quels, pour que les positions trouvees dans le
    titre replie restent valables dans le titre d'origine.
    """
    folded = []
    for char in title:
        lower = char.lower()
        folded.append(lower if len(lower) == 1 else char)
    return "".join(folded)


def _first_number(text: str) -> Optional[int]:
    match = NUMBER_PATTERN.search(text)
    if match is None:
        return None
    return int(match.group())


def detect_series(title: str) -> Optional[SeriesInfo]:
    """
    Cherche un segment saison/episode dans un titre.

    Exemples reconnus : "Show S02E05", "Serija sezona 1 epizoda 3",
    "Show Season 1 Episode 12".

    Args:
        title: Titre d'origine (casse conservee)

    Returns:
        SeriesInfo avec le titre prive du segment trouve, ou None si le titre
        ne contient pas de segment saison/episode exploitable.
    """
    lowered = fold_case(title)
    span_match = SERIES_TITLE_PATTERN.search(lowered)
    if span_match is None:
        return None

    span = span_match.group()
    season_match = SEASON_PATTERN.search(span)
    episode_match = EPISODE_PATTERN.search(span)
    if season_match is None or episode_match is None:
        return None

    season = _first_number(season_match.group())
    episode = _first_number(episode_match.group())
    if season is None or episode is None:
        return None

    start, end = span_match.span()
    return SeriesInfo(
        series_title=title[:start] + title[end:],
        season=season,
        episode=episode,
    )


def decide_kind(extension: str, lowered_title: Optional[str]) -> EntryKind:
    """
    Decision de classification pure, sans emplacement ni entree.

    Args:
        extension: Extension de l'emplacement (sans point)
        lowered_title: Titre, replie en minuscules ou non (la detection
            ignore la casse), ou None

    Returns:
        CHANNEL hors VOD, SERIES si un segment saison/episode est trouve, MOVIE sinon
    """
    if not is_vod_extension(extension):
        return EntryKind.CHANNEL
    if lowered_title is not None and detect_series(lowered_title) is not None:
        return EntryKind.SERIES
    return EntryKind.MOVIE


class ClassifierService:
    """
    Service construisant les entrees classees.

    Sans etat : une seule instance peut etre partagee entre plusieurs parsings.
    """

    def classify(
        self,
        location: MediaLocation,
        duration: Optional[timedelta],
        title: Optional[str],
        metadata: Metadata,
    ) -> M3uEntry:
        """
        Construit l'entree d'une directive associee a son emplacement.

        Args:
            location: Emplacement resolu
            duration: Duree de la directive (None si inconnue)
            title: Titre de la directive
            metadata: Metadonnees parsees de la directive

        Returns:
            M3uEntry de type CHANNEL, MOVIE ou SERIES
        """
        kind = decide_kind(extension_of(location), title)
        series = None
        if kind is EntryKind.SERIES and title is not None:
            series = detect_series(title)
        return M3uEntry(location, duration, title, kind, metadata, series)

    def plain(self, location: MediaLocation) -> M3uEntry:
        """Entree sans directive : ni duree, ni titre, ni metadonnees."""
        return M3uEntry(location)
