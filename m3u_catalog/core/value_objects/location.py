"""
Objets valeur pour les emplacements de media.

Un emplacement est soit un chemin du systeme de fichiers (MediaPath), soit un
localisateur distant opaque (MediaUrl). Aucune E/S n'est effectuee ici :
l'existence du fichier n'est pas verifiee.
"""

import re
from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Optional, Union
from urllib.parse import urlsplit

from m3u_catalog.core.exceptions import InvalidLocation
from m3u_catalog.utils.constants import PLAYLIST_EXTENSIONS

# Un localisateur distant commence par "<schema>://"
_URL_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")


@dataclass(frozen=True)
class MediaPath:
    """
    Emplacement sur le systeme de fichiers.

    Attributs:
        path: Chemin (absolu si resolu contre un repertoire de base)
    """

    path: Path

    @property
    def is_playlist_path(self) -> bool:
        """Vrai si le fichier ressemble a une playlist imbriquee (.m3u, .m3u8)."""
        return self.path.suffix.lower() in PLAYLIST_EXTENSIONS

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class MediaUrl:
    """
    Localisateur distant opaque (URL).

    Attributs:
        url: URL telle qu'ecrite dans la playlist
    """

    url: str

    def __str__(self) -> str:
        return self.url


MediaLocation = Union[MediaPath, MediaUrl]


def resolve_location(raw: str, base_dir: Optional[PurePath] = None) -> MediaLocation:
    """
    Valide et normalise une chaine brute en emplacement type.

    Les chemins relatifs sont resolus contre base_dir s'il est fourni,
    sinon ils restent relatifs.

    Args:
        raw: Chaine brute lue dans la playlist
        base_dir: Repertoire de base pour les chemins relatifs (optionnel)

    Returns:
        MediaUrl pour un localisateur "<schema>://...", MediaPath sinon

    Raises:
        InvalidLocation: Si la chaine est vide ou inexploitable
    """
    if not raw:
        raise InvalidLocation(raw, "emplacement vide")

    if _URL_PATTERN.match(raw):
        try:
            parts = urlsplit(raw)
        except ValueError as e:
            raise InvalidLocation(raw, f"URL invalide ({e})") from e
        if not parts.netloc and not parts.path:
            raise InvalidLocation(raw, "URL sans hote ni chemin")
        return MediaUrl(raw)

    if "\x00" in raw:
        raise InvalidLocation(raw, "caractere nul dans le chemin")

    path = Path(raw)
    if base_dir is not None and not path.is_absolute():
        path = Path(base_dir) / path
    return MediaPath(path)
