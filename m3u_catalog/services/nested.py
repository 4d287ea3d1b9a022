"""
Service d'expansion des playlists imbriquees.

Chaque entree dont l'emplacement est un fichier .m3u/.m3u8 est remplacee, a sa
place, par les entrees de ce fichier, developpees recursivement. Les fichiers
illisibles, les cycles et les imbrications trop profondes sont abandonnes avec
un avertissement.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from loguru import logger

from m3u_catalog.core.entities import M3uEntry
from m3u_catalog.core.exceptions import NotAFileError
from m3u_catalog.core.ports.line_source import ILineSource
from m3u_catalog.core.value_objects import MediaPath

if TYPE_CHECKING:
    from m3u_catalog.services.parser import M3uParser


class NestedPlaylistResolver:
    """
    Developpe recursivement les playlists imbriquees.

    Attributs:
        parser: Parser utilise pour lire les playlists imbriquees
        line_source: Source de lignes (verification des fichiers)
        max_depth: Nombre maximal de niveaux d'imbrication suivis
    """

    def __init__(
        self, parser: "M3uParser", line_source: ILineSource, max_depth: int = 16
    ) -> None:
        self._parser = parser
        self._line_source = line_source
        self._max_depth = max_depth

    def resolve(self, entries: list[M3uEntry], encoding: str = "utf-8") -> list[M3uEntry]:
        """
        Developpe les entrees de type playlist.

        Args:
            entries: Entrees a developper
            encoding: Encodage des playlists imbriquees

        Returns:
            Nouvelle liste ; identique a l'entree si aucune playlist n'y figure
        """
        result: list[M3uEntry] = []
        self._resolve_into(entries, encoding, result, chain=frozenset(), depth=0)
        return result

    def _resolve_into(
        self,
        entries: list[M3uEntry],
        encoding: str,
        result: list[M3uEntry],
        chain: frozenset[Path],
        depth: int,
    ) -> None:
        for entry in entries:
            location = entry.location
            if isinstance(location, MediaPath) and location.is_playlist_path:
                self._resolve_playlist(location.path, encoding, result, chain, depth)
            else:
                result.append(entry)

    def _resolve_playlist(
        self,
        path: Path,
        encoding: str,
        result: list[M3uEntry],
        chain: frozenset[Path],
        depth: int,
    ) -> None:
        key = self._chain_key(path)
        if key in chain:
            logger.warning(f"Playlist imbriquee cyclique ignoree: {path}")
            return
        if depth >= self._max_depth:
            logger.warning(
                f"Playlist imbriquee ignoree, profondeur maximale ({self._max_depth}) atteinte: {path}"
            )
            return

        parsed = self._read(path, encoding)
        if parsed is None:
            return
        self._resolve_into(parsed, encoding, result, chain | {key}, depth + 1)

    def _read(self, path: Path, encoding: str) -> Optional[list[M3uEntry]]:
        """Parse une playlist imbriquee ; None si elle ne peut pas etre lue."""
        try:
            if not self._line_source.is_regular_file(path):
                logger.warning(f"Playlist imbriquee introuvable: {path}")
                return None
            return self._parser.parse_file(path, encoding)
        except (NotAFileError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Impossible de lire la playlist imbriquee {path}: {e}")
            return None

    @staticmethod
    def _chain_key(path: Path) -> Path:
        try:
            return path.resolve()
        except OSError:
            return path.absolute()
