"""
Service de parsing des playlists .m3u.

Accepte plusieurs formats d'entree, qui aboutissent tous a l'assembleur ligne a ligne :
- un chemin de fichier (avec encodage, UTF-8 par defaut)
- un flux texte ou binaire deja ouvert
- une chaine contenant tout le texte de la playlist

Les lignes de commentaire et les lignes inexploitables sont ignorees (diagnostic
uniquement) ; le contenu mal forme n'interrompt jamais le parsing.
"""

import io
from itertools import dropwhile
from pathlib import Path, PurePath
from typing import IO, Iterable, Iterator, Optional, Union

from loguru import logger

from m3u_catalog.adapters.parsing import is_comment, match_directive, parse_metadata
from m3u_catalog.core.entities import Catalog, M3uEntry
from m3u_catalog.core.exceptions import InvalidLocation, NotAFileError
from m3u_catalog.core.ports.line_source import ILineSource
from m3u_catalog.core.value_objects import Directive, resolve_location
from m3u_catalog.services.catalog import CatalogBuilder
from m3u_catalog.services.classifier import ClassifierService
from m3u_catalog.services.nested import NestedPlaylistResolver
from m3u_catalog.utils.constants import EXTENDED_HEADER

# Etat de l'assembleur : directive en attente, ou None
PendingDirective = Optional[Directive]


def normalize_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Prepare les lignes brutes pour l'assembleur.

    Retire les lignes vides, nettoie la fin de chaque ligne conservee,
    puis retire l'en-tete #EXTM3U en tete de flux.
    """
    trimmed = (line.rstrip() for line in lines if line.strip())
    return dropwhile(lambda line: line == EXTENDED_HEADER, trimmed)


class M3uParser:
    """
    Service de parsing des playlists .m3u / .m3u etendues.

    Coordonne:
    - La source de lignes (ILineSource) pour lire les fichiers
    - La grammaire des directives et le parser de metadonnees
    - Le classifieur (ClassifierService) pour typer chaque entree
    """

    def __init__(
        self,
        line_source: ILineSource,
        classifier: ClassifierService,
        max_nesting_depth: int = 16,
    ) -> None:
        """
        Initialise le parser.

        Args:
            line_source: Implementation de ILineSource pour lire les fichiers
            classifier: Service de classification des entrees
            max_nesting_depth: Profondeur maximale d'expansion des playlists imbriquees
        """
        self._line_source = line_source
        self._classifier = classifier
        self._max_nesting_depth = max_nesting_depth

    # ------------------------------------------------------------------
    # API publique
    # ------------------------------------------------------------------

    def parse_file(self, path: Path, encoding: str = "utf-8") -> list[M3uEntry]:
        """
        Parse le fichier indique.

        Les chemins relatifs de la playlist sont resolus contre son repertoire.

        Args:
            path: Chemin vers un fichier .m3u
            encoding: Encodage du fichier (UTF-8 par defaut)

        Returns:
            Liste ordonnee de toutes les entrees du fichier

        Raises:
            NotAFileError: Si path n'est pas un fichier regulier (avant toute lecture)
            OSError: Si le fichier ne peut pas etre lu
        """
        path = Path(path)
        if not self._line_source.is_regular_file(path):
            raise NotAFileError(path)
        return self.parse_lines(self._line_source.read_lines(path, encoding), path.parent)

    def parse_stream(
        self,
        stream: Union[IO[str], IO[bytes]],
        base_dir: Optional[PurePath] = None,
        encoding: str = "utf-8",
    ) -> list[M3uEntry]:
        """
        Parse le contenu d'un flux deja ouvert.

        Un flux binaire est decode avec l'encodage indique. Le flux n'est
        pas ferme par le parser.

        Args:
            stream: Flux texte ou binaire
            base_dir: Repertoire de base pour les chemins relatifs
            encoding: Encodage des flux binaires

        Returns:
            Liste ordonnee des entrees
        """
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            wrapper = io.TextIOWrapper(stream, encoding=encoding)
            try:
                return self.parse_lines(wrapper, base_dir)
            finally:
                wrapper.detach()
        return self.parse_lines(stream, base_dir)

    def parse_string(
        self, content: str, base_dir: Optional[PurePath] = None
    ) -> list[M3uEntry]:
        """
        Parse le texte complet d'une playlist.

        Args:
            content: Contenu d'un fichier .m3u
            base_dir: Repertoire de base pour les chemins relatifs

        Returns:
            Liste ordonnee des entrees
        """
        # Memes fins de ligne que la lecture de fichier : \n, \r\n et \r uniquement
        return self.parse_lines(io.StringIO(content, newline=None), base_dir)

    def resolve_nested_playlists(
        self, entries: list[M3uEntry], encoding: str = "utf-8"
    ) -> list[M3uEntry]:
        """
        Remplace recursivement les entrees de type playlist par leur contenu.

        Les playlists imbriquees illisibles sont abandonnees (diagnostic uniquement).

        Args:
            entries: Entrees a developper
            encoding: Encodage des playlists imbriquees
        """
        resolver = NestedPlaylistResolver(
            self, self._line_source, max_depth=self._max_nesting_depth
        )
        return resolver.resolve(entries, encoding)

    def parse_and_format_file(self, path: Path, encoding: str = "utf-8") -> Catalog:
        """Parse un fichier et projette ses entrees dans un nouveau catalogue."""
        return CatalogBuilder().build(self.parse_file(path, encoding))

    def parse_and_format_string(
        self, content: str, base_dir: Optional[PurePath] = None
    ) -> Catalog:
        """Parse un texte de playlist et projette ses entrees dans un nouveau catalogue."""
        return CatalogBuilder().build(self.parse_string(content, base_dir))

    # ------------------------------------------------------------------
    # Assembleur
    # ------------------------------------------------------------------

    def parse_lines(
        self, lines: Iterable[str], base_dir: Optional[PurePath] = None
    ) -> list[M3uEntry]:
        """
        Point d'entree commun : assemble les entrees d'une sequence de lignes.

        Args:
            lines: Lignes brutes (parcourues une seule fois)
            base_dir: Repertoire de base pour les chemins relatifs

        Returns:
            Entrees dans l'ordre des lignes, sans les directives ni les lignes ignorees
        """
        entries: list[M3uEntry] = []
        pending: PendingDirective = None
        for line in normalize_lines(lines):
            pending, entry = self.step(pending, line, base_dir)
            if entry is not None:
                entries.append(entry)

        if pending is not None:
            logger.debug(f"Directive sans emplacement ignoree: {pending.line}")
        return entries

    def step(
        self,
        pending: PendingDirective,
        line: str,
        base_dir: Optional[PurePath] = None,
    ) -> tuple[PendingDirective, Optional[M3uEntry]]:
        """
        Transition unique de l'assembleur.

        Args:
            pending: Directive en attente avant cette ligne
            line: Ligne normalisee
            base_dir: Repertoire de base pour les chemins relatifs

        Returns:
            Tuple (directive en attente apres la ligne, entree produite ou None)
        """
        if is_comment(line):
            directive = match_directive(line)
            if directive is None:
                logger.debug(f"Ligne de commentaire ignoree: {line}")
                return pending, None
            if pending is not None:
                logger.debug(f"Directive remplacee avant usage: {pending.line}")
            return directive, None

        try:
            location = resolve_location(line, base_dir)
        except InvalidLocation as e:
            logger.warning(f"Ligne ignoree, emplacement inexploitable: {line} ({e})")
            return None, None

        if pending is None:
            return None, self._classifier.plain(location)

        entry = self._classifier.classify(
            location,
            pending.duration,
            pending.title,
            parse_metadata(pending.raw_attributes),
        )
        return None, entry
