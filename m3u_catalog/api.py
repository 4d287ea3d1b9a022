"""
Fonctions de commodite pour utiliser m3u-catalog comme bibliotheque.

Chaque fonction delegue a un M3uParser fourni par le container DI, donc
configure comme la CLI (variables d'environnement M3UCAT_*).

Usage:
    from m3u_catalog import parse_file, resolve_nested_playlists

    entries = resolve_nested_playlists(parse_file(Path("playlist.m3u")))
"""

from pathlib import Path, PurePath
from typing import IO, Optional, Union

from m3u_catalog.container import Container
from m3u_catalog.core.entities import Catalog, M3uEntry
from m3u_catalog.services.parser import M3uParser


container = Container()


def default_parser() -> M3uParser:
    """Parser du container ; la source de lignes et le classifieur sont partages."""
    return container.parser()


def parse_file(path: Path, encoding: str = "utf-8") -> list[M3uEntry]:
    """Parse un fichier .m3u. Voir M3uParser.parse_file."""
    return default_parser().parse_file(path, encoding)


def parse_stream(
    stream: Union[IO[str], IO[bytes]],
    base_dir: Optional[PurePath] = None,
    encoding: str = "utf-8",
) -> list[M3uEntry]:
    """Parse un flux texte ou binaire. Voir M3uParser.parse_stream."""
    return default_parser().parse_stream(stream, base_dir, encoding)


def parse_string(content: str, base_dir: Optional[PurePath] = None) -> list[M3uEntry]:
    """Parse le texte d'une playlist. Voir M3uParser.parse_string."""
    return default_parser().parse_string(content, base_dir)


def resolve_nested_playlists(
    entries: list[M3uEntry], encoding: str = "utf-8"
) -> list[M3uEntry]:
    """Developpe les playlists imbriquees. Voir M3uParser.resolve_nested_playlists."""
    return default_parser().resolve_nested_playlists(entries, encoding)


def parse_and_format(content: str, base_dir: Optional[PurePath] = None) -> Catalog:
    """Parse le texte d'une playlist et retourne son catalogue."""
    return default_parser().parse_and_format_string(content, base_dir)
